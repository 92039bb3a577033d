"""编排器数据模型

- Phase / Slot: 阶段与槽位枚举
- Step: 命名步骤
- StepOutcome: 步骤动作的返回值
- RunContext: 步骤间共享的可变上下文
- StepRecord / RunReport: 执行记录与汇总报告
"""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Union


class Phase(str, Enum):
    """执行阶段（固定集合，固定顺序）"""

    PREFLIGHT = "preflight"
    LAUNCH = "launch"
    POSTFLIGHT = "postflight"


PHASE_ORDER: tuple[Phase, ...] = (Phase.PREFLIGHT, Phase.LAUNCH, Phase.POSTFLIGHT)


class Slot(str, Enum):
    """阶段内槽位：主体之前 / 之后"""

    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class StepOutcome:
    """步骤执行结果"""

    ok: bool = True
    cause: str = ""

    @classmethod
    def fail(cls, cause: str) -> StepOutcome:
        return cls(ok=False, cause=cause)


class RunContext(MutableMapping):
    """共享上下文：选项名 -> 值

    一次编排执行内所有步骤共享同一实例（按引用传递），
    是步骤之间传递决策的唯一途径。
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RunContext({self._values!r})"

    def flag(self, key: str) -> bool:
        """按布尔值读取选项，缺失视为 False"""
        return bool(self._values.get(key, False))

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)


StepResult = Union[StepOutcome, bool, None]
Action = Callable[[RunContext], StepResult]


@dataclass(frozen=True)
class Step:
    """绑定到 (phase, slot) 的命名步骤；slot 为 None 表示阶段主体"""

    name: str
    phase: Phase
    slot: Slot | None
    action: Action

    @property
    def label(self) -> str:
        where = self.slot.value if self.slot else "body"
        return f"{self.phase.value}/{where}"


@dataclass
class StepRecord:
    """单个步骤的执行记录"""

    name: str
    phase: Phase
    slot: Slot | None
    status: str  # "done" / "failed"
    cause: str = ""
    error: BaseException | None = None


@dataclass
class RunReport:
    """编排执行报告"""

    context: RunContext
    records: list[StepRecord] = field(default_factory=list)
    halted_at: StepRecord | None = None

    @property
    def completed(self) -> bool:
        return self.halted_at is None

    @property
    def success(self) -> bool:
        return self.completed

    @property
    def executed(self) -> list[str]:
        """已执行（含失败的那一步）的步骤名，按执行顺序"""
        return [r.name for r in self.records]

    def summary(self) -> str:
        if self.halted_at is None:
            return f"全部阶段完成 ({len(self.records)} 个步骤)"
        h = self.halted_at
        return f"停机于阶段 {h.phase.value} 的步骤 {h.name}: {h.cause}"
