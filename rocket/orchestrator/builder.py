"""步骤计划构建器

功能模块通过 builder 声明自己的步骤，driver 统一 apply 到编排器。
条目按声明顺序保存，apply 时先整体校验重名再逐条 register。

用法:
    builder = StepPlanBuilder()
    builder.before(Phase.PREFLIGHT, "git.ask", ask_git)
    builder.after(Phase.POSTFLIGHT, "git.commit", commit)
    orchestrator = builder.build()
"""

from __future__ import annotations

from dataclasses import dataclass

from rocket.core.exceptions import DuplicateStepError
from rocket.orchestrator.models import Action, Phase, Slot
from rocket.orchestrator.orchestrator import PhaseOrchestrator


@dataclass(frozen=True)
class PlanEntry:
    """(phase, slot, name, action) 标记条目；slot 为 None 表示阶段主体"""

    phase: Phase
    slot: Slot | None
    name: str
    action: Action


class StepPlanBuilder:
    """按声明顺序收集步骤条目"""

    def __init__(self) -> None:
        self.entries: list[PlanEntry] = []

    def add(
        self, phase: Phase, slot: Slot | None, name: str, action: Action,
    ) -> StepPlanBuilder:
        self.entries.append(PlanEntry(
            phase=Phase(phase),
            slot=Slot(slot) if slot is not None else None,
            name=name, action=action,
        ))
        return self

    def before(self, phase: Phase, name: str, action: Action) -> StepPlanBuilder:
        return self.add(phase, Slot.BEFORE, name, action)

    def after(self, phase: Phase, name: str, action: Action) -> StepPlanBuilder:
        return self.add(phase, Slot.AFTER, name, action)

    def body(self, phase: Phase, name: str, action: Action) -> StepPlanBuilder:
        return self.add(phase, None, name, action)

    def apply_to(self, orchestrator: PhaseOrchestrator) -> PhaseOrchestrator:
        """先整体校验重名，再逐条注册；校验失败时编排器保持原样"""
        self._check(orchestrator)
        for e in self.entries:
            if e.slot is None:
                orchestrator.set_body(e.phase, e.action, name=e.name)
            else:
                orchestrator.register(e.phase, e.slot, e.name, e.action)
        return orchestrator

    def build(self) -> PhaseOrchestrator:
        return self.apply_to(PhaseOrchestrator())

    def _check(self, orchestrator: PhaseOrchestrator) -> None:
        seen: set[str] = set()
        bodies: dict[Phase, str] = {}
        for e in self.entries:
            if e.name in seen or e.name in orchestrator:
                raise DuplicateStepError(e.name)
            seen.add(e.name)
            if e.slot is None:
                existing = orchestrator.body_for(e.phase)
                if existing is not None:
                    raise DuplicateStepError(existing.name)
                if e.phase in bodies:
                    raise DuplicateStepError(bodies[e.phase])
                bodies[e.phase] = e.name
