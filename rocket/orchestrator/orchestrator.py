"""分阶段编排器 - preflight → launch → postflight

职责：
- 维护 (phase, slot) 步骤表，步骤名全局唯一
- 按阶段顺序执行：before 步骤 → 阶段主体 → after 步骤
- 首个失败即停机（不回滚已产生的副作用），返回汇总报告
"""

from __future__ import annotations

import logging

from rocket.core.exceptions import DuplicateStepError, StepFailure
from rocket.orchestrator.models import (
    PHASE_ORDER,
    Action,
    Phase,
    RunContext,
    RunReport,
    Slot,
    Step,
    StepOutcome,
    StepRecord,
)
from rocket.utils.logger import step_extra

logger = logging.getLogger(__name__)


class PhaseOrchestrator:
    """三阶段钩子编排器"""

    def __init__(self) -> None:
        self._steps: dict[tuple[Phase, Slot], list[Step]] = {
            (phase, slot): [] for phase in PHASE_ORDER for slot in Slot
        }
        self._bodies: dict[Phase, Step] = {}
        self._names: set[str] = set()

    # ---- 注册 ----

    def register(
        self, phase: Phase, slot: Slot, name: str, action: Action,
    ) -> Step:
        """在 (phase, slot) 末尾追加一个步骤"""
        phase, slot = Phase(phase), Slot(slot)
        if name in self._names:
            raise DuplicateStepError(name)
        step = Step(name=name, phase=phase, slot=slot, action=action)
        self._steps[(phase, slot)].append(step)
        self._names.add(name)
        logger.debug("步骤已注册: %s (%s)", name, step.label)
        return step

    def set_body(
        self, phase: Phase, action: Action, *, name: str = "",
    ) -> Step:
        """设置阶段主体（每个阶段至多一个）"""
        phase = Phase(phase)
        name = name or f"{phase.value}.body"
        if phase in self._bodies:
            raise DuplicateStepError(self._bodies[phase].name)
        if name in self._names:
            raise DuplicateStepError(name)
        step = Step(name=name, phase=phase, slot=None, action=action)
        self._bodies[phase] = step
        self._names.add(name)
        return step

    def steps_for(self, phase: Phase, slot: Slot) -> list[Step]:
        return list(self._steps[(Phase(phase), Slot(slot))])

    def body_for(self, phase: Phase) -> Step | None:
        return self._bodies.get(Phase(phase))

    def plan(self) -> list[Step]:
        """按执行顺序返回全部步骤"""
        ordered: list[Step] = []
        for phase in PHASE_ORDER:
            ordered.extend(self._steps[(phase, Slot.BEFORE)])
            body = self._bodies.get(phase)
            if body is not None:
                ordered.append(body)
            ordered.extend(self._steps[(phase, Slot.AFTER)])
        return ordered

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    # ---- 执行 ----

    def run(self, context: RunContext | None = None) -> RunReport:
        """执行全部阶段，首个失败即停机"""
        ctx = context if context is not None else RunContext()
        report = RunReport(context=ctx)

        for phase in PHASE_ORDER:
            steps = self._phase_steps(phase)
            if not steps:
                logger.debug("[%s] 无步骤，跳过", phase.value)
                continue
            logger.info("[%s] 开始 (%d 个步骤)", phase.value, len(steps))
            for step in steps:
                record = self._run_step(step, ctx)
                report.records.append(record)
                if record.status == "failed":
                    report.halted_at = record
                    logger.error(
                        "编排停机: %s", report.summary(),
                        extra=step_extra(record.name, record.phase.value),
                    )
                    return report

        logger.info("编排完成: %s", report.summary())
        return report

    def _phase_steps(self, phase: Phase) -> list[Step]:
        steps = list(self._steps[(phase, Slot.BEFORE)])
        body = self._bodies.get(phase)
        if body is not None:
            steps.append(body)
        steps.extend(self._steps[(phase, Slot.AFTER)])
        return steps

    def _run_step(self, step: Step, ctx: RunContext) -> StepRecord:
        extra = step_extra(step.name, step.phase.value)
        logger.info("  [%s] %s", step.label, step.name, extra=extra)
        try:
            result = step.action(ctx)
        except StepFailure as exc:
            failure = exc
        except KeyboardInterrupt as exc:
            # Ctrl-C 中断记为停机，已产生的副作用同样保留
            failure = StepFailure("用户中断 (KeyboardInterrupt)")
            failure.__cause__ = exc
            logger.warning("步骤 %s 被中断", step.name, extra=extra)
        except Exception as exc:  # noqa: BLE001
            failure = StepFailure(f"{type(exc).__name__}: {exc}")
            failure.__cause__ = exc
            logger.debug("步骤 %s 抛出异常", step.name, exc_info=True, extra=extra)
        else:
            failure = _failure_from_result(result)
            if failure is None:
                return StepRecord(
                    name=step.name, phase=step.phase,
                    slot=step.slot, status="done",
                )

        failure.step = step.name
        failure.phase = step.phase.value
        return StepRecord(
            name=step.name, phase=step.phase, slot=step.slot,
            status="failed", cause=failure.cause, error=failure,
        )


def _failure_from_result(result: object) -> StepFailure | None:
    """把动作返回值归一化为失败信号（成功返回 None）"""
    if result is None or result is True:
        return None
    if result is False:
        return StepFailure("步骤返回失败")
    if isinstance(result, StepOutcome):
        if result.ok:
            return None
        return StepFailure(result.cause or "步骤返回失败")
    return StepFailure(f"无法识别的步骤返回值: {result!r}")
