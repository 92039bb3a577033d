"""分阶段编排器模块

拆分说明：
- models.py: 数据模型（阶段、槽位、步骤、上下文、报告）
- orchestrator.py: 注册与执行
- builder.py: 步骤计划构建器
"""

from rocket.orchestrator.builder import PlanEntry, StepPlanBuilder
from rocket.orchestrator.models import (
    PHASE_ORDER,
    Phase,
    RunContext,
    RunReport,
    Slot,
    Step,
    StepOutcome,
    StepRecord,
)
from rocket.orchestrator.orchestrator import PhaseOrchestrator

__all__ = [
    "PHASE_ORDER",
    "Phase",
    "PhaseOrchestrator",
    "PlanEntry",
    "RunContext",
    "RunReport",
    "Slot",
    "Step",
    "StepOutcome",
    "StepPlanBuilder",
    "StepRecord",
]
