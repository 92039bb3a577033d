"""启动器 - 组装功能步骤并执行编排

driver 职责：
- 构造服务容器与初始上下文
- 按配置的功能列表注册步骤
- 执行编排并返回报告
"""

from __future__ import annotations

import logging

from rocket.core.config import Config
from rocket.features import load_features
from rocket.orchestrator import (
    PhaseOrchestrator,
    RunContext,
    RunReport,
    StepPlanBuilder,
)
from rocket.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def build_orchestrator(
    services: ServiceContainer, features: list[str] | None = None,
) -> PhaseOrchestrator:
    """按功能列表构建编排器（不执行）"""
    names = features if features is not None else services.config.features
    builder = StepPlanBuilder()
    load_features(names, builder, services)
    orchestrator = builder.build()
    logger.info("已注册 %d 个步骤 (功能: %s)", len(orchestrator), ", ".join(names))
    return orchestrator


def initial_context(config: Config) -> RunContext:
    return RunContext({
        "project_dir": config.project_dir,
        "database": "none",
    })


def launch(
    services: ServiceContainer, features: list[str] | None = None,
) -> RunReport:
    """构建并执行一次编排"""
    orchestrator = build_orchestrator(services, features)
    return orchestrator.run(initial_context(services.config))
