"""Mongoid 配置"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from rocket.features.database import MONGO
from rocket.orchestrator.models import Phase, RunContext

if TYPE_CHECKING:
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.commands import ProjectCommands
    from rocket.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def generate_config(ctx: RunContext, *, commands: ProjectCommands) -> None:
    if ctx.get("database") != MONGO:
        logger.info("未选择 mongo，跳过")
        return
    commands.generate("mongoid:config")


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.after(Phase.LAUNCH, "mongo.config", partial(
        generate_config, commands=services.commands,
    ))
