"""configatron 初始化"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext

if TYPE_CHECKING:
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.commands import ProjectCommands
    from rocket.services.container import ServiceContainer


def install(ctx: RunContext, *, commands: ProjectCommands) -> None:
    commands.generate("configatron:install")


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.after(Phase.LAUNCH, "configatron.install", partial(
        install, commands=services.commands,
    ))
