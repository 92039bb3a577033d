"""欢迎信息"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext

if TYPE_CHECKING:
    from rocket.core.protocols import Prompter, TemplateSource
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer


def show_welcome(
    ctx: RunContext, *, templates: TemplateSource, prompter: Prompter, url: str,
) -> None:
    prompter.say(templates.fetch(url))


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    url = f"{services.config.rocket_url.rstrip('/')}/welcome.rb"
    builder.before(Phase.PREFLIGHT, "welcome", partial(
        show_welcome,
        templates=services.templates, prompter=services.prompter, url=url,
    ))
