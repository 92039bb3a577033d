"""Twitter Bootstrap 样式"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext

if TYPE_CHECKING:
    from rocket.core.protocols import Prompter, ProjectFiles
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer

logger = logging.getLogger(__name__)

STYLESHEET = "app/assets/stylesheets/application.css.scss"


def ask_bootstrap(ctx: RunContext, *, prompter: Prompter) -> None:
    ctx["bootstrap"] = prompter.confirm(
        "bootstrap", "Would you like to install Twitter Bootstrap?",
    )


def import_bootstrap(ctx: RunContext, *, files: ProjectFiles) -> None:
    if not ctx.flag("bootstrap"):
        logger.info("未选择 bootstrap，跳过")
        return
    files.append(STYLESHEET, '\n@import "bootstrap";')


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.PREFLIGHT, "bootstrap.ask", partial(
        ask_bootstrap, prompter=services.prompter,
    ))
    builder.after(Phase.LAUNCH, "bootstrap.import", partial(
        import_bootstrap, files=services.files,
    ))
