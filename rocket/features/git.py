"""git 仓库初始化

preflight 询问是否初始化仓库；postflight 在所有文件落盘后
执行 init + 首次提交。
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext

if TYPE_CHECKING:
    from rocket.core.protocols import Prompter
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.commands import ProjectCommands
    from rocket.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def ask_git(ctx: RunContext, *, prompter: Prompter) -> None:
    ctx["use_git"] = prompter.confirm(
        "use_git", "Initialize a new git repository?",
    )


def commit(ctx: RunContext, *, commands: ProjectCommands) -> None:
    if not ctx.flag("use_git"):
        logger.info("未选择 git，跳过")
        return
    commands.run(["git", "init"], label="git init")
    commands.run(["git", "add", "."], label="git add")
    commands.run(["git", "commit", "-m", "initial commit"], label="git commit")


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.PREFLIGHT, "git.ask", partial(
        ask_git, prompter=services.prompter,
    ))
    builder.after(Phase.POSTFLIGHT, "git.commit", partial(
        commit, commands=services.commands,
    ))
