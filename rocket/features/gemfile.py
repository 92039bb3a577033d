"""Gemfile 替换 + bundle install

替换 Gemfile 注册在 launch/before，bundle install 作为 launch 阶段主体，
保证其后的生成器步骤都能用上新装的 gem。
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext
from rocket.services.templates import install_template

if TYPE_CHECKING:
    from rocket.core.protocols import Prompter, ProjectFiles, TemplateSource
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.commands import ProjectCommands
    from rocket.services.container import ServiceContainer

BANNER = f"\n{'=' * 17} Running Bundle Install {'=' * 17}\n"


def replace_gemfile(
    ctx: RunContext, *,
    files: ProjectFiles, templates: TemplateSource, url: str,
) -> None:
    install_template(files, templates, url, "Gemfile")
    files.remove("public/index.html")


def bundle_install(
    ctx: RunContext, *, commands: ProjectCommands, prompter: Prompter,
) -> None:
    prompter.say(BANNER)
    commands.run(["bundle", "install"], label="bundle install")


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.LAUNCH, "gemfile.replace", partial(
        replace_gemfile,
        files=services.files, templates=services.templates,
        url=services.config.rocket("gemfiles/gemfile"),
    ))
    builder.body(Phase.LAUNCH, "gemfile.bundle", partial(
        bundle_install, commands=services.commands, prompter=services.prompter,
    ))
