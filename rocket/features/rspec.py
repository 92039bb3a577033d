"""RSpec 测试框架

选用 RSpec 时跳过 Test::Unit（preflight 写入 ``skip_test_unit``），
launch 阶段在依赖安装后执行 rspec:install 并替换 spec_helper。
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.features.database import MONGO
from rocket.orchestrator.models import Phase, RunContext
from rocket.services.templates import install_template

if TYPE_CHECKING:
    from rocket.core.protocols import ProjectFiles, TemplateSource
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.commands import ProjectCommands
    from rocket.services.container import ServiceContainer

SPEC_HELPER = "spec/spec_helper.rb"


def set_options(ctx: RunContext) -> None:
    ctx["skip_test_unit"] = True


def install(
    ctx: RunContext, *,
    files: ProjectFiles, templates: TemplateSource,
    commands: ProjectCommands, helper_url: str,
) -> None:
    files.remove("test")
    commands.generate("rspec:install")
    install_template(files, templates, helper_url, SPEC_HELPER)
    # mongoid 没有事务夹具
    if ctx.get("database") == MONGO:
        files.gsub(SPEC_HELPER, r"config\.use_trans", "# config.use_trans")


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.PREFLIGHT, "rspec.options", set_options)
    builder.after(Phase.LAUNCH, "rspec.install", partial(
        install,
        files=services.files, templates=services.templates,
        commands=services.commands,
        helper_url=services.config.rocket("rspec/spec_helper.rb"),
    ))
