"""应用配置文件

用 Rails 官方模板重写 application.rb 与各环境配置，
并把 application.css 改名为 .css.scss 以便后续 @import。
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext
from rocket.services.templates import install_template

if TYPE_CHECKING:
    from rocket.core.config import Config
    from rocket.core.protocols import ProjectFiles, TemplateSource
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer

# 工程内路径 -> 模板文件后缀
CONFIG_FILES: list[tuple[str, str]] = [
    ("config/application.rb", ""),
    ("config/environments/development.rb", ".tt"),
    ("config/environments/test.rb", ".tt"),
]

STYLESHEET = "app/assets/stylesheets/application.css"


def write_configs(
    ctx: RunContext, *,
    files: ProjectFiles, templates: TemplateSource, config: Config,
) -> None:
    for path, ext in CONFIG_FILES:
        install_template(files, templates, config.rails_template(f"{path}{ext}"), path)


def convert_stylesheet(ctx: RunContext, *, files: ProjectFiles) -> None:
    files.copy(STYLESHEET, f"{STYLESHEET}.scss")
    files.remove(STYLESHEET)


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.LAUNCH, "application.config", partial(
        write_configs,
        files=services.files, templates=services.templates,
        config=services.config,
    ))
    builder.before(Phase.LAUNCH, "application.scss", partial(
        convert_stylesheet, files=services.files,
    ))
