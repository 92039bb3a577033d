"""Postgres 配置：用 Rails 官方 postgresql.yml 模板重写 database.yml"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from rocket.features.database import DATABASE_YML, POSTGRES
from rocket.orchestrator.models import Phase, RunContext
from rocket.services.templates import install_template

if TYPE_CHECKING:
    from rocket.core.protocols import ProjectFiles, TemplateSource
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def write_config(
    ctx: RunContext, *,
    files: ProjectFiles, templates: TemplateSource, url: str,
) -> None:
    if ctx.get("database") != POSTGRES:
        logger.info("未选择 postgres，跳过")
        return
    install_template(files, templates, url, DATABASE_YML)


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.LAUNCH, "postgres.config", partial(
        write_config,
        files=services.files, templates=services.templates,
        url=services.config.rails_template("config/databases/postgresql.yml"),
    ))
