"""Guardfile"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext
from rocket.services.templates import install_template

if TYPE_CHECKING:
    from rocket.core.protocols import ProjectFiles, TemplateSource
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer

GUARDFILE_PATH = "guard/guard-rspec/master/lib/guard/rspec/templates/Guardfile"


def write_guardfile(
    ctx: RunContext, *,
    files: ProjectFiles, templates: TemplateSource, url: str,
) -> None:
    install_template(files, templates, url, "Guardfile")


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.after(Phase.LAUNCH, "guard.guardfile", partial(
        write_guardfile,
        files=services.files, templates=services.templates,
        url=services.config.raw_git(GUARDFILE_PATH),
    ))
