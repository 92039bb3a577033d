"""数据库选择

preflight 提问并把选择写入上下文 ``database``（mongo / postgres / none），
选中数据库时删除生成器自带的 config/database.yml，由对应模块重写。
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rocket.orchestrator.models import Phase, RunContext

if TYPE_CHECKING:
    from rocket.core.protocols import Prompter, ProjectFiles
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer

MONGO = "mongo"
POSTGRES = "postgres"
NONE = "none"

# 展示文本 -> 上下文取值（顺序即菜单序号）
CHOICES: dict[str, str] = {
    "Mongoid": MONGO,
    "Postgres": POSTGRES,
    "Keep the generated default": NONE,
}

DATABASE_YML = "config/database.yml"


def ask_database(ctx: RunContext, *, prompter: Prompter) -> None:
    label = prompter.choose(
        "database", "What database would you like to use?", list(CHOICES),
    )
    ctx["database"] = CHOICES[label]
    if ctx["database"] == MONGO:
        ctx["skip_active_record"] = True


def remove_default_config(ctx: RunContext, *, files: ProjectFiles) -> None:
    if ctx.get("database", NONE) != NONE:
        files.remove(DATABASE_YML)


def register(builder: StepPlanBuilder, services: ServiceContainer) -> None:
    builder.before(Phase.PREFLIGHT, "database.ask", partial(
        ask_database, prompter=services.prompter,
    ))
    builder.after(Phase.PREFLIGHT, "database.clean", partial(
        remove_default_config, files=services.files,
    ))
