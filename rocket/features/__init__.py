"""功能模块 - 每个模块向步骤计划注册自己的 preflight / launch / postflight 步骤

注册功能：模块提供 `register(builder, services)` 函数即可。
内置模块按短名加载（如 "git"），自定义模块使用完整模块路径。
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from rocket.core.exceptions import ConfigError

if TYPE_CHECKING:
    from rocket.orchestrator.builder import StepPlanBuilder
    from rocket.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def _module_path(name: str) -> str:
    return name if "." in name else f"{__name__}.{name}"


def load_features(
    names: list[str], builder: StepPlanBuilder, services: ServiceContainer,
) -> None:
    """按名称加载功能模块并注册步骤"""
    for name in names:
        try:
            mod = importlib.import_module(_module_path(name))
        except ImportError as exc:
            raise ConfigError(f"加载功能模块失败: {name}") from exc
        if not hasattr(mod, "register"):
            raise ConfigError(f"功能模块 '{name}' 没有 register() 函数")
        mod.register(builder, services)
        logger.debug("功能模块已加载: %s", name)
