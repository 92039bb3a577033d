"""集中配置管理

替代各模块散落的 URL / 默认值常量，提供统一的配置入口。
支持从 YAML 文件加载 + 编程式覆盖。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from rocket.core.exceptions import ConfigError
from rocket.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_FEATURES: list[str] = [
    "welcome",
    "git",
    "database",
    "bootstrap",
    "rspec",
    "gemfile",
    "postgres",
    "mongo",
    "configatron",
    "application",
    "guard",
]


@dataclass
class Config:
    """启动器全局配置"""

    # 目标工程
    project_dir: str = "."

    # 远程模板源
    rocket_url: str = "http://www.railrocket.me/templates"
    rails_url: str = "https://raw.github.com/rails/rails/3-2-stable"
    raw_git_url: str = "https://raw.github.com"

    # 功能模块（按注册顺序）
    features: list[str] = field(default_factory=lambda: list(DEFAULT_FEATURES))

    # 预置答案（问题 key -> 答案），用于非交互执行
    answers: dict[str, Any] = field(default_factory=dict)

    # 超时（秒）
    fetch_timeout: int = 30
    command_timeout: float | None = None

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = "rocket.yml") -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        data = load_yaml(path)
        if not data:
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        if "features" in matched and not isinstance(matched["features"], list):
            raise ConfigError(f"{path}: features 必须是列表")
        if "answers" in matched and not isinstance(matched["answers"], dict):
            raise ConfigError(f"{path}: answers 必须是映射")
        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    def rocket(self, path: str, kind: str = "rails") -> str:
        """railrocket 模板地址"""
        return f"{self.rocket_url.rstrip('/')}/{kind}/{path}"

    def rails_template(self, path: str) -> str:
        """Rails 官方应用模板地址"""
        return (
            f"{self.rails_url.rstrip('/')}"
            f"/railties/lib/rails/generators/rails/app/templates/{path}"
        )

    def raw_git(self, path: str) -> str:
        return f"{self.raw_git_url.rstrip('/')}/{path}"


# 全局单例，首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str = "rocket.yml") -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current
