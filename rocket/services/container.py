"""服务容器 — 统一依赖注入

功能步骤需要的协作者（提问、文件、模板、命令）都通过容器获取，
同一容器内的实例共享状态（模板缓存等）。

用法:
    container = ServiceContainer(config=cfg)
    container.files.remove("Gemfile")        # 懒加载

    # 测试时注入替身
    container = ServiceContainer(config=cfg, executor=FakeExecutor())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rocket.core.config import Config
    from rocket.core.protocols import Prompter, ProjectFiles, TemplateSource
    from rocket.services.commands import ProjectCommands
    from rocket.utils.shell import CommandExecutor

logger = logging.getLogger(__name__)


class ServiceContainer:
    """懒加载服务容器 — 每个实例持有一组共享的协作者

    接受可选 Config；显式传入的协作者优先于默认实现。
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        prompter: Prompter | None = None,
        files: ProjectFiles | None = None,
        templates: TemplateSource | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        if config is None:
            from rocket.core.config import get_config
            config = get_config()
        self._config = config
        self._instances: dict[str, object] = {}
        for key, value in (
            ("prompter", prompter), ("files", files),
            ("templates", templates), ("executor", executor),
        ):
            if value is not None:
                self._instances[key] = value

    @property
    def config(self) -> Config:
        return self._config

    @property
    def prompter(self) -> Prompter:
        if "prompter" not in self._instances:
            from rocket.services.prompter import ClickPrompter
            self._instances["prompter"] = ClickPrompter(
                answers=self._config.answers,
            )
        return self._instances["prompter"]  # type: ignore[return-value]

    @property
    def files(self) -> ProjectFiles:
        if "files" not in self._instances:
            from rocket.services.files import LocalProjectFiles
            self._instances["files"] = LocalProjectFiles(
                root=self._config.project_dir,
            )
        return self._instances["files"]  # type: ignore[return-value]

    @property
    def templates(self) -> TemplateSource:
        if "templates" not in self._instances:
            from rocket.services.templates import RemoteTemplates
            self._instances["templates"] = RemoteTemplates(
                timeout=self._config.fetch_timeout,
            )
        return self._instances["templates"]  # type: ignore[return-value]

    @property
    def executor(self) -> CommandExecutor:
        if "executor" not in self._instances:
            from rocket.utils.shell import LocalExecutor
            self._instances["executor"] = LocalExecutor()
        return self._instances["executor"]  # type: ignore[return-value]

    @property
    def commands(self) -> ProjectCommands:
        if "commands" not in self._instances:
            from rocket.services.commands import ProjectCommands
            self._instances["commands"] = ProjectCommands(
                self.executor,
                cwd=self._config.project_dir,
                timeout=self._config.command_timeout,
            )
        return self._instances["commands"]  # type: ignore[return-value]
