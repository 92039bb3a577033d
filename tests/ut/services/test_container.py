"""ServiceContainer 单元测试"""

from __future__ import annotations

from pathlib import Path

import pytest

import rocket.core.config as cfgmod
from rocket.core.config import Config
from rocket.services.commands import ProjectCommands
from rocket.services.container import ServiceContainer
from rocket.services.files import LocalProjectFiles
from rocket.services.prompter import ClickPrompter
from rocket.services.templates import RemoteTemplates
from rocket.utils.shell import LocalExecutor


class TestServiceContainer:
    def test_lazy_loading(self, tmp_path: Path) -> None:
        c = ServiceContainer(Config(project_dir=str(tmp_path)))
        assert len(c._instances) == 0
        _ = c.files
        assert "files" in c._instances

    def test_shared_instances(self, tmp_path: Path) -> None:
        c = ServiceContainer(Config(project_dir=str(tmp_path)))
        assert c.templates is c.templates
        assert c.commands is c.commands

    def test_default_implementations(self, tmp_path: Path) -> None:
        cfg = Config(project_dir=str(tmp_path), answers={"use_git": "y"},
                     fetch_timeout=4, command_timeout=60)
        c = ServiceContainer(cfg)
        assert isinstance(c.prompter, ClickPrompter)
        assert c.prompter.answers == {"use_git": "y"}
        assert isinstance(c.files, LocalProjectFiles)
        assert c.files.root == tmp_path.resolve()
        assert isinstance(c.templates, RemoteTemplates)
        assert c.templates.timeout == 4
        assert isinstance(c.executor, LocalExecutor)
        assert isinstance(c.commands, ProjectCommands)
        assert c.commands.cwd == str(tmp_path)
        assert c.commands.timeout == 60

    def test_injected_collaborators(self, executor, templates) -> None:
        c = ServiceContainer(Config(), executor=executor, templates=templates)
        assert c.templates is templates
        assert c.commands.executor is executor

    def test_falls_back_to_global_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = Config(project_dir="/srv/app")
        monkeypatch.setattr(cfgmod, "_current", cfg)
        assert ServiceContainer().config is cfg


class TestProjectCommands:
    def test_generate(self, executor) -> None:
        cmds = ProjectCommands(executor, cwd="/w")
        cmds.generate("rspec:install")
        assert executor.calls == ["rails generate rspec:install"]
