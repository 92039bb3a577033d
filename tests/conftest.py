"""共享测试替身 — 记录型命令执行器 / 内存模板源 / 脚本化提问器

功能步骤只依赖协议，测试时通过 ServiceContainer 注入这些替身，
无需真实 subprocess / 网络 / 终端交互。
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rocket.core.config import Config
from rocket.core.exceptions import FetchError
from rocket.services.container import ServiceContainer
from rocket.services.files import LocalProjectFiles
from rocket.services.prompter import ClickPrompter
from rocket.utils.shell import CommandResult


class FakeExecutor:
    """记录所有命令；fail_on 中的命令返回 rc=1"""

    def __init__(self, fail_on: tuple[str, ...] = ()) -> None:
        self.calls: list[str] = []
        self.fail_on = fail_on

    def execute(self, cmd, *, cwd=".", env=None, timeout=None) -> CommandResult:
        line = cmd if isinstance(cmd, str) else " ".join(cmd)
        self.calls.append(line)
        if any(line.startswith(f) for f in self.fail_on):
            return CommandResult(returncode=1, stdout="", stderr=f"{line} boom")
        return CommandResult(returncode=0, stdout="", stderr="")


class FakeTemplates:
    """内存模板源：未知 URL 返回带 URL 的占位内容"""

    def __init__(self, pages: dict[str, str] | None = None, missing: tuple[str, ...] = ()) -> None:
        self.pages = pages or {}
        self.missing = missing
        self.fetched: list[str] = []

    def fetch(self, url: str) -> str:
        self.fetched.append(url)
        if any(m in url for m in self.missing):
            raise FetchError(f"拉取失败 (HTTP 404): {url}")
        return self.pages.get(url, f"# from {url}\n")

    def render(self, url: str) -> str:
        return self.fetch(url).replace("REMOVE\n", "")


def make_rails_project(root: Path) -> Path:
    """生成一个最小的 rails new 产物"""
    for rel, content in {
        "Gemfile": "source 'https://rubygems.org'\n",
        "public/index.html": "<h1>Welcome aboard</h1>\n",
        "config/database.yml": "development:\n  adapter: sqlite3\n",
        "config/application.rb": "# generated\n",
        "config/environments/development.rb": "# generated\n",
        "config/environments/test.rb": "# generated\n",
        "app/assets/stylesheets/application.css": "/* app */\n",
        "test/test_helper.rb": "# test unit\n",
    }.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    return make_rails_project(tmp_path / "app")


@pytest.fixture()
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture()
def templates() -> FakeTemplates:
    return FakeTemplates()


@pytest.fixture()
def make_services(project: Path, executor: FakeExecutor, templates: FakeTemplates):
    """按预置答案构建注入了替身的服务容器"""

    def _make(**answers: object) -> ServiceContainer:
        cfg = Config(project_dir=str(project), answers=dict(answers))
        return ServiceContainer(
            config=cfg,
            prompter=ClickPrompter(answers=cfg.answers),
            files=LocalProjectFiles(project),
            templates=templates,
            executor=executor,
        )

    return _make
