"""协作者协议定义

功能步骤只依赖这些窄接口（Protocol），由服务容器注入具体实现。
命令执行协议 CommandExecutor 定义在 rocket.utils.shell。

使用 typing.Protocol 而非 ABC，测试替身无需继承即可满足协议。
"""

from __future__ import annotations

from typing import Protocol


# =========================================================================
# 交互提问
# =========================================================================

class Prompter(Protocol):
    """交互式提问协议

    key 用于查找预置答案，question 为展示给用户的文本。
    """

    def confirm(self, key: str, question: str) -> bool:
        """是/否提问"""
        ...

    def choose(self, key: str, question: str, choices: list[str]) -> str:
        """从固定选项中选择一项，返回选中的选项"""
        ...

    def say(self, message: str) -> None:
        """向用户输出一段文本"""
        ...


# =========================================================================
# 工程文件操作
# =========================================================================

class ProjectFiles(Protocol):
    """以工程根目录为基准的文件操作协议"""

    def exists(self, path: str) -> bool:
        ...

    def read(self, path: str) -> str:
        ...

    def create(self, path: str, content: str) -> None:
        """创建（或覆盖）文件"""
        ...

    def remove(self, path: str) -> bool:
        """删除文件或目录；不存在时静默返回 False"""
        ...

    def copy(self, src: str, dest: str) -> None:
        ...

    def append(self, path: str, content: str) -> None:
        ...

    def gsub(self, path: str, pattern: str, replacement: str) -> int:
        """正则替换文件内容，返回替换次数"""
        ...


# =========================================================================
# 远程模板
# =========================================================================

class TemplateSource(Protocol):
    """远程模板源协议"""

    def fetch(self, url: str) -> str:
        """拉取原始文本"""
        ...

    def render(self, url: str) -> str:
        """拉取并整理为可直接写入工程的文本"""
        ...
