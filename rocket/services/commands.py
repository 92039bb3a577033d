"""工程内命令执行服务

把 CommandExecutor 绑定到工程目录与超时，供功能步骤调用
生成器、包管理器和 git。
"""

from __future__ import annotations

from rocket.utils.shell import CommandExecutor, CommandResult, run_cmd


class ProjectCommands:
    """在工程根目录下执行外部命令"""

    def __init__(
        self, executor: CommandExecutor, *,
        cwd: str = ".", timeout: float | None = None,
    ) -> None:
        self.executor = executor
        self.cwd = cwd
        self.timeout = timeout

    def run(self, cmd: str | list[str], *, label: str = "cmd") -> CommandResult:
        """执行命令，返回码非 0 时抛 ExecutionError"""
        return run_cmd(
            cmd, cwd=self.cwd, label=label,
            executor=self.executor, timeout=self.timeout,
        )

    def generate(self, generator: str) -> CommandResult:
        """rails generate <generator>"""
        return self.run(["rails", "generate", generator], label=f"generate {generator}")
