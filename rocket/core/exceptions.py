"""统一异常体系

所有业务异常继承 RocketError，替代散落的 ValueError / RuntimeError。
CLI 层可据此输出友好提示并映射退出码。
"""

from __future__ import annotations


class RocketError(Exception):
    """框架基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(RocketError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class ValidationError(RocketError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class DuplicateStepError(RocketError):
    """步骤名重复注册（注册表保持不变）"""

    code = "DUPLICATE_STEP"

    def __init__(self, name: str) -> None:
        super().__init__(f"步骤已注册: {name}")
        self.name = name


class StepFailure(RocketError):
    """步骤执行失败 — 编排器据此停机

    步骤动作可直接抛出本异常并只给出 cause，
    编排器在停机时补全 step / phase。
    """

    code = "STEP_FAILURE"

    def __init__(
        self, cause: str, *, step: str = "", phase: str = "",
    ) -> None:
        super().__init__(cause)
        self.cause = cause
        self.step = step
        self.phase = phase

    def __str__(self) -> str:
        if self.step:
            return f"[{self.phase}] {self.step}: {self.cause}"
        return self.cause


class ExecutionError(RocketError):
    """外部命令执行失败（返回码非 0）"""

    code = "EXECUTION_ERROR"


class FetchError(RocketError):
    """远程模板拉取失败"""

    code = "FETCH_ERROR"


class PromptAbortedError(RocketError):
    """用户中止了交互式提问"""

    code = "PROMPT_ABORTED"
