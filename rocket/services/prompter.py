"""交互式提问服务

基于 click 的提问实现。问题 key 在预置答案中存在时直接取答案不再提问，
方便 CI / 脚本化执行。
"""

from __future__ import annotations

import logging
from typing import Any

import click

from rocket.core.exceptions import PromptAbortedError, ValidationError

logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset(("y", "yes", "true", "1", "on"))
_FALSE_WORDS = frozenset(("n", "no", "false", "0", "off"))

INDENT = "     "


def coerce_bool(value: Any, *, key: str = "") -> bool:
    """把预置答案转换为布尔值"""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValidationError(f"无法识别的是/否答案 {key}={value!r}")


def coerce_choice(value: Any, choices: list[str], *, key: str = "") -> str:
    """把预置答案转换为选项：支持 1 起始序号或选项原文"""
    text = str(value).strip()
    if text in choices:
        return text
    if text.isdigit() and 1 <= int(text) <= len(choices):
        return choices[int(text) - 1]
    raise ValidationError(
        f"无效的选项答案 {key}={value!r}", details=list(choices),
    )


class ClickPrompter:
    """click 交互提问器"""

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})

    def confirm(self, key: str, question: str) -> bool:
        if key in self.answers:
            answer = coerce_bool(self.answers[key], key=key)
            logger.info("预置答案: %s=%s", key, answer)
            return answer
        try:
            return click.confirm(question)
        except click.Abort as exc:
            raise PromptAbortedError(f"用户取消提问: {key}") from exc

    def choose(self, key: str, question: str, choices: list[str]) -> str:
        if key in self.answers:
            answer = coerce_choice(self.answers[key], choices, key=key)
            logger.info("预置答案: %s=%s", key, answer)
            return answer
        menu = "\n".join(
            f"{INDENT}{i}) {c}" for i, c in enumerate(choices, start=1)
        )
        try:
            index = click.prompt(
                f"{question}\n{menu}\n",
                type=click.IntRange(1, len(choices)),
            )
        except click.Abort as exc:
            raise PromptAbortedError(f"用户取消提问: {key}") from exc
        return choices[index - 1]

    def say(self, message: str) -> None:
        click.echo(message)
