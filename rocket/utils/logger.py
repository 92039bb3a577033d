"""rocket 日志配置

提供统一的日志配置，支持普通文本和结构化 JSON 两种输出格式。
编排器在步骤相关日志上通过 extra 附带 step / phase 字段，
两种格式都会带出，便于在 CI 日志中按步骤过滤。
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

# 编排器通过 logging extra 附带的步骤字段
STEP_FIELDS = ("phase", "step")


def step_extra(step: str, phase: str) -> dict[str, str]:
    """构造步骤日志的 extra 字典"""
    return {"step": step, "phase": phase}


class JSONFormatter(logging.Formatter):
    """结构化 JSON 日志格式器，便于 CI 流水线消费

    输出格式:
        {
            "timestamp": "2024-01-01T12:00:00+00:00",
            "level": "INFO",
            "logger": "rocket.orchestrator.orchestrator",
            "message": "log message",
            "phase": "launch",        (仅步骤日志)
            "step": "gemfile.bundle", (仅步骤日志)
            "module": "orchestrator",
            "function": "run",
            "line": 42,
            "exception": "traceback..." (仅在有异常时)
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in STEP_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_entry[key] = value
        log_entry.update(
            module=record.module,
            function=record.funcName,
            line=record.lineno,
        )
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


class StepTextFormatter(logging.Formatter):
    """文本格式：带步骤字段的记录在消息前加 "phase:step" 前缀"""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        step = getattr(record, "step", None)
        if step is None:
            return text
        phase = getattr(record, "phase", None) or "-"
        marker = f"{record.name}: "
        # 前缀插在 logger 名之后、消息之前
        head, sep, tail = text.partition(marker)
        if not sep:
            return f"<{phase}:{step}> {text}"
        return f"{head}{sep}<{phase}:{step}> {tail}"


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """配置根日志器

    参数:
        level: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        json_output: 为 True 时使用 JSON 格式（适用于 CI），否则使用人类可读格式

    输出到 stderr，stdout 留给交互提问和报告；重复调用会替换已有 handler。
    """
    root = logging.getLogger()
    reset_logging()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(StepTextFormatter(
            "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
        ))

    root.addHandler(handler)


def reset_logging() -> None:
    """清理根日志器上所有已注册的 handlers"""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
