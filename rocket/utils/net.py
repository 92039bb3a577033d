"""网络工具 — URL 安全校验 + 文本拉取"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from urllib.parse import urlparse

from rocket.core.exceptions import FetchError, ValidationError

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = frozenset(("http", "https"))


def validate_url_scheme(url: str, *, context: str = "") -> None:
    """校验 URL 仅使用 http/https，防止 file:// 等非预期协议访问

    Raises:
        ValidationError: URL scheme 不在白名单内
    """
    parsed = urlparse(url)
    if parsed.scheme not in _ALLOWED_SCHEMES:
        label = f" ({context})" if context else ""
        raise ValidationError(
            f"不允许的 URL 协议 '{parsed.scheme}'{label}，"
            f"仅支持 http/https: {url}"
        )


def fetch_text(url: str, *, timeout: int = 30) -> str:
    """拉取远程文本内容（UTF-8）

    Raises:
        ValidationError: URL 协议不合法
        FetchError: 网络错误或 HTTP 状态码异常
    """
    validate_url_scheme(url, context="template fetch")
    logger.debug("拉取: %s", url)
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:  # noqa: S310
            return resp.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        raise FetchError(f"拉取失败 (HTTP {exc.code}): {url}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise FetchError(f"拉取失败: {url} ({exc})") from exc
