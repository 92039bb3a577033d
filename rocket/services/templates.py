"""远程模板服务

通过 HTTP 拉取模板文本。模板内以单独一行 ``REMOVE`` 标记的占位行
在写入工程前剔除。
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from rocket.utils.net import fetch_text

if TYPE_CHECKING:
    from rocket.core.protocols import ProjectFiles, TemplateSource

logger = logging.getLogger(__name__)

_REMOVE_MARKER = re.compile(r"REMOVE\n")


def strip_markers(text: str) -> str:
    return _REMOVE_MARKER.sub("", text)


class RemoteTemplates:
    """HTTP 模板源（同一 URL 只拉取一次）"""

    def __init__(self, *, timeout: int = 30) -> None:
        self.timeout = timeout
        self._cache: dict[str, str] = {}

    def fetch(self, url: str) -> str:
        if url not in self._cache:
            self._cache[url] = fetch_text(url, timeout=self.timeout)
            logger.info("  fetch   %s", url)
        return self._cache[url]

    def render(self, url: str) -> str:
        return strip_markers(self.fetch(url))


def install_template(
    files: ProjectFiles, templates: TemplateSource, url: str, dest: str,
) -> None:
    """拉取远程模板并写入工程文件（覆盖已有文件）"""
    content = templates.render(url)
    files.remove(dest)
    files.create(dest, content)
