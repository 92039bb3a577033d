"""工程文件操作服务

所有路径相对工程根目录解析，禁止越出根目录。
删除不存在的路径是静默的空操作；写入使用原子写。
"""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path

from rocket.core.exceptions import ValidationError
from rocket.utils.yaml_io import atomic_write

logger = logging.getLogger(__name__)


class LocalProjectFiles:
    """本地工程目录文件操作"""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        p = (self.root / path).resolve()
        if p != self.root and self.root not in p.parents:
            raise ValidationError(f"路径越出工程目录: {path}")
        return p

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def read(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def create(self, path: str, content: str) -> None:
        atomic_write(self._resolve(path), content)
        logger.info("  create  %s", path)

    def _entry(self, path: str) -> Path:
        """解析父目录但不跟随最后一级符号链接"""
        raw = self.root / path
        parent = raw.parent.resolve()
        if parent != self.root and self.root not in parent.parents:
            raise ValidationError(f"路径越出工程目录: {path}")
        entry = parent / raw.name
        if entry == self.root or not raw.name or raw.name == "..":
            raise ValidationError(f"不允许删除工程根目录: {path}")
        return entry

    def remove(self, path: str) -> bool:
        p = self._entry(path)
        # 符号链接只删链接本身，不动链接目标
        if p.is_symlink():
            p.unlink()
        elif p.is_dir():
            shutil.rmtree(p)
        elif p.exists():
            p.unlink()
        else:
            logger.debug("  skip    %s (不存在)", path)
            return False
        logger.info("  remove  %s", path)
        return True

    def copy(self, src: str, dest: str) -> None:
        target = self._resolve(dest)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self._resolve(src), target)
        logger.info("  copy    %s -> %s", src, dest)

    def append(self, path: str, content: str) -> None:
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "a", encoding="utf-8") as f:
            f.write(content)
        logger.info("  append  %s", path)

    def gsub(self, path: str, pattern: str, replacement: str) -> int:
        p = self._resolve(path)
        text = p.read_text(encoding="utf-8")
        new_text, count = re.subn(pattern, replacement, text)
        if count:
            atomic_write(p, new_text)
        logger.info("  gsub    %s (%d 处)", path, count)
        return count
