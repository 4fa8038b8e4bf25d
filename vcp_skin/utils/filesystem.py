"""Filesystem access used by the skin loader."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SkinFileSystem(Protocol):
    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, content: str) -> None:
        ...

    def exists(self, path: Path) -> bool:
        ...


class LocalFileSystem:
    """Reads and writes UTF-8 files on the local disk."""

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()
