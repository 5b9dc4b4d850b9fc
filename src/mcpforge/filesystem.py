"""Filesystem interface used by the scaffolder and its local implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

DIRECTORY_MODE = 0o755


class Filesystem(ABC):
    """Minimal set of file operations needed to scaffold a resource."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` refers to an existing entry."""

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Return ``True`` when ``path`` is an existing directory."""

    @abstractmethod
    def make_directory(self, path: Path, mode: int = DIRECTORY_MODE) -> None:
        """Create ``path`` and any missing parents."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the contents of ``path``."""

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path``, replacing any previous contents."""


class LocalFilesystem(Filesystem):
    """:class:`Filesystem` backed by the local disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def make_directory(self, path: Path, mode: int = DIRECTORY_MODE) -> None:
        path = Path(path)
        # mkdir(parents=True) only applies ``mode`` to the leaf
        missing = [directory for directory in (path, *path.parents) if not directory.exists()]
        for directory in reversed(missing):
            directory.mkdir(mode=mode, exist_ok=True)

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding=self.encoding)


__all__ = ["DIRECTORY_MODE", "Filesystem", "LocalFilesystem"]
