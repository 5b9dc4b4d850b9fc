"""Exception types raised by the resource scaffolder."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for every error raised while scaffolding a resource."""


class InvalidNameError(ScaffoldError, ValueError):
    """Raised when a name cannot be turned into a resource class name."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid resource name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class AlreadyExistsError(ScaffoldError, FileExistsError):
    """Raised when the destination of a resource is already taken."""

    def __init__(self, class_name: str, path: Path) -> None:
        super().__init__(f"MCP resource {class_name} already exists at {path}")
        self.class_name = class_name
        self.path = path


class ScaffoldIOError(ScaffoldError, OSError):
    """Raised when the template cannot be read or the resource cannot be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TemplateRenderingError(ScaffoldError):
    """Raised when a placeholder expected by the renderer is missing."""


__all__ = [
    "AlreadyExistsError",
    "InvalidNameError",
    "ScaffoldError",
    "ScaffoldIOError",
    "TemplateRenderingError",
]
