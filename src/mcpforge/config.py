"""Configuration for where and how resources are generated."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "DEFAULT_NAMESPACE",
    "DEFAULT_SUBDIRECTORY",
    "PYPROJECT_TABLE",
    "ScaffoldSettings",
]


DEFAULT_NAMESPACE = "app.MCP.Resources"
DEFAULT_SUBDIRECTORY = "MCP/Resources"
PYPROJECT_TABLE = "mcpforge"


class ScaffoldSettings(BaseModel):
    """Locations and constants used when generating a resource class.

    Attributes
    ----------
    app_root:
        Application root under which resources are placed.
    subdirectory:
        Path of the resource directory relative to :attr:`app_root`.
    extension:
        File extension of generated resources, including the leading dot.
    namespace:
        Logical grouping written into every generated resource.
    template:
        Optional template overriding the stub shipped with the package.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    app_root: Path = Field(default=Path("app"), description="Application root directory.")
    subdirectory: str = Field(default=DEFAULT_SUBDIRECTORY, description="Resource directory below the application root.")
    extension: str = Field(default=".py", description="File extension of generated resources.")
    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Namespace written into generated resources.")
    template: Path | None = Field(default=None, description="Custom template replacing the packaged stub.")

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("extension must start with '.' and name a suffix")
        return value

    @field_validator("subdirectory")
    @classmethod
    def _check_subdirectory(cls, value: str) -> str:
        if Path(value).is_absolute():
            raise ValueError("subdirectory must be relative to the application root")
        return value

    @property
    def resource_directory(self) -> Path:
        return self.app_root / self.subdirectory

    def resource_path(self, class_name: str) -> Path:
        """Return the destination of ``class_name``. Performs no I/O."""

        return self.resource_directory / f"{class_name}{self.extension}"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], *, base_dir: Path | None = None) -> "ScaffoldSettings":
        """Build settings from ``values``, resolving relative paths against ``base_dir``."""

        data = dict(values)
        if base_dir is not None:
            for key in ("app_root", "template"):
                value = data.get(key)
                if isinstance(value, (str, os.PathLike)) and not Path(value).is_absolute():
                    data[key] = base_dir / value
        return cls.model_validate(data)

    @classmethod
    def from_pyproject(cls, path: str | Path) -> "ScaffoldSettings":
        """Load settings from the ``[tool.mcpforge]`` table of ``path``.

        A missing file or table yields the default settings.
        """

        path = Path(path)
        if not path.is_file():
            return cls()

        with path.open("rb") as handle:
            document = tomllib.load(handle)

        tool = document.get("tool", {})
        if not isinstance(tool, dict):
            raise ValueError(f"'tool' in {path} must be a table")
        table = tool.get(PYPROJECT_TABLE, {})
        if not isinstance(table, dict):
            raise ValueError(f"'tool.{PYPROJECT_TABLE}' in {path} must be a table")
        return cls.from_mapping(table, base_dir=path.parent)

    def with_overrides(self, **overrides: Any) -> "ScaffoldSettings":
        """Return a copy with the non-``None`` values of ``overrides`` applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return type(self).model_validate({**self.model_dump(), **values})
