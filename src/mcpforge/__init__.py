"""Scaffolding for MCP server code.

The package turns human friendly names into resource class names, renders the
packaged resource stub and writes it under an application root, refusing to
replace files that already exist. It can be used programmatically or through
the ``mcpforge`` command line interface.
"""

from __future__ import annotations

from .config import ScaffoldSettings
from .errors import (
    AlreadyExistsError,
    InvalidNameError,
    ScaffoldError,
    ScaffoldIOError,
    TemplateRenderingError,
)
from .filesystem import Filesystem, LocalFilesystem
from .naming import normalize_class_name, studly
from .scaffold import ResourceScaffolder, compute_path
from .template import TemplateRenderer

__all__ = [
    "AlreadyExistsError",
    "Filesystem",
    "InvalidNameError",
    "LocalFilesystem",
    "ResourceScaffolder",
    "ScaffoldError",
    "ScaffoldIOError",
    "ScaffoldSettings",
    "TemplateRenderer",
    "TemplateRenderingError",
    "compute_path",
    "normalize_class_name",
    "studly",
]

__version__ = "0.1.0"
