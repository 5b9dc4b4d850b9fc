"""Resource scaffolding."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path

from .config import ScaffoldSettings
from .errors import AlreadyExistsError, ScaffoldIOError
from .filesystem import DIRECTORY_MODE, Filesystem, LocalFilesystem
from .naming import normalize_class_name
from .template import TemplateRenderer, packaged_stub

__all__ = ["ResourceScaffolder", "compute_path"]


LOGGER = logging.getLogger(__name__)


def compute_path(class_name: str, settings: ScaffoldSettings | None = None) -> Path:
    """Return where ``class_name`` is generated under ``settings``."""

    return (settings or ScaffoldSettings()).resource_path(class_name)


class ResourceScaffolder:
    """Generate MCP resource classes from a stub.

    The filesystem, the renderer and the settings are passed in explicitly so
    callers and tests decide where files are read from and written to.
    """

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        *,
        filesystem: Filesystem | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.filesystem = filesystem or LocalFilesystem()
        self.renderer = renderer or TemplateRenderer(strict=True)

    def class_name(self, name: str) -> str:
        return normalize_class_name(name)

    def path_for(self, class_name: str) -> Path:
        return compute_path(class_name, self.settings)

    def make(self, name: str) -> Path:
        """Normalise ``name`` and generate the matching resource."""

        class_name = self.class_name(name)
        return self.generate(class_name, self.path_for(class_name))

    def generate(self, class_name: str, path: Path) -> Path:
        """Write the resource ``class_name`` to ``path``.

        Raises
        ------
        AlreadyExistsError
            If ``path`` exists. Nothing is written in that case.
        ScaffoldIOError
            If the template cannot be read or the resource cannot be written.
        """

        path = Path(path)
        LOGGER.debug("Generating %s at %s", class_name, path)
        if self.filesystem.exists(path):
            LOGGER.info("Refusing to overwrite %s", path)
            raise AlreadyExistsError(class_name, path)

        stub = self._load_template()
        content = self.renderer.render_string(
            stub,
            {"className": class_name, "namespace": self.settings.namespace},
        )

        directory = path.parent
        try:
            if not self.filesystem.is_directory(directory):
                LOGGER.debug("Creating directory %s", directory)
                self.filesystem.make_directory(directory, DIRECTORY_MODE)
            self.filesystem.write_text(path, content)
        except OSError as exc:
            raise ScaffoldIOError(f"cannot write {path}: {exc}", path) from exc

        LOGGER.info("Created MCP resource %s at %s", class_name, path)
        return path

    def _load_template(self) -> str:
        with ExitStack() as stack:
            template = self.settings.template
            if template is None:
                template = stack.enter_context(packaged_stub())
            try:
                return self.filesystem.read_text(template)
            except OSError as exc:
                raise ScaffoldIOError(f"cannot read template {template}: {exc}", template) from exc
