"""Literal placeholder substitution for resource stubs."""

from __future__ import annotations

import re
from contextlib import contextmanager
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Iterator, Mapping

from .errors import TemplateRenderingError

__all__ = [
    "CLASS_NAME_TOKEN",
    "NAMESPACE_TOKEN",
    "STUB_NAME",
    "TemplateRenderer",
    "TemplateRenderingError",
    "packaged_stub",
    "placeholder",
]


STUB_NAME = "resource.stub"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


def placeholder(key: str) -> str:
    """Return the literal token that stands for ``key`` in a stub."""

    return "{{ " + key + " }}"


CLASS_NAME_TOKEN = placeholder("className")
NAMESPACE_TOKEN = placeholder("namespace")


@contextmanager
def packaged_stub(name: str = STUB_NAME) -> Iterator[Path]:
    """Yield a filesystem path to a stub shipped inside the package."""

    stub = resources.files("mcpforge").joinpath("stubs").joinpath(name)
    with resources.as_file(stub) as path:
        yield path


@dataclass(slots=True)
class TemplateRenderer:
    """Replace ``{{ key }}`` tokens with plain strings.

    Each token is replaced verbatim: values are not escaped and the output is
    never scanned again, so a value that itself looks like a token is kept
    as-is.
    """

    strict: bool = False

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        """Render ``template`` using ``context``.

        When :attr:`strict` is set every key of ``context`` must appear in
        ``template`` as a token, otherwise :class:`TemplateRenderingError` is
        raised.
        """

        if self.strict:
            missing = sorted(key for key in context if placeholder(key) not in template)
            if missing:
                raise TemplateRenderingError(f"template has no placeholder for {', '.join(missing)}")

        tokens = {placeholder(key): str(value) for key, value in context.items()}
        if not tokens:
            return template

        pattern = re.compile("|".join(re.escape(token) for token in tokens))
        return pattern.sub(lambda match: tokens[match.group(0)], template)

    @staticmethod
    def placeholders(template: str) -> set[str]:
        """Return the keys of all tokens still present in ``template``."""

        return {match.group("key") for match in _PLACEHOLDER_PATTERN.finditer(template)}
