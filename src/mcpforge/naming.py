"""Name normalisation used to derive resource class names."""

from __future__ import annotations

import re

from .errors import InvalidNameError

__all__ = ["RESOURCE_SUFFIX", "normalize_class_name", "studly"]


RESOURCE_SUFFIX = "Resource"

_SEPARATORS = re.compile(r"[\s\-_]+")


def _collapse_separators(value: str) -> str:
    return _SEPARATORS.sub(" ", value).strip()


def _identifier_chars(word: str) -> str:
    return "".join(char for char in word if ("a" + char).isidentifier())


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def studly(value: str) -> str:
    """Return ``value`` in studly (Pascal) case.

    Words are split on whitespace, hyphens and underscores. Only the first
    character of every word is upper-cased so existing inner capitals survive:
    ``"order items"`` and ``"orderItems"`` both become ``"OrderItems"``.
    """

    words = _collapse_separators(value).split(" ")
    return "".join(_upper_first(_identifier_chars(word)) for word in words)


def normalize_class_name(name: str, *, suffix: str = RESOURCE_SUFFIX) -> str:
    """Return the resource class name generated from ``name``.

    The result is studly cased and always ends with ``suffix``; the suffix is
    not appended a second time when ``name`` already carries it.

    Raises
    ------
    InvalidNameError
        If nothing usable is left of ``name`` or the result cannot be used as
        a class name.
    """

    class_name = studly(name)
    if not class_name:
        raise InvalidNameError(name, "name must contain at least one letter or digit")

    if not class_name.endswith(suffix):
        class_name += suffix

    if not class_name.isidentifier():
        raise InvalidNameError(name, f"'{class_name}' is not a valid class name")

    return class_name
