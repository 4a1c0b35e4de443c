"""Typed field extraction from document nodes.

Each helper returns an optional value or applies a single, explicit
default-or-fail policy so the parsers never fall back inline.
"""

from __future__ import annotations

import re
from xml.etree.ElementTree import Element

from .errors import InvalidFieldError, MissingFieldError

_CONTEXT_FIELDS = ("id", "loadID")
_INTEGER = re.compile(r"-?[0-9]+")


def describe(node: Element) -> str:
    """Return a short human-readable description of ``node`` for diagnostics."""

    for field in _CONTEXT_FIELDS:
        child = node.find(field)
        if child is not None and child.text:
            return f"<{node.tag}> ({field}={child.text})"
    return f"<{node.tag}>"


def child_text(node: Element, path: str) -> str | None:
    """Return the text content at ``path`` below ``node``.

    Absent nodes and empty text both yield ``None``.
    """

    child = node.find(path)
    if child is None:
        return None
    text = "".join(child.itertext())
    return text or None


def required_text(node: Element, path: str) -> str:
    """Return the text at ``path`` or raise :class:`MissingFieldError`."""

    value = child_text(node, path)
    if value is None:
        raise MissingFieldError(path, describe(node))
    return value


def optional_int(node: Element, path: str, *, default: int = 0) -> int:
    """Return the integer at ``path``, ``default`` when absent.

    A present value that is not an integer raises :class:`InvalidFieldError`.
    """

    value = child_text(node, path)
    if value is None:
        return default
    text = value.strip()
    if _INTEGER.fullmatch(text) is None:
        raise InvalidFieldError(path, value, describe(node))
    return int(text)
