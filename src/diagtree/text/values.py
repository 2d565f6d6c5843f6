# diagtree:header:start
#
#   project      : DiagTree
#   file         : values.py
#   file_relpath : src/diagtree/text/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Display strings for user-provided values and types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

NULL_TEXT = "null"


def format_value(value: object | None) -> str:
    """Return the display text of a value; ``None`` renders as ``"null"``."""
    return NULL_TEXT if value is None else str(value)


def format_values(values: Iterable[object | None]) -> str:
    """Return ``"[a, b, ...]"`` using `format_value` for each element."""
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def type_label(type_: type) -> str:
    """Return the fully qualified name of a type.

    Builtin types are reported by their bare name (``int``, not ``builtins.int``).
    """
    module = type_.__module__
    if module == "builtins":
        return type_.__qualname__
    return f"{module}.{type_.__qualname__}"


def capitalize(text: str) -> str:
    """Upper-case the first character only (unlike `str.capitalize`)."""
    return text[:1].upper() + text[1:]
