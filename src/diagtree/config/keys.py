# diagtree:header:start
#
#   project      : DiagTree
#   file         : keys.py
#   file_relpath : src/diagtree/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Canonical TOML section and key names for DiagTree configuration.

Keys defined here represent the *external configuration API* as it appears in
``diagtree.toml`` and in ``[tool.diagtree]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DiagTree configuration."""

    # pyproject.toml nesting: [tool.diagtree]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_DIAGTREE: Final[str] = "diagtree"

    KEY_COLLAPSE_FIRST_CHILD: Final[str] = "collapse_first_child"
    KEY_LINE_SEPARATOR: Final[str] = "line_separator"


# Accepted values for `line_separator`; "native" resolves to `os.linesep`.
LINE_SEPARATORS: Final[dict[str, str | None]] = {
    "lf": "\n",
    "crlf": "\r\n",
    "native": None,
}
