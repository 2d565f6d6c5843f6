# diagtree:header:start
#
#   project      : DiagTree
#   file         : document.py
#   file_relpath : src/diagtree/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Tree description documents.

A tree document describes diagnostic nodes as structured data, either JSON or
TOML (parsed with `tomlkit`):

```toml
[[nodes]]
text = "Could not resolve all dependencies"

[[nodes.children]]
text = "Could not find lib-1.0"
```

Documents are loaded into immutable `TreeEntry` records and replayed onto a
`TreeVisitor` such as `diagtree.text.formatter.TreeFormatter`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from diagtree.config.logging import get_logger
from diagtree.core.errors import DocumentError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from diagtree.config.logging import DiagtreeLogger
    from diagtree.text.visitor import TreeVisitor

logger: DiagtreeLogger = get_logger(__name__)

KEY_NODES = "nodes"
KEY_TEXT = "text"
KEY_CHILDREN = "children"


class DocumentFormat(str, Enum):
    """Serialization formats accepted for tree documents."""

    JSON = "json"
    TOML = "toml"

    @classmethod
    def from_path(cls, path: Path) -> DocumentFormat:
        """Guess the format from a file suffix; defaults to JSON."""
        if path.suffix.lower() == ".toml":
            return cls.TOML
        return cls.JSON


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A node of a tree document.

    Attributes:
        text (str): The node label.
        children (tuple[TreeEntry, ...]): Child entries in order.
    """

    text: str
    children: tuple[TreeEntry, ...] = ()


def parse_document(text: str, fmt: DocumentFormat) -> tuple[TreeEntry, ...]:
    """Parse a tree document.

    Args:
        text (str): Document content.
        fmt (DocumentFormat): Serialization format of ``text``.

    Returns:
        tuple[TreeEntry, ...]: The top-level entries.

    Raises:
        DocumentError: If the content cannot be decoded or has the wrong shape.
    """
    data: Any
    try:
        if fmt is DocumentFormat.TOML:
            data = tomlkit.parse(text).unwrap()
        else:
            data = json.loads(text)
    except (TomlkitParseError, json.JSONDecodeError) as exc:
        raise DocumentError(f"Invalid {fmt.value.upper()} document: {exc}") from exc

    if not isinstance(data, dict):
        raise DocumentError("Tree document must be a table/object")
    nodes: Any = cast("dict[str, Any]", data).get(KEY_NODES)
    if nodes is None:
        raise DocumentError(f"Tree document has no {KEY_NODES!r} entry")
    entries = _parse_entries(nodes, KEY_NODES)
    logger.debug("Parsed tree document with %d top-level entries", len(entries))
    return entries


def load_document(path: Path, fmt: DocumentFormat | None = None) -> tuple[TreeEntry, ...]:
    """Read and parse a tree document from disk.

    Args:
        path (Path): Document location.
        fmt (DocumentFormat | None): Format override; guessed from the suffix if None.

    Returns:
        tuple[TreeEntry, ...]: The top-level entries.

    Raises:
        DocumentError: If the file is not valid UTF-8 or not a valid document.
    """
    logger.debug("Loading tree document: %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentError(f"{path} is not valid UTF-8: {exc}") from exc
    return parse_document(text, fmt or DocumentFormat.from_path(path))


def _parse_entries(value: Any, where: str) -> tuple[TreeEntry, ...]:
    if not isinstance(value, list):
        raise DocumentError(f"{where}: expected a list of nodes")
    return tuple(
        _parse_entry(item, f"{where}[{index}]")
        for index, item in enumerate(cast("list[Any]", value))
    )


def _parse_entry(value: Any, where: str) -> TreeEntry:
    if not isinstance(value, dict):
        raise DocumentError(f"{where}: expected a table/object")
    item = cast("dict[str, Any]", value)
    text: Any = item.get(KEY_TEXT)
    if not isinstance(text, str):
        raise DocumentError(f"{where}: {KEY_TEXT!r} must be a string")
    children: Any = item.get(KEY_CHILDREN, [])
    return TreeEntry(text=text, children=_parse_entries(children, f"{where}.{KEY_CHILDREN}"))


def replay(entries: Sequence[TreeEntry], visitor: TreeVisitor[str]) -> None:
    """Drive ``visitor`` depth-first over ``entries``.

    Every node with children is wrapped in ``start_children()`` /
    ``end_children()``. Nested leaves are closed by their next sibling or by
    the parent's ``end_children()``; top-level leaves are closed with their own
    ``end_children()`` call.
    """
    for entry in entries:
        visitor.node(entry.text)
        if entry.children:
            _replay_children(entry.children, visitor)
        else:
            visitor.end_children()


def _replay_children(children: Sequence[TreeEntry], visitor: TreeVisitor[str]) -> None:
    visitor.start_children()
    for child in children:
        visitor.node(child.text)
        if child.children:
            _replay_children(child.children, visitor)
    visitor.end_children()
