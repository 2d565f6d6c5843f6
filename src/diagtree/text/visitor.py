# diagtree:header:start
#
#   project      : DiagTree
#   file         : visitor.py
#   file_relpath : src/diagtree/text/visitor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Depth-first tree visitor protocol.

A producer describes a tree by calling, for every node in depth-first order:

    node(value)
    start_children()   # only when the node has children
    ...children...
    end_children()

Siblings are introduced by calling `node` again without an intervening
`start_children`.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class TreeVisitor(Generic[T]):
    """Base visitor; every callback is a no-op by default."""

    def node(self, value: T) -> None:
        """Visit a new node."""

    def start_children(self) -> None:
        """Start visiting the children of the current node."""

    def end_children(self) -> None:
        """Finish visiting the children of the current node."""
