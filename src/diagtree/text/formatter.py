# diagtree:header:start
#
#   project      : DiagTree
#   file         : formatter.py
#   file_relpath : src/diagtree/text/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Builds a tree of diagnostic messages and renders it as indented text.

`TreeFormatter` is driven through the `TreeVisitor` protocol. Top-level nodes
are written to the output as soon as they are declared; the subtree below a
top-level node is rendered in one pass when its children are ended.

Example:
    >>> formatter = TreeFormatter()
    >>> formatter.node("Could not resolve all dependencies")
    >>> formatter.start_children()
    >>> formatter.node("Could not find lib-1.0")
    >>> formatter.node("Could not find lib-2.0")
    >>> formatter.end_children()
    >>> print(formatter)
    Could not resolve all dependencies:
      - Could not find lib-1.0
      - Could not find lib-2.0

Rendering rules:
    * Children are written as ``"  - "`` bullets, one indent level (four
      spaces) deeper than their parent.
    * A node with exactly one child is written as ``"parent: child"`` on a single
      line, unless that child could itself collapse its own single child. Along a
      chain of single children the collapsing therefore alternates.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from diagtree.config.logging import get_logger
from diagtree.config.model import FormatterConfig
from diagtree.core.errors import ProtocolViolation
from diagtree.text.output import LinePrefixingTextOutput, StringTextOutput
from diagtree.text.values import capitalize, format_value, format_values, type_label
from diagtree.text.visitor import TreeVisitor

if TYPE_CHECKING:
    from diagtree.config.logging import DiagtreeLogger

logger: DiagtreeLogger = get_logger(__name__)

INDENT: Final[str] = "    "
BULLET: Final[str] = "  - "


class NodeState(Enum):
    """Lifecycle of a node while the tree is being built."""

    COLLECT_VALUE = "collect_value"
    TRAVERSE_CHILDREN = "traverse_children"
    DONE = "done"


@dataclass(eq=False, slots=True)
class _Node:
    """One diagnostic entry. The root sentinel has no parent and no value."""

    parent: _Node | None = field(repr=False)
    value: list[str] | None
    collapse_first_child: bool
    state: NodeState
    first_child: _Node | None = field(default=None, repr=False)
    last_child: _Node | None = field(default=None, repr=False)
    next_sibling: _Node | None = field(default=None, repr=False)
    prefix: str | None = None
    value_written: bool = False
    collapsible: bool = False

    @classmethod
    def root(cls, collapse_first_child: bool) -> _Node:
        return cls(
            parent=None,
            value=None,
            collapse_first_child=collapse_first_child,
            state=NodeState.TRAVERSE_CHILDREN,
            prefix="",
        )

    @classmethod
    def child_of(cls, parent: _Node, text: str) -> _Node:
        node = cls(
            parent=parent,
            value=[text],
            collapse_first_child=parent.collapse_first_child,
            state=NodeState.COLLECT_VALUE,
        )
        if parent.last_child is None:
            parent.first_child = node
        else:
            parent.last_child.next_sibling = node
        parent.last_child = node
        return node

    @property
    def text(self) -> str:
        return "".join(self.value or ())

    @property
    def is_top_level(self) -> bool:
        return self.parent is not None and self.parent.parent is None

    def children(self) -> Iterator[_Node]:
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def subtree(self) -> list[_Node]:
        """Return this node and its descendants in depth-first pre-order."""
        nodes: list[_Node] = []
        stack: list[_Node] = [self]
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(reversed(list(node.children())))
        return nodes

    def mark_collapsible(self) -> None:
        """Set `collapsible` on every node of the subtree, children first.

        A node collapses when it has exactly one child and that child does not
        collapse its own single child.
        """
        for node in reversed(self.subtree()):
            child = node.first_child
            node.collapsible = (
                node.collapse_first_child
                and child is not None
                and child.next_sibling is None
                and not child.collapsible
            )


@dataclass(frozen=True, slots=True)
class NodeView:
    """Read-only snapshot of a node, as yielded by `TreeFormatter.walk`.

    Attributes:
        text (str): The node's label, including appended text.
        depth (int): 0 for top-level nodes.
        state (NodeState): The node's lifecycle state.
    """

    text: str
    depth: int
    state: NodeState


class TreeFormatter(TreeVisitor[str]):
    """Constructs a tree of diagnostic messages.

    Args:
        collapse_first_child (bool): Whether a sole child may be rendered on its
            parent's line. Ignored when ``config`` is given.
        config (FormatterConfig | None): Full formatter configuration.

    Raises:
        ProtocolViolation: From the builder methods, when called out of order.
    """

    config: FormatterConfig

    def __init__(
        self,
        collapse_first_child: bool = True,
        *,
        config: FormatterConfig | None = None,
    ) -> None:
        if config is None:
            config = FormatterConfig(collapse_first_child=collapse_first_child)
        self.config = config
        self._output = StringTextOutput(config.line_separator)
        self._root = _Node.root(config.collapse_first_child)
        self._current = self._root

    def __str__(self) -> str:
        return self._output.getvalue()

    def to_string(self) -> str:
        """Return the text rendered so far."""
        return self._output.getvalue()

    # ------------------------------ Building ------------------------------

    def node(self, value: str) -> None:
        """Start a new node with the given text.

        The node is a child of the current node if its children were started,
        otherwise a sibling of the current node.
        """
        current = self._current
        if current.state is NodeState.TRAVERSE_CHILDREN:
            new = _Node.child_of(current, value)
        else:
            if current.parent is None:
                raise ProtocolViolation("Not visiting any node.")
            current.state = NodeState.DONE
            new = _Node.child_of(current.parent, value)
        self._current = new
        logger.trace("node %r", value)

        if new.is_top_level:
            if new is not self._root.first_child:
                self._output.line_break()
            self._output.append(value)
            new.value_written = True

    def node_type(self, type_: type) -> None:
        """Start a new node labeled with the given type's name."""
        self.node(capitalize(type_label(type_)))

    def append(self, text: str) -> None:
        """Append text to the current node."""
        current = self._current
        if current.state is not NodeState.COLLECT_VALUE or current.value is None:
            raise ProtocolViolation("Cannot append text to node.")
        current.value.append(text)
        if current.value_written:
            self._output.append(text)

    def append_type(self, type_: type) -> None:
        """Append a type name to the current node."""
        self.append(type_label(type_))

    def append_value(self, value: object | None) -> None:
        """Append a user provided value to the current node."""
        self.append(format_value(value))

    def append_values(self, values: Iterable[object | None]) -> None:
        """Append user provided values to the current node, as ``[a, b]``."""
        self.append(format_values(values))

    def start_children(self) -> None:
        """Start the children of the current node."""
        current = self._current
        if current.state is not NodeState.COLLECT_VALUE:
            raise ProtocolViolation("Cannot start children again.")
        current.state = NodeState.TRAVERSE_CHILDREN
        logger.trace("start children of %r", current.text)

    def end_children(self) -> None:
        """End the children of the current node and return to its parent.

        When the current node is a leaf, it is closed first, together with the
        child list it belongs to. A top-level leaf is closed on its own.
        """
        current = self._current
        if current.parent is None:
            raise ProtocolViolation("Not visiting any node.")
        if current.state is NodeState.COLLECT_VALUE:
            current.state = NodeState.DONE
            current = current.parent
            self._current = current
            if current.parent is None:
                logger.trace("end top-level leaf")
                return
        if current.state is not NodeState.TRAVERSE_CHILDREN:
            raise ProtocolViolation("Cannot end children.")
        logger.trace("end children of %r", current.text)
        if current.is_top_level:
            logger.debug("Rendering subtree of %r", current.text)
            current.mark_collapsible()
            self._write_node(current)
        current.state = NodeState.DONE
        self._current = current.parent

    # ------------------------------ Inspection ----------------------------

    def walk(self) -> Iterator[NodeView]:
        """Yield a snapshot of every node, depth-first in insertion order."""
        stack: list[tuple[_Node, int]] = [(c, 0) for c in reversed(list(self._root.children()))]
        while stack:
            node, depth = stack.pop()
            yield NodeView(text=node.text, depth=depth, state=node.state)
            stack.extend((c, depth + 1) for c in reversed(list(node.children())))

    # ------------------------------ Rendering -----------------------------

    def _write_node(self, node: _Node) -> None:
        """Write ``node``, its subtree and all of its following siblings.

        Pending nodes are kept on an explicit stack; each entry records whether
        a line break precedes it.
        """
        pending: list[tuple[_Node, bool]] = [(node, False)]
        while pending:
            node, break_before = pending.pop()
            if break_before:
                self._output.line_break()
            first = self._write_entry(node)
            if node.next_sibling is not None:
                pending.append((node.next_sibling, True))
            if first is not None:
                pending.append((first, False))

    def _write_entry(self, node: _Node) -> _Node | None:
        """Write the label of ``node`` and what separates it from its first child.

        Returns:
            _Node | None: The first child, to be written next.
        """
        parent = node.parent
        if parent is None or parent.prefix is None:
            raise ProtocolViolation("Cannot render a node without a placed parent.")
        if node.prefix is None:
            node.prefix = "" if node.is_top_level else parent.prefix + INDENT

        output = LinePrefixingTextOutput(self._output, node.prefix, prefix_first_line=False)
        if not node.value_written:
            output.append(parent.prefix)
            output.append(BULLET)
            output.append(node.text)
            node.value_written = True

        first = node.first_child
        if first is None:
            return None
        if node.collapsible:
            output.append(": ")
            output.append(first.text)
            first.value_written = True
            first.prefix = node.prefix
        else:
            self._output.append(":")
            self._output.line_break()
        return first
