# diagtree:header:start
#
#   project      : DiagTree
#   file         : strategies_diagtree.py
#   file_relpath : tests/strategies_diagtree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

# pyright: strict

"""Hypothesis strategies for generating diagnostic trees.

Labels are single-line so that every node occupies at most one rendered line.
"""

from __future__ import annotations

import string
from collections.abc import Iterable

from hypothesis import strategies as st

from diagtree.document import TreeEntry

LABEL_ALPHABET: str = string.ascii_letters + string.digits + " ._-()'"


def _join(head: str, tail: str) -> str:
    return head + tail


# Labels never start with a space, so only nested lines are indented.
s_label: st.SearchStrategy[str] = st.builds(
    _join,
    st.sampled_from(string.ascii_letters + string.digits),
    st.text(alphabet=LABEL_ALPHABET, max_size=11),
)


def _with_children(
    children: st.SearchStrategy[TreeEntry],
) -> st.SearchStrategy[TreeEntry]:
    return st.builds(
        TreeEntry,
        text=s_label,
        children=st.lists(children, min_size=1, max_size=4).map(tuple),
    )


s_entry: st.SearchStrategy[TreeEntry] = st.recursive(
    st.builds(TreeEntry, text=s_label),
    _with_children,
    max_leaves=25,
)

s_forest: st.SearchStrategy[tuple[TreeEntry, ...]] = st.lists(
    s_entry, min_size=1, max_size=4
).map(tuple)


def count_nodes(entries: Iterable[TreeEntry]) -> int:
    """Return the number of entries in a forest, descendants included."""
    return sum(1 + count_nodes(e.children) for e in entries)


def can_collapse(entry: TreeEntry) -> bool:
    """Return True if ``entry`` is rendered on one line with its only child."""
    return len(entry.children) == 1 and not can_collapse(entry.children[0])


def count_collapsed(entries: Iterable[TreeEntry]) -> int:
    """Return the number of entries that pull their only child onto their line."""
    return sum(int(can_collapse(e)) + count_collapsed(e.children) for e in entries)


def flat_lines(entries: Iterable[TreeEntry], depth: int = 0) -> list[str]:
    """Return the expected lines of a forest rendered without collapsing."""
    lines: list[str] = []
    for entry in entries:
        head = entry.text if depth == 0 else " " * 4 * (depth - 1) + "  - " + entry.text
        lines.append(head + (":" if entry.children else ""))
        lines.extend(flat_lines(entry.children, depth + 1))
    return lines
