# diagtree:header:start
#
#   project      : DiagTree
#   file         : test_formatter_property.py
#   file_relpath : tests/text/test_formatter_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

# pyright: strict

"""Property tests for `TreeFormatter` over generated trees.

Generated forests are replayed through `diagtree.document.replay` and the
rendered text is checked against the node structure:

1) every node is sealed once the forest has been replayed,
2) without collapsing, the output equals a straightforward bullet rendering,
3) with collapsing, exactly one line disappears per collapsed node.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from diagtree.config.model import FormatterConfig
from diagtree.document import TreeEntry, replay
from diagtree.text.formatter import NodeState, TreeFormatter
from tests.strategies_diagtree import (
    count_collapsed,
    count_nodes,
    flat_lines,
    s_forest,
)


def _render(forest: tuple[TreeEntry, ...], *, collapse: bool) -> TreeFormatter:
    formatter = TreeFormatter(
        config=FormatterConfig(collapse_first_child=collapse, line_separator="\n")
    )
    replay(forest, formatter)
    return formatter


@settings(max_examples=100, deadline=None)
@given(forest=s_forest)
def test_replayed_forest_leaves_every_node_done(forest: tuple[TreeEntry, ...]) -> None:
    """All nodes reachable in the tree are DONE after a well-formed replay."""
    formatter = _render(forest, collapse=True)
    views = list(formatter.walk())
    assert len(views) == count_nodes(forest)
    assert all(v.state is NodeState.DONE for v in views)


@settings(max_examples=100, deadline=None)
@given(forest=s_forest)
def test_flat_rendering_has_one_bullet_line_per_node(forest: tuple[TreeEntry, ...]) -> None:
    """Without collapsing, each node is one line indented by its depth."""
    formatter = _render(forest, collapse=False)
    assert str(formatter) == "\n".join(flat_lines(forest))


@settings(max_examples=100, deadline=None)
@given(forest=s_forest)
def test_collapsing_removes_one_line_per_collapsed_node(forest: tuple[TreeEntry, ...]) -> None:
    """Each collapsed node pulls its only child onto its own line."""
    formatter = _render(forest, collapse=True)
    lines = str(formatter).split("\n")
    assert len(lines) == count_nodes(forest) - count_collapsed(forest)


@settings(max_examples=100, deadline=None)
@given(forest=s_forest)
def test_top_level_labels_start_lines(forest: tuple[TreeEntry, ...]) -> None:
    """Every top-level label starts an unindented line, in order."""
    formatter = _render(forest, collapse=True)
    unindented = [line for line in str(formatter).split("\n") if not line.startswith(" ")]
    assert len(unindented) == len(forest)
    for line, entry in zip(unindented, forest):
        assert line.startswith(entry.text)


def _chain(length: int) -> tuple[TreeEntry, ...]:
    entry = TreeEntry(text=f"n{length - 1}")
    for index in range(length - 2, -1, -1):
        entry = TreeEntry(text=f"n{index}", children=(entry,))
    return (entry,)


@pytest.mark.hypothesis_slow
@settings(max_examples=300, deadline=None)
@given(length=st.integers(min_value=1, max_value=200))
def test_deep_single_child_chains(length: int) -> None:
    """Long chains of single children render in both modes without error."""
    forest = _chain(length)
    flat = _render(forest, collapse=False)
    assert str(flat) == "\n".join(flat_lines(forest))
    collapsed = _render(forest, collapse=True)
    lines = str(collapsed).split("\n")
    assert len(lines) == length - count_collapsed(forest)
    assert lines[0].startswith("n0")
