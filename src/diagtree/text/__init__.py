# diagtree:header:start
#
#   project      : DiagTree
#   file         : __init__.py
#   file_relpath : src/diagtree/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Tree building and text rendering.

Public modules:
    - diagtree.text.formatter
    - diagtree.text.output
    - diagtree.text.values
    - diagtree.text.visitor
"""

from __future__ import annotations

from diagtree.text.formatter import NodeState, NodeView, TreeFormatter
from diagtree.text.output import LinePrefixingTextOutput, StringTextOutput, TextOutput
from diagtree.text.visitor import TreeVisitor

__all__ = [
    "LinePrefixingTextOutput",
    "NodeState",
    "NodeView",
    "StringTextOutput",
    "TextOutput",
    "TreeFormatter",
    "TreeVisitor",
]
