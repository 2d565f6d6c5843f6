# diagtree:header:start
#
#   project      : DiagTree
#   file         : __init__.py
#   file_relpath : src/diagtree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""DiagTree package.

DiagTree builds hierarchical diagnostic messages through a small sequential
protocol (`TreeFormatter`) and renders them as a single indented text block.
"""

from __future__ import annotations

from diagtree.config.model import FormatterConfig, MutableFormatterConfig
from diagtree.core.errors import ConfigError, DiagtreeError, DocumentError, ProtocolViolation
from diagtree.text.formatter import NodeState, NodeView, TreeFormatter
from diagtree.text.visitor import TreeVisitor

__all__ = [
    "ConfigError",
    "DiagtreeError",
    "DocumentError",
    "FormatterConfig",
    "MutableFormatterConfig",
    "NodeState",
    "NodeView",
    "ProtocolViolation",
    "TreeFormatter",
    "TreeVisitor",
]
