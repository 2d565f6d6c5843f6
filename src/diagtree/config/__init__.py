# diagtree:header:start
#
#   project      : DiagTree
#   file         : __init__.py
#   file_relpath : src/diagtree/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Configuration and logging for DiagTree.

Public modules:
    - diagtree.config.keys
    - diagtree.config.logging
    - diagtree.config.model
"""

from __future__ import annotations

from diagtree.config.model import FormatterConfig, MutableFormatterConfig

__all__ = [
    "FormatterConfig",
    "MutableFormatterConfig",
]
