# diagtree:header:start
#
#   project      : DiagTree
#   file         : __init__.py
#   file_relpath : src/diagtree/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Click-based command line interface for DiagTree."""

from __future__ import annotations
