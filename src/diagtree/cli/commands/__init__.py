# diagtree:header:start
#
#   project      : DiagTree
#   file         : __init__.py
#   file_relpath : src/diagtree/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""DiagTree CLI subcommands."""

from __future__ import annotations
