# diagtree:header:start
#
#   project      : DiagTree
#   file         : __init__.py
#   file_relpath : src/diagtree/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Core, UI-agnostic primitives shared across DiagTree.

Included modules:

- ``errors``
  Exception hierarchy (`DiagtreeError`, `ProtocolViolation`, `ConfigError`,
  `DocumentError`).

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``.

This package is free of UI dependencies and side effects.
"""

from __future__ import annotations
