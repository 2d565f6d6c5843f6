# diagtree:header:start
#
#   project      : DiagTree
#   file         : errors.py
#   file_relpath : src/diagtree/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Exceptions raised by the DiagTree core.

These exceptions are UI-agnostic. The CLI translates them into
`click.ClickException` subclasses with dedicated exit codes (see
`diagtree.cli.errors`).
"""

from __future__ import annotations


class DiagtreeError(Exception):
    """Base class for all DiagTree errors."""


class ProtocolViolation(DiagtreeError, RuntimeError):
    """A builder method was called in a state where it is not legal.

    Raised synchronously by `TreeFormatter` when the node/children protocol is
    not respected (e.g. appending text while traversing children, or ending
    children when no node is open). The current build cannot be recovered.
    """


class ConfigError(DiagtreeError):
    """A configuration value or file is malformed."""


class DocumentError(DiagtreeError):
    """A tree description document is malformed."""
