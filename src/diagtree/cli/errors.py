# diagtree:header:start
#
#   project      : DiagTree
#   file         : errors.py
#   file_relpath : src/diagtree/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Exceptions for the DiagTree CLI.

Core errors (`diagtree.core.errors`) are translated into these exceptions at
the command boundary so Click reports them with a dedicated exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from diagtree.core.exit_codes import ExitCode


class DiagtreeCliError(click.ClickException):
    """Base class for all DiagTree CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class DiagtreeUsageError(DiagtreeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DiagtreeDocumentError(DiagtreeCliError):
    """Error for malformed tree documents."""

    exit_code = ExitCode.DATA_ERROR


class DiagtreeFileNotFoundError(DiagtreeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DiagtreeProtocolError(DiagtreeCliError):
    """Error when the builder protocol is violated while rendering."""

    exit_code = ExitCode.PROTOCOL_ERROR


class DiagtreeIOError(DiagtreeCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class DiagtreeConfigError(DiagtreeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
