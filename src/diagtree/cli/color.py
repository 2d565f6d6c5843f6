# diagtree:header:start
#
#   project      : DiagTree
#   file         : color.py
#   file_relpath : src/diagtree/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Color-mode resolution for CLI output."""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override: Parsed `ColorMode` value from ``--color``;
            `None` means "not provided".
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
