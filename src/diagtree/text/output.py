# diagtree:header:start
#
#   project      : DiagTree
#   file         : output.py
#   file_relpath : src/diagtree/text/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Text output sinks used by the tree formatter.

The formatter only needs two primitives: append raw text and emit a line
separator. Styling, if any, is the concern of the sink implementation.
"""

from __future__ import annotations

import os
import re
from typing import Final, Protocol

_LINE_END: Final[re.Pattern[str]] = re.compile(r"\r\n|\n")


class TextOutput(Protocol):
    """Minimal interface for a text sink."""

    def append(self, text: str) -> None:
        """Append raw text."""
        ...

    def line_break(self) -> None:
        """Append a line separator."""
        ...


class StringTextOutput(TextOutput):
    """In-memory text sink.

    Args:
        line_separator (str): Separator written by `line_break`. Defaults to the
            platform separator.
    """

    line_separator: str

    def __init__(self, line_separator: str = os.linesep) -> None:
        self.line_separator = line_separator
        self._parts: list[str] = []

    def append(self, text: str) -> None:
        """Append raw text to the buffer."""
        if text:
            self._parts.append(text)

    def line_break(self) -> None:
        """Append the configured line separator to the buffer."""
        self._parts.append(self.line_separator)

    def getvalue(self) -> str:
        """Return the accumulated text."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()


class LinePrefixingTextOutput(TextOutput):
    """Sink wrapper that writes ``prefix`` at the start of every line.

    The prefix is written lazily, right before the first character of a line,
    so a trailing line break never produces a dangling prefix.

    Args:
        target (TextOutput): The sink receiving the prefixed text.
        prefix (str): Text inserted at the start of each line.
        prefix_first_line (bool): If False, the line in progress when the
            wrapper is created is left untouched.
    """

    def __init__(self, target: TextOutput, prefix: str, *, prefix_first_line: bool = True) -> None:
        self._target = target
        self._prefix = prefix
        self._at_line_start = prefix_first_line

    def append(self, text: str) -> None:
        """Append text, prefixing each line that follows a line break."""
        pos = 0
        for match in _LINE_END.finditer(text):
            self._write_line_text(text[pos : match.start()])
            self._target.append(match.group())
            self._at_line_start = True
            pos = match.end()
        self._write_line_text(text[pos:])

    def line_break(self) -> None:
        """Append a line separator; the next text starts a prefixed line."""
        self._target.line_break()
        self._at_line_start = True

    def _write_line_text(self, chunk: str) -> None:
        if not chunk:
            return
        if self._at_line_start and self._prefix:
            self._target.append(self._prefix)
        self._at_line_start = False
        self._target.append(chunk)
