# diagtree:header:start
#
#   project      : DiagTree
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Logging helpers: TRACE level, environment resolution and chalk formatting."""

from __future__ import annotations

import logging as std_logging

import pytest

from diagtree.config import logging
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("20", 20),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """DIAGTREE_LOG_LEVEL accepts level names and numbers."""
    monkeypatch.setenv(logging.LOG_LEVEL_ENV_VAR, value)
    assert logging.resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable no level is forced."""
    assert logging.resolve_env_log_level() is None


class _ListHandler(std_logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=std_logging.NOTSET)
        self.records: list[std_logging.LogRecord] = []

    def emit(self, record: std_logging.LogRecord) -> None:
        self.records.append(record)


def test_trace_logging() -> None:
    """`get_logger` returns a logger with a working `trace` method."""
    logger = logging.get_logger("diagtree.tests.trace")
    assert isinstance(logger, logging.DiagtreeLogger)

    handler = _ListHandler()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.TRACE_LEVEL)
    try:
        logger.trace("node %r", "A")
        logger.setLevel(std_logging.DEBUG)
        logger.trace("suppressed")
    finally:
        logger.removeHandler(handler)

    assert [r.getMessage() for r in handler.records] == ["node 'A'"]
    assert handler.records[0].levelname == "TRACE"


def test_chalk_formatter_keeps_message_text() -> None:
    """Colorized records still contain the formatted message."""
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = std_logging.LogRecord(
        "diagtree", std_logging.WARNING, __file__, 1, "careful %s", ("now",), None
    )
    assert "[WARNING] careful now" in formatter.format(record)
