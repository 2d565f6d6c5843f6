# diagtree:header:start
#
#   project      : DiagTree
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Pytest configuration for the DiagTree test suite.

Sets up TRACE logging for test runs and provides formatter fixtures that use
``"\\n"`` as line separator so expected strings are platform independent.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from diagtree.config import logging
from diagtree.config.model import FormatterConfig
from diagtree.text.formatter import TreeFormatter

F = TypeVar("F", bound=Callable[..., object])

LF_CONFIG = FormatterConfig(line_separator="\n")
LF_FLAT_CONFIG = FormatterConfig(collapse_first_child=False, line_separator="\n")


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


@pytest.fixture(autouse=True)
def silence_diagtree_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure DiagTree's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``DIAGTREE_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def formatter() -> TreeFormatter:
    """Return a collapsing formatter using ``"\\n"`` line breaks."""
    return TreeFormatter(config=LF_CONFIG)


@pytest.fixture
def flat_formatter() -> TreeFormatter:
    """Return a non-collapsing formatter using ``"\\n"`` line breaks."""
    return TreeFormatter(config=LF_FLAT_CONFIG)
