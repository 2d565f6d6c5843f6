# diagtree:header:start
#
#   project      : DiagTree
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""CLI test: `version` command output and group help."""

from __future__ import annotations

import pytest

from diagtree.constants import get_diagtree_version
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version_outputs_installed_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == get_diagtree_version()


def test_version_verbose_adds_title() -> None:
    """With `-v` the version is preceded by a title line."""
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "DiagTree version:"
    assert lines[1].strip() == get_diagtree_version()


def test_group_without_subcommand_prints_hint() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "diagtree render DOCUMENT" in result.output
    assert "render" in result.output and "version" in result.output
