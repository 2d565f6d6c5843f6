# diagtree:header:start
#
#   project      : DiagTree
#   file         : constants.py
#   file_relpath : src/diagtree/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""DiagTree constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

DISTRIBUTION_NAME: str = "diagtree"

VERSION_UNKNOWN: str = "0+unknown"


def get_diagtree_version() -> str:
    """Return the installed DiagTree version (``0+unknown`` when not installed)."""
    try:
        return get_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return VERSION_UNKNOWN
