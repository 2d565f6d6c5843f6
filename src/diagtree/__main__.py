# diagtree:header:start
#
#   project      : DiagTree
#   file         : __main__.py
#   file_relpath : src/diagtree/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Module entry point for running DiagTree via ``python -m diagtree``.

Examples:
    Render a tree document::

        python -m diagtree render failure.json
"""

from __future__ import annotations

from diagtree.cli.main import cli

if __name__ == "__main__":
    cli()
