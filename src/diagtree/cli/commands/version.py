# diagtree:header:start
#
#   project      : DiagTree
#   file         : version.py
#   file_relpath : src/diagtree/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""DiagTree `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from diagtree.cli.options import get_effective_verbosity
from diagtree.constants import get_diagtree_version

if TYPE_CHECKING:
    from diagtree.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DiagTree.",
)
def version_command() -> None:
    """Print the DiagTree version installed in the current Python environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    version_text: str = get_diagtree_version()
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DiagTree version:", bold=True, underline=True))
        console.print(f"    {console.styled(version_text, bold=True)}")
    else:
        console.print(console.styled(version_text, bold=True))
