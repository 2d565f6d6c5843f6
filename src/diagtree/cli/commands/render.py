# diagtree:header:start
#
#   project      : DiagTree
#   file         : render.py
#   file_relpath : src/diagtree/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""DiagTree `render` command.

Reads a tree document (JSON or TOML) from a file or STDIN, replays it onto a
`TreeFormatter` and prints the rendered diagnostic message.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from diagtree.cli.config_resolver import resolve_formatter_config
from diagtree.cli.errors import (
    DiagtreeConfigError,
    DiagtreeDocumentError,
    DiagtreeFileNotFoundError,
    DiagtreeIOError,
    DiagtreeProtocolError,
)
from diagtree.cli.options import get_effective_verbosity
from diagtree.config.logging import get_logger
from diagtree.core.errors import ConfigError, DocumentError, ProtocolViolation
from diagtree.document import DocumentFormat, load_document, parse_document, replay
from diagtree.text.formatter import TreeFormatter

if TYPE_CHECKING:
    from diagtree.cli.console import ConsoleLike
    from diagtree.config.model import FormatterConfig
    from diagtree.document import TreeEntry

logger = get_logger(__name__)

STDIN_MARKER = "-"


def _read_entries(document: str, doc_format: DocumentFormat | None) -> tuple[TreeEntry, ...]:
    if document == STDIN_MARKER:
        try:
            text: str = click.get_text_stream("stdin").read()
        except UnicodeDecodeError as exc:
            raise DocumentError(f"STDIN is not valid UTF-8: {exc}") from exc
        return parse_document(text, doc_format or DocumentFormat.JSON)

    path = Path(document)
    if not path.exists():
        raise DiagtreeFileNotFoundError(f"Document not found: {path}")
    try:
        return load_document(path, doc_format)
    except OSError as exc:
        raise DiagtreeIOError(f"Cannot read {path}: {exc}") from exc


@click.command(
    name="render",
    help="Render a tree document as an indented diagnostic message.",
)
@click.argument("document", metavar="DOCUMENT", default=STDIN_MARKER)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read formatter settings from this TOML file.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore diagtree.toml / pyproject.toml in the current directory.",
)
@click.option(
    "--collapse/--no-collapse",
    "collapse",
    default=None,
    help="Render a single child on its parent's line.",
)
@click.option(
    "--format",
    "doc_format",
    type=click.Choice([f.value for f in DocumentFormat]),
    default=None,
    help="Document format (default: from the file suffix, JSON for STDIN).",
)
def render_command(
    *,
    document: str,
    config_path: Path | None,
    no_config: bool,
    collapse: bool | None,
    doc_format: str | None,
) -> None:
    """Render a tree document.

    Args:
        document (str): Path of the tree document, or ``-`` for STDIN.
        config_path (Path | None): Explicit configuration file.
        no_config (bool): Skip local configuration discovery.
        collapse (bool | None): Override ``collapse_first_child``.
        doc_format (str | None): Document format override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    if config_path is not None and not config_path.exists():
        raise DiagtreeFileNotFoundError(f"Config file not found: {config_path}")

    try:
        config: FormatterConfig = resolve_formatter_config(
            config_path=config_path,
            no_config=no_config,
            collapse_first_child=collapse,
        ).freeze()
    except ConfigError as exc:
        raise DiagtreeConfigError(str(exc)) from exc

    fmt = DocumentFormat(doc_format) if doc_format else None
    try:
        entries = _read_entries(document, fmt)
    except DocumentError as exc:
        raise DiagtreeDocumentError(str(exc)) from exc

    formatter = TreeFormatter(config=config)
    try:
        replay(entries, formatter)
    except ProtocolViolation as exc:
        raise DiagtreeProtocolError(str(exc)) from exc
    logger.debug("Rendered %d top-level entries from %s", len(entries), document)

    if vlevel < 0:
        return
    if vlevel > 0:
        source = "<stdin>" if document == STDIN_MARKER else document
        console.print(console.styled(f"Diagnostic message from {source}:", bold=True))
    console.print(formatter.to_string())
