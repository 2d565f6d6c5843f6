# diagtree:header:start
#
#   project      : DiagTree
#   file         : config_resolver.py
#   file_relpath : src/diagtree/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Resolve the formatter configuration from Click parameters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from diagtree.config.logging import get_logger
from diagtree.config.model import MutableFormatterConfig

if TYPE_CHECKING:
    from diagtree.config.logging import DiagtreeLogger

logger: DiagtreeLogger = get_logger(__name__)

LOCAL_CONFIG_NAMES: tuple[str, ...] = ("pyproject.toml", "diagtree.toml")


def resolve_formatter_config(
    *,
    config_path: Path | None,
    no_config: bool,
    collapse_first_child: bool | None,
    anchor: Path | None = None,
) -> MutableFormatterConfig:
    """Build the formatter configuration with layered precedence.

    Resolution order (lowest → highest precedence):
      1. Runtime defaults.
      2. Local config in ``anchor`` (default: CWD), unless ``no_config``:
         ``pyproject.toml`` (``[tool.diagtree]``) first, then ``diagtree.toml``.
      3. The explicit ``--config`` file.
      4. CLI overrides.

    Args:
        config_path (Path | None): Explicit configuration file.
        no_config (bool): Skip local configuration discovery.
        collapse_first_child (bool | None): ``--collapse/--no-collapse`` override.
        anchor (Path | None): Directory searched for local configuration files.

    Returns:
        MutableFormatterConfig: The merged draft; call ``freeze()`` for use.
    """
    draft = MutableFormatterConfig.from_defaults()

    if not no_config:
        base: Path = anchor or Path.cwd()
        for name in LOCAL_CONFIG_NAMES:
            candidate = base / name
            if not candidate.is_file():
                continue
            found = MutableFormatterConfig.from_toml_file(candidate)
            if found is not None:
                logger.info("Loading local config: %s", candidate)
                draft = draft.merge_with(found)

    if config_path is not None:
        logger.info("Loading explicit config: %s", config_path)
        extra = MutableFormatterConfig.from_toml_file(config_path)
        if extra is not None:
            draft = draft.merge_with(extra)
        else:
            logger.warning("Ignoring config without [tool.diagtree]: %s", config_path)

    if collapse_first_child is not None:
        draft.collapse_first_child = collapse_first_child

    logger.trace("Resolved formatter config: %s", draft)
    return draft
