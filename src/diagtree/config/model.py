# diagtree:header:start
#
#   project      : DiagTree
#   file         : model.py
#   file_relpath : src/diagtree/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# diagtree:header:end

"""Formatter configuration: immutable snapshot and mutable builder.

`MutableFormatterConfig` collects values from defaults, TOML files and CLI
overrides (``None`` means "inherit"), then `freeze` resolves them into an
immutable `FormatterConfig` consumed by `diagtree.text.formatter.TreeFormatter`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from diagtree.config.keys import LINE_SEPARATORS, Toml
from diagtree.config.logging import get_logger
from diagtree.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from diagtree.config.logging import DiagtreeLogger

TomlTable = dict[str, Any]

logger: DiagtreeLogger = get_logger(__name__)


def resolve_line_separator(name: str) -> str:
    """Map a configured line separator name onto the actual separator.

    Args:
        name (str): One of ``"lf"``, ``"crlf"`` or ``"native"`` (case-insensitive).

    Returns:
        str: The line separator string.

    Raises:
        ConfigError: If ``name`` is not a known separator name.
    """
    key = name.strip().lower()
    if key not in LINE_SEPARATORS:
        raise ConfigError(
            f"Invalid {Toml.KEY_LINE_SEPARATOR!r}: {name!r} "
            f"(expected one of: {', '.join(LINE_SEPARATORS)})"
        )
    return LINE_SEPARATORS[key] or os.linesep


def line_separator_name(separator: str) -> str:
    """Return the TOML name of a line separator (inverse of `resolve_line_separator`)."""
    for name, value in LINE_SEPARATORS.items():
        if value == separator:
            return name
    return "native"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable configuration for a `TreeFormatter`.

    Attributes:
        collapse_first_child (bool): Render a sole child on its parent's line
            (``"parent: child"``) when the alternation rule allows it.
        line_separator (str): Separator emitted between rendered lines.
        config_files (tuple[Path | str, ...]): Sources the values were read from.
    """

    collapse_first_child: bool = True
    line_separator: str = os.linesep
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict."""
        return {
            Toml.KEY_COLLAPSE_FIRST_CHILD: self.collapse_first_child,
            Toml.KEY_LINE_SEPARATOR: line_separator_name(self.line_separator),
        }

    def thaw(self) -> MutableFormatterConfig:
        """Return a mutable copy of this frozen config."""
        return MutableFormatterConfig(
            collapse_first_child=self.collapse_first_child,
            line_separator=self.line_separator,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableFormatterConfig:
    """Mutable configuration used while loading and merging sources.

    Attributes:
        collapse_first_child (bool | None): None = inherit.
        line_separator (str | None): Resolved separator string; None = inherit.
        config_files (list[Path | str]): Sources the values were read from.
    """

    collapse_first_child: bool | None = None
    line_separator: str | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> FormatterConfig:
        """Resolve unset values against the defaults and return a `FormatterConfig`."""
        defaults = FormatterConfig()
        return FormatterConfig(
            collapse_first_child=(
                self.collapse_first_child
                if self.collapse_first_child is not None
                else defaults.collapse_first_child
            ),
            line_separator=(
                self.line_separator if self.line_separator is not None else defaults.line_separator
            ),
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableFormatterConfig) -> MutableFormatterConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableFormatterConfig): The config whose values take precedence.

        Returns:
            MutableFormatterConfig: The merged draft.
        """
        return MutableFormatterConfig(
            collapse_first_child=(
                other.collapse_first_child
                if other.collapse_first_child is not None
                else self.collapse_first_child
            ),
            line_separator=(
                other.line_separator if other.line_separator is not None else self.line_separator
            ),
            config_files=self.config_files + other.config_files,
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableFormatterConfig:
        """Return a draft populated with the runtime defaults."""
        defaults = FormatterConfig()
        return cls(
            collapse_first_child=defaults.collapse_first_child,
            line_separator=defaults.line_separator,
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | str | None = None,
    ) -> MutableFormatterConfig:
        """Build a draft from a parsed TOML table.

        Unknown keys are logged and ignored.

        Args:
            data (TomlTable): The (already extracted) DiagTree table.
            config_file (Path | str | None): Source of ``data``, for diagnostics.

        Returns:
            MutableFormatterConfig: The parsed draft.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        source: str = str(config_file) if config_file is not None else "<dict>"
        draft = cls(config_files=[config_file] if config_file is not None else [])

        for key in data:
            if key not in (Toml.KEY_COLLAPSE_FIRST_CHILD, Toml.KEY_LINE_SEPARATOR):
                logger.warning("Ignoring unknown configuration key %r in %s", key, source)

        collapse: Any = data.get(Toml.KEY_COLLAPSE_FIRST_CHILD)
        if collapse is not None:
            if not isinstance(collapse, bool):
                raise ConfigError(
                    f"{source}: {Toml.KEY_COLLAPSE_FIRST_CHILD!r} must be a boolean, "
                    f"got {type(collapse).__name__}"
                )
            draft.collapse_first_child = collapse

        separator: Any = data.get(Toml.KEY_LINE_SEPARATOR)
        if separator is not None:
            if not isinstance(separator, str):
                raise ConfigError(
                    f"{source}: {Toml.KEY_LINE_SEPARATOR!r} must be a string, "
                    f"got {type(separator).__name__}"
                )
            draft.line_separator = resolve_line_separator(separator)

        logger.debug("Parsed formatter config from %s: %s", source, draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableFormatterConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``diagtree.toml`` (top-level keys) and ``pyproject.toml``
        (the ``[tool.diagtree]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableFormatterConfig | None: The parsed draft, or None if a
                ``pyproject.toml`` has no ``[tool.diagtree]`` table.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """
        logger.debug("Creating MutableFormatterConfig from TOML config: %s", path)
        try:
            text: str = path.read_text(encoding="utf-8")
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except OSError as exc:
            raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Configuration file {path} is not valid UTF-8: {exc}") from exc
        except TomlkitParseError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

        toml_data: TomlTable = cast("TomlTable", doc.unwrap())

        if path.name == "pyproject.toml":
            tool: Any = toml_data.get(Toml.SECTION_TOOL)
            tool_section: Any = (
                cast("TomlTable", tool).get(Toml.SECTION_DIAGTREE)
                if isinstance(tool, dict)
                else None
            )
            if not isinstance(tool_section, dict):
                logger.info("[tool.diagtree] section missing in %s", path)
                return None
            toml_data = cast("TomlTable", tool_section)

        return cls.from_toml_dict(toml_data, config_file=path)
