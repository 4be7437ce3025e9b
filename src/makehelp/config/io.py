# topmark:header:start
#
#   project      : MakeHelp
#   file         : io.py
#   file_relpath : src/makehelp/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML configuration for the MakeHelp CLI.

Settings are read from ``makehelp.toml``, or from the ``[tool.makehelp]`` table
of ``pyproject.toml``::

    format = "text"            # default output format (name or alias)
    color = true               # force color on/off; omit for auto-detection
    base-source-path = "."     # shorten absolute source paths relative to this

    [colors]                   # role -> click color name
    target-name = "bright_green"
    category-name = "cyan"

Relative ``base-source-path`` values are resolved against the directory of the
configuration file. Unknown keys are logged and ignored; values of the wrong
type raise `InvalidConfigError`.

Files are parsed with ``tomlkit``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from makehelp.config.logging import get_logger
from makehelp.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from makehelp.errors import InvalidConfigError, UnknownFormatError
from makehelp.rendering.colors import ColorScheme
from makehelp.rendering.config import RendererConfig
from makehelp.rendering.factory import OutputFormat, resolve_format

if TYPE_CHECKING:
    from makehelp.config.logging import MakehelpLogger

logger: MakehelpLogger = get_logger(__name__)

TomlTable = dict[str, Any]

KNOWN_KEYS: Final[frozenset[str]] = frozenset({"format", "color", "base-source-path", "colors"})


@dataclass(frozen=True)
class FileConfig:
    """Settings read from a configuration file.

    Attributes:
        path (Path | None): The file the settings came from; None for defaults.
        format (OutputFormat | None): Default output format.
        color (bool | None): Forced color setting; None means auto-detect.
        base_source_path (Path | None): Base for shortening source paths.
        color_scheme (ColorScheme | None): Custom colors, if a ``[colors]``
            table is present.
    """

    path: Path | None = None
    format: OutputFormat | None = None
    color: bool | None = None
    base_source_path: Path | None = None
    color_scheme: ColorScheme | None = None

    def renderer_config(
        self, use_color: bool, base_source_path: Path | None = None
    ) -> RendererConfig:
        """Build the renderer configuration.

        Args:
            use_color (bool): The decided color setting.
            base_source_path (Path | None): Overrides the file's
                ``base-source-path`` when given.

        Returns:
            RendererConfig: Configuration for the renderer factory.
        """
        return RendererConfig(
            use_color=use_color,
            color_scheme=self.color_scheme if use_color else None,
            base_source_path=base_source_path or self.base_source_path,
        )


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into plain Python values.

    Raises:
        InvalidConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidConfigError(f"cannot read config file {path}: {e}") from e
    try:
        return cast("TomlTable", tomlkit.parse(text).unwrap())
    except TomlkitParseError as e:
        raise InvalidConfigError(f"{path}: invalid TOML: {e}") from e


def _table_for(path: Path) -> TomlTable | None:
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for key in PYPROJECT_TOOL_SECTION:
        if not isinstance(table, dict) or key not in table:
            return None
        table = cast("TomlTable", table)[key]
    if not isinstance(table, dict):
        raise InvalidConfigError(f"{path}: [{'.'.join(PYPROJECT_TOOL_SECTION)}] must be a table")
    return cast("TomlTable", table)


def find_config_file(start: Path) -> Path | None:
    """Return the nearest configuration file at or above ``start``.

    In each directory ``makehelp.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.makehelp]`` table.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _table_for(pyproject) is not None:
            return pyproject
    return None


def config_from_table(table: TomlTable, *, path: Path | None = None) -> FileConfig:
    """Validate a TOML table and convert it into a `FileConfig`.

    Args:
        table (TomlTable): The ``makehelp`` settings table.
        path (Path | None): Source file, used in messages and to resolve
            relative paths.

    Returns:
        FileConfig: The validated settings.

    Raises:
        InvalidConfigError: On values of the wrong type, an unknown format,
            or an unknown color role or color name.
    """
    where: str = str(path) if path is not None else "<config>"
    for key in table:
        if key not in KNOWN_KEYS:
            logger.warning("%s: ignoring unknown key %r", where, key)

    fmt: OutputFormat | None = None
    raw_format: Any = table.get("format")
    if raw_format is not None:
        if not isinstance(raw_format, str):
            raise InvalidConfigError(f"{where}: 'format' must be a string")
        try:
            fmt = resolve_format(raw_format)
        except UnknownFormatError as e:
            raise InvalidConfigError(f"{where}: {e}") from e

    color: Any = table.get("color")
    if color is not None and not isinstance(color, bool):
        raise InvalidConfigError(f"{where}: 'color' must be true or false")

    base: Path | None = None
    raw_base: Any = table.get("base-source-path")
    if raw_base is not None:
        if not isinstance(raw_base, str):
            raise InvalidConfigError(f"{where}: 'base-source-path' must be a string")
        base = Path(raw_base)
        if not base.is_absolute() and path is not None:
            base = path.parent / base

    scheme: ColorScheme | None = None
    raw_colors: Any = table.get("colors")
    if raw_colors is not None:
        if not isinstance(raw_colors, dict):
            raise InvalidConfigError(f"{where}: [colors] must be a table")
        colors: dict[str, Any] = cast("dict[str, Any]", raw_colors)
        for role, value in colors.items():
            if not isinstance(value, str):
                raise InvalidConfigError(f"{where}: colors.{role} must be a color name")
        try:
            scheme = ColorScheme.from_mapping(cast("dict[str, str]", colors))
        except InvalidConfigError as e:
            raise InvalidConfigError(f"{where}: {e}") from e

    return FileConfig(
        path=path,
        format=fmt,
        color=color,
        base_source_path=base,
        color_scheme=scheme,
    )


def load_config_file(path: Path) -> FileConfig:
    """Read settings from ``path`` (``makehelp.toml`` or ``pyproject.toml``).

    A ``pyproject.toml`` without a ``[tool.makehelp]`` table yields defaults.

    Raises:
        InvalidConfigError: If the file is unreadable, not valid TOML, or
            contains invalid settings.
    """
    table: TomlTable | None = _table_for(path)
    if table is None:
        logger.debug("%s has no [%s] table", path, ".".join(PYPROJECT_TOOL_SECTION))
        return FileConfig(path=path)
    config: FileConfig = config_from_table(table, path=path)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
