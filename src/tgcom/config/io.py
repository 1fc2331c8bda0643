# topmark:header:start
#
#   project      : tgcom
#   file         : io.py
#   file_relpath : src/tgcom/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Load and discover TOML configuration sources.

Sources are ``tgcom.toml`` files and the ``[tool.tgcom]`` table of
``pyproject.toml`` files. Parsing is done with `tomlkit` and returned as plain
`dict` structures; the typed getters below validate individual values and raise
`ConfigError` on a wrong shape.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tgcom.config.keys import Toml
from tgcom.config.logging import get_logger
from tgcom.constants import FILE_ENCODING, PYPROJECT_TOML_NAME, TGCOM_TOML_NAME
from tgcom.errors import ConfigError

if TYPE_CHECKING:
    from tgcom.config.logging import TgcomLogger

TomlTable = dict[str, Any]

logger: TgcomLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding=FILE_ENCODING)
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"cannot read config file: {exc.strerror or exc}", path=path) from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path=path) from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def get_tgcom_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the tgcom table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.tgcom]`` (None when absent); for any
    other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    table: Any = tool.get(Toml.SECTION_TGCOM)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config_files(start: Path) -> list[Path]:
    """Return config files found by walking upward from ``start``.

    Files are returned root-most first so that later (nearer) files win when
    merged. Within one directory ``pyproject.toml`` comes before ``tgcom.toml``.
    A file setting ``root = true`` stops the walk after its directory.
    ``pyproject.toml`` files without a ``[tool.tgcom]`` table are skipped.

    Args:
        start (Path): Directory (or file) where discovery starts.

    Returns:
        list[Path]: Discovered config files in merge order.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        root_stop_here = False
        dir_entries: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, TGCOM_TOML_NAME):
            candidate: Path = cur / name
            if not candidate.is_file():
                continue
            try:
                table: TomlTable | None = get_tgcom_table(candidate, load_toml_dict(candidate))
            except ConfigError as exc:
                # A broken unrelated pyproject.toml must not block discovery
                if name == PYPROJECT_TOML_NAME:
                    logger.debug("Ignoring unreadable %s: %s", candidate, exc)
                    continue
                raise
            if table is None:
                continue
            logger.debug("Discovered config file: %s", candidate)
            dir_entries.append(candidate)
            if table.get(Toml.KEY_ROOT) is True:
                root_stop_here = True

        if dir_entries:
            per_dir.append(dir_entries)

        parent: Path = cur.parent
        if root_stop_here:
            logger.debug("Stopping upward config discovery at %s due to root=true", cur)
            break
        if parent == cur:
            break
        cur = parent

    ordered: list[Path] = []
    for dir_list in reversed(per_dir):
        ordered.extend(dir_list)
    return ordered


# --- Checked getters ---


def get_table(table: TomlTable, key: str, *, path: Path | None = None) -> TomlTable:
    """Return the sub-table ``key`` (empty when missing).

    Raises:
        ConfigError: If the value is present but not a table.
    """
    value: Any = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table", path=path)
    return cast("TomlTable", value)


def get_string_mapping(table: TomlTable, key: str, *, path: Path | None = None) -> dict[str, str]:
    """Return the sub-table ``key`` as a ``str -> str`` mapping.

    Raises:
        ConfigError: If the sub-table is not a table or has non-string values.
    """
    result: dict[str, str] = {}
    for name, value in get_table(table, key, path=path).items():
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"[{key}] {name} must be a non-empty string", path=path)
        result[str(name)] = value
    return result


def get_bool_or_none(table: TomlTable, key: str, *, path: Path | None = None) -> bool | None:
    """Return a boolean value, or None when the key is missing.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"{key} must be true or false, got {value!r}", path=path)


def get_string_or_none(table: TomlTable, key: str, *, path: Path | None = None) -> str | None:
    """Return a string value, or None when the key is missing.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"{key} must be a string, got {value!r}", path=path)
