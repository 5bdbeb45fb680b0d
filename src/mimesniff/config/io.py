# topmark:header:start
#
#   project      : MimeSniff
#   file         : io.py
#   file_relpath : src/mimesniff/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters below never raise: a value of the wrong shape is logged at WARNING
level and the caller's default is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mimesniff.config.keys import Toml
from mimesniff.config.logging import get_logger
from mimesniff.constants import (
    DEFAULT_FORM_FIELD,
    DEFAULT_MAX_MEMORY,
    DEFAULT_METHODS,
    DEFAULT_SOURCE_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

    from mimesniff.config.logging import MimesniffLogger

TomlTable = dict[str, Any]

logger: MimesniffLogger = get_logger(__name__)


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


def load_defaults_dict() -> TomlTable:
    """Return MimeSniff's runtime defaults as a TOML-compatible dict.

    Performs no I/O; the returned dict is new so callers may mutate it.
    """
    return {
        Toml.SECTION_SOURCE: {
            Toml.KEY_ENABLED: [DEFAULT_SOURCE_NAME],
            Toml.KEY_METHODS: list(DEFAULT_METHODS),
            Toml.KEY_FORM_FIELD: DEFAULT_FORM_FIELD,
            Toml.KEY_MAX_MEMORY: DEFAULT_MAX_MEMORY,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``mimesniff.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML-compatible dict into TOML text."""
    return tomlkit.dumps(data)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key`` (empty dict if missing or not a table)."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string at ``key``, or None when missing or not a string."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for %r, got %r; ignoring", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str, *, minimum: int = 0) -> int | None:
    """Return the integer at ``key``, or None when missing, not an int or below ``minimum``.

    Booleans are rejected even though they are ``int`` subclasses.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected an integer for %r, got %r; ignoring", key, value)
        return None
    if value < minimum:
        logger.warning("Value for %r must be >= %d, got %d; ignoring", key, minimum, value)
        return None
    return value


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return the list of strings at ``key``, or None when missing or malformed."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    logger.warning("Expected a list of strings for %r, got %r; ignoring", key, value)
    return None
