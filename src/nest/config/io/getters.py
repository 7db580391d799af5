# topmark:header:start
#
#   project      : Nest
#   file         : getters.py
#   file_relpath : src/nest/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

Each getter is a tri-state projection of one key: the key is absent, the value
has the wrong type, or the value is present and valid. The first two cases
return ``None`` and only emit **debug** logs, so callers can chain lookups and
skip a setting without raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nest.config.logging import get_logger

from .guards import as_str, as_toml_array, as_toml_table

if TYPE_CHECKING:
    from nest.config.logging import NestLogger

    from .types import TomlArray, TomlTable

logger: NestLogger = get_logger(__name__)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Unlike a coercing getter, integers, floats and booleans are **not** turned
    into strings: only a real ``str`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    result: str | None = as_str(value)
    if result is None:
        logger.debug("Expected string for key %s, got %s: %r", key, type(value).__name__, value)
    return result


def get_table_value_or_none(table: TomlTable, key: str) -> TomlTable | None:
    """Extract an optional sub-table from a TOML table.

    Args:
        table (TomlTable): Parent table.
        key (str): Sub-table key.

    Returns:
        TomlTable | None: The sub-table, or ``None`` when absent or not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    return as_toml_table(value)


def get_array_value_or_none(table: TomlTable, key: str) -> TomlArray | None:
    """Extract an optional array from a TOML table.

    No item-level validation is performed.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        TomlArray | None: The array, or ``None`` when absent or not an array.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    return as_toml_array(value)
