# topmark:header:start
#
#   project      : Nest
#   file         : guards.py
#   file_relpath : src/nest/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and narrowing helpers for parsed TOML values.

Parsed TOML is unwrapped into plain Python values, so a table is a ``dict``, an
array is a ``list`` and a string is a ``str``. The `TypeGuard` predicates below
let Pyright narrow such values, and the ``as_*`` helpers return ``None``
instead of raising when a value has another shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

from nest.config.logging import get_logger

if TYPE_CHECKING:
    from nest.config.logging import NestLogger

    from .types import TomlArray, TomlTable


logger: NestLogger = get_logger(__name__)

# --- Type guards / narrowers ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[Any]]: True if obj is a list.
    """
    return isinstance(obj, list)


# --- "Casting" helpers ---


def as_toml_table(obj: object) -> TomlTable | None:
    """Return the object as a TOML table when possible.

    Args:
        obj (object): Arbitrary object obtained from parsed TOML.

    Returns:
        TomlTable | None: ``obj`` when it is a ``dict``, otherwise ``None``.
    """
    if is_toml_table(obj):
        return obj

    logger.debug("Not a TOML table: %r", obj)
    return None


def as_toml_array(obj: object) -> TomlArray | None:
    """Return the object as a TOML array when possible.

    Args:
        obj (object): Arbitrary object obtained from parsed TOML.

    Returns:
        TomlArray | None: ``obj`` when it is a ``list``, otherwise ``None``.
    """
    if is_any_list(obj):
        return obj

    logger.debug("Not a TOML array: %r", obj)
    return None


def as_str(obj: object) -> str | None:
    """Return the object as a string when it is one, otherwise ``None``.

    No coercion is attempted: integers, booleans and floats yield ``None``.
    """
    return obj if isinstance(obj, str) else None
