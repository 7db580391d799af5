# topmark:header:start
#
#   project      : Nest
#   file         : __init__.py
#   file_relpath : src/nest/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Nest configuration.

This package centralizes **pure** helpers for reading and inspecting the TOML
configuration file. Keeping them apart from the parser avoids import cycles and
keeps `nest.config.parser` focused on which settings are extracted.

Design goals:
    * Minimal side effects: functions **do not** mutate configuration objects.
    * Clear typing: public helpers use small aliases (``TomlTable``, ``TomlArray``)
      and TypeGuards so Pyright can narrow parsed values.

Typical flow:
    1. Read and parse a file (``read_conf``); failures raise a ``ParseConfError``.
    2. Read values with the ``get_*_or_none`` getters, which never raise.
"""

from __future__ import annotations

from .getters import (
    get_array_value_or_none,
    get_string_value_or_none,
    get_table_value_or_none,
)
from .guards import (
    as_str,
    as_toml_array,
    as_toml_table,
    is_any_list,
    is_toml_table,
)
from .loaders import parse_toml_text, read_conf, read_toml_text
from .types import TomlArray, TomlTable

__all__: list[str] = [
    "TomlArray",
    "TomlTable",
    "as_str",
    "as_toml_array",
    "as_toml_table",
    "get_array_value_or_none",
    "get_string_value_or_none",
    "get_table_value_or_none",
    "is_any_list",
    "is_toml_table",
    "parse_toml_text",
    "read_conf",
    "read_toml_text",
]
