# topmark:header:start
#
#   project      : Nest
#   file         : __init__.py
#   file_relpath : src/nest/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest configuration layer.

Typical use:

    ```python
    from nest.config import Config, ConfigParser, ParseConfError

    config = Config.from_defaults()
    try:
        ConfigParser("/etc/nest/config.toml").load_to_config(config)
    except ParseConfError as exc:
        ...  # keep the defaults, or abort
    ```

`Config.load(path)` does both steps at once.
"""

from __future__ import annotations

from nest.config.errors import (
    ConfigDeserializeError,
    ConfigIOError,
    ConfigShapeError,
    ParseConfError,
)
from nest.config.model import Config
from nest.config.parser import ConfigParser

__all__: list[str] = [
    "Config",
    "ConfigDeserializeError",
    "ConfigIOError",
    "ConfigParser",
    "ConfigShapeError",
    "ParseConfError",
]
