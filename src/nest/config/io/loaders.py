# topmark:header:start
#
#   project      : Nest
#   file         : loaders.py
#   file_relpath : src/nest/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and the document is unwrapped into plain Python
values (``dict`` / ``list`` / ``str`` / scalars). No assumption is made here
about the shape of the top-level value; that check belongs to the parser.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from nest.config.errors import ConfigDeserializeError, ConfigIOError
from nest.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from nest.config.logging import NestLogger

logger: NestLogger = get_logger(__name__)


def read_toml_text(path: Path) -> str:
    """Read a whole configuration file as UTF-8 text.

    Args:
        path (Path): File to read.

    Returns:
        str: The file contents.

    Raises:
        ConfigIOError: If the file cannot be opened, read or decoded.
    """
    try:
        # newline="": line endings reach the TOML parser untranslated.
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading config file %s: %s", path, e)
        raise ConfigIOError(e) from e
    except ValueError as e:
        # The OS cannot represent the path (e.g. an embedded NUL byte).
        logger.error("Invalid config file path %r: %s", str(path), e)
        raise ConfigIOError(OSError(errno.EINVAL, str(e), str(path))) from e


def parse_toml_text(text: str) -> Any:
    """Parse TOML text into plain Python values.

    Args:
        text (str): TOML document.

    Returns:
        Any: The unwrapped document.

    Raises:
        ConfigDeserializeError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as e:
        logger.error("Error decoding TOML: %s", e)
        raise ConfigDeserializeError(e) from e
    return doc.unwrap()


def read_conf(path: Path) -> Any:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        Any: The parsed document, untyped.

    Raises:
        ConfigIOError: If the file cannot be opened or read.
        ConfigDeserializeError: If the contents are not valid TOML.
    """
    text: str = read_toml_text(path)
    logger.trace("Read %d characters from %s", len(text), path)
    return parse_toml_text(text)
