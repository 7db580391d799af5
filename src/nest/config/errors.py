# topmark:header:start
#
#   project      : Nest
#   file         : errors.py
#   file_relpath : src/nest/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised while loading a Nest configuration file.

Three non-overlapping kinds exist:

- `ConfigIOError`: the file could not be opened or read.
- `ConfigDeserializeError`: the text is not valid TOML.
- `ConfigShapeError`: the text is valid TOML but the document is not a table.

All of them derive from `ParseConfError`, so callers that only want to know
"did the load fail" can catch the base class. They are only raised while a
`ConfigParser` is constructed; applying a parsed file never raises.
"""

from __future__ import annotations

from tomlkit.exceptions import TOMLKitError


class ParseConfError(Exception):
    """Base class for configuration loading errors.

    ``str(err)`` yields the message of the underlying failure.
    """


class ConfigIOError(ParseConfError):
    """The configuration file could not be opened or read.

    Attributes:
        error (OSError | UnicodeDecodeError): The underlying failure.
    """

    def __init__(self, error: OSError | UnicodeDecodeError) -> None:
        super().__init__(str(error))
        self.error: OSError | UnicodeDecodeError = error


class ConfigDeserializeError(ParseConfError):
    """The configuration file is not valid TOML.

    Attributes:
        error (TOMLKitError): The tomlkit diagnostic. Syntax errors
            (``tomlkit.exceptions.ParseError``) also carry ``line`` and ``col``.
    """

    def __init__(self, error: TOMLKitError) -> None:
        super().__init__(str(error))
        self.error: TOMLKitError = error

    @property
    def line(self) -> int | None:
        """Line of the syntax error (1-based), when known."""
        return getattr(self.error, "line", None)

    @property
    def col(self) -> int | None:
        """Column of the syntax error (1-based), when known."""
        return getattr(self.error, "col", None)


class ConfigShapeError(ParseConfError):
    """The configuration document parsed, but its top level is not a table."""
