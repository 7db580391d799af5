# topmark:header:start
#
#   project      : Nest
#   file         : errors.py
#   file_relpath : src/nest/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Nest CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `from_parse_error` maps configuration loading
    errors onto the matching CLI error.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from nest.cli.exit_codes import ExitCode
from nest.config.errors import ConfigIOError, ParseConfError


class NestError(click.ClickException):
    """Base class for all Nest CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class NestUsageError(NestError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NestConfigError(NestError):
    """Error for configuration errors (malformed or invalid config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class NestIOError(NestError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


def from_parse_error(exc: ParseConfError) -> NestError:
    """Return the CLI error matching a configuration loading error.

    Args:
        exc (ParseConfError): Error raised while loading the configuration file.

    Returns:
        NestError: `NestIOError` for I/O failures, `NestConfigError` otherwise.
    """
    if isinstance(exc, ConfigIOError):
        return NestIOError(f"Cannot read config file: {exc}")
    return NestConfigError(f"Invalid config file: {exc}")
