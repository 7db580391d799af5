# topmark:header:start
#
#   project      : Nest
#   file         : options.py
#   file_relpath : src/nest/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution helpers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from nest.cli.errors import NestUsageError
from nest.constants import DEFAULT_CONFIG_PATH, ENV_CONFIG_PATH

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The verbosity level: positive when verbose, negative when quiet, 0 otherwise.

    Raises:
        NestUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise NestUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in the output.",
    )(f)
    return f


def config_path_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` option, defaulting to ``$NEST_CONFIG`` then the system file."""
    f = click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        envvar=ENV_CONFIG_PATH,
        default=DEFAULT_CONFIG_PATH,
        show_default=True,
        help=f"Configuration file to load (env: {ENV_CONFIG_PATH}).",
    )(f)
    return f
