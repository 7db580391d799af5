# topmark:header:start
#
#   project      : Nest
#   file         : version.py
#   file_relpath : src/nest/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest `version` command.

Prints the current Nest version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nest.constants import NEST_VERSION

if TYPE_CHECKING:
    from nest.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Nest.",
)
def version_command() -> None:
    """Show the current version of Nest."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(NEST_VERSION)
