# topmark:header:start
#
#   project      : Nest
#   file         : main.py
#   file_relpath : src/nest/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Nest CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console, so subcommands only
read them back.
"""

from __future__ import annotations

import click

from nest.cli.commands.config import config_group
from nest.cli.commands.version import version_command
from nest.cli.console import ClickConsole
from nest.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from nest.config.logging import resolve_env_log_level, setup_logging


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Nest package manager CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Nest CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'nest config show' to inspect the configuration.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_group)

if __name__ == "__main__":
    cli()
