# topmark:header:start
#
#   project      : Nest
#   file         : config.py
#   file_relpath : src/nest/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest `config` command group.

Subcommands:
  * ``show``: load the configuration file over the defaults and print the
    effective settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nest.cli.errors import from_parse_error
from nest.cli.options import config_path_option
from nest.config import Config, ConfigParser, ParseConfError
from nest.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from nest.cli.console import ClickConsole
    from nest.config.logging import NestLogger

logger: NestLogger = get_logger(__name__)


@click.group(name="config", help="Inspect the Nest configuration.")
def config_group() -> None:
    """Group for configuration subcommands."""


@config_group.command(
    name="show",
    help="Load the configuration file and print the effective settings.",
)
@config_path_option
def config_show_command(*, config_path: Path) -> None:
    """Print the effective configuration.

    Args:
        config_path (Path): Configuration file to apply over the defaults.

    Raises:
        NestError: If the configuration file cannot be loaded.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    config: Config = Config.from_defaults()
    try:
        parser = ConfigParser(config_path)
    except ParseConfError as exc:
        logger.debug("Loading %s failed: %s: %s", config_path, type(exc).__name__, exc)
        raise from_parse_error(exc) from exc
    parser.load_to_config(config)

    if vlevel >= 0:
        console.print(f"Using {config_path} as config file")
        console.print()

    console.print(console.styled("[paths]", bold=True))
    console.print(f"cache_dir = {config.cache}")
    console.print(f"download_dir = {config.download_path}")

    for repo in config.repositories:
        console.print()
        console.print(console.styled(f"[repositories.{repo.name}]", bold=True))
        if vlevel > 0:
            console.print(f"# cache: {repo.cache_root}")
        for mirror in repo.mirrors:
            console.print(f"mirror = {mirror}")

    if not config.repositories and vlevel >= 0:
        console.print()
        console.print(console.styled("(no repositories configured)", dim=True))
