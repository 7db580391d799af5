# topmark:header:start
#
#   project      : Nest
#   file         : model.py
#   file_relpath : src/nest/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration model.

`Config` holds the settings Nest runs with. It starts from built-in defaults
(`Config.from_defaults`) and is then updated in place by
`nest.config.parser.ConfigParser.load_to_config` with the values found in the
configuration file.

Scope:
    - *In scope*: data shapes, defaults, and the setters used by the parser.
    - *Out of scope*: TOML I/O and extraction, which live in `nest.config.io`
      and `nest.config.parser`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from nest.config.logging import get_logger
from nest.constants import DEFAULT_CACHE_DIR, DEFAULT_DOWNLOAD_DIR

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nest.config.logging import NestLogger
    from nest.repository.model import Repository

logger: NestLogger = get_logger(__name__)


@dataclass
class Config:
    """Mutable runtime configuration for Nest.

    Attributes:
        cache (Path): Root directory of the package cache.
        download_path (Path): Directory where package archives are downloaded.
        repositories (list[Repository]): Configured repositories, in file order.
        config_file (Path | None): Configuration file applied last, if any.
    """

    cache: Path = DEFAULT_CACHE_DIR
    download_path: Path = DEFAULT_DOWNLOAD_DIR
    repositories: list[Repository] = field(default_factory=list)
    config_file: Path | None = None

    @classmethod
    def from_defaults(cls) -> Config:
        """Return a configuration holding only the built-in defaults."""
        return cls()

    @classmethod
    def load(cls, path: Path | str) -> Config:
        """Return the defaults overridden by the settings of one configuration file.

        Args:
            path (Path | str): Configuration file to apply.

        Returns:
            Config: A new configuration.

        Raises:
            ParseConfError: If the file cannot be read, is not valid TOML, or
                its top level is not a table.
        """
        # Local import: the parser depends on this module.
        from nest.config.parser import ConfigParser

        config: Config = cls.from_defaults()
        ConfigParser(path).load_to_config(config)
        return config

    def set_cache(self, path: Path) -> None:
        """Set the package cache root."""
        logger.debug("cache: %s -> %s", self.cache, path)
        self.cache = path

    def set_download_path(self, path: Path) -> None:
        """Set the download directory."""
        logger.debug("download_path: %s -> %s", self.download_path, path)
        self.download_path = path

    def set_repositories(self, repositories: Sequence[Repository]) -> None:
        """Replace the whole repository list.

        Args:
            repositories (Sequence[Repository]): New repositories; copied into a new list.
        """
        logger.debug(
            "repositories: %d -> %d entries",
            len(self.repositories),
            len(repositories),
        )
        self.repositories = list(repositories)
