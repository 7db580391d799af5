# topmark:header:start
#
#   project      : Nest
#   file         : parser.py
#   file_relpath : src/nest/config/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest configuration file parsing.

All the code fetching settings from the configuration file lives in
`ConfigParser.load_to_config`. When a setting is added, this is where the code
reading it must be added.

Strictness is graduated:
    - Loading fails hard when the file cannot be read, is not valid TOML, or its
      top level is not a table (see `nest.config.errors`).
    - Applying never fails: a missing or mistyped setting is skipped, and a
      repository whose mirrors are malformed is dropped without affecting the
      other repositories.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from nest.config.errors import ConfigShapeError
from nest.config.io import (
    as_str,
    as_toml_table,
    get_array_value_or_none,
    get_string_value_or_none,
    get_table_value_or_none,
    is_toml_table,
    read_conf,
)
from nest.config.keys import Toml
from nest.config.logging import get_logger
from nest.repository.model import Mirror, Repository

if TYPE_CHECKING:
    from collections.abc import Callable

    from nest.config.io import TomlTable
    from nest.config.logging import NestLogger
    from nest.config.model import Config

logger: NestLogger = get_logger(__name__)


class ConfigParser:
    """Holds the root table of a parsed configuration file.

    The constructor is the only place where the document shape is checked:
    once an instance exists, ``table`` is guaranteed to be a TOML table.

    Attributes:
        path (Path): The configuration file that was read.
        table (TomlTable): The parsed top-level table.
    """

    path: Path
    table: TomlTable

    def __init__(self, path: Path | str) -> None:
        """Read and parse a TOML configuration file.

        Args:
            path (Path | str): Configuration file to read.

        Raises:
            ConfigIOError: If the file cannot be opened or read.
            ConfigDeserializeError: If the file is not valid TOML.
            ConfigShapeError: If the top-level value is not a table.
        """
        self.path = Path(path)
        doc: Any = read_conf(self.path)
        if not is_toml_table(doc):
            raise ConfigShapeError("Invalid toml file")
        logger.info("Using %s as config file", self.path)
        self.table = doc

    def load_to_config(self, config: Config) -> None:
        """Replace the default values in ``config`` with the ones found in the file.

        This never raises; settings that are missing or malformed are left
        untouched in ``config``.

        Args:
            config (Config): Configuration to update in place.
        """
        self._parse_paths(config)
        repositories: list[Repository] | None = self._parse_repositories(config)
        if repositories is not None:
            config.set_repositories(repositories)
        config.config_file = self.path

    def _parse_paths(self, config: Config) -> None:
        paths: TomlTable | None = self._get_table(Toml.SECTION_PATHS)
        if paths is None:
            return
        self._set_path(config.set_cache, paths, Toml.KEY_CACHE_DIR)
        self._set_path(config.set_download_path, paths, Toml.KEY_DOWNLOAD_DIR)

    @staticmethod
    def _set_path(
        setter: Callable[[Path], None],
        table: TomlTable,
        key: str,
    ) -> None:
        value: str | None = get_string_value_or_none(table, key)
        if value is None:
            logger.debug("[%s].%s not set, keeping default", Toml.SECTION_PATHS, key)
            return
        setter(Path(value))

    def _parse_repo(self, name: str, value: Any, config: Config) -> Repository | None:
        """Return a new repository read from its ``[repositories.<name>]`` table.

        The first mirror that is not a string abandons the whole repository.
        """
        repo_table: TomlTable | None = as_toml_table(value)
        if repo_table is None:
            logger.debug("Ignoring non-table entry [%s].%s", Toml.SECTION_REPOSITORIES, name)
            return None

        mirror_list: list[Any] | None = get_array_value_or_none(repo_table, Toml.KEY_MIRRORS)
        if mirror_list is None:
            logger.debug(
                "Ignoring [%s].%s: no %r array",
                Toml.SECTION_REPOSITORIES,
                name,
                Toml.KEY_MIRRORS,
            )
            return None

        repo = Repository(config, name)
        for item in mirror_list:
            url: str | None = as_str(item)
            if url is None:
                logger.debug(
                    "Ignoring [%s].%s: non-string entry in %s: %r",
                    Toml.SECTION_REPOSITORIES,
                    name,
                    Toml.KEY_MIRRORS,
                    item,
                )
                return None
            repo.mirrors_mut().append(Mirror(url))
        return repo

    def _parse_repositories(self, config: Config) -> list[Repository] | None:
        """Return a new list of repositories, or ``None`` when the section is unusable."""
        repositories: TomlTable | None = self._get_table(Toml.SECTION_REPOSITORIES)
        if repositories is None:
            return None

        out: list[Repository] = []
        for name, value in repositories.items():
            repo: Repository | None = self._parse_repo(name, value, config)
            if repo is not None:
                logger.trace("Repository %s: %d mirror(s)", name, len(repo.mirrors))
                out.append(repo)
        return out

    def _get_table(self, key: str) -> TomlTable | None:
        return get_table_value_or_none(self.table, key)
