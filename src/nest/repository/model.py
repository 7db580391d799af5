# topmark:header:start
#
#   project      : Nest
#   file         : model.py
#   file_relpath : src/nest/repository/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repository and mirror descriptors.

A repository is a named source of packages. In the configuration file it is
described solely by its ordered list of mirrors; everything else (such as the
repository's cache location) is derived from the `Config` it is built against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from nest.config.model import Config


@dataclass(frozen=True, slots=True)
class Mirror:
    """A single URL endpoint serving a repository's content.

    The URL is kept verbatim; it is not validated.
    """

    url: str

    def __str__(self) -> str:
        return self.url


@dataclass(slots=True, init=False)
class Repository:
    """A named package repository and its mirrors.

    Attributes:
        name (str): Repository name, taken from the ``[repositories]`` table key.
        cache_root (Path): Directory holding this repository's cached data
            (``<config.cache>/<name>`` at construction time).
        mirrors (list[Mirror]): Ordered, mutable list of mirrors.
    """

    name: str
    cache_root: Path
    mirrors: list[Mirror]

    def __init__(self, config: Config, name: str) -> None:
        self.name = name
        # The name is joined verbatim: an absolute or ``..`` name is not confined
        # to ``config.cache``. Callers writing under cache_root must check it.
        self.cache_root = config.cache / name
        self.mirrors = []

    def mirrors_mut(self) -> list[Mirror]:
        """Return the mirror list itself, for in-place edits."""
        return self.mirrors
