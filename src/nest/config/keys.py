# topmark:header:start
#
#   project      : Nest
#   file         : keys.py
#   file_relpath : src/nest/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Nest configuration.

Keys defined here are the *external configuration API* of ``config.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys read from the Nest configuration file.

    Sections and keys not listed here are ignored by the parser.
    """

    # [paths]
    SECTION_PATHS: Final[str] = "paths"

    KEY_CACHE_DIR: Final[str] = "cache_dir"
    KEY_DOWNLOAD_DIR: Final[str] = "download_dir"

    # [repositories.<name>]
    SECTION_REPOSITORIES: Final[str] = "repositories"

    KEY_MIRRORS: Final[str] = "mirrors"
