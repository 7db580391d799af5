# topmark:header:start
#
#   project      : Nest
#   file         : constants.py
#   file_relpath : src/nest/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from pathlib import Path

NEST_VERSION: str = get_version("nest")

# System-wide configuration file read when no other path is given.
DEFAULT_CONFIG_PATH: Path = Path("/etc/nest/config.toml")

DEFAULT_CACHE_DIR: Path = Path("/var/nest/cache")
DEFAULT_DOWNLOAD_DIR: Path = Path("/var/nest/download")

# Environment variables
ENV_CONFIG_PATH: str = "NEST_CONFIG"
ENV_LOG_LEVEL: str = "NEST_LOG_LEVEL"
