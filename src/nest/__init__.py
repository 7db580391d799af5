# topmark:header:start
#
#   project      : Nest
#   file         : __init__.py
#   file_relpath : src/nest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest package.

Nest is a package manager. This distribution ships its configuration layer:
it reads the TOML configuration file, merges the user settings over the
built-in defaults, and exposes a small CLI to inspect the effective result.
"""

from __future__ import annotations
