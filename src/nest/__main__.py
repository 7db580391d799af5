# topmark:header:start
#
#   project      : Nest
#   file         : __main__.py
#   file_relpath : src/nest/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Nest via ``python -m nest``.

It delegates directly to :func:`nest.cli.main.cli`, the same entry point used
by the ``nest`` console script.

Examples:
    Show the effective configuration::

        python -m nest config show --config ./nest.toml
"""

from __future__ import annotations

from nest.cli.main import cli

if __name__ == "__main__":
    cli()
