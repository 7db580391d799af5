# topmark:header:start
#
#   project      : Nest
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test fixtures.

`run_cli` invokes the Click group through `click.testing.CliRunner` with
colors disabled, so assertions can match plain text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from nest.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging setup performed by the CLI group after each test."""
    root: logging.Logger = logging.getLogger()
    handlers: list[logging.Handler] = root.handlers[:]
    level: int = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def run_cli() -> Callable[[Sequence[str]], Result]:
    """Return a helper invoking the Nest CLI with ``--no-color``.

    Returns:
        Callable[[Sequence[str]], Result]: Runs the CLI with the given arguments.
    """
    runner = CliRunner()

    def _run(argv: Sequence[str]) -> Result:
        return runner.invoke(cli, ["--no-color", *argv])

    return _run
