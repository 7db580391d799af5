# topmark:header:start
#
#   project      : Nest
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Nest test suite.

This file sets up global fixtures and the logging configuration for test runs.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from nest.config import logging

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_nest_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Nest's runtime log level and config path are not forced via env.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv("NEST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NEST_CONFIG", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def write_toml(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing TOML text to a file under ``tmp_path``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Callable[[str], Path]: Writes its dedented argument to ``config.toml`` and returns the path.
    """

    def _write(text: str, name: str = "config.toml") -> Path:
        path: Path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write
