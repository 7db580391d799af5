# topmark:header:start
#
#   project      : Nest
#   file         : test_repository_model.py
#   file_relpath : tests/repository/test_repository_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Repository` and `Mirror`."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from nest.config import Config
from nest.repository import Mirror, Repository


def test_repository_starts_without_mirrors() -> None:
    """A new repository has a name, a derived cache root and no mirrors."""
    config = Config(cache=Path("/cache"))

    repo = Repository(config, "stable")

    assert repo.name == "stable"
    assert repo.cache_root == Path("/cache/stable")
    assert repo.mirrors == []


def test_mirrors_mut_edits_in_place() -> None:
    """`mirrors_mut` exposes the list owned by the repository."""
    repo = Repository(Config.from_defaults(), "stable")

    repo.mirrors_mut().append(Mirror("https://a.example"))
    repo.mirrors_mut().append(Mirror("https://b.example"))

    assert [str(m) for m in repo.mirrors] == ["https://a.example", "https://b.example"]


def test_mirror_is_immutable() -> None:
    """Mirrors are frozen value objects."""
    mirror = Mirror("https://a.example")

    with pytest.raises(dataclasses.FrozenInstanceError):
        mirror.url = "https://b.example"  # type: ignore[misc]

    assert mirror == Mirror("https://a.example")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("../escape", Path("/cache/../escape")),
        ("/etc", Path("/etc")),
    ],
)
def test_cache_root_joins_name_verbatim(name: str, expected: Path) -> None:
    """Quoted table keys are used as-is when deriving the cache root."""
    repo = Repository(Config(cache=Path("/cache")), name)

    assert repo.name == name
    assert repo.cache_root == expected
