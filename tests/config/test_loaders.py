# topmark:header:start
#
#   project      : Nest
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading and parsing TOML files in `nest.config.io.loaders`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from nest.config.errors import ConfigDeserializeError, ConfigIOError, ParseConfError
from nest.config.io import parse_toml_text, read_conf

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_read_conf_returns_plain_python_values(write_toml: Callable[[str], Path]) -> None:
    """Parsed documents are unwrapped into dict/list/str, not tomlkit items."""
    path: Path = write_toml(
        """
        [paths]
        cache_dir = "/tmp/cache"

        [repositories.stable]
        mirrors = ["https://a.example", "https://b.example"]
        """
    )

    doc: Any = read_conf(path)

    assert type(doc) is dict
    assert type(doc["paths"]) is dict
    assert type(doc["paths"]["cache_dir"]) is str
    assert type(doc["repositories"]["stable"]["mirrors"]) is list
    assert doc["repositories"]["stable"]["mirrors"] == ["https://a.example", "https://b.example"]


def test_read_conf_missing_file_raises_io_error(tmp_path: Path) -> None:
    """A nonexistent path yields the I/O kind, carrying the OSError."""
    with pytest.raises(ConfigIOError) as excinfo:
        read_conf(tmp_path / "missing.toml")

    assert isinstance(excinfo.value.error, FileNotFoundError)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert isinstance(excinfo.value, ParseConfError)


def test_read_conf_directory_raises_io_error(tmp_path: Path) -> None:
    """Opening a directory fails with the I/O kind."""
    with pytest.raises(ConfigIOError):
        read_conf(tmp_path)


def test_read_conf_undecodable_bytes_raise_io_error(tmp_path: Path) -> None:
    """A read that fails while decoding is reported as the I/O kind too."""
    path: Path = tmp_path / "config.toml"
    path.write_bytes(b"key = \"\xff\xfe\"\n")

    with pytest.raises(ConfigIOError) as excinfo:
        read_conf(path)

    assert isinstance(excinfo.value.error, UnicodeDecodeError)


def test_read_conf_malformed_toml_raises_deserialize_error(
    write_toml: Callable[[str], Path],
) -> None:
    """Syntax errors yield the Deserialize kind with a position."""
    path: Path = write_toml("[paths\ncache_dir = 'x'\n")

    with pytest.raises(ConfigDeserializeError) as excinfo:
        read_conf(path)

    assert excinfo.value.line is not None
    assert excinfo.value.line >= 1
    assert str(excinfo.value)


def test_parse_duplicate_key_raises_deserialize_error() -> None:
    """Duplicate keys are a deserialization failure, not a crash."""
    with pytest.raises(ConfigDeserializeError):
        parse_toml_text("a = 1\na = 2\n")


def test_parse_empty_text_is_an_empty_table() -> None:
    """An empty document is a valid, empty table."""
    assert parse_toml_text("") == {}


def test_read_conf_logs_errors(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Failures are logged at ERROR level with the offending path."""
    caplog.set_level("ERROR")
    missing: Path = tmp_path / "missing.toml"

    with pytest.raises(ConfigIOError):
        read_conf(missing)

    assert any(str(missing) in r.getMessage() for r in caplog.records)


def test_read_conf_path_with_nul_byte_raises_io_error(tmp_path: Path) -> None:
    """A path the OS cannot represent is reported as the I/O kind."""
    with pytest.raises(ConfigIOError) as excinfo:
        read_conf(tmp_path / "conf\x00ig.toml")

    assert isinstance(excinfo.value.error, OSError)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_read_conf_bare_carriage_return_raises_deserialize_error(tmp_path: Path) -> None:
    """A lone CR is not a TOML line ending and must reach the parser as-is."""
    path: Path = tmp_path / "config.toml"
    path.write_bytes(b'[paths]\rcache_dir = "x"\r')

    with pytest.raises(ConfigDeserializeError):
        read_conf(path)


def test_read_conf_accepts_crlf_line_endings(tmp_path: Path) -> None:
    """CRLF is a valid TOML line ending."""
    path: Path = tmp_path / "config.toml"
    path.write_bytes(b'[paths]\r\ncache_dir = "x"\r\n')

    assert read_conf(path) == {"paths": {"cache_dir": "x"}}
