"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from fixprint.config.config import Config


def test_defaults_when_file_missing(portable_repo_root: Path) -> None:
    """A missing config file yields defaults and is not created."""

    config = Config.load()

    assert config.offset == 0
    assert config.summary is False
    assert config.max_line_length == 4096
    assert config.error_policy == "abort"
    assert config.validate_checksum is True
    assert config.log_file is None
    assert not (portable_repo_root / "config" / "config.toml").exists()


def test_load_toml(portable_repo_root: Path) -> None:
    config_dir = portable_repo_root / "config"
    config_dir.mkdir()
    _ = (config_dir / "config.toml").write_text(
        "offset = 12\n"
        "summary = true\n"
        'error_policy = "skip"\n'
        "validate_checksum = false\n"
        'log_file = "/tmp/fixprint/fixprint.log"\n'
    )

    config = Config.load()

    assert config.offset == 12
    assert config.summary is True
    assert config.error_policy == "skip"
    assert config.validate_checksum is False
    assert config.log_file == Path("/tmp/fixprint/fixprint.log")


def test_load_is_cached_until_reset(portable_repo_root: Path) -> None:
    first = Config.load()
    assert Config.load() is first

    Config.reset()
    assert Config.load() is not first


def test_unknown_keys_are_ignored(portable_repo_root: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_dir = portable_repo_root / "config"
    config_dir.mkdir()
    _ = (config_dir / "config.toml").write_text("offset = 3\nbase_path = '/music'\n")

    config = Config.load()

    assert config.offset == 3
    assert "base_path" in caplog.text


def test_empty_log_file_means_console_only() -> None:
    assert Config(log_file="").log_file is None  # pyright: ignore[reportArgumentType]


def test_malformed_toml_raises(portable_repo_root: Path) -> None:
    config_dir = portable_repo_root / "config"
    config_dir.mkdir()
    _ = (config_dir / "config.toml").write_text("offset = = 3\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
