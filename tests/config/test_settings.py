"""Tests for derived runtime settings."""

from fixprint.config.config import Config
from fixprint.config.settings import load_settings


def test_valid_values_pass_through() -> None:
    settings = load_settings(
        Config(offset=8, summary=True, max_line_length=512, error_policy="Skip")
    )

    assert settings.offset == 8
    assert settings.summary is True
    assert settings.max_line_length == 512
    assert settings.error_policy == "skip"


def test_invalid_values_fall_back_to_defaults() -> None:
    settings = load_settings(Config(offset=-4, max_line_length=0, error_policy="retry"))

    assert settings.offset == 0
    assert settings.max_line_length == 4096
    assert settings.error_policy == "abort"


def test_loads_config_on_demand() -> None:
    settings = load_settings()

    assert settings.offset == 0
    assert settings.validate_checksum is True
    assert settings.log_file is None


def test_booleans_are_not_accepted_as_byte_counts() -> None:
    settings = load_settings(Config(offset=True, max_line_length=True))  # pyright: ignore[reportArgumentType]

    assert settings.offset == 0
    assert settings.max_line_length == 4096


def test_non_boolean_flags_fall_back_to_defaults() -> None:
    settings = load_settings(
        Config(summary="false", validate_checksum="no")  # pyright: ignore[reportArgumentType]
    )

    assert settings.summary is False
    assert settings.validate_checksum is True
