"""Configuration management for fixprint."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from fixprint.config.paths import default_config_path
from fixprint.platform.logging import logger

MAX_LINE_LENGTH_DEFAULT = 4096
ERROR_POLICY_DEFAULT = "abort"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Bytes skipped at the start of every line before decoding
    offset: int = 0

    # Print the per-message-type summary after the run
    summary: bool = False

    # Lines longer than this are truncated before decoding
    max_line_length: int = MAX_LINE_LENGTH_DEFAULT

    # "abort" stops at the first undecodable line, "skip" keeps reading
    error_policy: str = ERROR_POLICY_DEFAULT

    # Verify tag 10 on messages that carry one
    validate_checksum: bool = True

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the TOML file, falling back to defaults.

        The file is never created or rewritten; a missing file simply yields
        the defaults.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            logger.debug("Configuration loaded from %s", config_file)
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None
