"""Where: src/fixprint/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to feature layers without file I/O.
Assumptions: - CLI flags override these values for a single run.
Trade-offs: - Invalid values fall back to defaults instead of failing the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fixprint.config.config import (
    ERROR_POLICY_DEFAULT,
    MAX_LINE_LENGTH_DEFAULT,
    Config,
)

# The only protocol dialect the bundled decoder understands.
FIX_BEGIN_STRING: str = "FIX.4.2"

_ERROR_POLICIES: frozenset[str] = frozenset({"abort", "skip"})


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Validated configuration values used to build a run."""

    offset: int
    summary: bool
    max_line_length: int
    error_policy: str
    validate_checksum: bool
    log_file: Path | None


def load_settings(app_config: Config | None = None) -> RuntimeSettings:
    """Validate ``app_config`` (loaded on demand) into runtime settings."""

    app_config = app_config if app_config is not None else Config.load()

    max_line_length = getattr(app_config, "max_line_length", MAX_LINE_LENGTH_DEFAULT)
    if isinstance(max_line_length, bool) or not isinstance(max_line_length, int) or max_line_length <= 0:
        max_line_length = MAX_LINE_LENGTH_DEFAULT

    offset = getattr(app_config, "offset", 0)
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        offset = 0

    error_policy = str(getattr(app_config, "error_policy", ERROR_POLICY_DEFAULT)).strip().lower()
    if error_policy not in _ERROR_POLICIES:
        error_policy = ERROR_POLICY_DEFAULT

    summary = getattr(app_config, "summary", False)
    if not isinstance(summary, bool):
        summary = False

    validate_checksum = getattr(app_config, "validate_checksum", True)
    if not isinstance(validate_checksum, bool):
        validate_checksum = True

    return RuntimeSettings(
        offset=offset,
        summary=summary,
        max_line_length=max_line_length,
        error_policy=error_policy,
        validate_checksum=validate_checksum,
        log_file=getattr(app_config, "log_file", None),
    )


__all__ = ["FIX_BEGIN_STRING", "RuntimeSettings", "load_settings"]
