"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from fixprint.features.stream import ErrorPolicy


@final
@dataclass(slots=True)
class PrintArgs:
    """Command line arguments for printing a log."""

    input_path: str
    offset: int
    summary: bool
    max_line_length: int
    error_policy: ErrorPolicy
    validate_checksum: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ContextArgs:
    """Command line arguments for ``--context``: report the decoder dialect."""

    validate_checksum: bool


CLIArgs = PrintArgs | ContextArgs

__all__ = ["CLIArgs", "ContextArgs", "PrintArgs"]
