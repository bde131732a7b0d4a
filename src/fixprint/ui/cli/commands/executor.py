"""src/fixprint/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the decoder, registry and output console once for every command.
"""

from abc import ABC, abstractmethod
from typing import Any

from rich.console import Console

from fixprint.config.settings import FIX_BEGIN_STRING
from fixprint.features.fix import FixMessageRegistry, FixTagValueDecoder
from fixprint.ui.cli.display.report import make_output_console


class CommandExecutor(ABC):
    """Base class for command execution."""

    registry: FixMessageRegistry
    decoder: FixTagValueDecoder
    console: Console

    def __init__(self, *, validate_checksum: bool = True, console: Console | None = None) -> None:
        """Initialize command executor.

        Args:
            validate_checksum: Whether the decoder verifies CheckSum (10).
            console: Output console; stdout when omitted.
        """
        self.registry = FixMessageRegistry()
        self.decoder = FixTagValueDecoder(
            FIX_BEGIN_STRING,
            self.registry,
            validate_checksum=validate_checksum,
        )
        self.console = console if console is not None else make_output_console()

    @abstractmethod
    def execute(self) -> Any:
        """Execute the command."""
        pass
