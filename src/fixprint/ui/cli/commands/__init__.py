"""CLI command executors."""

from fixprint.ui.cli.commands.context import ContextCommand
from fixprint.ui.cli.commands.executor import CommandExecutor
from fixprint.ui.cli.commands.print_log import PrintCommand

__all__ = ["CommandExecutor", "ContextCommand", "PrintCommand"]
