"""src/fixprint/ui/cli/commands/context.py
What: Report which FIX dialect the bundled decoder accepts.
Why: Let operators check the BeginString before pointing the tool at a log.
"""

from typing import override

from rich.console import Console

from fixprint.features.fix import FixContext
from fixprint.ui.cli.args.options import ContextArgs
from fixprint.ui.cli.commands.executor import CommandExecutor


class ContextCommand(CommandExecutor):
    """Command for ``--context``."""

    def __init__(self, args: ContextArgs, *, console: Console | None = None) -> None:
        super().__init__(validate_checksum=args.validate_checksum, console=console)

    @override
    def execute(self) -> FixContext:
        context = self.decoder.context()
        self.console.print(f"Context FIX beginstring:{context.begin_string}")
        self.console.print(f"Context FIX version:{context.version}")
        return context
