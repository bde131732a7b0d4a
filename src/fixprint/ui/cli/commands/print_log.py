"""src/fixprint/ui/cli/commands/print_log.py
What: Execute a printing run over a file or standard input via the CLI.
Why: Tie the application service to the report display.
"""

from typing import BinaryIO, override

from rich.console import Console

from fixprint.application.services import PrintLogService, PrintRequest
from fixprint.features.stream import InterruptFlag, StreamRunResult
from fixprint.ui.cli.args.options import PrintArgs
from fixprint.ui.cli.commands.executor import CommandExecutor
from fixprint.ui.cli.display.report import ReportDisplay


class PrintCommand(CommandExecutor):
    """Command for printing and summarizing a protocol log."""

    args: PrintArgs
    service: PrintLogService
    report_display: ReportDisplay

    def __init__(
        self,
        args: PrintArgs,
        *,
        console: Console | None = None,
        stdin: BinaryIO | None = None,
        interrupt: InterruptFlag | None = None,
    ) -> None:
        super().__init__(validate_checksum=args.validate_checksum, console=console)
        self.args = args
        self.service = PrintLogService(
            self.decoder,
            self.console,
            interrupt=interrupt,
            stdin=stdin,
        )
        self.report_display = ReportDisplay(self.registry, self.console)

    @override
    def execute(self) -> StreamRunResult:
        """Run the stream loop, then print the report.

        The report is printed even when the loop stopped on a decode failure
        or an interrupt, since messages already printed remain valid.

        Returns:
            StreamRunResult: The loop outcome.
        """
        request = PrintRequest(
            input_path=self.args.input_path,
            offset=self.args.offset,
            summary=self.args.summary,
            max_line_length=self.args.max_line_length,
            error_policy=self.args.error_policy,
        )
        result = self.service.run(request)
        self.report_display.show_report(result)
        return result
