"""src/fixprint/ui/cli/display/report.py
What: Render the end-of-run totals and per-type summary table.
Why: Keep report formatting in one place, separate from the stream loop.
"""

from __future__ import annotations

from typing import IO, final

from rich.console import Console

from fixprint.features.stream import StreamRunResult, TypeNameRegistryPort

NAME_COLUMN_WIDTH = 20


def make_output_console(file: IO[str] | None = None) -> Console:
    """Create the stdout console used for rendered messages and reports.

    Markup, highlighting and wrapping are disabled. Decoded messages and
    report rows are written straight to ``console.file`` so that tabs are
    kept.
    """
    return Console(
        file=file,
        soft_wrap=True,
        markup=False,
        highlight=False,
        emoji=False,
    )


@final
class ReportDisplay:
    """Handles the final report in CLI."""

    console: Console
    registry: TypeNameRegistryPort

    def __init__(self, registry: TypeNameRegistryPort, console: Console | None = None) -> None:
        """Initialize report display.

        Args:
            registry: Resolves type tags to display names for the summary.
            console: Output console; stdout when omitted.
        """
        self.registry = registry
        self.console = console if console is not None else make_output_console()

    def show_report(self, result: StreamRunResult) -> None:
        """Print totals and, when summarization ran, the per-type table.

        Raises:
            UnknownMessageTypeError: If a summarized tag is missing from the
                registry. Totals are printed first; no table rows are.
        """
        self._write_line(f"{result.decoded} messages decoded.")
        if result.skipped:
            self._write_line(f"{result.skipped} lines skipped.")

        if result.summary is None:
            return

        rows = [
            (self.registry.lookup(tag), tag, count)
            for tag, count in result.summary.entries()
        ]
        for name, tag, count in rows:
            self._write_line(f'{name:<{NAME_COLUMN_WIDTH}} ("{tag}")\t{count}')

    def _write_line(self, text: str) -> None:
        # Bypasses Rich rendering, which would expand the column tab.
        _ = self.console.file.write(f"{text}\n")


__all__ = ["NAME_COLUMN_WIDTH", "ReportDisplay", "make_output_console"]
