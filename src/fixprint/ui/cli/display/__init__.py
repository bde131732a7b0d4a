"""Console display helpers for the CLI."""

from .report import ReportDisplay, make_output_console

__all__ = ["ReportDisplay", "make_output_console"]
