"""Command line interface package."""

from fixprint.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
