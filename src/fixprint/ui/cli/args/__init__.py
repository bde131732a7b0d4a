"""Command line argument handling package."""

from fixprint.ui.cli.args.parser import ArgumentParser
from fixprint.ui.cli.args.options import CLIArgs, ContextArgs, PrintArgs

__all__ = ["ArgumentParser", "CLIArgs", "ContextArgs", "PrintArgs"]
