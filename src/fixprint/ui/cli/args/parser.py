"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn, final, override

from fixprint import __version__
from fixprint.config.settings import load_settings
from fixprint.features.stream import ErrorPolicy
from fixprint.platform.logging import setup_logger
from fixprint.ui.cli.args.options import CLIArgs, ContextArgs, PrintArgs

USAGE_EXAMPLES = """\
e.g.
  fixprint myfix_server_protocol.log
  fixprint -s -o 12 myfix_client_protocol.log
  cat myfix_client_protocol.log | fixprint -
"""


class _ExitOneArgumentParser(argparse.ArgumentParser):
    """``argparse.ArgumentParser`` that exits with status 1 on bad arguments."""

    @override
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {parsed}")
    return parsed


def _policy_name(value: str) -> str:
    return value.strip().lower()


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _ExitOneArgumentParser(
            prog="fixprint",
            description="fixprint -- FIX protocol log printer",
            epilog=USAGE_EXAMPLES,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "input_path",
            nargs="?",
            default=None,
            type=str,
            help="FIX protocol log file, use '-' for stdin",
            metavar="INPUT",
        )
        _ = parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"%(prog)s for fixprint version {__version__}",
            help="print version then exit",
        )
        _ = parser.add_argument(
            "-o",
            "--offset",
            type=_non_negative_int,
            default=None,
            metavar="N",
            help="bytes to skip on each line before parsing FIX message",
        )
        _ = parser.add_argument(
            "-s",
            "--summary",
            action="store_true",
            default=None,
            help="summary, generate message summary",
        )
        _ = parser.add_argument(
            "-c",
            "--context",
            action="store_true",
            help="print the FIX BeginString and version then exit",
        )
        _ = parser.add_argument(
            "--on-error",
            type=_policy_name,
            choices=[policy.value for policy in ErrorPolicy],
            default=None,
            help="What to do with an undecodable line",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug diagnostics",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments, with config defaults
            applied where a flag was not given.

        Raises:
            SystemExit: With status 1 on argument errors or missing input,
                with status 0 after ``--help`` or ``--version``.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        settings = load_settings()
        _ = setup_logger(log_file=settings.log_file, console_level=log_level)

        if parsed_args.context:
            return ContextArgs(validate_checksum=settings.validate_checksum)

        input_path: str | None = parsed_args.input_path
        if not input_path:
            parser.print_help(sys.stderr)
            sys.exit(1)

        raw_policy: str = parsed_args.on_error or settings.error_policy
        try:
            error_policy = ErrorPolicy.from_user_input(raw_policy)
        except ValueError as e:
            parser.error(str(e))

        return PrintArgs(
            input_path=input_path,
            offset=parsed_args.offset if parsed_args.offset is not None else settings.offset,
            summary=parsed_args.summary if parsed_args.summary is not None else settings.summary,
            max_line_length=settings.max_line_length,
            error_policy=error_policy,
            validate_checksum=settings.validate_checksum,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
