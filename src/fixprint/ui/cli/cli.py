"""Command line interface for fixprint."""

import sys
from typing import final

from fixprint.application.services import InputUnavailableError
from fixprint.features.stream import UnknownMessageTypeError
from fixprint.platform.logging import logger
from fixprint.ui.cli.args import ArgumentParser
from fixprint.ui.cli.args.options import CLIArgs, ContextArgs
from fixprint.ui.cli.commands import ContextCommand, PrintCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 on an unopenable input, a fatal decode failure or
        a summary tag missing from the registry. Interruption is not an error.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ContextArgs):
                _ = ContextCommand(args).execute()
                return

            result = PrintCommand(args).execute()
            if result.failed:
                sys.exit(1)
            return

        except InputUnavailableError:
            # Already reported by the service.
            sys.exit(1)
        except UnknownMessageTypeError as e:
            logger.error(
                "Summary failed: %s",
                e,
                extra={"stream_event": "stream.report.error", "error_message": str(e)},
            )
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("interrupted", extra={"stream_event": "stream.interrupted"})
            return
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Underlying command processing
        calls ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully or is interrupted.
    """
    CommandProcessor.process_command()
    return 0
