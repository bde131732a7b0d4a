"""Application service for printing protocol logs.

This layer centralizes construction of the input source, decoder and stream
loop so that the CLI only deals with arguments and presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Callable, final

from rich.console import Console

from fixprint.config.config import MAX_LINE_LENGTH_DEFAULT
from fixprint.features.stream import (
    ErrorPolicy,
    InputSource,
    InterruptFlag,
    MessageDecoderPort,
    StreamLoop,
    StreamRunResult,
    SummaryAggregator,
)
from fixprint.platform.logging import logger
from fixprint.platform.signals import handle_interrupts


class InputUnavailableError(OSError):
    """Raised when the requested input cannot be opened."""

    def __init__(self, source: str, cause: OSError | None) -> None:
        super().__init__(f"Could not open {source}")
        self.source = source
        self.cause = cause


@dataclass(frozen=True)
class PrintRequest:
    """Input parameters for one printing run.

    Attributes:
        input_path: File to read, or ``-`` for standard input.
        offset: Bytes skipped at the start of every line.
        summary: Whether to count messages per type.
        max_line_length: Upper bound on the bytes read per line.
        error_policy: How to react to undecodable lines.
    """

    input_path: str
    offset: int = 0
    summary: bool = False
    max_line_length: int = MAX_LINE_LENGTH_DEFAULT
    error_policy: ErrorPolicy = ErrorPolicy.ABORT


@final
class PrintLogService:
    """Application service that runs the stream loop over one input."""

    def __init__(
        self,
        decoder: MessageDecoderPort,
        console: Console,
        *,
        interrupt: InterruptFlag | None = None,
        source_factory: Callable[..., InputSource] | None = None,
        stdin: BinaryIO | None = None,
        install_signal_handlers: bool = True,
    ) -> None:
        """Create a service.

        Tests can inject a source factory, a pre-set interrupt flag or a fake
        stdin, and disable signal handler installation.
        """
        self.decoder = decoder
        self.console = console
        self.interrupt = interrupt if interrupt is not None else InterruptFlag()
        self._source_factory: Callable[..., InputSource] = source_factory or InputSource.open
        self._stdin = stdin
        self._install_signal_handlers = install_signal_handlers

    def run(self, request: PrintRequest) -> StreamRunResult:
        """Print every message of the requested input.

        Args:
            request: Run parameters.

        Returns:
            StreamRunResult: What the loop observed, including partial results
            when it stopped on a decode failure.

        Raises:
            InputUnavailableError: If the input cannot be opened; the loop
                never starts in that case.
        """
        source = self._source_factory(
            request.input_path,
            stdin=self._stdin,
            max_line_length=request.max_line_length,
        )
        if not source.is_usable:
            logger.error(
                "Could not open %s",
                request.input_path,
                extra={
                    "stream_event": "stream.open.error",
                    "source": request.input_path,
                    "error_message": str(source.open_error) if source.open_error else None,
                },
            )
            raise InputUnavailableError(request.input_path, source.open_error)

        loop = StreamLoop(
            self.decoder,
            self.console,
            self.interrupt,
            offset=request.offset,
            summary=SummaryAggregator() if request.summary else None,
            error_policy=request.error_policy,
        )

        with source:
            if self._install_signal_handlers:
                with handle_interrupts(self.interrupt):
                    result = loop.run(source)
            else:
                result = loop.run(source)

        self._log_outcome(result)
        return result

    @staticmethod
    def _log_outcome(result: StreamRunResult) -> None:
        if result.interrupted:
            logger.info(
                "interrupted",
                extra={"stream_event": "stream.interrupted", "decoded": result.decoded},
            )
        if result.failure is not None:
            logger.error(
                "Decode failed on line %d: %s",
                result.failure.line_number,
                result.failure.reason,
                extra={
                    "stream_event": "stream.decode.error",
                    "line_number": result.failure.line_number,
                    "error_message": result.failure.reason,
                },
            )
        logger.debug(
            "Stream finished: state=%s lines=%d decoded=%d skipped=%d",
            result.state.value,
            result.lines_read,
            result.decoded,
            result.skipped,
        )


__all__ = ["InputUnavailableError", "PrintLogService", "PrintRequest"]
