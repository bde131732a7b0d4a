"""Summary: Read, decode, render and count messages until the stream ends.
Why: Own the interruptible, fail-fast control loop independently of any UI.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from fixprint.features.stream.domain.interrupt import InterruptFlag
from fixprint.features.stream.domain.models import (
    DecodeFailure,
    ErrorPolicy,
    LoopState,
    StreamRunResult,
)
from fixprint.features.stream.domain.summary import SummaryAggregator
from fixprint.features.stream.usecases.input_source import InputSource
from fixprint.features.stream.usecases.ports import MessageDecoderPort
from fixprint.platform.logging import logger


@final
class StreamLoop:
    """Drive one pass over an input source.

    The interrupt flag is checked before every read, so an interrupt stops
    the loop without consuming further input. Decoded messages are rendered
    to ``console`` in input order and never retained.
    """

    def __init__(
        self,
        decoder: MessageDecoderPort,
        console: Console,
        interrupt: InterruptFlag,
        *,
        offset: int = 0,
        summary: SummaryAggregator | None = None,
        error_policy: ErrorPolicy = ErrorPolicy.ABORT,
    ) -> None:
        """Initialize the loop.

        Args:
            decoder: Collaborator turning raw lines into messages.
            console: Output sink for rendered messages.
            interrupt: Flag set when the operator requests shutdown.
            offset: Bytes skipped at the start of every line.
            summary: Aggregator to update, or None when summarization is off.
            error_policy: Whether a decode failure stops the run.
        """
        if offset < 0:
            raise ValueError(f"offset must be non-negative; received {offset}")

        self.decoder = decoder
        self.console = console
        self.interrupt = interrupt
        self.offset = offset
        self.summary = summary
        self.error_policy = error_policy

    def run(self, source: InputSource) -> StreamRunResult:
        """Consume ``source`` until end-of-stream, interruption or a fatal decode failure."""

        result = StreamRunResult(state=LoopState.RUNNING, summary=self.summary)

        while result.state is LoopState.RUNNING:
            if self.interrupt.is_requested:
                result.state = LoopState.INTERRUPTED
                break

            line = source.read_line()
            if line is None:
                result.state = LoopState.STOPPED
                break
            result.lines_read += 1

            payload = line[self.offset:]
            if not payload:
                continue

            decoded = self.decoder.decode(payload)
            if decoded.message is None:
                failure = DecodeFailure(
                    line_number=result.lines_read,
                    line=line,
                    reason=decoded.error or "decode failed",
                )
                if self.error_policy is ErrorPolicy.SKIP:
                    result.skipped += 1
                    logger.warning(
                        "Skipped undecodable line %d: %s",
                        failure.line_number,
                        failure.reason,
                        extra={
                            "stream_event": "stream.decode.skip",
                            "line_number": failure.line_number,
                            "error_message": failure.reason,
                        },
                    )
                    continue

                result.failure = failure
                result.state = LoopState.STOPPED
                break

            message = decoded.message
            # Written raw so tabs inside field values survive.
            _ = self.console.file.write(f"{message.render()}\n")
            result.decoded += 1
            if self.summary is not None:
                self.summary.record(message.type_tag)

        return result


__all__ = ["StreamLoop"]
