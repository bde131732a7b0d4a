"""Summary: Value objects describing decode outcomes and stream loop results.
Why: Let the loop branch on explicit results instead of unwinding exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from fixprint.features.stream.domain.summary import SummaryAggregator
    from fixprint.features.stream.usecases.ports import DecodedMessage


class LoopState(str, Enum):
    """Lifecycle states of the stream loop."""

    RUNNING = "running"
    INTERRUPTED = "interrupted"
    STOPPED = "stopped"


class ErrorPolicy(str, Enum):
    """Represent how the loop reacts to a line the decoder rejects."""

    ABORT = "abort"
    SKIP = "skip"

    @staticmethod
    def from_user_input(value: str) -> "ErrorPolicy":
        """Translate raw CLI or config input into the matching policy."""

        normalized = value.strip().lower()
        for policy in ErrorPolicy:
            if policy.value == normalized:
                return policy
        valid: Final[str] = ", ".join(p.value for p in ErrorPolicy)
        msg = f"Unsupported error policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class UnknownMessageTypeError(LookupError):
    """Raised when a message type tag has no entry in the name registry."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown message type {tag!r}")
        self.tag = tag


@dataclass(slots=True, frozen=True)
class DecodeResult:
    """Outcome of decoding a single line.

    Exactly one of ``message`` and ``error`` is set.
    """

    message: "DecodedMessage | None" = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.message is not None

    @classmethod
    def success(cls, message: "DecodedMessage") -> "DecodeResult":
        return cls(message=message)

    @classmethod
    def failure(cls, reason: str) -> "DecodeResult":
        return cls(error=reason or "decode failed")


@dataclass(slots=True, frozen=True)
class DecodeFailure:
    """A rejected line together with its 1-based position in the input."""

    line_number: int
    line: bytes
    reason: str


@dataclass(slots=True)
class StreamRunResult:
    """Capture what a single pass of the stream loop observed."""

    state: LoopState
    decoded: int = 0
    skipped: int = 0
    lines_read: int = 0
    summary: "SummaryAggregator | None" = None
    failure: DecodeFailure | None = None

    @property
    def interrupted(self) -> bool:
        return self.state is LoopState.INTERRUPTED

    @property
    def failed(self) -> bool:
        """Return True when the loop stopped on a fatal decode failure."""

        return self.failure is not None


__all__ = [
    "DecodeFailure",
    "DecodeResult",
    "ErrorPolicy",
    "LoopState",
    "StreamRunResult",
    "UnknownMessageTypeError",
]
