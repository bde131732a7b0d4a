"""Summary: Domain types for the stream feature.
Why: Keep value objects importable without pulling in I/O adapters.
"""

from .interrupt import InterruptFlag
from .models import (
    DecodeFailure,
    DecodeResult,
    ErrorPolicy,
    LoopState,
    StreamRunResult,
    UnknownMessageTypeError,
)
from .summary import SummaryAggregator

__all__ = [
    "DecodeFailure",
    "DecodeResult",
    "ErrorPolicy",
    "InterruptFlag",
    "LoopState",
    "StreamRunResult",
    "SummaryAggregator",
    "UnknownMessageTypeError",
]
