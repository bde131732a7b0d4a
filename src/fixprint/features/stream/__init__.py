# Where: fixprint.features.stream.__init__
# What: Expose the stream loop, its input abstraction and domain types.
# Why: Provide a cohesive import surface for the application and UI layers.

from .domain import (
    DecodeFailure,
    DecodeResult,
    ErrorPolicy,
    InterruptFlag,
    LoopState,
    StreamRunResult,
    SummaryAggregator,
    UnknownMessageTypeError,
)
from .usecases import (
    STDIN_PATH,
    DecodedMessage,
    InputSource,
    MessageDecoderPort,
    StreamLoop,
    TypeNameRegistryPort,
)

__all__ = [
    "DecodeFailure",
    "DecodeResult",
    "DecodedMessage",
    "ErrorPolicy",
    "InputSource",
    "InterruptFlag",
    "LoopState",
    "MessageDecoderPort",
    "STDIN_PATH",
    "StreamLoop",
    "StreamRunResult",
    "SummaryAggregator",
    "TypeNameRegistryPort",
    "UnknownMessageTypeError",
]
