# Where: fixprint.features.fix.__init__
# What: Expose the bundled FIX 4.2 decoder and message type registry.
# Why: Let the application layer depend on one import path for protocol adapters.

from .adapters import (
    FixContext,
    FixMessage,
    FixMessageRegistry,
    FixTagValueDecoder,
    compute_checksum,
)

__all__ = [
    "FixContext",
    "FixMessage",
    "FixMessageRegistry",
    "FixTagValueDecoder",
    "compute_checksum",
]
