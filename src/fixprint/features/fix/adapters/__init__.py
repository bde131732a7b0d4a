"""Adapters implementing the stream ports for FIX tag=value logs."""

from .message_registry import FIX42_FIELD_NAMES, FIX42_MESSAGE_TYPES, FixMessageRegistry, field_name
from .tag_value_decoder import FixContext, FixMessage, FixTagValueDecoder, compute_checksum

__all__ = [
    "FIX42_FIELD_NAMES",
    "FIX42_MESSAGE_TYPES",
    "FixContext",
    "FixMessage",
    "FixMessageRegistry",
    "FixTagValueDecoder",
    "compute_checksum",
    "field_name",
]
