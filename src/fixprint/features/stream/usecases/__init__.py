"""Summary: Stream use cases and their collaborator ports.
Why: Offer one import surface for the loop, its input and its ports.
"""

from .input_source import STDIN_PATH, InputSource
from .ports import DecodedMessage, MessageDecoderPort, TypeNameRegistryPort
from .stream_loop import StreamLoop

__all__ = [
    "DecodedMessage",
    "InputSource",
    "MessageDecoderPort",
    "STDIN_PATH",
    "StreamLoop",
    "TypeNameRegistryPort",
]
