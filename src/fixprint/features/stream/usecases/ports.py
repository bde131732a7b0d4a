"""Summary: Ports defining the stream loop's collaborators.
Why: Keep the loop decoder-agnostic so tests can drive it with stub decoders.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fixprint.features.stream.domain.models import DecodeResult


@runtime_checkable
class DecodedMessage(Protocol):
    """A structured message produced from one raw line."""

    @property
    def type_tag(self) -> str:
        """Short discriminator naming the message type."""
        ...

    def render(self) -> str:
        """Human-readable rendering printed for the message."""
        ...


@runtime_checkable
class MessageDecoderPort(Protocol):
    """Port for turning a raw line into a decoded message."""

    def decode(self, line: bytes) -> DecodeResult:
        """Decode ``line``, returning a success or failure result."""
        ...


@runtime_checkable
class TypeNameRegistryPort(Protocol):
    """Port resolving message type tags to display names."""

    def lookup(self, tag: str) -> str:
        """Return the display name for ``tag``.

        Raises:
            UnknownMessageTypeError: If ``tag`` is not registered.
        """
        ...


__all__ = ["DecodedMessage", "MessageDecoderPort", "TypeNameRegistryPort"]
