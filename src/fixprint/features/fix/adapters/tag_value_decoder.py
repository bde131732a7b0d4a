"""Summary: Decode FIX tag=value lines into renderable messages.
Why: Supply the default decoder behind the stream loop's decoder port.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, final

from fixprint.features.fix.adapters.message_registry import FixMessageRegistry, field_name
from fixprint.features.stream.domain.models import DecodeResult

SOH: Final[bytes] = b"\x01"
PIPE: Final[bytes] = b"|"

TAG_BEGIN_STRING: Final[int] = 8
TAG_MSG_TYPE: Final[int] = 35
TAG_CHECKSUM: Final[int] = 10

_BEGIN_STRING_VERSION = re.compile(r"^FIXT?\.(\d+)\.(\d+)")


@dataclass(slots=True, frozen=True)
class FixContext:
    """Protocol dialect the decoder was built for."""

    begin_string: str
    version: int


@dataclass(slots=True, frozen=True)
class FixMessage:
    """A decoded FIX message in wire order."""

    begin_string: str
    msg_type: str
    name: str
    fields: tuple[tuple[int, str], ...]

    @property
    def type_tag(self) -> str:
        return self.msg_type

    def get(self, tag: int) -> str | None:
        """Return the first value carried for ``tag``, if any."""

        for field_tag, value in self.fields:
            if field_tag == tag:
                return value
        return None

    def render(self) -> str:
        lines = [f'{self.name} ("{self.msg_type}")']
        for tag, value in self.fields:
            label = field_name(tag)
            lines.append(f"  {label} ({tag}): {value}" if label else f"  {tag}: {value}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def compute_checksum(data: bytes) -> str:
    """Return the FIX checksum of ``data`` as a three digit string."""

    return f"{sum(data) % 256:03d}"


def version_of(begin_string: str) -> int:
    """Map a BeginString such as ``FIX.4.2`` to its numeric version (4200)."""

    match = _BEGIN_STRING_VERSION.match(begin_string)
    if match is None:
        raise ValueError(f"Unrecognised BeginString '{begin_string}'")
    return int(match.group(1)) * 1000 + int(match.group(2)) * 100


@final
class FixTagValueDecoder:
    """Decoder for SOH or ``|`` delimited FIX tag=value messages.

    Every field must be ``<tag>=<value>`` with a numeric tag. The first field
    must be BeginString (8) matching the configured dialect, MsgType (35)
    must be present and registered, and CheckSum (10), when present, must
    match the bytes preceding it.
    """

    def __init__(
        self,
        begin_string: str = "FIX.4.2",
        registry: FixMessageRegistry | None = None,
        *,
        validate_checksum: bool = True,
    ) -> None:
        self.begin_string = begin_string
        self.registry = registry if registry is not None else FixMessageRegistry()
        self.validate_checksum = validate_checksum
        self._context = FixContext(begin_string=begin_string, version=version_of(begin_string))

    def context(self) -> FixContext:
        return self._context

    def decode(self, line: bytes) -> DecodeResult:
        delimiter = SOH if SOH in line else PIPE
        body = line[:-1] if line.endswith(delimiter) else line
        if not body:
            return DecodeResult.failure("empty message")

        fields: list[tuple[int, str]] = []
        for index, raw_field in enumerate(body.split(delimiter), start=1):
            tag_bytes, separator, value_bytes = raw_field.partition(b"=")
            if not separator or not tag_bytes.isdigit():
                return DecodeResult.failure(
                    f"malformed field {index}: {raw_field.decode('latin-1')!r}"
                )
            fields.append((int(tag_bytes), value_bytes.decode("latin-1")))

        first_tag, begin_string = fields[0]
        if first_tag != TAG_BEGIN_STRING:
            return DecodeResult.failure(f"first field must be BeginString (8), got tag {first_tag}")
        if begin_string != self.begin_string:
            return DecodeResult.failure(
                f"unsupported BeginString '{begin_string}' (expected '{self.begin_string}')"
            )

        msg_type = next((value for tag, value in fields if tag == TAG_MSG_TYPE), None)
        if msg_type is None:
            return DecodeResult.failure("missing MsgType (35)")
        if msg_type not in self.registry:
            return DecodeResult.failure(f"unknown MsgType '{msg_type}'")

        if self.validate_checksum:
            checksum_error = self._verify_checksum(body, delimiter, fields)
            if checksum_error:
                return DecodeResult.failure(checksum_error)

        return DecodeResult.success(
            FixMessage(
                begin_string=begin_string,
                msg_type=msg_type,
                name=self.registry.lookup(msg_type),
                fields=tuple(fields),
            )
        )

    @staticmethod
    def _verify_checksum(
        body: bytes,
        delimiter: bytes,
        fields: list[tuple[int, str]],
    ) -> str | None:
        """Return an error message when the trailing CheckSum does not match."""

        if not any(tag == TAG_CHECKSUM for tag, _ in fields):
            return None
        if fields[-1][0] != TAG_CHECKSUM:
            return "CheckSum (10) must be the last field"

        # Checksums are defined over SOH-delimited bytes.
        normalized = body.replace(delimiter, SOH) if delimiter != SOH else body
        marker = normalized.rfind(SOH + b"10=")
        expected = compute_checksum(normalized[: marker + 1])
        actual = fields[-1][1]
        if actual != expected:
            return f"CheckSum mismatch: message has {actual}, computed {expected}"
        return None


__all__ = [
    "FixContext",
    "FixMessage",
    "FixTagValueDecoder",
    "compute_checksum",
    "version_of",
]
