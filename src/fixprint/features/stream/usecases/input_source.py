"""Summary: Line-oriented byte input from a file path or a borrowed stream.
Why: Release the underlying handle exactly once, and only when we opened it.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from types import TracebackType
from typing import BinaryIO, final

from fixprint.config.config import MAX_LINE_LENGTH_DEFAULT
from fixprint.platform.logging import logger

STDIN_PATH = "-"

_DISCARD_CHUNK_SIZE = 8192


@final
class InputSource:
    """Ordered supply of raw byte lines.

    An instance either owns its stream (it opened a path itself) or borrows
    one handed in from outside, such as standard input. Only owned streams
    are closed.
    """

    name: str
    max_line_length: int
    open_error: OSError | None

    def __init__(
        self,
        stream: BinaryIO | None,
        *,
        owns_stream: bool,
        name: str = "<stream>",
        max_line_length: int = MAX_LINE_LENGTH_DEFAULT,
        open_error: OSError | None = None,
    ) -> None:
        """Wrap ``stream``.

        Args:
            stream: Binary stream to read from, or None when opening failed.
            owns_stream: Whether ``close`` should release ``stream``.
            name: Display name used in diagnostics.
            max_line_length: Upper bound on the bytes delivered per line.
            open_error: The error that prevented opening, if any.
        """
        if max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive; received {max_line_length}")

        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False
        self.name = name
        self.max_line_length = max_line_length
        self.open_error = open_error

    @classmethod
    def open(
        cls,
        path: str,
        *,
        stdin: BinaryIO | None = None,
        max_line_length: int = MAX_LINE_LENGTH_DEFAULT,
    ) -> "InputSource":
        """Create a source for ``path``; ``-`` borrows standard input.

        Opening failures do not raise: the returned source reports
        ``is_usable`` as False and keeps the error in ``open_error``.
        """
        if path == STDIN_PATH:
            stream = stdin if stdin is not None else sys.stdin.buffer
            return cls(stream, owns_stream=False, name=STDIN_PATH, max_line_length=max_line_length)

        try:
            handle: BinaryIO = open(path, "rb")
        except OSError as e:
            logger.debug("Failed to open %s: %s", path, e)
            return cls(
                None,
                owns_stream=False,
                name=path,
                max_line_length=max_line_length,
                open_error=e,
            )
        return cls(handle, owns_stream=True, name=path, max_line_length=max_line_length)

    @property
    def is_usable(self) -> bool:
        return self._stream is not None and not self._closed

    @property
    def owns_stream(self) -> bool:
        return self._owns_stream

    def read_line(self) -> bytes | None:
        """Return the next line without its terminator, or None at end-of-stream.

        A line reaching ``max_line_length`` bytes is delivered truncated and
        the remainder of that physical line is discarded.
        """
        if self._stream is None or self._closed:
            return None

        raw = self._stream.readline(self.max_line_length)
        if not raw:
            return None

        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        elif len(raw) >= self.max_line_length:
            self._discard_rest_of_line()
            logger.debug("Truncated line at %d bytes", self.max_line_length)

        return raw

    def _discard_rest_of_line(self) -> None:
        assert self._stream is not None
        while True:
            chunk = self._stream.readline(_DISCARD_CHUNK_SIZE)
            if not chunk or chunk.endswith(b"\n"):
                return

    def close(self) -> None:
        """Release the stream if owned; later calls are no-ops."""

        if self._closed:
            return
        self._closed = True
        if self._owns_stream and self._stream is not None:
            self._stream.close()

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line

    def __enter__(self) -> "InputSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["InputSource", "STDIN_PATH"]
