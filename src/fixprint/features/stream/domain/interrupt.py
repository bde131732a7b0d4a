"""Summary: Process-wide interrupt request flag observed by the stream loop.
Why: Give signal delivery and the loop one well-defined shared boolean.
"""

from __future__ import annotations

import threading
from typing import final


@final
class InterruptFlag:
    """Boolean set asynchronously by signal handlers and read by the loop.

    Backed by ``threading.Event`` so writes are visible to the reader without
    an explicit lock.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def request(self) -> None:
        """Mark an interrupt as requested."""
        self._event.set()

    @property
    def is_requested(self) -> bool:
        return self._event.is_set()

    def clear(self) -> None:
        self._event.clear()


__all__ = ["InterruptFlag"]
