"""Summary: Route SIGINT/SIGTERM into an interrupt flag for the duration of a run.
Why: Let the stream loop stop cleanly between lines instead of unwinding mid-read.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from types import FrameType
from typing import Any

from fixprint.features.stream.domain.interrupt import InterruptFlag
from fixprint.platform.logging import logger

DEFAULT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


@contextmanager
def handle_interrupts(
    flag: InterruptFlag,
    signals: Sequence[signal.Signals] = DEFAULT_SIGNALS,
) -> Iterator[InterruptFlag]:
    """Install handlers that set ``flag``; restore the previous ones on exit.

    Args:
        flag: Flag to set when one of ``signals`` is delivered.
        signals: Signals to intercept.

    Yields:
        InterruptFlag: The same ``flag``, for convenience.
    """

    def _handler(signum: int, _frame: FrameType | None) -> None:
        flag.request()

    previous: dict[signal.Signals, Any] = {}
    try:
        for sig in signals:
            previous[sig] = signal.signal(sig, _handler)
            logger.debug("Installed interrupt handler for %s", sig.name)
        yield flag
    finally:
        for sig, handler in previous.items():
            _ = signal.signal(sig, handler)


__all__ = ["DEFAULT_SIGNALS", "handle_interrupts"]
