"""Summary: Count decoded messages per type tag in first-seen order.
Why: Feed the end-of-run report without retaining the messages themselves.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import final


@final
class SummaryAggregator:
    """Mapping from message type tag to occurrence count.

    Entries are only ever added or incremented, and iteration follows the
    order in which each tag was first recorded.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def record(self, tag: str) -> None:
        """Increment the count for ``tag``, creating it with 1 if unseen."""

        self._counts[tag] = self._counts.get(tag, 0) + 1

    def entries(self) -> Iterator[tuple[str, int]]:
        """Yield ``(tag, count)`` pairs in first-seen order."""

        yield from self._counts.items()

    def count(self, tag: str) -> int:
        return self._counts.get(tag, 0)

    @property
    def total(self) -> int:
        """Sum of all counts; equals the number of recorded messages."""

        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, tag: object) -> bool:
        return tag in self._counts


__all__ = ["SummaryAggregator"]
