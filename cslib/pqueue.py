"""A queue that hands out values in priority order.

Lower priority numbers come out first, so priority 1 precedes priority 2.
Values with equal priority come out in the order they were enqueued.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterator
from typing import Any

__all__ = ["PriorityQueue", "EmptyQueueError"]


class EmptyQueueError(IndexError):
    """Raised when a value is requested from an empty queue."""


class PriorityQueue:
    """A min-priority queue with first-in-first-out ties."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Any]] = []
        self._sequence = 0

    def enqueue(self, value: Any, priority: float) -> None:
        """Add ``value`` with the given numeric priority."""
        heapq.heappush(self._heap, (float(priority), self._sequence, value))
        self._sequence += 1

    def dequeue(self) -> Any:
        """Remove and return the value with the lowest priority number."""
        if not self._heap:
            raise EmptyQueueError("dequeue: attempting to dequeue an empty queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Any:
        """Return the next value without removing it."""
        if not self._heap:
            raise EmptyQueueError("peek: attempting to peek at an empty queue")
        return self._heap[0][2]

    def peek_priority(self) -> float:
        """Return the priority of the next value without removing it."""
        if not self._heap:
            raise EmptyQueueError("peek_priority: attempting to peek at an empty queue")
        return self._heap[0][0]

    def clear(self) -> None:
        """Remove every value."""
        self._heap.clear()

    def clone(self) -> PriorityQueue:
        """Return a shallow copy; the values themselves are shared."""
        copy = PriorityQueue()
        copy._heap = list(self._heap)
        copy._sequence = self._sequence
        return copy

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in dequeue order without removing them."""
        return (value for _, _, value in sorted(self._heap))

    def __repr__(self) -> str:
        entries = ", ".join(f"({value!r}, {priority!r})" for priority, _, value in sorted(self._heap))
        return f"PriorityQueue([{entries}])"