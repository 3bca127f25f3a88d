"""Min-priority queue used by the A* search."""

import itertools
from collections import Counter
from heapq import heappop, heappush
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class PriorityQueue(Generic[T]):
    """
    Binary-heap priority queue; the lowest priority is dequeued first.

    Ties are broken by insertion order. The same element may be enqueued
    several times with different priorities; older entries are not purged
    and simply come out later.

    contains() is a membership check for callers. The A* search does not
    use it: it re-enqueues a coordinate on every g-score improvement.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()
        self._members: Counter = Counter()

    def enqueue(self, element: T, priority: float) -> None:
        heappush(self._heap, (priority, next(self._counter), element))
        self._members[element] += 1

    def dequeue(self) -> T:
        """
        Remove and return the element with the lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("dequeue from empty priority queue")
        _, _, element = heappop(self._heap)
        self._members[element] -= 1
        if not self._members[element]:
            del self._members[element]
        return element

    def is_empty(self) -> bool:
        return not self._heap

    def contains(self, element: T) -> bool:
        """Check membership by element equality, ignoring priority."""
        return element in self._members

    def __len__(self) -> int:
        return len(self._heap)
