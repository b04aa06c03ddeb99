"""
Priority Frontier
=================

Min-heap of pending (state, predecessor, cost) entries.

Ordering comes solely from the caller's ``less`` over costs. The frontier
knows nothing about the search: it never deduplicates, so several entries
for the same state may be queued at once, and entries of equal cost come
out in whatever order the heap yields them.
"""

import heapq
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional


@dataclass(frozen=True)
class FrontierEntry:
    """A candidate waiting to be finalized."""

    state: Hashable
    prev: Optional[Hashable]
    cost: Any


class _Ranked:
    """Heap slot that compares entries through the caller's ``less``."""

    __slots__ = ("entry", "less")

    def __init__(self, entry: FrontierEntry, less: Callable[[Any, Any], bool]):
        self.entry = entry
        self.less = less

    def __lt__(self, other: "_Ranked") -> bool:
        return bool(self.less(self.entry.cost, other.entry.cost))


class PriorityFrontier:
    """
    Mutable min-heap ordered by ``less(cost_a, cost_b)``.

    Example
    -------
    >>> frontier = PriorityFrontier(lambda a, b: a < b)
    >>> frontier.push("b", None, 2)
    >>> frontier.push("a", "b", 1)
    >>> frontier.pop().state
    'a'
    """

    def __init__(self, less: Callable[[Any, Any], bool]):
        self._less = less
        self._heap: list[_Ranked] = []

    def push(self, state: Hashable, prev: Optional[Hashable], cost: Any) -> None:
        """Queue an entry in O(log n)."""
        heapq.heappush(self._heap, _Ranked(FrontierEntry(state, prev, cost), self._less))

    def pop(self) -> FrontierEntry:
        """
        Remove and return the cheapest entry in O(log n).

        Raises
        ------
        IndexError
            If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap).entry

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityFrontier(size={len(self._heap)})"
