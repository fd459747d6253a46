"""Priority queue of empty cells keyed by how many numbers still fit."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .bounded_set import BoundedSet


@dataclass(eq=False)
class FieldToFill:
    """An empty cell together with the numbers currently legal for it."""
    x: int
    y: int
    candidates: BoundedSet

    def __lt__(self, other: "FieldToFill") -> bool:
        return len(self.candidates) < len(other.candidates)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y}) {list(self.candidates)}"


class CandidateIndex:
    """Min-heap of ``FieldToFill`` ordered by candidate count.

    Candidate sets are mutated in place by the solver, which does not go
    through the heap, so ``heapify`` must be called after any change that
    can affect the order and before the next ``peek``/``pop``.
    """

    def __init__(self, fields: Iterable[FieldToFill] = ()) -> None:
        self._heap: List[FieldToFill] = list(fields)
        heapq.heapify(self._heap)

    def push(self, field: FieldToFill) -> None:
        heapq.heappush(self._heap, field)

    def peek(self) -> FieldToFill:
        return self._heap[0]

    def pop(self) -> FieldToFill:
        return heapq.heappop(self._heap)

    def remove_at(self, i: int) -> FieldToFill:
        last = self._heap.pop()
        if i == len(self._heap):
            return last
        removed = self._heap[i]
        self._heap[i] = last
        heapq.heapify(self._heap)
        return removed

    def heapify(self) -> None:
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[FieldToFill]:
        return iter(self._heap)
