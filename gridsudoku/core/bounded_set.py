"""Presence set over the integers ``1..max_number``.

The values stored by the solver are small and dense (usually 1-9, rarely
more than 25), so a flat list of flags plus a cached count beats a hash
based ``set`` on the hot path of candidate recomputation.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List


class BoundedSet:
    __slots__ = ("_flags", "_count")

    def __init__(self, max_number: int, values: Iterable[int] = ()) -> None:
        if max_number < 0:
            raise ValueError(f"max_number must not be negative, got {max_number}")
        self._flags: List[bool] = [False] * max_number
        self._count = 0
        for n in values:
            self.add(n)

    @classmethod
    def full(cls, max_number: int) -> "BoundedSet":
        s = cls(max_number)
        s._flags = [True] * max_number
        s._count = max_number
        return s

    @property
    def max_number(self) -> int:
        return len(self._flags)

    def _index(self, n: int) -> int:
        if not 1 <= n <= len(self._flags):
            raise IndexError(f"{n} is outside of 1..{len(self._flags)}")
        return n - 1

    def add(self, n: int) -> bool:
        """Insert ``n``; return True if it was not present before."""
        i = self._index(n)
        if self._flags[i]:
            return False
        self._flags[i] = True
        self._count += 1
        return True

    def remove(self, n: int) -> bool:
        """Drop ``n``; return True if it was present."""
        i = self._index(n)
        if not self._flags[i]:
            return False
        self._flags[i] = False
        self._count -= 1
        return True

    def contains(self, n: int) -> bool:
        return self._flags[self._index(n)]

    __contains__ = contains

    def clear(self) -> None:
        for i in range(len(self._flags)):
            self._flags[i] = False
        self._count = 0

    def copy(self) -> "BoundedSet":
        other = BoundedSet(0)
        other._flags = list(self._flags)
        other._count = self._count
        return other

    def complement(self) -> "BoundedSet":
        """Every valid number that is absent from this set."""
        other = BoundedSet(0)
        other._flags = [not f for f in self._flags]
        other._count = len(self._flags) - self._count
        return other

    def _check_compatible(self, other: "BoundedSet") -> None:
        if other.max_number != self.max_number:
            raise ValueError(
                f"sets have different bounds: {self.max_number} and {other.max_number}"
            )

    def union(self, other: "BoundedSet") -> "BoundedSet":
        return union(self, other)

    def intersection(self, other: "BoundedSet") -> "BoundedSet":
        return intersection(self, other)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for i, present in enumerate(self._flags):
            if present:
                yield i + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedSet):
            return NotImplemented
        return self._flags == other._flags

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"BoundedSet({self.max_number}, {list(self)})"


def _combine(sets: tuple, pick) -> BoundedSet:
    if not sets:
        raise ValueError("at least one set is required")
    first = sets[0]
    for s in sets[1:]:
        first._check_compatible(s)
    result = BoundedSet(0)
    result._flags = [pick(flags) for flags in zip(*(s._flags for s in sets))]
    result._count = sum(result._flags)
    return result


def union(*sets: BoundedSet) -> BoundedSet:
    """Numbers present in any of ``sets``; all must share ``max_number``."""
    return _combine(sets, any)


def intersection(*sets: BoundedSet) -> BoundedSet:
    """Numbers present in every one of ``sets``; all must share ``max_number``."""
    return _combine(sets, all)
