"""Solver registry and the interface every search strategy implements."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional, Type

from ..core.bounded_set import BoundedSet
from ..core.errors import GroupConflict
from ..core.grid import Grid


class SearchState(str, Enum):
    """Where a solver is in its enumeration."""
    READY = "ready"
    SEARCHING = "searching"
    SOLUTION_FOUND = "solution_found"
    EXHAUSTED = "exhausted"


class Solver:
    """Base search strategy.

    ``reset`` loads a puzzle, then each ``next_solution`` call returns a new
    completion of it until ``None`` signals that there are no more. Returned
    grids are independent copies.
    """
    name: str = "solver"

    def __init__(self) -> None:
        self.state = SearchState.EXHAUSTED

    def reset(self, grid: Grid) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def next_solution(self) -> Optional[Grid]:  # pragma: no cover - interface
        raise NotImplementedError

    def solutions(self, limit: int = 0) -> Iterator[Grid]:
        """Yield solutions of the current puzzle; ``limit`` 0 means all."""
        found = 0
        while not limit or found < limit:
            solution = self.next_solution()
            if solution is None:
                return
            found += 1
            yield solution


SOLVER_REGISTRY: Dict[str, Type[Solver]] = {}


def register_solver(cls: Type[Solver]) -> Type[Solver]:
    SOLVER_REGISTRY[cls.name] = cls
    return cls


def get_solver(name: str) -> Solver:
    try:
        cls = SOLVER_REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown solver {name!r}, expected one of {sorted(SOLVER_REGISTRY)}") from None
    return cls()


def validate_grid(grid: Grid, allow_empty: bool = True) -> None:
    """Raise ``GroupConflict`` if a number repeats in a row/column/subgrid.

    With ``allow_empty=False`` an empty cell is a conflict as well, which
    turns this into a check for a finished solution.
    """
    seen = BoundedSet(grid.size)

    def check(x: int, y: int, n: int) -> None:
        if n == 0:
            if allow_empty:
                return
            raise GroupConflict(x, y, n, "is empty")
        if not seen.add(n):
            raise GroupConflict(x, y, n)

    grid.validate(check, seen.clear)


from . import bruteforce, smart_backtrack  # noqa: E402,F401  (populate registry)
