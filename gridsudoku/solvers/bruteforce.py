"""Naive exhaustive search, kept as a reference to check other solvers against.

Every combination of numbers for the initially empty cells is tried in
lexicographic order and the full grid is validated afterwards. This is
only practical for tiny puzzles.
"""

from __future__ import annotations

import itertools
from typing import Iterator, List, Optional

from ..core.errors import GroupConflict
from ..core.grid import Cell, Grid
from . import SearchState, Solver, register_solver, validate_grid


@register_solver
class BruteforceSolver(Solver):
    name = "bruteforce"

    def __init__(self) -> None:
        super().__init__()
        self._grid: Optional[Grid] = None
        self._cells: List[Cell] = []
        self._pending: Iterator[Grid] = iter(())

    def reset(self, grid: Grid) -> None:
        self._grid = grid.copy()
        self._cells = list(grid.empty_cells())
        try:
            validate_grid(grid)
        except GroupConflict:
            self._pending = iter(())
            self.state = SearchState.EXHAUSTED
            return
        self._pending = self._search()
        self.state = SearchState.READY

    def next_solution(self) -> Optional[Grid]:
        if self.state is SearchState.EXHAUSTED:
            return None
        self.state = SearchState.SEARCHING
        solution = next(self._pending, None)
        if solution is None:
            self.state = SearchState.EXHAUSTED
        else:
            self.state = SearchState.SOLUTION_FOUND
        return solution

    def _search(self) -> Iterator[Grid]:
        numbers = range(1, self._grid.size + 1)
        for values in itertools.product(numbers, repeat=len(self._cells)):
            for (x, y), n in zip(self._cells, values):
                self._grid.set(x, y, n)
            if self._is_solved():
                yield self._grid.copy()

    def _is_solved(self) -> bool:
        try:
            validate_grid(self._grid, allow_empty=False)
        except GroupConflict:
            return False
        return True
