"""Depth-first search with the minimum-remaining-values heuristic.

The search is not recursive. Two stacks hold its history:

* ``made`` - numbers the solver put on the board, in order;
* ``leftover`` - numbers that were legal for a cell when it was filled but
  were not picked, i.e. the branches still to explore.

Each step takes the empty cell with the fewest legal numbers from the
candidate index, fills in its smallest candidate, pushes the other
candidates to ``leftover`` and strikes the number from the candidates of
the cell's peers. A cell with no candidates means a dead end: the last
leftover choice is popped, every made choice back to its cell is undone
and the cell gets the leftover number instead. Because the whole history
is explicit, finding a solution does not lose the search position and the
next call simply continues from the next leftover choice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..core.bounded_set import BoundedSet
from ..core.candidates import CandidateIndex, FieldToFill
from ..core.errors import GroupConflict
from ..core.grid import Grid
from . import SearchState, Solver, register_solver, validate_grid

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Choice:
    x: int
    y: int
    number: int


@register_solver
class SmartBacktrackSolver(Solver):
    name = "smart"

    def __init__(self) -> None:
        super().__init__()
        self._grid: Optional[Grid] = None
        self._fields = CandidateIndex()
        self._leftover: List[Choice] = []
        self._made: List[Choice] = []

    def reset(self, grid: Grid) -> None:
        self._fields = CandidateIndex()
        self._leftover = []
        self._made = []
        try:
            validate_grid(grid)
        except GroupConflict as exc:
            log.debug("puzzle rejected: %s", exc)
            self._grid = None
            self.state = SearchState.EXHAUSTED
            return
        self._grid = grid.copy()
        self._fields = CandidateIndex(
            FieldToFill(x, y, self._possible_numbers(x, y)) for x, y in self._grid.empty_cells()
        )
        log.debug("reset %dx%d grid with %d cells to fill", grid.size, grid.size, len(self._fields))
        self.state = SearchState.READY

    def next_solution(self) -> Optional[Grid]:
        if self.state is SearchState.EXHAUSTED:
            return None
        self.state = SearchState.SEARCHING
        while self._fields:
            field = self._fields.peek()
            if not field.candidates:
                if self._backtrack():
                    continue
                log.debug("search space exhausted")
                self.state = SearchState.EXHAUSTED
                return None
            self._fields.pop()
            self._set_number(field.x, field.y, self._pick_first_available(field))
        self.state = SearchState.SOLUTION_FOUND
        solution = self._grid.copy()
        # move on to the next unexplored branch so the following call can continue
        if not self._backtrack():
            log.debug("last solution found")
            self.state = SearchState.EXHAUSTED
        return solution

    def _pick_first_available(self, field: FieldToFill) -> int:
        numbers = iter(field.candidates)
        chosen = next(numbers)
        for n in numbers:
            self._leftover.append(Choice(field.x, field.y, n))
        return chosen

    def _set_number(self, x: int, y: int, n: int) -> None:
        self._grid.set(x, y, n)
        self._made.append(Choice(x, y, n))
        changed = False
        for f in self._fields:
            if f.x == x or f.y == y or self._grid.have_common_subgrid(x, y, f.x, f.y):
                changed = f.candidates.remove(n) or changed
        if changed:
            self._fields.heapify()

    def _backtrack(self) -> bool:
        if not self._leftover:
            return False
        choice = self._leftover.pop()
        for i in range(len(self._made) - 1, -1, -1):
            made = self._made[i]
            if made.x == choice.x and made.y == choice.y:
                if choice.number not in self._possible_numbers(made.x, made.y):
                    raise RuntimeError(
                        f"leftover number {choice.number} is not legal at ({made.x}, {made.y})"
                    )
                self._grid.set(made.x, made.y, choice.number)
                self._restore_fields(self._made[i + 1:])
                del self._made[i:]
                self._made.append(choice)
                return True
            self._grid.set(made.x, made.y, 0)
        raise RuntimeError(f"no made choice for leftover cell ({choice.x}, {choice.y})")

    def _restore_fields(self, reverted: List[Choice]) -> None:
        """Rebuild candidates after ``reverted`` were cleared from the board.

        The cell being backtracked to is not put back: its remaining
        alternatives already sit on the leftover stack.
        """
        for f in self._fields:
            f.candidates = self._possible_numbers(f.x, f.y)
        for c in reverted:
            self._fields.push(FieldToFill(c.x, c.y, self._possible_numbers(c.x, c.y)))
        self._fields.heapify()

    def _possible_numbers(self, x: int, y: int) -> BoundedSet:
        forbidden = BoundedSet(self._grid.size)
        for px, py in self._grid.peers(x, y):
            n = self._grid.get(px, py)
            if n:
                forbidden.add(n)
        return forbidden.complement()
