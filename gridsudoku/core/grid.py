"""Square puzzle grid split into equal rectangular subgrids.

A grid built from subgrid width ``w`` and height ``h`` is always
``w*h`` cells wide and tall, e.g. subgrid 3x2 gives a 6x6 grid::

    +-------+-------+
    | 0 0 0 | 0 0 0 |
    | 0 0 0 | 0 0 0 |
    +-------+-------+
    | 0 0 0 | 0 0 0 |
    | 0 0 0 | 0 0 0 |
    +-------+-------+
    | 0 0 0 | 0 0 0 |
    | 0 0 0 | 0 0 0 |
    +-------+-------+

Cells are addressed as ``(x, y)``: ``x`` is the column, ``y`` the row.
A value of 0 marks an empty cell.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Sequence, Tuple

from .errors import InvalidDimensions

MAX_SIZE = 65535

Cell = Tuple[int, int]
Visit = Callable[[int, int], None]
CellCheck = Callable[[int, int, int], None]


class Grid:
    __slots__ = ("_data", "_subgrid_width", "_subgrid_height", "_size")

    def __init__(self, subgrid_width: int, subgrid_height: int) -> None:
        if subgrid_width < 1 or subgrid_height < 1:
            raise InvalidDimensions(
                f"subgrid sizes must be at least 1, got {subgrid_width}, {subgrid_height}"
            )
        size = subgrid_width * subgrid_height
        if size > MAX_SIZE:
            raise InvalidDimensions(f"grid size ({size}) > max available grid size ({MAX_SIZE})")
        self._subgrid_width = subgrid_width
        self._subgrid_height = subgrid_height
        self._size = size
        self._data: List[int] = [0] * (size * size)

    @classmethod
    def from_rows(cls, subgrid_width: int, subgrid_height: int, rows: Sequence[Sequence[int]]) -> "Grid":
        grid = cls(subgrid_width, subgrid_height)
        if len(rows) != grid.size:
            raise ValueError(f"expected {grid.size} rows, got {len(rows)}")
        for y, row in enumerate(rows):
            if len(row) != grid.size:
                raise ValueError(f"expected {grid.size} numbers in row {y}, got {len(row)}")
            for x, value in enumerate(row):
                grid.set(x, y, value)
        return grid

    @property
    def size(self) -> int:
        return self._size

    @property
    def subgrid_width(self) -> int:
        return self._subgrid_width

    @property
    def subgrid_height(self) -> int:
        return self._subgrid_height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._size and 0 <= y < self._size):
            raise IndexError(f"cell ({x}, {y}) is outside of {self._size}x{self._size} grid")
        return y * self._size + x

    def get(self, x: int, y: int) -> int:
        return self._data[self._offset(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        if not 0 <= value <= self._size:
            raise ValueError(f"cannot set value {value} for grid with size {self._size}")
        self._data[self._offset(x, y)] = value

    def copy(self) -> "Grid":
        other = Grid.__new__(Grid)
        other._subgrid_width = self._subgrid_width
        other._subgrid_height = self._subgrid_height
        other._size = self._size
        other._data = list(self._data)
        return other

    def rows(self) -> List[List[int]]:
        n = self._size
        return [self._data[y * n:(y + 1) * n] for y in range(n)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._subgrid_width == other._subgrid_width
            and self._subgrid_height == other._subgrid_height
            and self._data == other._data
        )

    __hash__ = None  # mutable

    def equal(self, other: "Grid") -> bool:
        return self == other

    # -- group iteration ---------------------------------------------------

    def row(self, y: int) -> Iterator[Cell]:
        for x in range(self._size):
            yield x, y

    def column(self, x: int) -> Iterator[Cell]:
        for y in range(self._size):
            yield x, y

    def subgrid(self, x: int, y: int) -> Iterator[Cell]:
        """Cells of the subgrid containing ``(x, y)``, row-major."""
        begin_x = x - x % self._subgrid_width
        begin_y = y - y % self._subgrid_height
        for dy in range(self._subgrid_height):
            for dx in range(self._subgrid_width):
                yield begin_x + dx, begin_y + dy

    def peers(self, x: int, y: int) -> Iterator[Cell]:
        """Cells sharing a row, column or subgrid with ``(x, y)``.

        Each peer is yielded once and ``(x, y)`` itself is skipped.
        """
        for px, py in self.row(y):
            if px != x:
                yield px, py
        for px, py in self.column(x):
            if py != y:
                yield px, py
        for px, py in self.subgrid(x, y):
            if px != x and py != y:
                yield px, py

    def empty_cells(self) -> Iterator[Cell]:
        n = self._size
        for offset, value in enumerate(self._data):
            if value == 0:
                yield offset % n, offset // n

    def for_each_in_row(self, y: int, visit: Visit) -> None:
        for cx, cy in self.row(y):
            visit(cx, cy)

    def for_each_in_column(self, x: int, visit: Visit) -> None:
        for cx, cy in self.column(x):
            visit(cx, cy)

    def for_each_in_subgrid(self, x: int, y: int, visit: Visit) -> None:
        for cx, cy in self.subgrid(x, y):
            visit(cx, cy)

    def for_each_peer(self, x: int, y: int, visit: Visit) -> None:
        for cx, cy in self.peers(x, y):
            visit(cx, cy)

    def for_each(self, visit: Callable[[int, int, int], None]) -> None:
        n = self._size
        for offset, value in enumerate(self._data):
            visit(offset % n, offset // n, value)

    def have_common_subgrid(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        return (
            x1 // self._subgrid_width == x2 // self._subgrid_width
            and y1 // self._subgrid_height == y2 // self._subgrid_height
        )

    def groups(self) -> Iterator[List[Cell]]:
        """Every row, then every column, then every subgrid."""
        for y in range(self._size):
            yield list(self.row(y))
        for x in range(self._size):
            yield list(self.column(x))
        for y in range(0, self._size, self._subgrid_height):
            for x in range(0, self._size, self._subgrid_width):
                yield list(self.subgrid(x, y))

    def validate(self, check: CellCheck, on_group_end: Callable[[], None]) -> None:
        """Run ``check(x, y, value)`` over every cell of every group.

        ``on_group_end`` is called after each group so the caller can reset
        whatever it accumulates per group. The first exception raised by
        ``check`` (normally ``GroupConflict``) propagates and ends the pass.
        """
        for group in self.groups():
            for x, y in group:
                check(x, y, self._data[y * self._size + x])
            on_group_end()

    # -- rendering ---------------------------------------------------------

    def __str__(self) -> str:
        digit_len = len(str(self._size))
        chars_per_subgrid = self._subgrid_width + 1 + self._subgrid_width * digit_len
        subgrids_across = self._size // self._subgrid_width
        separator = "+" + "+".join("-" * chars_per_subgrid for _ in range(subgrids_across)) + "+\n"
        parts: List[str] = []
        for y in range(self._size):
            if y % self._subgrid_height == 0:
                parts.append(separator)
            for x in range(self._size):
                if x % self._subgrid_width == 0:
                    parts.append("| ")
                parts.append(f"{self._data[y * self._size + x]:>{digit_len}} ")
            parts.append("|\n")
        parts.append(separator)
        return "".join(parts)

    def serialize(self) -> str:
        """Header line with the subgrid sizes followed by ``str(self)``."""
        return f"{self._subgrid_width} {self._subgrid_height}\n{self}"

    def __repr__(self) -> str:
        return f"Grid({self._subgrid_width}, {self._subgrid_height}, {self.rows()!r})"
