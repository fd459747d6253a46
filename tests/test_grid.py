import pytest

from gridsudoku.core.bounded_set import BoundedSet
from gridsudoku.core.errors import GroupConflict, InvalidDimensions
from gridsudoku.core.grid import MAX_SIZE, Grid

GRID_3X2_ZEROS = """\
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
"""

GRID_3X2_SUBGRIDS_FILLED = """\
+-------+-------+
| 0 0 0 | 2 2 2 |
| 0 0 0 | 2 2 2 |
+-------+-------+
| 1 1 1 | 0 0 0 |
| 1 1 1 | 0 0 0 |
+-------+-------+
| 0 0 0 | 0 0 0 |
| 0 0 0 | 0 0 0 |
+-------+-------+
"""

GRID_3X2_PEERS_FILLED = """\
+-------+-------+
| 0 0 1 | 0 0 0 |
| 0 0 1 | 0 0 0 |
+-------+-------+
| 1 1 1 | 0 0 0 |
| 1 1 0 | 1 1 1 |
+-------+-------+
| 0 0 1 | 0 0 0 |
| 0 0 1 | 0 0 0 |
+-------+-------+
"""


def test_sizes_are_limited():
    with pytest.raises(InvalidDimensions):
        Grid(MAX_SIZE + 1, 1)
    with pytest.raises(InvalidDimensions):
        Grid(MAX_SIZE - 1, MAX_SIZE - 1)
    with pytest.raises(InvalidDimensions):
        Grid(0, 3)
    with pytest.raises(InvalidDimensions):
        Grid(3, -1)


@pytest.mark.parametrize("width,height", [(1, 1), (2, 1), (1, 3), (2, 2), (3, 2), (3, 3), (4, 5)])
def test_new_grid_is_empty(width, height):
    grid = Grid(width, height)
    assert grid.size == width * height
    assert grid.rows() == [[0] * grid.size for _ in range(grid.size)]


def test_new_grid_renders_zeros():
    assert str(Grid(3, 2)) == GRID_3X2_ZEROS


def test_get_returns_value_set():
    grid = Grid(3, 2)
    grid.set(2, 1, 6)
    assert grid.get(2, 1) == 6
    assert grid.rows()[1] == [0, 0, 6, 0, 0, 0]


def test_set_rejects_values_outside_domain():
    grid = Grid(3, 2)
    with pytest.raises(ValueError):
        grid.set(2, 1, 7)
    with pytest.raises(ValueError):
        grid.set(2, 1, -1)
    with pytest.raises(IndexError):
        grid.set(6, 0, 1)
    with pytest.raises(IndexError):
        grid.get(0, -1)


def test_copy_is_independent_and_equal():
    grid = Grid(2, 2)
    grid.set(1, 1, 3)
    other = grid.copy()
    assert other == grid
    other.set(0, 0, 1)
    assert other != grid
    assert grid.get(0, 0) == 0


def test_equality_includes_dimensions():
    assert Grid(2, 1) != Grid(1, 2)
    assert Grid(2, 3) == Grid(2, 3)
    assert Grid(2, 3).equal(Grid(2, 3))


def test_for_each_in_subgrid():
    grid = Grid(3, 2)
    grid.for_each_in_subgrid(1, 3, lambda x, y: grid.set(x, y, 1))
    grid.for_each_in_subgrid(3, 0, lambda x, y: grid.set(x, y, 2))
    assert str(grid) == GRID_3X2_SUBGRIDS_FILLED


def test_for_each_peer_visits_every_peer_once():
    grid = Grid(3, 2)

    def visit(x, y):
        grid.set(x, y, 1 if grid.get(x, y) == 0 else 2)

    grid.for_each_peer(2, 3, visit)
    assert str(grid) == GRID_3X2_PEERS_FILLED


def test_visit_order():
    grid = Grid(3, 2)
    row, column, subgrid = [], [], []
    grid.for_each_in_row(4, lambda x, y: row.append((x, y)))
    grid.for_each_in_column(5, lambda x, y: column.append((x, y)))
    grid.for_each_in_subgrid(4, 3, lambda x, y: subgrid.append((x, y)))
    assert row == [(x, 4) for x in range(6)]
    assert column == [(5, y) for y in range(6)]
    assert subgrid == [(3, 2), (4, 2), (5, 2), (3, 3), (4, 3), (5, 3)]


def test_have_common_subgrid():
    grid = Grid(3, 3)
    assert grid.have_common_subgrid(0, 1, 2, 2)
    assert not grid.have_common_subgrid(0, 0, 3, 0)
    grid = Grid(3, 2)
    assert grid.have_common_subgrid(3, 2, 5, 3)
    assert not grid.have_common_subgrid(3, 1, 3, 2)


def test_validate_visits_rows_columns_then_subgrids():
    grid = Grid(2, 1)
    visited = []
    grid.validate(lambda x, y, n: visited.append((x, y)), lambda: visited.append("end"))
    assert visited == [
        (0, 0), (1, 0), "end",
        (0, 1), (1, 1), "end",
        (0, 0), (0, 1), "end",
        (1, 0), (1, 1), "end",
        (0, 0), (1, 0), "end",
        (0, 1), (1, 1), "end",
    ]


def test_validate_stops_at_first_conflict():
    grid = Grid(2, 2)
    grid.set(0, 0, 1)
    grid.set(1, 2, 1)
    grid.set(0, 3, 1)
    seen = BoundedSet(grid.size)
    groups = []

    def check(x, y, n):
        if n and not seen.add(n):
            raise GroupConflict(x, y, n)

    def group_end():
        groups.append(len(seen))
        seen.clear()

    with pytest.raises(GroupConflict) as info:
        grid.validate(check, group_end)
    assert (info.value.x, info.value.y, info.value.value) == (0, 3, 1)
    # every row passed, the first column failed
    assert len(groups) == 4


def test_serialize_adds_header():
    grid = Grid(2, 1)
    grid.set(0, 0, 2)
    assert grid.serialize() == "2 1\n+-----+\n| 2 0 |\n+-----+\n| 0 0 |\n+-----+\n"


def test_wide_numbers_are_right_aligned():
    grid = Grid(5, 2)
    grid.set(0, 0, 10)
    first_row = str(grid).splitlines()[1]
    assert first_row == "| 10  0  0  0  0 |  0  0  0  0  0 |"


def test_for_each_visits_row_major_with_values():
    grid = Grid(2, 1)
    grid.set(1, 0, 2)
    grid.set(0, 1, 1)
    visited = []
    grid.for_each(lambda x, y, n: visited.append((x, y, n)))
    assert visited == [(0, 0, 0), (1, 0, 2), (0, 1, 1), (1, 1, 0)]
