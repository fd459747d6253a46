"""Reading and writing puzzles.

The text format is the one produced by ``Grid.serialize``: the first line
holds the subgrid width and height, the following lines hold the grid rows::

    2 2
    +-----+-----+
    | 0 0 | 0 3 |
    | 0 1 | 0 4 |
    +-----+-----+
    | 4 2 | 3 1 |
    | 1 3 | 4 2 |
    +-----+-----+

Parsing is tolerant: numbers may be separated by anything that is not a
digit and lines without digits are skipped, so this works too::

    2x2 :)
    0 0 0 3
    0 1 0 4
    4 2 3 1
    1 3 4 2
    some random comment not containing digits

Puzzles can also be stored as YAML::

    subgrid: [2, 2]
    rows:
      - [0, 0, 0, 3]
      - 0 1 0 4
      - 4 2 3 1
      - 1 3 4 2
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable, List, Optional, TextIO

import yaml

from ..core.errors import InvalidDimensions, ParseError
from ..core.grid import Grid

_NUMBER = re.compile(r"[0-9]+")

YAML_SUFFIXES = (".yaml", ".yml")


def _to_int(text: str, line_number: Optional[int] = None, line: Optional[str] = None) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise ParseError(f"error parsing number {text[:20]}...", line_number, line) from exc


def read_grid(lines: Iterable[str]) -> Grid:
    """Build a grid from the text format, one item of ``lines`` per line."""
    numbered = enumerate(lines, start=1)
    try:
        line_number, header = next(numbered)
    except StopIteration:
        raise ParseError("no data") from None
    numbers = _NUMBER.findall(header)
    if len(numbers) != 2:
        raise ParseError(f"expected 2 numbers, got {len(numbers)}", line_number, header)
    try:
        grid = Grid(_to_int(numbers[0], line_number, header), _to_int(numbers[1], line_number, header))
    except InvalidDimensions as exc:
        raise ParseError(f"error creating grid: {exc}", line_number, header) from exc

    y = 0
    for line_number, line in numbered:
        numbers = _NUMBER.findall(line)
        if not numbers:
            continue
        # checked this late because trailing lines without numbers are fine
        if y >= grid.size:
            raise ParseError(f"too many grid lines, expected {grid.size}", line_number, line)
        if len(numbers) != grid.size:
            raise ParseError(f"expected {grid.size} numbers, got {len(numbers)}", line_number, line)
        for x, text in enumerate(numbers):
            n = _to_int(text, line_number, line)
            if n > grid.size:
                raise ParseError(f"invalid number {n}", line_number, line)
            grid.set(x, y, n)
        y += 1
    if y != grid.size:
        raise ParseError(f"invalid number of grid lines, expected {grid.size}, got {y}")
    return grid


def parse_grid(text: str) -> Grid:
    return read_grid(text.splitlines())


def grid_from_mapping(data: Any) -> Grid:
    """Build a grid from a loaded YAML document."""
    if not isinstance(data, dict):
        raise ParseError("puzzle must be a mapping with 'subgrid' and 'rows'")
    try:
        width, height = (int(v) for v in data["subgrid"])
        raw_rows = list(data["rows"])
    except KeyError as exc:
        raise ParseError(f"missing key {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise ParseError(f"invalid puzzle header: {exc}") from exc
    try:
        grid = Grid(width, height)
    except InvalidDimensions as exc:
        raise ParseError(f"error creating grid: {exc}") from exc

    rows: List[List[int]] = []
    for y, row in enumerate(raw_rows):
        if isinstance(row, str):
            values = [_to_int(t) for t in _NUMBER.findall(row)]
        elif isinstance(row, list) and all(isinstance(v, int) and not isinstance(v, bool) for v in row):
            values = list(row)
        else:
            raise ParseError(f"row {y} must be a list of integers or a string, got {row!r}")
        if any(not 0 <= v <= grid.size for v in values):
            raise ParseError(f"row {y} holds a number outside of 0..{grid.size}: {row!r}")
        rows.append(values)
    try:
        return Grid.from_rows(width, height, rows)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def load_grid(path: str | Path) -> Grid:
    """Load a puzzle file; YAML is picked by the file extension."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix.lower() in YAML_SUFFIXES:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as exc:
                    raise ParseError(f"invalid YAML in {path}: {exc}") from exc
                return grid_from_mapping(data)
            return read_grid(f)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{path} is not valid UTF-8: {exc}") from exc


def dump_grid(grid: Grid) -> str:
    return grid.serialize()


def write_grid(grid: Grid, stream: TextIO) -> None:
    stream.write(grid.serialize())
