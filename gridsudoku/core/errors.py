"""Exceptions shared by the grid model, the solvers and the loaders."""

from __future__ import annotations

from typing import Optional


class InvalidDimensions(ValueError):
    """Raised when a grid cannot be built with the requested subgrid sizes."""


class ParseError(ValueError):
    """Malformed puzzle or config input."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        text = message
        if line_number is not None:
            text = f"line {line_number}: {text}"
        if line is not None:
            text = f"{text}: {line.rstrip()!r}"
        super().__init__(text)


class GroupConflict(Exception):
    """Raised by validation callbacks to stop ``Grid.validate`` early."""

    def __init__(self, x: int, y: int, value: int, reason: str = "repeated in row/column/subgrid") -> None:
        self.x = x
        self.y = y
        self.value = value
        super().__init__(f"number {value} at ({x}, {y}) {reason}")
