"""Tile movement rules for the 2048 board."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum

Cell = tuple[int, int]


class Direction(Enum):
    """A move direction, valued by the final byte of its arrow-key escape sequence."""

    UP = "A"
    DOWN = "B"
    RIGHT = "C"
    LEFT = "D"


def _collapse(values: Sequence[int]) -> tuple[list[int], int]:
    """Pack the tiles of one line toward its front and merge equal neighbours once."""
    merged: list[int] = []
    points = 0
    pending: int | None = None
    for value in (v for v in values if v):
        if pending is None:
            pending = value
        elif pending == value:
            merged.append(pending * 2)
            points += pending * 2
            pending = None
        else:
            merged.append(pending)
            pending = value
    if pending is not None:
        merged.append(pending)
    merged.extend([0] * (len(values) - len(merged)))
    return merged, points


class Movement(ABC):
    """Shifts and merges tiles in one direction, keeping a running total of points."""

    def __init__(self) -> None:
        self.points = 0

    @abstractmethod
    def move_tiles(self, grid: list[list[int]]) -> int:
        """Move the tiles of ``grid`` in place and return the points scored so far."""

    def _slide(self, grid: list[list[int]], lines: Iterable[list[Cell]]) -> int:
        for line in lines:
            values, gained = _collapse([grid[r][c] for r, c in line])
            for (r, c), value in zip(line, values):
                grid[r][c] = value
            self.points += gained
        return self.points


def _size(grid: list[list[int]]) -> tuple[int, int]:
    return len(grid), (len(grid[0]) if grid else 0)


class Up(Movement):
    """Moves every tile toward the top row."""

    def move_tiles(self, grid: list[list[int]]) -> int:
        rows, cols = _size(grid)
        lines = ([(r, c) for r in range(rows)] for c in range(cols))
        return self._slide(grid, lines)


class Down(Movement):
    """Moves every tile toward the bottom row."""

    def move_tiles(self, grid: list[list[int]]) -> int:
        rows, cols = _size(grid)
        lines = ([(r, c) for r in reversed(range(rows))] for c in range(cols))
        return self._slide(grid, lines)


class Left(Movement):
    """Moves every tile toward the left column."""

    def move_tiles(self, grid: list[list[int]]) -> int:
        rows, cols = _size(grid)
        lines = ([(r, c) for c in range(cols)] for r in range(rows))
        return self._slide(grid, lines)


class Right(Movement):
    """Moves every tile toward the right column."""

    def move_tiles(self, grid: list[list[int]]) -> int:
        rows, cols = _size(grid)
        lines = ([(r, c) for c in reversed(range(cols))] for r in range(rows))
        return self._slide(grid, lines)


_MOVEMENTS: dict[Direction, type[Movement]] = {
    Direction.UP: Up,
    Direction.DOWN: Down,
    Direction.LEFT: Left,
    Direction.RIGHT: Right,
}


def movement_for(direction: Direction | str) -> Movement:
    """Return a fresh movement for ``direction``; raises ValueError if it is unknown."""
    return _MOVEMENTS[Direction(direction)]()