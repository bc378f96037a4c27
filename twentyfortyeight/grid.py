"""The 2048 board: tiles, score keeping, tile spawning and rendering."""

from __future__ import annotations

import random
from collections.abc import Sequence

from twentyfortyeight.movement import Direction, movement_for

WINNING_TILE = 2048
_ESCAPE = "\x1b"
_CSI = "["


def parse_arrow_key(keys: str) -> Direction | None:
    """Map an arrow-key escape sequence such as ``"\\x1b[A"`` to a direction.

    Returns None when ``keys`` is not an arrow key.
    """
    if len(keys) < 3 or keys[0] != _ESCAPE or keys[1] != _CSI:
        return None
    try:
        return Direction(keys[2])
    except ValueError:
        return None


class Grid:
    """A board of tiles together with the current score, move count and high score."""

    def __init__(
        self,
        rows: int = 4,
        cols: int = 4,
        highscore: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("a grid needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self.highscore = highscore
        self.score = 0
        self.move_num = 0
        self.rng = rng if rng is not None else random.Random()
        self.cells: list[list[int]] = [[0] * cols for _ in range(rows)]

    def new_game(self) -> None:
        """Empty the board and reset the score and move count."""
        self.cells = [[0] * self.cols for _ in range(self.rows)]
        self.score = 0
        self.move_num = 0

    def generate_num(self) -> tuple[int, int] | None:
        """Try to place a 2 (or, less often, a 4) on a random empty cell.

        Makes one attempt per cell of the board and returns the cell it filled,
        or None if every attempt hit an occupied cell.
        """
        for _ in range(self.rows * self.cols):
            value = 2 if self.rng.randrange(101) > 10 else 4
            row = self.rng.randrange(self.rows)
            col = self.rng.randrange(self.cols)
            if self.cells[row][col] == 0:
                self.cells[row][col] = value
                return row, col
        return None

    def apply_move(self, direction: Direction | str) -> bool:
        """Slide the tiles in ``direction`` and update the statistics.

        Returns True if the move changed the board, in which case the move is
        counted, a new tile is spawned and the high score is raised if beaten.
        """
        old_cells = [list(row) for row in self.cells]
        self.score += movement_for(direction).move_tiles(self.cells)
        if not self.changed_since(old_cells):
            return False
        self.move_num += 1
        self.generate_num()
        self.highscore = max(self.highscore, self.score)
        return True

    def changed_since(self, old_cells: Sequence[Sequence[int]]) -> bool:
        """Tell whether the board differs from ``old_cells``."""
        return any(
            list(old) != current for old, current in zip(old_cells, self.cells)
        )

    def game_not_over(self) -> bool:
        """Tell whether a move is still possible: an empty cell or equal neighbours."""
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value == 0:
                    return True
                if r + 1 < self.rows and value == self.cells[r + 1][c]:
                    return True
                if c + 1 < self.cols and value == row[c + 1]:
                    return True
        return False

    def game_won(self) -> bool:
        """Tell whether the winning tile is on the board."""
        return any(WINNING_TILE in row for row in self.cells)

    def _border(self) -> str:
        return "• " * (4 * self.cols) + "•"

    def _spacer(self) -> str:
        return "•       " * self.cols + "•"

    @staticmethod
    def _cell(value: int) -> str:
        if value == 0:
            return "•" + " " * 7
        if value < 10:
            return "•" + str(value).rjust(4) + " " * 3
        return "•" + str(value).rjust(5) + " " * 2

    def render(self) -> str:
        """Return the statistics header followed by the drawn board."""
        lines = [
            "",
            f"Score: {self.score}",
            f"Highscore: {self.highscore}",
            f"Moves: {self.move_num}",
        ]
        border, spacer = self._border(), self._spacer()
        for row in self.cells:
            lines.append(border)
            lines.append(spacer)
            lines.append("".join(self._cell(value) for value in row) + "•")
            lines.append(spacer)
        lines.append(border)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()