"""Interactive terminal front end for the 2048 game."""

from __future__ import annotations

import argparse
import random
import subprocess
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from twentyfortyeight.grid import Grid, parse_arrow_key

try:
    import termios
except ImportError:  # pragma: no cover - non-Unix platforms
    termios = None  # type: ignore[assignment]

ROWS = 4
COLS = 4
DEFAULT_HIGHSCORE_FILE = "highscore.txt"


def read_highscore(path: str | Path) -> int:
    """Read the stored high score, or 0 if there is none."""
    try:
        text = Path(path).read_text()
    except OSError:
        return 0
    parts = text.split()
    try:
        return int(parts[0]) if parts else 0
    except ValueError:
        return 0


def write_highscore(path: str | Path, highscore: int) -> None:
    """Store the high score."""
    Path(path).write_text(str(highscore))


def _prompt(output: TextIO, text: str) -> None:
    output.write(text)
    output.flush()


def menu(input_func: Callable[[], str] = input, output: TextIO | None = None) -> int:
    """Show the main menu and return the choice: 1 to play, 2 to quit."""
    output = output if output is not None else sys.stdout
    print("<<<<<<2048>>>>>>", file=output)
    print("1. Play Game", file=output)
    print("2. Quit", file=output)
    while True:
        _prompt(output, "Enter your choice: ")
        try:
            choice = int(input_func().strip())
        except ValueError:
            choice = 0
        if choice in (1, 2):
            return choice
        print("Error: Invalid Input", file=output)


def play_game(
    grid: Grid,
    read_keys: Callable[[], str],
    output: TextIO | None = None,
    highscore_path: str | Path = DEFAULT_HIGHSCORE_FILE,
    clear: Callable[[], None] | None = None,
) -> bool:
    """Play a round on ``grid`` as it stands until it is won or lost.

    Returns True if the round was won.
    """
    output = output if output is not None else sys.stdout
    clear = clear if clear is not None else _clear_screen
    output.write(str(grid))
    while True:
        write_highscore(highscore_path, grid.highscore)
        _prompt(output, "Enter your move: ")
        direction = parse_arrow_key(read_keys())
        if direction is not None:
            valid = grid.apply_move(direction)
            clear()
            if not valid:
                print("\nERROR: Invalid Move", file=output)
        output.write(str(grid))
        if not grid.game_not_over():
            print("\nGame Over!", file=output)
            return False
        if grid.game_won():
            print("You Win!", file=output)
            return True


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _key_reader(stream: TextIO) -> Callable[[], str]:
    def chars() -> Iterator[str]:
        while True:
            char = stream.read(1)
            if not char:
                raise EOFError("end of input")
            if not char.isspace():
                yield char

    def read_keys() -> str:
        source = chars()
        return "".join(next(source) for _ in range(3))

    return read_keys


@contextmanager
def _unbuffered_keys(stream: TextIO) -> Iterator[None]:
    """Turn off line buffering on a terminal so arrow keys arrive without Enter."""
    if termios is None or not stream.isatty():
        yield
        return
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    changed = termios.tcgetattr(fd)
    changed[3] &= ~termios.ICANON
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive game."""
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument(
        "--highscore-file",
        default=DEFAULT_HIGHSCORE_FILE,
        help="file holding the high score",
    )
    args = parser.parse_args(argv)

    output = sys.stdout
    stdin = sys.stdin
    grid = Grid(ROWS, COLS, read_highscore(args.highscore_file), random.Random())
    read_keys = _key_reader(stdin)

    with _unbuffered_keys(stdin):
        try:
            choice = menu(input, output)
            while choice == 1:
                grid.new_game()
                grid.generate_num()
                grid.generate_num()
                play_game(grid, read_keys, output, args.highscore_file, _clear_screen)
                _prompt(output, "Press enter to continue: ")
                input()
                print(file=output)
                choice = menu(input, output)
                _clear_screen()
        except EOFError:
            pass
    output.write("\nThank you for playing 2048")
    output.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())