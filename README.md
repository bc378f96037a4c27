# twentyfortyeight

The 2048 puzzle for the terminal. Pressing an arrow key slides the tiles across a 4×4 board. When two tiles with the same number meet, they merge into one tile showing their sum, and that sum is added to your score. A round ends once a 2048 tile is on the board or no move is left.

## Installing

```
pip install .
```

## Playing

```
twentyfortyeight
twentyfortyeight --highscore-file scores.txt
```

The menu offers **1. Play Game** and **2. Quit**. Any other answer prints `Error: Invalid Input` and asks again.

While a round is running:

- An arrow key slides every tile in that direction. Keys that are not arrow keys are ignored, and the board is shown again.
- A move that leaves the board unchanged gets `ERROR: Invalid Move`. It is not counted, and no new tile appears.
- After each valid move, a new tile is placed on a random empty square. It is a 2 most of the time and a 4 now and then.
- The board is shown with the score, the high score and the number of moves.
- The round ends with `Game Over!` when no move is left, or with `You Win!` when a 2048 tile appears.

After a round, press Enter to return to the menu. At the end of input the game says goodbye and exits.

The high score is kept in `highscore.txt` in the current directory, or in the file given with `--highscore-file`. It is read at start-up and written back before every move. A file that is missing or cannot be read counts as a high score of 0.

On a Unix terminal, line buffering is switched off while the game runs, so arrow keys are read without pressing Enter. The screen is cleared with the `clear` command after each move.

## Using the pieces from Python

`twentyfortyeight.movement` holds the sliding rules. `Direction` names the four directions. `Up`, `Down`, `Left` and `Right` are `Movement` subclasses whose `move_tiles(grid)` changes a list of rows in place and returns the points scored so far. `movement_for(direction)` returns a fresh movement for a direction.

```python
from twentyfortyeight.movement import Direction, movement_for

row = [[2, 2, 4, 0]]
points = movement_for(Direction.LEFT).move_tiles(row)
# row is now [[4, 4, 0, 0]] and points == 4
```

`twentyfortyeight.grid.Grid` holds the board together with `score`, `move_num` and `highscore`. Its methods are:

- `new_game()`
- `generate_num()`
- `apply_move(direction)`, which returns whether the board changed
- `changed_since(old_cells)`
- `game_not_over()`
- `game_won()`
- `render()`, also available through `str()`

`parse_arrow_key(keys)` turns an escape sequence such as `"\x1b[A"` into a `Direction`, or returns `None`.

```python
import random
from twentyfortyeight.grid import Grid

grid = Grid(4, 4, 0, random.Random(1))
grid.new_game()
grid.generate_num()
grid.generate_num()
print(grid)
```

`twentyfortyeight.cli` provides `menu`, `play_game`, `read_highscore`, `write_highscore` and `main`, which is the command above.

## Limits

The command always plays on a 4×4 board. A round stops as soon as 2048 is reached; there is no option to keep playing past it. There is no undo and no saved game, and only the high score is kept between runs.

## Running the tests

```
pip install ".[test]"
pytest
```