# mcsansano

A small turn-based kitchen game that you play in the terminal. You move a cook
around a grid. The grid holds four stations: a cutting board (`T`), a stove (`C`),
a pantry (`A`) and a fire extinguisher (`E`). Each choice you make uses one turn.
The game ends when you run out of turns, when you pick an option that ends it, or
when the input runs out.

## Installation

```
pip install .
```

## Playing

```
mcsansano
```

The command reads your choices from standard input. First it asks for a
difficulty:

| Choice | Level  | Board   | Turns |
|--------|--------|---------|-------|
| 1      | Easy   | 5 × 5   | 60    |
| 2      | Medium | 8 × 8   | 50    |
| 3      | Hard   | 10 × 10 | 45    |

If you give any other answer, the command prints `Dificultad no valida` and exits
with status 1.

The cook starts on a random cell. The stations are placed at random, but never in
the last row or the last column. On each turn the game prints the board, the
number of turns left and a menu. In the board the cook is shown as `[O]`, a
station as its letter (for example `[T]`) and an empty cell as `[ ]`.

- `W`, `A`, `S` and `D` move the cook up, left, down or right. The game then asks
  how many spaces to move.
  - A move that would leave the board is rejected with `Movimiento no valido`.
  - A count of zero or less leaves the cook where it is.
- `2`, `3`, `4` and `5` end the game with `Juego terminado`.
- Any other key prints `Opcion no valida`.

Every choice uses up a turn, whether or not it does anything. When the turns run
out, the game prints `Se acabaron los turnos`.

If the cook steps onto a station, the game names the station. The cook then
takes that cell, and the station is gone from the board.

## Using the library

```python
import random

from mcsansano.board import Board
from mcsansano.game import Difficulty, Game, InvalidMoveError

board = Board(5, 5, random.Random(1))
print(board.render())

game = Game(Difficulty.EASY, random.Random(1))
try:
    reached = game.move("D", 1)  # station symbol reached, or None
except InvalidMoveError:
    reached = None
```

`mcsansano.board` provides the following:

- `Board(rows, columns, rng)` builds a grid with at least two rows and two
  columns. It places one `Player` and four `Station`s on it.
- `Board` has these methods:
  - `render()` returns the board as text.
  - `find_player()` returns the cook, or `None` if the board holds none.
  - `station_at(x, y)` returns the symbol of the station in a cell, or `None`.
  - `move_player(player, x, y)` moves the cook and returns the symbol of any
    station it replaced.
  - `set_cell(x, y, element)` puts an element into a cell.
  - `clear()` empties the board.
- A position outside the board raises `OutOfBoundsError`.

`mcsansano.game` provides the following:

- `Difficulty` holds the three levels and their board sizes and turn budgets.
- `Game(difficulty, rng)` sets up a board and a turn budget.
- `Game.move(direction, spaces)` moves the cook. It raises `InvalidMoveError` for
  a move off the board, `PlayerNotFoundError` if the board holds no cook, and
  `ValueError` for an unknown direction.
- `Game.run(input_stream, output_stream)` plays a session on any pair of text
  streams, so you can script a game or test it without a terminal.
- `Ingredient` and `Order` are plain records for inventory items and dishes.

## What it does not do

Only movement works. The cooking part of the game is not there:

- The action, inventory and delivery options (`2`, `3`, `4`) end the game. They
  do not act.
- No ingredients are fetched, cut or cooked.
- No orders are handed out or delivered.
- Nothing catches fire.
- `Game.inventory` and `Game.orders` start empty, and the game never fills them.

## Running the tests

```
pip install .[test]
pytest
```