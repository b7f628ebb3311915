"""Kitchen board: a grid holding the player and the work stations."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, Union

STATION_SYMBOLS: tuple[str, ...] = ("T", "C", "A", "E")
"""Cutting board, cooker, pantry and fire extinguisher, in placement order."""

ARRIVAL_MESSAGES: dict[str, str] = {
    "T": "Has llegado a la Tabla de cortar",
    "C": "Has llegado a la Cocina",
    "A": "Has llegado al Almacén",
    "E": "Has llegado al Extintor",
}

EMPTY_CELL = "[ ] "
PLAYER_CELL = "[O] "


class OutOfBoundsError(IndexError):
    """Raised when a position lies outside the board."""


@dataclass
class Player:
    """The cook, with its position on the board."""

    x: int
    y: int
    on_fire: bool = False


@dataclass
class Station:
    """A work station shown on the board by a one-letter symbol."""

    symbol: str
    action: Optional[Callable[..., Any]] = None
    on_fire: bool = False
    disabled_turns: int = 0

    def __post_init__(self) -> None:
        if self.symbol not in STATION_SYMBOLS:
            raise ValueError(f"unknown station symbol: {self.symbol!r}")


Cell = Union[Player, Station, None]


class Board:
    """A rows x columns grid with one player and four stations placed at random."""

    def __init__(
        self, rows: int, columns: int, rng: Optional[random.Random] = None
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("the board needs at least one row and one column")
        if rows < 2 or columns < 2:
            raise ValueError("stations need at least two rows and two columns")
        self.rows = rows
        self.columns = columns
        self.cells: list[list[Cell]] = [[None] * columns for _ in range(rows)]
        rng = rng if rng is not None else random.Random()

        player = Player(rng.randrange(rows), rng.randrange(columns))
        self.cells[player.x][player.y] = player

        # Stations never go in the last row or the last column.
        free = sum(
            self.cells[x][y] is None
            for x in range(rows - 1)
            for y in range(columns - 1)
        )
        if free < len(STATION_SYMBOLS):
            raise ValueError("the board is too small to hold every station")

        for symbol in STATION_SYMBOLS:
            while True:
                x = rng.randrange(rows - 1)
                y = rng.randrange(columns - 1)
                if self.cells[x][y] is None:
                    self.cells[x][y] = Station(symbol)
                    break

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.rows and 0 <= y < self.columns):
            raise OutOfBoundsError("Movimiento fuera de los límites del tablero")

    def _positions(self) -> Iterator[tuple[int, int, Cell]]:
        for x, row in enumerate(self.cells):
            for y, cell in enumerate(row):
                yield x, y, cell

    def render(self) -> str:
        """Return the board as text, one line per row."""
        lines = []
        for row in self.cells:
            parts = []
            for cell in row:
                if cell is None:
                    parts.append(EMPTY_CELL)
                elif isinstance(cell, Station):
                    parts.append(f"[{cell.symbol}] ")
                else:
                    parts.append(PLAYER_CELL)
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    def set_cell(self, x: int, y: int, element: Cell) -> None:
        """Replace whatever is in a cell with ``element``."""
        self._check_bounds(x, y)
        self.cells[x][y] = element

    def clear(self) -> None:
        """Empty the board and reset its size to zero."""
        self.cells = []
        self.rows = 0
        self.columns = 0

    def find_player(self) -> Optional[Player]:
        """Return the player standing at its own position, or None."""
        for x, y, cell in self._positions():
            if isinstance(cell, Player) and cell.x == x and cell.y == y:
                return cell
        return None

    def station_at(self, x: int, y: int) -> Optional[str]:
        """Return the symbol of the station in a cell, or None."""
        self._check_bounds(x, y)
        cell = self.cells[x][y]
        if isinstance(cell, Station):
            return cell.symbol
        return None

    def move_player(self, player: Player, new_x: int, new_y: int) -> Optional[str]:
        """Move the player to a new cell.

        A station in the target cell is taken off the board; its symbol is
        returned so the caller can announce the arrival.
        """
        self._check_bounds(new_x, new_y)
        symbol = self.station_at(new_x, new_y)
        self.cells[player.x][player.y] = None
        player.x = new_x
        player.y = new_y
        self.cells[new_x][new_y] = player
        return symbol