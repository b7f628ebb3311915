"""Game loop: difficulty selection, player movement and turn handling."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, TextIO, Union

from mcsansano.board import ARRIVAL_MESSAGES, Board

MAX_INVENTORY = 5
"""Maximum number of items the cook can carry."""

DIFFICULTY_PROMPT = "Seleccione dificultad: \n1.Facil\n2.Medio\n3.Dificil\n"
MENU = (
    "1. Moverse (W, A, S, D)\n"
    "2. Accion \n"
    "3. Ver inventario\n"
    "4. Entregar plato\n"
    "5. Salir\n"
)
SPACES_PROMPT = "Cuantos espacios quiere moverse?\n"
INVALID_MOVE = "Movimiento no valido"
PLAYER_NOT_FOUND = "Jugador no encontrado"
INVALID_OPTION = "Opcion no valida"
INVALID_DIFFICULTY = "Dificultad no valida"
OUT_OF_TURNS = "Se acabaron los turnos"
GAME_OVER = "Juego terminado"

_DIRECTIONS: dict[str, tuple[int, int]] = {
    "W": (-1, 0),
    "A": (0, -1),
    "S": (1, 0),
    "D": (0, 1),
}
_ENDING_OPTIONS = frozenset("2345")


class InvalidMoveError(ValueError):
    """Raised when a move would leave the board."""


class PlayerNotFoundError(LookupError):
    """Raised when the board holds no player."""


class Difficulty(IntEnum):
    """Game difficulty, selecting board size and turn budget."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def rows(self) -> int:
        return _SETTINGS[self][0]

    @property
    def columns(self) -> int:
        return _SETTINGS[self][1]

    @property
    def turns(self) -> int:
        return _SETTINGS[self][2]


_SETTINGS: dict[Difficulty, tuple[int, int, int]] = {
    Difficulty.EASY: (5, 5, 60),
    Difficulty.MEDIUM: (8, 8, 50),
    Difficulty.HARD: (10, 10, 45),
}


@dataclass
class Ingredient:
    """An ingredient, or a fire extinguisher, that the cook can carry."""

    name: str
    state: int = 0
    is_extinguisher: bool = False
    preparation_turns: int = 0
    fire_chance: int = 0


@dataclass
class Order:
    """A dish to deliver and the ingredients it needs."""

    dish_name: str
    required_ingredients: list[Ingredient] = field(default_factory=list)
    completed: bool = False


class _Scanner:
    """Reads single characters and integers from a text stream on demand."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def _next(self) -> str:
        if self._pending:
            return self._pending.pop()
        return self._stream.read(1)

    def _push(self, char: str) -> None:
        if char:
            self._pending.append(char)

    def _skip_space(self) -> str:
        char = self._next()
        while char and char.isspace():
            char = self._next()
        return char

    def read_char(self) -> Optional[str]:
        """Return the next non-blank character, or None at end of input."""
        char = self._skip_space()
        return char or None

    def read_int(self) -> Optional[int]:
        """Return the next integer, or None if the input holds none."""
        char = self._skip_space()
        if not char:
            return None
        text = ""
        if char in "+-":
            text = char
            char = self._next()
        digits = ""
        while char and char.isdigit():
            digits += char
            char = self._next()
        self._push(char)
        if not digits:
            return None
        return int(text + digits)


class Game:
    """One kitchen shift: a board, an inventory, orders and a turn budget."""

    def __init__(
        self,
        difficulty: Union[Difficulty, int],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.difficulty = Difficulty(difficulty)
        self.board = Board(self.difficulty.rows, self.difficulty.columns, rng)
        self.inventory: list[Ingredient] = []
        self.orders: list[Order] = []
        self.turns_left = self.difficulty.turns

    def move(self, direction: str, spaces: int) -> Optional[str]:
        """Move the player ``spaces`` cells in a direction (W, A, S or D).

        Returns the symbol of a station reached, if any. A non-positive
        number of spaces leaves the player where it is.
        """
        try:
            dx, dy = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        if spaces <= 0:
            return None
        player = self.board.find_player()
        if player is None:
            raise PlayerNotFoundError(PLAYER_NOT_FOUND)
        new_x = player.x + dx * spaces
        new_y = player.y + dy * spaces
        if not (0 <= new_x < self.board.rows and 0 <= new_y < self.board.columns):
            raise InvalidMoveError(INVALID_MOVE)
        return self.board.move_player(player, new_x, new_y)

    def run(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        """Play turns read from ``input_stream`` until they run out or the player stops."""
        source = input_stream if input_stream is not None else sys.stdin
        out = output_stream if output_stream is not None else sys.stdout
        scanner = source if isinstance(source, _Scanner) else _Scanner(source)

        playing = True
        while playing and self.turns_left > 0:
            out.write(self.board.render())
            out.write(f"Turnos restantes: {self.turns_left}\n")
            out.write(MENU)

            choice = scanner.read_char()
            if choice is None:
                playing = False
                break
            self.turns_left -= 1

            if choice in _DIRECTIONS:
                out.write(SPACES_PROMPT)
                spaces = scanner.read_int()
                if spaces is None:
                    continue
                try:
                    symbol = self.move(choice, spaces)
                except InvalidMoveError:
                    out.write(INVALID_MOVE + "\n")
                except PlayerNotFoundError:
                    out.write(PLAYER_NOT_FOUND + "\n")
                else:
                    if symbol is not None:
                        out.write(ARRIVAL_MESSAGES[symbol] + "\n")
            elif choice in _ENDING_OPTIONS:
                playing = False
            else:
                out.write(INVALID_OPTION + "\n")

        if self.turns_left == 0:
            out.write(OUT_OF_TURNS + "\n")
        elif not playing:
            out.write(GAME_OVER + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Ask for a difficulty on standard input, then play a game."""
    parser = argparse.ArgumentParser(
        prog="mcsansano", description="Cook dishes on a kitchen board."
    )
    parser.parse_args(argv)

    out = sys.stdout
    out.write(DIFFICULTY_PROMPT)
    scanner = _Scanner(sys.stdin)
    choice = scanner.read_int()
    try:
        difficulty = Difficulty(choice)
    except ValueError:
        out.write(INVALID_DIFFICULTY + "\n")
        return 1

    Game(difficulty).run(scanner, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())