import random

import pytest

from mcsansano.board import (
    ARRIVAL_MESSAGES,
    Board,
    OutOfBoundsError,
    Player,
    Station,
    STATION_SYMBOLS,
)


def _contents(board):
    players = []
    stations = []
    for x, row in enumerate(board.cells):
        for y, cell in enumerate(row):
            if isinstance(cell, Player):
                players.append((x, y, cell))
            elif isinstance(cell, Station):
                stations.append((x, y, cell))
    return players, stations


def _empty_board(rows=5, columns=5):
    board = Board(rows, columns, random.Random(1))
    for x in range(rows):
        for y in range(columns):
            board.set_cell(x, y, None)
    return board


def test_same_seed_same_board():
    a = Board(8, 8, random.Random(42))
    b = Board(8, 8, random.Random(42))
    assert a.render() == b.render()


@pytest.mark.parametrize("rows,columns", [(0, 5), (5, 0), (-1, 3), (1, 5), (5, 1), (2, 2)])
def test_invalid_sizes(rows, columns):
    with pytest.raises(ValueError):
        Board(rows, columns, random.Random(0))


def test_render_format():
    board = _empty_board(3, 3)
    board.set_cell(0, 0, Station("T"))
    board.set_cell(1, 1, Player(1, 1))
    board.set_cell(2, 2, Station("E"))
    assert board.render() == (
        "[T] [ ] [ ] \n"
        "[ ] [O] [ ] \n"
        "[ ] [ ] [E] \n"
    )


def test_render_has_one_line_per_row():
    board = Board(8, 8, random.Random(3))
    lines = board.render().splitlines()
    assert len(lines) == 8
    assert all(line.count("[") == 8 for line in lines)
    assert sum(line.count("[O]") for line in lines) == 1


def test_set_cell_out_of_bounds():
    board = Board(5, 5, random.Random(0))
    with pytest.raises(OutOfBoundsError):
        board.set_cell(5, 0, None)
    with pytest.raises(OutOfBoundsError):
        board.set_cell(0, -1, None)


def test_set_cell_replaces():
    board = _empty_board()
    board.set_cell(2, 3, Station("C"))
    assert board.station_at(2, 3) == "C"
    board.set_cell(2, 3, Station("A"))
    assert board.station_at(2, 3) == "A"


def test_clear():
    board = Board(5, 5, random.Random(0))
    board.clear()
    assert board.rows == 0 and board.columns == 0
    assert board.cells == []
    assert board.render() == ""
    assert board.find_player() is None


def test_find_player():
    board = Board(5, 5, random.Random(7))
    players, _ = _contents(board)
    assert board.find_player() is players[0][2]


def test_find_player_ignores_misplaced():
    board = _empty_board()
    board.set_cell(1, 1, Player(2, 2))
    assert board.find_player() is None


def test_station_at():
    board = _empty_board()
    board.set_cell(0, 1, Station("A"))
    board.set_cell(0, 2, Player(0, 2))
    assert board.station_at(0, 1) == "A"
    assert board.station_at(0, 2) is None
    assert board.station_at(4, 4) is None


def test_unknown_station_symbol():
    with pytest.raises(ValueError):
        Station("X")


def test_move_player_to_empty_cell():
    board = _empty_board()
    player = Player(0, 0)
    board.set_cell(0, 0, player)
    assert board.move_player(player, 3, 2) is None
    assert (player.x, player.y) == (3, 2)
    assert board.cells[0][0] is None
    assert board.find_player() is player


def test_move_player_onto_station_removes_it():
    board = _empty_board()
    player = Player(0, 0)
    board.set_cell(0, 0, player)
    board.set_cell(0, 3, Station("C"))
    assert board.move_player(player, 0, 3) == "C"
    assert ARRIVAL_MESSAGES["C"] == "Has llegado a la Cocina"
    assert board.cells[0][3] is player
    board.move_player(player, 1, 3)
    assert board.station_at(0, 3) is None


@pytest.mark.parametrize("target", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_move_player_out_of_bounds(target):
    board = _empty_board()
    player = Player(2, 2)
    board.set_cell(2, 2, player)
    with pytest.raises(OutOfBoundsError):
        board.move_player(player, *target)
    assert (player.x, player.y) == (2, 2)
    assert board.cells[2][2] is player