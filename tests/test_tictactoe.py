import math

import pytest

from scaradraw.coordinate import Coordinate
from scaradraw.shape import Painter
from scaradraw.tictactoe import HolderState, TicTacToe

CORNER = Coordinate(340, 170, 0)
SIZE = 120


def cell_point(row, col):
    return CORNER + Coordinate(row * SIZE / 3 + SIZE / 6, col * SIZE / 3 + SIZE / 6, 0)


def test_fresh_board_is_empty():
    game = TicTacToe(CORNER, SIZE)
    assert all(cell is HolderState.EMPTY for row in game.grid for cell in row)
    assert game.winner() is HolderState.EMPTY


def test_put_on_out_of_bounds_raises():
    game = TicTacToe(CORNER, SIZE)
    with pytest.raises(ValueError):
        game.put_on(3, 0, HolderState.CROSS)
    with pytest.raises(ValueError):
        game.put_on(0, -1, HolderState.CROSS)


def test_put_on_occupied_raises():
    game = TicTacToe(CORNER, SIZE)
    game.put_on(1, 1, HolderState.CIRCLE)
    assert game.grid[1][1] is HolderState.CIRCLE
    with pytest.raises(ValueError):
        game.put_on(1, 1, HolderState.CROSS)


@pytest.mark.parametrize(
    "cells",
    [
        [(0, 0), (0, 1), (0, 2)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ],
)
def test_winner_lines(cells):
    game = TicTacToe(CORNER, SIZE)
    for row, col in cells:
        game.put_on(row, col, HolderState.CIRCLE)
    assert game.winner() is HolderState.CIRCLE


def test_cell_of():
    game = TicTacToe(CORNER, SIZE)
    assert game.cell_of(Coordinate(345, 175, 0)) == (0, 0)
    assert game.cell_of(Coordinate(340 + 119, 170 + 119, 0)) == (2, 2)
    assert game.cell_of(Coordinate(339, 175, 0))[0] < 0


def test_start_game_requests_cross_and_clears():
    requests = []
    game = TicTacToe(CORNER, SIZE, on_move_requested=requests.append)
    game.put_on(0, 0, HolderState.CIRCLE)
    game.start_game()
    assert requests == [HolderState.CROSS]
    assert game.is_game_on
    assert game.grid[0][0] is HolderState.EMPTY
    assert game.moves_count == 0


def test_move_ignored_before_start():
    placed = []
    game = TicTacToe(
        CORNER, SIZE, on_piece_placed=lambda r, c, s, t: placed.append((r, c, s, t))
    )
    game.process_user_move(cell_point(0, 0))
    assert game.grid[0][0] is HolderState.EMPTY
    assert game.moves_count == 0
    assert placed == []


def test_out_of_bounds_click_rerequests_same_player():
    requests = []
    game = TicTacToe(CORNER, SIZE, on_move_requested=requests.append)
    game.start_game()
    game.process_user_move(Coordinate(0, 0, 0))
    assert requests == [HolderState.CROSS, HolderState.CROSS]
    assert game.moves_count == 0
    assert all(cell is HolderState.EMPTY for row in game.grid for cell in row)


def test_occupied_click_rerequests_same_player():
    requests = []
    game = TicTacToe(CORNER, SIZE, on_move_requested=requests.append)
    game.start_game()
    game.process_user_move(cell_point(1, 1))
    game.process_user_move(cell_point(1, 1))
    assert requests == [HolderState.CROSS, HolderState.CIRCLE, HolderState.CIRCLE]
    assert game.moves_count == 1
    assert game.grid[1][1] is HolderState.CROSS


def test_cross_trajectory_is_closed_triangle():
    placed = []
    game = TicTacToe(
        CORNER, SIZE, on_piece_placed=lambda r, c, s, t: placed.append((r, c, s, t))
    )
    game.start_game()
    game.process_user_move(cell_point(0, 0))
    assert game.grid[0][0] is HolderState.CROSS
    assert game.moves_count == 1
    row, col, state, trajectory = placed[0]
    assert (row, col, state) == (0, 0, HolderState.CROSS)
    assert len(trajectory) == 4
    assert tuple(trajectory[0]) == pytest.approx(tuple(trajectory[-1]))
    assert tuple(trajectory[0]) != pytest.approx(tuple(trajectory[1]))


def test_circle_trajectory_lies_on_circle():
    placed = []
    game = TicTacToe(
        CORNER, SIZE, on_piece_placed=lambda r, c, s, t: placed.append((r, c, s, t))
    )
    game.start_game()
    game.process_user_move(cell_point(0, 0))
    game.process_user_move(cell_point(2, 1))
    assert game.grid[2][1] is HolderState.CIRCLE
    row, col, state, trajectory = placed[1]
    assert (row, col, state) == (2, 1, HolderState.CIRCLE)
    center = cell_point(2, 1)
    assert len(trajectory) >= 3
    for x, y in trajectory:
        assert math.hypot(x - center.x, y - center.y) == pytest.approx(SIZE / 8)


def test_cross_wins():
    finished = []
    game = TicTacToe(CORNER, SIZE, on_game_finished=finished.append)
    game.start_game()
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        game.process_user_move(cell_point(row, col))
    assert finished == [HolderState.CROSS]
    assert game.winner() is HolderState.CROSS
    assert not game.is_game_on
    game.process_user_move(cell_point(2, 2))
    assert game.grid[2][2] is HolderState.EMPTY


def test_draw_game():
    finished = []
    game = TicTacToe(CORNER, SIZE, on_game_finished=finished.append)
    game.start_game()
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
    for row, col in moves:
        game.process_user_move(cell_point(row, col))
    assert finished == [HolderState.EMPTY]
    assert game.moves_count == 9
    assert not game.is_game_on


def test_draw_empty_board_has_grid_lines_only():
    game = TicTacToe(CORNER, SIZE)
    painter = Painter()
    game.draw(painter)
    lines = [c for c in painter.commands if c[0] == "line"]
    assert len(lines) == 4
    with pytest.raises(RuntimeError):
        painter.restore()


def test_draw_pieces():
    game = TicTacToe(CORNER, SIZE)
    game.put_on(0, 0, HolderState.CROSS)
    game.put_on(1, 1, HolderState.CIRCLE)
    painter = Painter()
    game.draw(painter)
    lines = [c for c in painter.commands if c[0] == "line"]
    ellipses = [c for c in painter.commands if c[0] == "ellipse"]
    assert len(lines) == 7
    assert len(ellipses) == 1