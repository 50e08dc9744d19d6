"""Tic-tac-toe board whose moves produce drawing trajectories."""

from __future__ import annotations

import enum
import math
from typing import Callable

from .circle import Circle
from .coordinate import Coordinate
from .shape import Painter, View
from .triangle import Triangle

__all__ = ["HolderState", "TicTacToe"]

Point = tuple[float, float]
MoveRequested = Callable[["HolderState"], None]
GameFinished = Callable[["HolderState"], None]
PiecePlaced = Callable[[int, int, "HolderState", list[Point]], None]

_BLACK = (0, 0, 0, 255)


class HolderState(enum.Enum):
    """Content of a board cell; also used for the player and the winner."""

    CROSS = enum.auto()
    CIRCLE = enum.auto()
    EMPTY = enum.auto()


def _circle_pen(painter: Painter) -> None:
    painter.set_pen(color=_BLACK, width=1, style="solid")


class TicTacToe:
    """A 3x3 board laid out as a square starting at ``left_top_corner``.

    Rows follow the x axis and columns the y axis. Events are reported
    through the optional callbacks given to the constructor.
    """

    def __init__(
        self,
        left_top_corner: Coordinate,
        size: float,
        on_move_requested: MoveRequested | None = None,
        on_game_finished: GameFinished | None = None,
        on_piece_placed: PiecePlaced | None = None,
    ) -> None:
        self.left_top_corner = left_top_corner
        self.size = size
        self.on_move_requested = on_move_requested
        self.on_game_finished = on_game_finished
        self.on_piece_placed = on_piece_placed
        self.is_game_on = False
        self.current_player = HolderState.CROSS
        self.moves_count = 0
        self._grid = [[HolderState.EMPTY] * 3 for _ in range(3)]

    @property
    def grid(self) -> tuple[tuple[HolderState, ...], ...]:
        """Snapshot of the board, indexed ``grid[row][col]``."""
        return tuple(tuple(row) for row in self._grid)

    def _clear(self) -> None:
        self._grid = [[HolderState.EMPTY] * 3 for _ in range(3)]

    def winner(self) -> HolderState:
        """The player holding a full row, column or diagonal, else EMPTY."""
        g = self._grid
        lines = [list(row) for row in g]
        lines += [[g[0][j], g[1][j], g[2][j]] for j in range(3)]
        lines.append([g[0][0], g[1][1], g[2][2]])
        lines.append([g[0][2], g[1][1], g[2][0]])
        for a, b, c in lines:
            if a is not HolderState.EMPTY and a == b == c:
                return a
        return HolderState.EMPTY

    def put_on(self, row: int, col: int, piece: HolderState) -> None:
        """Place ``piece`` on an empty cell; raise ValueError otherwise."""
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise ValueError(f"cell ({row}, {col}) is outside the board")
        if self._grid[row][col] is not HolderState.EMPTY:
            raise ValueError(f"cell ({row}, {col}) is already occupied")
        self._grid[row][col] = piece

    def cell_of(self, point: Coordinate) -> tuple[int, int]:
        """Grid cell (row, col) under ``point``; may lie outside 0..2."""
        offset = point - self.left_top_corner
        cell = self.size / 3
        return math.floor(offset.x / cell), math.floor(offset.y / cell)

    def _cell_center(self, row: int, col: int) -> Coordinate:
        third = self.size / 3
        sixth = self.size / 6
        return self.left_top_corner + Coordinate(
            row * third + sixth, col * third + sixth, 0
        )

    def _request_move(self) -> None:
        if self.on_move_requested is not None:
            self.on_move_requested(self.current_player)

    def _finish(self, winner: HolderState) -> None:
        if self.on_game_finished is not None:
            self.on_game_finished(winner)

    def start_game(self) -> None:
        """Clear the board, give the first move to CROSS and request it."""
        self.is_game_on = True
        self.current_player = HolderState.CROSS
        self.moves_count = 0
        self._clear()
        print("\nGame Start...", flush=True)
        self._request_move()

    def _trajectory(self, row: int, col: int, piece: HolderState) -> list[Point]:
        center = self._cell_center(row, col)
        if piece is HolderState.CROSS:
            return Triangle(center, int(self.size / 4), 0.0).path()
        circle = Circle(center, self.size / 8)
        circle.set_painter_transform(_circle_pen)
        return circle.path(3)

    def process_user_move(self, point: Coordinate) -> None:
        """Play the current player's piece at the cell under ``point``."""
        if not self.is_game_on:
            return

        row, col = self.cell_of(point)
        print(f"\nSelected cell: {row}, {col}", flush=True)

        if not (0 <= row <= 2 and 0 <= col <= 2):
            print("\nInvalid move: Out of bounds", flush=True)
            self._request_move()
            return
        if self._grid[row][col] is not HolderState.EMPTY:
            print("\nInvalid move: Cell occupied", flush=True)
            self._request_move()
            return

        player = self.current_player
        self.put_on(row, col, player)
        trajectory = self._trajectory(row, col, player)
        if self.on_piece_placed is not None:
            self.on_piece_placed(row, col, player, trajectory)
        self.moves_count += 1

        winner = self.winner()
        if winner is not HolderState.EMPTY:
            self._finish(winner)
            print("\ngame finished", flush=True)
            self.is_game_on = False
            return
        if self.moves_count == 9:
            self._finish(HolderState.EMPTY)
            self.is_game_on = False
            return

        self.current_player = (
            HolderState.CIRCLE if player is HolderState.CROSS else HolderState.CROSS
        )
        self._request_move()

    def draw(self, painter: Painter) -> None:
        """Draw the dotted grid and every placed piece."""
        painter.save()
        painter.set_pen(color=_BLACK, width=1, style="dot")

        x0, y0, size = self.left_top_corner.x, self.left_top_corner.y, self.size
        for k in (1, 2):
            offset = (k * size) / 3
            painter.draw_line(int(x0 + offset), int(y0), int(x0 + offset), int(y0 + size))
        for k in (1, 2):
            offset = (k * size) / 3
            painter.draw_line(int(x0), int(y0 + offset), int(x0 + size), int(y0 + offset))

        painter.set_pen(style="solid")

        for row in range(3):
            for col in range(3):
                piece = self._grid[row][col]
                center = self._cell_center(row, col)
                if piece is HolderState.CROSS:
                    Triangle(center, int(size / 4), 0.0).draw(painter, View.TOP_VIEW)
                elif piece is HolderState.CIRCLE:
                    circle = Circle(center, size / 8)
                    circle.set_painter_transform(_circle_pen)
                    circle.draw(painter, View.SIDE_VIEW)

        painter.restore()