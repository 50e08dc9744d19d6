"""Drawing canvas, game controller and command-line entry point."""

from __future__ import annotations

import argparse
import struct
import sys
import threading
import time
from typing import Callable, Protocol

from .coordinate import Coordinate
from .shape import Painter, View
from .tictactoe import HolderState, TicTacToe
from .trajectory import TrajectorySpeedManipulator
from .workspace import WorkSpace

__all__ = ["DrawingCanvas", "Controller", "encode_packet", "main"]

Point = tuple[float, float]

_PACKET = struct.Struct("<3d")
_RED = (255, 0, 0, 255)
_BLACK = (0, 0, 0, 255)

BOARD_CORNER = Coordinate(340, 170, 0)
BOARD_SIZE = 120
SPEED_LIMIT = 120
STEP_SIZE = 3
EMPTY_BUFFER_WAIT = 0.5
NO_POINT_WAIT = 0.01


def encode_packet(time_ms: float, x: float, y: float) -> bytes:
    """Pack a timed target position as three little-endian doubles."""
    return _PACKET.pack(time_ms, x, y)


class _Sender(Protocol):
    def send(self, data: bytes, handler: Callable[[], None] | None = None) -> bool: ...


class DrawingCanvas:
    """Headless drawing surface: freehand strokes, point picking and painting.

    Freehand points go both to :attr:`points` and to the shared
    ``path_buffer``, guarded by ``lock``. While a point is being picked a
    press selects that point instead of drawing.
    """

    def __init__(
        self,
        game: TicTacToe,
        path_buffer: list[Point],
        lock: threading.Lock | None = None,
        workspace: WorkSpace | None = None,
    ) -> None:
        self.game = game
        self.path_buffer = path_buffer
        self.lock = lock if lock is not None else threading.Lock()
        self.workspace = workspace or WorkSpace.symmetric(
            Coordinate(400, 400, 0), 208, 90, 200
        )
        self.points: list[Point] = []
        self.is_drawing = False
        self.picking = False
        self.on_point_selected: Callable[[Coordinate], None] | None = None
        self.on_update: Callable[[], None] | None = None
        self._cond = threading.Condition()
        self._pick_seq = 0
        self._last_pick = Coordinate()

    def _update(self) -> None:
        if self.on_update is not None:
            self.on_update()

    def _append(self, x: float, y: float) -> None:
        point = (float(x), float(y))
        self.points.append(point)
        with self.lock:
            self.path_buffer.append(point)
        self._update()

    def press(self, x: float, y: float, left_button: bool = True) -> None:
        """Handle a mouse press at ``(x, y)``."""
        with self._cond:
            picking = self.picking
            if picking:
                self.picking = False
                self._last_pick = Coordinate(x, y, 0)
                self._pick_seq += 1
                self._cond.notify_all()
                selected = self._last_pick
        if picking:
            if self.on_point_selected is not None:
                self.on_point_selected(selected)
            return
        if left_button:
            self.is_drawing = True
            self._append(x, y)

    def move(self, x: float, y: float) -> None:
        """Handle mouse movement; extends the stroke while drawing."""
        if self.is_drawing:
            self._append(x, y)

    def release(self, left_button: bool = True) -> None:
        """Handle a mouse release; the left button ends the stroke."""
        if left_button:
            self.is_drawing = False

    def pick_point(self, timeout: float | None = None) -> Coordinate:
        """Block until the next press and return where it happened.

        Raises TimeoutError if no press arrives within ``timeout`` seconds.
        """
        with self._cond:
            self.picking = True
            start = self._pick_seq
            if not self._cond.wait_for(lambda: self._pick_seq != start, timeout):
                self.picking = False
                raise TimeoutError("no point was picked")
            return self._last_pick

    def clear(self) -> None:
        """Forget the freehand strokes (the shared path buffer is kept)."""
        self.points.clear()
        self._update()

    def close(self) -> None:
        """Closing the canvas ends the running game."""
        self.game.is_game_on = False

    def paint(self, painter: Painter) -> None:
        """Draw workspace, strokes, board and pending path onto ``painter``."""
        painter.set_pen(color=_BLACK, width=2, style="solid", cap="round")
        self.workspace.draw(painter, View.SIDE_VIEW)
        for (x1, y1), (x2, y2) in zip(self.points, self.points[1:]):
            painter.draw_line(x1, y1, x2, y2)
        self.game.draw(painter)
        with self.lock:
            pending = list(self.path_buffer)
        if len(pending) > 1:
            painter.set_pen(color=_RED, width=2, style="solid", cap="round")
            for (x1, y1), (x2, y2) in zip(pending, pending[1:]):
                painter.draw_line(x1, y1, x2, y2)


class Controller:
    """Ties the game, the canvas and the path streaming together."""

    def __init__(
        self,
        sender: _Sender,
        *,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.sender = sender
        self.lock = threading.Lock()
        self.path_buffer: list[Point] = []
        self.game = TicTacToe(
            BOARD_CORNER,
            BOARD_SIZE,
            on_move_requested=self.handle_move_request,
            on_game_finished=self.handle_game_end,
            on_piece_placed=self.handle_piece_placed,
        )
        self.canvas = DrawingCanvas(self.game, self.path_buffer, self.lock)
        self.canvas.on_point_selected = self.game.process_user_move
        self.trajectory = TrajectorySpeedManipulator(
            self.path_buffer, SPEED_LIMIT, STEP_SIZE, clock=clock, sleep=sleep
        )
        self.time_ms = 0.0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start_game(self) -> None:
        """Start a fresh game."""
        self.game.start_game()

    def handle_move_request(self, player: HolderState) -> None:
        """Let the next press on the canvas choose ``player``'s cell."""
        with self.canvas._cond:
            self.canvas.picking = True

    def handle_game_end(self, winner: HolderState) -> None:
        """Announce the result of the game."""
        if winner is HolderState.EMPTY:
            message = "Game ended in a draw!"
        elif winner is HolderState.CROSS:
            message = "X Wins"
        else:
            message = "O Wins"
        print(f"\n{message}", flush=True)

    def handle_piece_placed(
        self, row: int, col: int, state: HolderState, trajectory: list[Point]
    ) -> None:
        """Queue the piece's outline for the robot to draw."""
        with self.lock:
            self.path_buffer.extend(trajectory)
        self.canvas._update()

    def next_packet(self) -> bytes | None:
        """Next timed point relative to the system centre, encoded, or None."""
        with self.lock:
            if not self.path_buffer:
                return None
            result = self.trajectory.next_point()
            if result is None:
                return None
            elapsed, (px, py) = result
            self.time_ms += elapsed
            center = self.canvas.workspace.system_center
            x = px - center.x
            y = py - center.y
            packet = encode_packet(self.time_ms, -x, -y)
        self.canvas._update()
        return packet

    def _send_loop(self) -> None:
        while not self._stop.is_set():
            with self.lock:
                empty = not self.path_buffer
            if empty:
                self._stop.wait(EMPTY_BUFFER_WAIT)
                continue
            packet = self.next_packet()
            if packet is None:
                self._stop.wait(NO_POINT_WAIT)
                continue
            self.sender.send(packet, None)

    def start_sending(self) -> None:
        """Stream path points to the sender on a background thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._send_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop streaming and wait for the background thread to end."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=2.0)
        self._thread = None


def _run_console(controller: Controller, lines) -> None:
    canvas = controller.canvas
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        command = line.lower()
        if command in ("quit", "exit"):
            return
        if command == "start":
            controller.start_game()
            continue
        if command == "clear":
            canvas.clear()
            continue
        parts = line.split()
        try:
            x, y = (float(p) for p in parts)
        except ValueError:
            print(f"unrecognised input: {line}", file=sys.stderr)
            continue
        canvas.press(x, y, True)
        canvas.release(True)


def main(argv: list[str] | None = None) -> int:
    """Serve path points over TCP while a game is played from standard input.

    Input lines are ``start``, ``clear``, ``quit`` or ``X Y`` clicks.
    """
    from .tcp_sender import TcpSender

    parser = argparse.ArgumentParser(prog="scaradraw")
    parser.add_argument("--port", type=int, default=1234)
    args = parser.parse_args(argv)

    with TcpSender(args.port) as sender:
        controller = Controller(sender)
        controller.start_sending()
        try:
            _run_console(controller, sys.stdin)
        finally:
            controller.canvas.close()
            controller.stop()
    return 0