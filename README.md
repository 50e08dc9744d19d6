# scaradraw

scaradraw plans drawings for a five-bar SCARA plotter and streams them to the
machine as timed points over TCP.

It offers:

- plane geometry: `Coordinate`, `Line`, `Circle`, `Arc`, `Rectangle` and
  `Triangle`, with angle helpers in `scaradraw.angles`;
- `Painter` and `Shape` in `scaradraw.shape`: shapes draw onto a `Painter`,
  which records drawing commands in its `commands` list;
- `WorkSpace`, which works out the region the two arms can reach and the arcs
  that bound it (`boundary_arcs()`);
- `TicTacToe`, a game board whose placed pieces become pen trajectories;
- `TrajectorySpeedManipulator`, which steps through a shared path no faster
  than a set speed and splits long segments into short steps;
- `TcpSender` and `UdpSender`, which send the points to the controller;
- `DrawingCanvas` and `Controller` in `scaradraw.app`, which tie a game, a
  headless drawing surface and the point stream together.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
scaradraw [--port PORT]
```

This listens on TCP port 1234 (or `--port`) for the plotter controller and
streams queued path points to the first client that connects. The game is
played from standard input, one command per line:

- `start` starts a new game;
- `X Y` is a click at that position (for example `350 180`): during a game it
  picks the cell for the current player, otherwise it adds a point to the
  freehand path;
- `clear` forgets the freehand strokes on the canvas;
- `quit` or `exit` stops the program.

Each packet sent is three little-endian doubles, `(time_ms, x, y)`. The time is
cumulative. `x` and `y` are measured from the centre of the workspace, with
both signs flipped. Build a packet with
`scaradraw.app.encode_packet(time_ms, x, y)`.

## Using the library

```python
from scaradraw.coordinate import Coordinate
from scaradraw.tictactoe import TicTacToe

game = TicTacToe(Coordinate(340, 170, 0), 120)
game.start_game()
game.process_user_move(Coordinate(350, 180, 0))  # places CROSS in cell (0, 0)
print(game.grid[0][0])
```

Distances, angles and circle intersections come from the shape classes:

```python
from scaradraw.circle import Circle
from scaradraw.coordinate import Coordinate

a = Circle(Coordinate(0, 0, 0), 5)
b = Circle(Coordinate(8, 0, 0), 5)
print(a.circle_intersection(b))  # the two points (4, 3, 0) and (4, -3, 0)
```

`circle_intersection` returns `None` when the circles do not meet, an empty
list when they coincide, and one or two points otherwise.

## What it does not do

There is no graphical window. `DrawingCanvas` is headless: mouse input is fed
through `press`, `move` and `release` (or the standard-input commands above),
and drawing goes to a recording `Painter`, not to the screen.