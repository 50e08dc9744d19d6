"""Geometry, tic-tac-toe trajectories and TCP/UDP point streaming for a five-bar SCARA plotter."""

__version__ = "0.1.0"