"""Chesstile — an interactive knight-and-queen chessboard."""

__version__ = "0.1.0"
