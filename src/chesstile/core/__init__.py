"""Core domain layer — pure board logic with zero external dependencies.

Quick start::

    from chesstile.core import BoardGrid, PieceArena, PieceKind, Square, legal_moves

    grid, arena = BoardGrid(), PieceArena()
    queen = arena.allocate(PieceKind.QUEEN)
    grid.place(queen, Square(3, 3))
    for sq in legal_moves(queen.kind, Square(3, 3), grid):
        print(sq)
"""

from chesstile.core.board import BoardGrid
from chesstile.core.enums import HighlightKind, PieceKind, SelectionPhase
from chesstile.core.errors import (
    BoardError,
    OutOfBoundsError,
    PieceNotFoundError,
    SquareOccupiedError,
)
from chesstile.core.layout import DEFAULT_KINDS, Layout, initial_layout
from chesstile.core.move_rules import (
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    knight_moves,
    legal_moves,
    queen_moves,
)
from chesstile.core.piece import Piece, PieceArena, PieceId
from chesstile.core.types import ALL_SQUARES, BOARD_SIZE, Square

__all__ = [
    # Enums
    "HighlightKind",
    "PieceKind",
    "SelectionPhase",
    # Types
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Square",
    # Errors
    "BoardError",
    "OutOfBoundsError",
    "PieceNotFoundError",
    "SquareOccupiedError",
    # Domain objects
    "BoardGrid",
    "Piece",
    "PieceArena",
    "PieceId",
    # Rules / layout
    "DEFAULT_KINDS",
    "KNIGHT_OFFSETS",
    "Layout",
    "QUEEN_DIRS",
    "initial_layout",
    "knight_moves",
    "legal_moves",
    "queen_moves",
]
