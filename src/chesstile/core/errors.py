"""Exceptions raised by the board domain.

Every error here is a contract violation surfaced to the caller; nothing is
retried or recovered internally.  Plain "not found" queries (``locate``,
an empty legal-move set) return empty values instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesstile.core.piece import Piece, PieceId
    from chesstile.core.types import Square


class BoardError(Exception):
    """Base class for board-domain errors."""


class OutOfBoundsError(BoardError, ValueError):
    """A coordinate lies outside the 8x8 board."""

    def __init__(self, square: Square) -> None:
        super().__init__(f"Square {square.file, square.rank} is off the board")
        self.square = square


class SquareOccupiedError(BoardError):
    """Attempted to place a piece on a square that already holds one."""

    def __init__(self, square: Square, occupant: Piece) -> None:
        super().__init__(f"Square {square} is already occupied by {occupant}")
        self.square = square
        self.occupant = occupant


class PieceNotFoundError(BoardError, LookupError):
    """The referenced piece is not on the board (or its handle is stale)."""

    def __init__(self, piece_id: PieceId) -> None:
        super().__init__(f"Piece {piece_id} is not on the board")
        self.piece_id = piece_id
