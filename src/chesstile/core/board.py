"""BoardGrid - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesstile.core.errors import (
    OutOfBoundsError,
    PieceNotFoundError,
    SquareOccupiedError,
)
from chesstile.core.piece import Piece
from chesstile.core.types import ALL_SQUARES, BOARD_SIZE, Square


def _index(sq: Square) -> int:
    if not sq.is_valid:
        raise OutOfBoundsError(sq)
    return sq.rank * BOARD_SIZE + sq.file


class BoardGrid:
    """Mutable 64-square occupancy map.

    Every occupied square holds exactly one piece and a piece is never on two
    squares: the only way to relocate a piece is :meth:`move_piece`, which
    clears the source and fills the destination in one step.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Queries ------------------------------------------------------------

    def occupant(self, sq: Square) -> Piece | None:
        return self._squares[_index(sq)]

    def is_occupied(self, sq: Square) -> bool:
        return self.occupant(sq) is not None

    def locate(self, piece: Piece) -> Square | None:
        """Square holding *piece*, or None if it is not on the board."""
        for sq in ALL_SQUARES:
            if self._squares[_index(sq)] == piece:
                return sq
        return None

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """All ``(square, piece)`` placements in rank-major order."""
        for sq in ALL_SQUARES:
            piece = self._squares[_index(sq)]
            if piece is not None:
                yield sq, piece

    def __len__(self) -> int:
        return sum(1 for p in self._squares if p is not None)

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, sq: Square) -> None:
        """Put *piece* on an empty square."""
        idx = _index(sq)
        occupant = self._squares[idx]
        if occupant is not None:
            raise SquareOccupiedError(sq, occupant)
        self._squares[idx] = piece

    def move_piece(self, piece: Piece, destination: Square) -> Piece | None:
        """Relocate *piece* to *destination*.

        Returns the piece previously on *destination* (now off the board),
        or None if the square was empty.
        """
        dst = _index(destination)
        origin = self.locate(piece)
        if origin is None:
            raise PieceNotFoundError(piece.id)
        if origin == destination:
            return None
        displaced = self._squares[dst]
        self._squares[_index(origin)], self._squares[dst] = None, piece
        return displaced

    def remove(self, sq: Square) -> Piece | None:
        """Clear *sq*; returns the removed piece (None if already empty)."""
        idx = _index(sq)
        piece = self._squares[idx]
        self._squares[idx] = None
        return piece

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)

    def copy(self) -> BoardGrid:
        grid = BoardGrid()
        grid._squares = self._squares.copy()
        return grid

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardGrid):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._squares[rank * BOARD_SIZE + file]
                row.append(p.kind.letter if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
