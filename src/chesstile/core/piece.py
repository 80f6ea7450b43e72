"""Piece value objects and the arena that hands out their identities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesstile.core.enums import PieceKind
from chesstile.core.errors import PieceNotFoundError


@dataclass(frozen=True, slots=True)
class PieceId:
    """Opaque, generation-checked handle to an arena slot.

    A slot is reused after its piece is released, but with a bumped
    generation, so a handle kept past release never aliases the new piece.
    """

    index: int
    generation: int

    def __str__(self) -> str:
        return f"#{self.index}.{self.generation}"


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece: identity plus kind.  Position lives on the board."""

    id: PieceId
    kind: PieceKind

    def __str__(self) -> str:
        return f"{self.kind!s}{self.id}"

    @property
    def symbol(self) -> str:
        return self.kind.symbol


class PieceArena:
    """Allocates and releases piece identities."""

    __slots__ = ("_generations", "_pieces", "_free")

    def __init__(self) -> None:
        self._generations: list[int] = []
        self._pieces: list[Piece | None] = []
        self._free: list[int] = []

    def allocate(self, kind: PieceKind) -> Piece:
        """Create a new piece of *kind* with a fresh handle."""
        if self._free:
            index = self._free.pop()
        else:
            index = len(self._pieces)
            self._generations.append(0)
            self._pieces.append(None)
        piece = Piece(PieceId(index, self._generations[index]), kind)
        self._pieces[index] = piece
        return piece

    def release(self, piece_id: PieceId) -> None:
        """Invalidate *piece_id*; raises if it is already stale."""
        if not self.is_alive(piece_id):
            raise PieceNotFoundError(piece_id)
        self._pieces[piece_id.index] = None
        self._generations[piece_id.index] += 1
        self._free.append(piece_id.index)

    def get(self, piece_id: PieceId) -> Piece | None:
        """Live piece for *piece_id*, or None if the handle is stale."""
        if not self.is_alive(piece_id):
            return None
        return self._pieces[piece_id.index]

    def is_alive(self, piece_id: PieceId) -> bool:
        idx = piece_id.index
        return (
            0 <= idx < len(self._pieces)
            and self._generations[idx] == piece_id.generation
            and self._pieces[idx] is not None
        )

    def clear(self) -> None:
        """Release every live piece."""
        for piece in list(self):
            self.release(piece.id)

    def __iter__(self) -> Iterator[Piece]:
        return (p for p in self._pieces if p is not None)

    def __len__(self) -> int:
        return sum(1 for p in self._pieces if p is not None)
