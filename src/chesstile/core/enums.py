"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum, auto


class PieceKind(IntEnum):
    """Kinds of pieces that can appear on the board."""

    KNIGHT = auto()
    QUEEN = auto()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♘."""
        return _SYMBOLS[self]

    @property
    def letter(self) -> str:
        """Single-letter abbreviation used in board diagrams."""
        return _LETTERS[self]

    def __str__(self) -> str:
        return self.name.lower()


_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "♘",
    PieceKind.QUEEN: "♕",
}

_LETTERS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "N",
    PieceKind.QUEEN: "Q",
}


class SelectionPhase(IntEnum):
    """States of the selection state machine."""

    IDLE = auto()
    SELECTED = auto()


class HighlightKind(IntEnum):
    """What a highlighted square means to the presentation layer."""

    HOVER = auto()
    LEGAL_MOVE = auto()
