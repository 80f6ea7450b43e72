"""Value types exchanged with the presentation layer, plus the controller ABC.

The presentation side resolves raw pointer input into a :data:`ClickTarget`
(or a hovered square) and consumes :class:`HighlightDelta` and
:class:`ClickResult` values in return.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from chesstile.core.enums import HighlightKind, SelectionPhase

if TYPE_CHECKING:
    from chesstile.core.layout import Layout
    from chesstile.core.piece import Piece, PieceId
    from chesstile.core.types import Square


# ── Click targets ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PieceTarget:
    """The pointer pressed on a piece."""

    piece_id: PieceId


@dataclass(frozen=True, slots=True)
class SquareTarget:
    """The pointer pressed on a board square (not on a piece)."""

    square: Square


@dataclass(frozen=True, slots=True)
class Miss:
    """The pointer pressed outside the board."""


MISS = Miss()

ClickTarget: TypeAlias = PieceTarget | SquareTarget | Miss


# ── Results ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Selection:
    """Selection state: idle, or one piece with its cached legal moves."""

    piece: Piece | None = None
    legal_moves: tuple[Square, ...] = ()

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.IDLE if self.piece is None else SelectionPhase.SELECTED

    @property
    def is_idle(self) -> bool:
        return self.piece is None


IDLE = Selection()


@dataclass(frozen=True, slots=True)
class HighlightDelta:
    """Turn a square's highlight of *kind* on or off."""

    square: Square
    kind: HighlightKind
    on: bool


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A completed move, for the renderer to animate."""

    piece_id: PieceId
    from_sq: Square
    to_sq: Square
    captured: PieceId | None = None


@dataclass(frozen=True, slots=True)
class ClickResult:
    """Outcome of one click.

    Attributes:
        selection: Selection state after the click.
        highlighted: Squares to show as legal moves (empty when idle).
        move: The move performed, if any.
        deltas: Highlight changes caused by the click, in application order.
    """

    selection: Selection
    highlighted: frozenset[Square]
    move: MoveRecord | None = None
    deltas: tuple[HighlightDelta, ...] = ()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IBoardController(ABC):
    """Interface for the interaction controller driven once per pointer event."""

    @abstractmethod
    def new_session(
        self,
        layout: Layout | None = None,
        rng: random.Random | None = None,
    ) -> list[tuple[Piece, Square]]:
        """Reset the board and place the starting pieces."""

    @abstractmethod
    def on_hover(self, square: Square | None) -> list[HighlightDelta]:
        """Update hover for the square under the pointer (None if off-board)."""

    @abstractmethod
    def on_click(self, target: ClickTarget) -> ClickResult:
        """Advance the selection state machine by one click."""
