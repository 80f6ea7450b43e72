"""BoardController — turns pointer events into board mutations.

Owns the grid, the piece arena, the selection and the hover square.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from chesstile.core.board import BoardGrid
from chesstile.core.enums import HighlightKind
from chesstile.core.errors import PieceNotFoundError
from chesstile.core.layout import Layout, initial_layout
from chesstile.core.move_rules import legal_moves
from chesstile.core.piece import Piece, PieceArena, PieceId
from chesstile.core.types import Square
from chesstile.game.interfaces import (
    IDLE,
    ClickResult,
    ClickTarget,
    HighlightDelta,
    IBoardController,
    MoveRecord,
    PieceTarget,
    Selection,
    SquareTarget,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
SelectionCallback = Callable[[Selection], None]
SessionCallback = Callable[[list[tuple[Piece, Square]]], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_session_started: list[SessionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController(IBoardController):
    """Selection / hover state machine over a :class:`BoardGrid`.

    States are ``Idle`` and ``Selected(piece, legal_moves)``.  Legal moves
    are computed once when a piece is selected and dropped on every
    transition out of ``Selected``.  Hover is tracked only while idle.

    Thread-safety: all methods are expected to run on a single thread (the
    GUI thread), one call per pointer event.
    """

    __slots__ = ("_grid", "_arena", "_selection", "_hover", "events")

    def __init__(self) -> None:
        self._grid = BoardGrid()
        self._arena = PieceArena()
        self._selection: Selection = IDLE
        self._hover: Square | None = None
        self.events = BoardEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def grid(self) -> BoardGrid:
        return self._grid

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def hover(self) -> Square | None:
        return self._hover

    @property
    def highlighted(self) -> frozenset[Square]:
        """Squares currently shown as legal moves."""
        return frozenset(self._selection.legal_moves)

    def piece(self, piece_id: PieceId) -> Piece | None:
        return self._arena.get(piece_id)

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        return self._grid.pieces()

    # ── IBoardController impl ────────────────────────────────────────────

    def new_session(
        self,
        layout: Layout | None = None,
        rng: random.Random | None = None,
    ) -> list[tuple[Piece, Square]]:
        if layout is None:
            layout = initial_layout(rng=rng)

        self._grid.clear()
        self._arena.clear()
        self._selection = IDLE
        self._hover = None

        placed: list[tuple[Piece, Square]] = []
        for kind, sq in layout:
            piece = self._arena.allocate(kind)
            self._grid.place(piece, sq)
            placed.append((piece, sq))

        _LOGGER.info(
            "New session: %s",
            ", ".join(f"{piece.kind!s} on {sq}" for piece, sq in placed),
        )
        for cb in self.events.on_session_started:
            cb(placed)
        return placed

    def on_hover(self, square: Square | None) -> list[HighlightDelta]:
        if not self._selection.is_idle:
            return []
        if square is not None and not square.is_valid:
            square = None
        if square == self._hover:
            return []

        deltas: list[HighlightDelta] = []
        if self._hover is not None:
            deltas.append(HighlightDelta(self._hover, HighlightKind.HOVER, False))
        if square is not None:
            deltas.append(HighlightDelta(square, HighlightKind.HOVER, True))
        self._hover = square
        return deltas

    def on_click(self, target: ClickTarget) -> ClickResult:
        if isinstance(target, PieceTarget):
            return self._click_piece(target.piece_id)
        if isinstance(target, SquareTarget) and target.square.is_valid:
            return self._click_square(target.square)
        # Miss, or a square past the board edge
        return self._deselect()

    # ── Transitions ──────────────────────────────────────────────────────

    def _click_piece(self, piece_id: PieceId) -> ClickResult:
        piece = self._arena.get(piece_id)
        origin = self._grid.locate(piece) if piece is not None else None
        if piece is None or origin is None:
            raise PieceNotFoundError(piece_id)

        if self._selection.piece == piece:
            return self._deselect()
        return self._select(piece, origin)

    def _click_square(self, sq: Square) -> ClickResult:
        piece = self._selection.piece
        if piece is None:
            return ClickResult(IDLE, frozenset())
        if sq not in self._selection.legal_moves:
            return self._deselect()

        origin = self._grid.locate(piece)
        if origin is None:
            raise PieceNotFoundError(piece.id)
        captured = self._grid.move_piece(piece, sq)
        if captured is not None:
            self._arena.release(captured.id)

        record = MoveRecord(
            piece.id, origin, sq, captured.id if captured is not None else None
        )
        deltas = self._clear_highlights()
        self._selection = IDLE

        if captured is not None:
            _LOGGER.info("%s %s -> %s, captures %s", piece.kind, origin, sq, captured)
        else:
            _LOGGER.info("%s %s -> %s", piece.kind, origin, sq)
        self._emit_move(record)
        self._emit_selection()
        return ClickResult(IDLE, frozenset(), record, tuple(deltas))

    def _select(self, piece: Piece, origin: Square) -> ClickResult:
        deltas = self._clear_highlights()
        moves = legal_moves(piece.kind, origin, self._grid)
        self._selection = Selection(piece, moves)
        deltas.extend(HighlightDelta(sq, HighlightKind.LEGAL_MOVE, True) for sq in moves)

        _LOGGER.debug("Selected %s on %s (%d moves)", piece, origin, len(moves))
        self._emit_selection()
        return ClickResult(self._selection, frozenset(moves), None, tuple(deltas))

    def _deselect(self) -> ClickResult:
        if self._selection.is_idle:
            return ClickResult(IDLE, frozenset())
        deltas = self._clear_highlights()
        self._selection = IDLE
        _LOGGER.debug("Selection cleared")
        self._emit_selection()
        return ClickResult(IDLE, frozenset(), None, tuple(deltas))

    def _clear_highlights(self) -> list[HighlightDelta]:
        """Switch off legal-move and hover highlights; hover becomes None."""
        deltas = [
            HighlightDelta(sq, HighlightKind.LEGAL_MOVE, False)
            for sq in self._selection.legal_moves
        ]
        if self._hover is not None:
            deltas.append(HighlightDelta(self._hover, HighlightKind.HOVER, False))
            self._hover = None
        return deltas

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selection)
