"""Interaction layer — selection/hover state machine and its value types.

Quick start::

    from chesstile.game import BoardController, PieceTarget, SquareTarget

    ctrl = BoardController()
    placed = ctrl.new_session()
    piece, square = placed[0]
    result = ctrl.on_click(PieceTarget(piece.id))
    ctrl.on_click(SquareTarget(result.selection.legal_moves[0]))
"""

from chesstile.game.controller import BoardController, BoardEvents
from chesstile.game.interfaces import (
    IDLE,
    MISS,
    ClickResult,
    ClickTarget,
    HighlightDelta,
    IBoardController,
    Miss,
    MoveRecord,
    PieceTarget,
    Selection,
    SquareTarget,
)

__all__ = [
    # Interfaces / values
    "IDLE",
    "MISS",
    "ClickResult",
    "ClickTarget",
    "HighlightDelta",
    "IBoardController",
    "Miss",
    "MoveRecord",
    "PieceTarget",
    "Selection",
    "SquareTarget",
    # Concrete
    "BoardController",
    "BoardEvents",
]
