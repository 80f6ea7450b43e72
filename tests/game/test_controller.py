"""Tests for BoardController — the selection state machine."""

import random

import pytest

from chesstile.core.enums import HighlightKind, PieceKind, SelectionPhase
from chesstile.core.errors import PieceNotFoundError
from chesstile.core.piece import Piece
from chesstile.core.types import Square
from chesstile.game.controller import BoardController
from chesstile.game.interfaces import (
    IDLE,
    MISS,
    HighlightDelta,
    MoveRecord,
    PieceTarget,
    Selection,
    SquareTarget,
)

KNIGHT_SQ = Square(1, 0)  # b1
QUEEN_SQ = Square(3, 3)  # d4


def _make_controller(
    layout: tuple[tuple[PieceKind, Square], ...] = (
        (PieceKind.KNIGHT, KNIGHT_SQ),
        (PieceKind.QUEEN, QUEEN_SQ),
    ),
) -> tuple[BoardController, Piece, Piece]:
    """Helper: controller with a knight on b1 and a queen on d4."""
    ctrl = BoardController()
    placed = ctrl.new_session(layout)
    (knight, _), (queen, _), *_ = placed
    return ctrl, knight, queen


class TestNewSession:
    def test_initial_state_idle(self) -> None:
        ctrl, _, _ = _make_controller()
        assert ctrl.selection == IDLE
        assert ctrl.selection.phase == SelectionPhase.IDLE
        assert ctrl.hover is None
        assert ctrl.highlighted == frozenset()

    def test_pieces_placed(self) -> None:
        ctrl, knight, queen = _make_controller()
        assert ctrl.grid.locate(knight) == KNIGHT_SQ
        assert ctrl.grid.locate(queen) == QUEEN_SQ
        assert len(ctrl.grid) == 2

    def test_random_layout(self) -> None:
        ctrl = BoardController()
        placed = ctrl.new_session(rng=random.Random(5))
        kinds = sorted(piece.kind for piece, _ in placed)
        assert kinds == [PieceKind.KNIGHT, PieceKind.QUEEN]
        assert placed[0][1] != placed[1][1]

    def test_new_session_resets_selection_and_stale_ids(self) -> None:
        ctrl, knight, _ = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        ctrl.new_session(rng=random.Random(1))
        assert ctrl.selection.is_idle
        assert len(ctrl.grid) == 2
        assert ctrl.piece(knight.id) is None
        with pytest.raises(PieceNotFoundError):
            ctrl.on_click(PieceTarget(knight.id))

    def test_session_event_fires(self) -> None:
        ctrl = BoardController()
        sessions: list[int] = []
        ctrl.events.on_session_started.append(lambda placed: sessions.append(len(placed)))
        ctrl.new_session(rng=random.Random(2))
        assert sessions == [2]


class TestSelect:
    def test_click_piece_selects_with_cached_moves(self) -> None:
        ctrl, knight, _ = _make_controller()
        result = ctrl.on_click(PieceTarget(knight.id))
        assert result.selection.piece == knight
        assert result.selection.phase == SelectionPhase.SELECTED
        # b1 knight: a3, c3 and d2 are all free
        assert result.highlighted == {Square(0, 2), Square(2, 2), Square(3, 1)}
        assert ctrl.highlighted == result.highlighted
        assert result.move is None

    def test_selection_reports_legal_move_deltas(self) -> None:
        ctrl, knight, _ = _make_controller()
        result = ctrl.on_click(PieceTarget(knight.id))
        assert result.deltas == tuple(
            HighlightDelta(sq, HighlightKind.LEGAL_MOVE, True)
            for sq in result.selection.legal_moves
        )

    def test_click_same_piece_deselects(self) -> None:
        ctrl, knight, _ = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(PieceTarget(knight.id))
        assert result.selection == IDLE
        assert result.highlighted == frozenset()
        assert ctrl.highlighted == frozenset()
        assert all(not d.on for d in result.deltas)
        assert {d.square for d in result.deltas} == {
            Square(0, 2),
            Square(2, 2),
            Square(3, 1),
        }

    def test_click_other_piece_reselects(self) -> None:
        ctrl, knight, queen = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(PieceTarget(queen.id))
        assert result.selection.piece == queen
        assert len(result.highlighted) == 27
        off = [d for d in result.deltas if not d.on]
        on = [d for d in result.deltas if d.on]
        assert {d.square for d in off} == {Square(0, 2), Square(2, 2), Square(3, 1)}
        assert len(on) == 27
        # All OFF deltas come before the ON deltas
        assert result.deltas.index(on[0]) == len(off)

    def test_boxed_in_piece_selects_with_no_moves(self) -> None:
        ctrl, knight, _ = _make_controller(
            (
                (PieceKind.KNIGHT, Square(0, 0)),
                (PieceKind.QUEEN, Square(1, 2)),
                (PieceKind.QUEEN, Square(2, 1)),
            )
        )
        result = ctrl.on_click(PieceTarget(knight.id))
        assert result.selection.piece == knight
        assert result.highlighted == frozenset()

    def test_stale_piece_raises_and_keeps_state(self) -> None:
        ctrl, knight, queen = _make_controller()
        ctrl.on_click(PieceTarget(queen.id))
        ctrl.grid.remove(KNIGHT_SQ)
        with pytest.raises(PieceNotFoundError):
            ctrl.on_click(PieceTarget(knight.id))
        assert ctrl.selection.piece == queen


class TestDeselect:
    def test_illegal_square_deselects_without_moving(self) -> None:
        ctrl, knight, _ = _make_controller()
        before = ctrl.grid.copy()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(SquareTarget(Square(7, 7)))
        assert result.selection == IDLE
        assert result.move is None
        assert result.highlighted == frozenset()
        assert ctrl.grid == before

    def test_miss_deselects(self) -> None:
        ctrl, knight, _ = _make_controller()
        before = ctrl.grid.copy()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(MISS)
        assert result.selection == IDLE
        assert len(result.deltas) == 3
        assert ctrl.grid == before

    def test_off_board_square_is_a_miss(self) -> None:
        ctrl, knight, _ = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(SquareTarget(Square(9, 9)))
        assert result.selection == IDLE

    def test_idle_clicks_change_nothing(self) -> None:
        ctrl, _, _ = _make_controller()
        selections: list[Selection] = []
        ctrl.events.on_selection_changed.append(selections.append)
        for target in (MISS, SquareTarget(Square(5, 5))):
            result = ctrl.on_click(target)
            assert result.selection == IDLE
            assert result.deltas == ()
        assert selections == []


class TestMove:
    def test_legal_square_moves_piece(self) -> None:
        ctrl, knight, _ = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(SquareTarget(Square(2, 2)))
        assert result.move == MoveRecord(knight.id, KNIGHT_SQ, Square(2, 2))
        assert result.selection == IDLE
        assert result.highlighted == frozenset()
        assert ctrl.grid.locate(knight) == Square(2, 2)
        assert ctrl.grid.occupant(KNIGHT_SQ) is None

    def test_move_clears_legal_highlights(self) -> None:
        ctrl, knight, _ = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        result = ctrl.on_click(SquareTarget(Square(0, 2)))
        assert {d.square for d in result.deltas} == {Square(0, 2), Square(2, 2), Square(3, 1)}
        assert all(d.kind == HighlightKind.LEGAL_MOVE and not d.on for d in result.deltas)

    def test_moves_are_recomputed_after_move(self) -> None:
        ctrl, knight, queen = _make_controller()
        ctrl.on_click(PieceTarget(knight.id))
        ctrl.on_click(SquareTarget(Square(2, 2)))
        result = ctrl.on_click(PieceTarget(queen.id))
        # The knight on c3 now blocks the queen's south-west ray.
        assert Square(2, 2) in result.highlighted
        assert Square(1, 1) not in result.highlighted
        assert len(result.highlighted) == 25

    def test_queen_captures_blocker(self) -> None:
        ctrl, knight, queen = _make_controller(
            (
                (PieceKind.KNIGHT, Square(3, 6)),
                (PieceKind.QUEEN, Square(3, 3)),
            )
        )
        ctrl.on_click(PieceTarget(queen.id))
        assert Square(3, 6) in ctrl.highlighted
        assert Square(3, 7) not in ctrl.highlighted

        result = ctrl.on_click(SquareTarget(Square(3, 6)))

        assert result.move == MoveRecord(queen.id, Square(3, 3), Square(3, 6), knight.id)
        assert ctrl.grid.occupant(Square(3, 6)) == queen
        assert len(ctrl.grid) == 1
        assert ctrl.piece(knight.id) is None

    def test_move_event_fires(self) -> None:
        ctrl, knight, _ = _make_controller()
        moves: list[MoveRecord] = []
        ctrl.events.on_move.append(moves.append)
        ctrl.on_click(PieceTarget(knight.id))
        ctrl.on_click(SquareTarget(Square(3, 1)))
        assert moves == [MoveRecord(knight.id, KNIGHT_SQ, Square(3, 1))]

    def test_selection_events_follow_transitions(self) -> None:
        ctrl, knight, queen = _make_controller()
        phases: list[SelectionPhase] = []
        ctrl.events.on_selection_changed.append(lambda s: phases.append(s.phase))
        ctrl.on_click(PieceTarget(knight.id))
        ctrl.on_click(PieceTarget(queen.id))
        ctrl.on_click(SquareTarget(Square(3, 7)))
        assert phases == [
            SelectionPhase.SELECTED,
            SelectionPhase.SELECTED,
            SelectionPhase.IDLE,
        ]
