"""Tests for hover tracking in BoardController."""

from chesstile.core.enums import HighlightKind, PieceKind
from chesstile.core.types import Square
from chesstile.game.controller import BoardController
from chesstile.game.interfaces import MISS, HighlightDelta, PieceTarget, SquareTarget


def _make_controller() -> BoardController:
    ctrl = BoardController()
    ctrl.new_session(((PieceKind.KNIGHT, Square(1, 0)), (PieceKind.QUEEN, Square(3, 3))))
    return ctrl


def _on(sq: Square) -> HighlightDelta:
    return HighlightDelta(sq, HighlightKind.HOVER, True)


def _off(sq: Square) -> HighlightDelta:
    return HighlightDelta(sq, HighlightKind.HOVER, False)


class TestHoverIdle:
    def test_first_hover_highlights(self) -> None:
        ctrl = _make_controller()
        assert ctrl.on_hover(Square(4, 4)) == [_on(Square(4, 4))]
        assert ctrl.hover == Square(4, 4)

    def test_same_square_is_noop(self) -> None:
        ctrl = _make_controller()
        ctrl.on_hover(Square(4, 4))
        assert ctrl.on_hover(Square(4, 4)) == []

    def test_new_square_moves_highlight(self) -> None:
        ctrl = _make_controller()
        ctrl.on_hover(Square(4, 4))
        assert ctrl.on_hover(Square(5, 4)) == [_off(Square(4, 4)), _on(Square(5, 4))]
        assert ctrl.hover == Square(5, 4)

    def test_none_clears(self) -> None:
        ctrl = _make_controller()
        ctrl.on_hover(Square(4, 4))
        assert ctrl.on_hover(None) == [_off(Square(4, 4))]
        assert ctrl.hover is None
        assert ctrl.on_hover(None) == []

    def test_off_board_square_counts_as_none(self) -> None:
        ctrl = _make_controller()
        ctrl.on_hover(Square(0, 0))
        assert ctrl.on_hover(Square(-1, 0)) == [_off(Square(0, 0))]
        assert ctrl.hover is None


class TestHoverSuppressed:
    def test_selecting_clears_hover(self) -> None:
        ctrl = _make_controller()
        ctrl.on_hover(Square(1, 0))
        knight = ctrl.grid.occupant(Square(1, 0))
        assert knight is not None

        result = ctrl.on_click(PieceTarget(knight.id))

        assert _off(Square(1, 0)) in result.deltas
        assert ctrl.hover is None

    def test_hover_ignored_while_selected(self) -> None:
        ctrl = _make_controller()
        knight = ctrl.grid.occupant(Square(1, 0))
        assert knight is not None
        ctrl.on_click(PieceTarget(knight.id))

        assert ctrl.on_hover(Square(6, 6)) == []
        assert ctrl.on_hover(None) == []
        assert ctrl.hover is None

    def test_hover_resumes_after_deselect(self) -> None:
        ctrl = _make_controller()
        knight = ctrl.grid.occupant(Square(1, 0))
        assert knight is not None
        ctrl.on_click(PieceTarget(knight.id))
        ctrl.on_click(MISS)

        assert ctrl.on_hover(Square(6, 6)) == [_on(Square(6, 6))]

    def test_hover_resumes_after_move(self) -> None:
        ctrl = _make_controller()
        knight = ctrl.grid.occupant(Square(1, 0))
        assert knight is not None
        ctrl.on_click(PieceTarget(knight.id))
        ctrl.on_click(SquareTarget(Square(2, 2)))

        assert ctrl.on_hover(Square(2, 2)) == [_on(Square(2, 2))]
