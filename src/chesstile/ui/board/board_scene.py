"""BoardScene — QGraphicsScene that draws the board and feeds pointer input
into the :class:`BoardController`.

The scene is the pointer adapter: it resolves scene positions into squares
or click targets, calls the controller once per event, and renders the
highlight deltas and moves it gets back.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QPointF,
    QPropertyAnimation,
    Qt,
    pyqtSignal,
)
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSceneMouseEvent

from chesstile.core.enums import HighlightKind
from chesstile.core.errors import PieceNotFoundError
from chesstile.core.piece import Piece, PieceId
from chesstile.core.types import ALL_SQUARES, BOARD_SIZE, Square
from chesstile.game.controller import BoardController
from chesstile.game.interfaces import (
    MISS,
    ClickResult,
    ClickTarget,
    HighlightDelta,
    MoveRecord,
    PieceTarget,
    SquareTarget,
)
from chesstile.ui.board.piece_item import PieceItem
from chesstile.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_Z_TILE = 0.0
_Z_SELECTED = 0.5
_Z_HOVER = 0.6
_Z_MOVE = 0.8


class BoardScene(QGraphicsScene):
    """Renders tiles, highlights and piece items for a controller.

    Signals:
        piece_moved(MoveRecord): Emitted after a click moved a piece.
        selection_changed(object): Emitted with the new ``Selection``.
    """

    piece_moved = pyqtSignal(object)
    selection_changed = pyqtSignal(object)

    TILE = 80  # default px per square

    _ANIM_DURATION_MS = 150

    def __init__(
        self,
        controller: BoardController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else BoardController()
        self._theme = BoardTheme.default()
        self._tile = self.TILE
        self._show_legal_moves = True
        self._show_hover = True
        self._animate_moves = True
        self._active_anim: QPropertyAnimation | None = None

        # Visual layers
        self._tile_items: dict[Square, QGraphicsRectItem] = {}
        self._overlays: dict[tuple[Square, HighlightKind], QGraphicsRectItem] = {}
        self._selected_item: QGraphicsRectItem | None = None
        self._piece_items: dict[PieceId, PieceItem] = {}

        self._controller.events.on_session_started.append(self._on_session_started)
        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def tile_size(self) -> int:
        return self._tile

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_tile_size(self, size: int) -> None:
        """Rescale tiles and overlays; piece items are resized in place."""
        self._tile = max(int(size), 8)
        self._draw_board()
        self._resize_pieces()
        self._rebuild_overlays()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self._rebuild_overlays()

    def set_show_hover(self, visible: bool) -> None:
        """Show or hide the tile-under-pointer highlight."""
        self._show_hover = visible
        self._rebuild_overlays()

    def set_animate_moves(self, enabled: bool) -> None:
        """Enable or disable piece move animations."""
        self._animate_moves = enabled

    def piece_item(self, piece_id: PieceId) -> PieceItem | None:
        return self._piece_items.get(piece_id)

    def has_overlay(self, sq: Square, kind: HighlightKind) -> bool:
        return (sq, kind) in self._overlays

    # ── Pointer handling ─────────────────────────────────────────────────

    def handle_pointer_move(self, pos: QPointF) -> None:
        """One hover tick for the pointer at scene position *pos*."""
        self._apply_deltas(self._controller.on_hover(self._pos_to_square(pos)))

    def pointer_left(self) -> None:
        """The pointer left the board view."""
        self._apply_deltas(self._controller.on_hover(None))

    def handle_press(self, pos: QPointF) -> ClickResult | None:
        """One click at scene position *pos*.

        Returns None when the click referred to a piece the controller no
        longer knows; the scene is resynced in that case.
        """
        target = self._resolve_target(pos)
        try:
            result = self._controller.on_click(target)
        except PieceNotFoundError:
            _LOGGER.warning("Click on stale piece item %s; resyncing", target)
            self._sync_pieces()
            self._rebuild_overlays()
            return None

        self._apply_deltas(result.deltas)
        self._update_selected_marker()
        self.selection_changed.emit(result.selection)
        if result.move is not None:
            self._animate_move(result.move)
            self.piece_moved.emit(result.move)
        return result

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self.handle_pointer_move(event.scenePos())
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.handle_press(event.scenePos())
        event.accept()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._rebuild_overlays()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles."""
        for tile in self._tile_items.values():
            self.removeItem(tile)
        self._tile_items.clear()

        t = self._tile
        for sq in ALL_SQUARES:
            vx, vy = self._visual_coords(sq)
            is_light = (sq.file + sq.rank) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vx * t, vy * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(_Z_TILE)
            self.addItem(rect)
            self._tile_items[sq] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller's grid."""
        self._stop_animation()
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        for sq, piece in self._controller.pieces():
            self._add_piece_item(piece, sq)

    def _resize_pieces(self) -> None:
        self._stop_animation()
        for item in self._piece_items.values():
            item.set_tile_size(self._tile)
            item.setPos(self._piece_pos(item.square, item))

    def _add_piece_item(self, piece: Piece, sq: Square) -> PieceItem:
        item = PieceItem(
            piece, sq, self._tile, self._theme.piece_fill, self._theme.piece_outline
        )
        item.setPos(self._piece_pos(sq, item))
        self.addItem(item)
        self._piece_items[piece.id] = item
        return item

    def _animate_move(self, move: MoveRecord) -> None:
        self._stop_animation()

        if move.captured is not None:
            cap = self._piece_items.pop(move.captured, None)
            if cap is not None:
                self.removeItem(cap)

        item = self._piece_items.get(move.piece_id)
        if item is None:
            _LOGGER.warning("No item for moved piece %s; resyncing", move.piece_id)
            self._sync_pieces()
            return

        item.square = move.to_sq
        target = self._piece_pos(move.to_sq, item)
        if not self._animate_moves:
            item.setPos(target)
            return

        item.setZValue(2)
        anim = QPropertyAnimation(item, b"pos", self)
        anim.setDuration(self._ANIM_DURATION_MS)
        anim.setStartValue(item.pos())
        anim.setEndValue(target)
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)

        def _on_finished() -> None:
            self._active_anim = None
            item.setZValue(1)
            item.setPos(target)

        anim.finished.connect(_on_finished)
        self._active_anim = anim
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def _stop_animation(self) -> None:
        """Finish a running slide instantly."""
        anim = self._active_anim
        if anim is None:
            return
        self._active_anim = None
        anim.stop()
        for item in self._piece_items.values():
            item.setZValue(1)
            item.setPos(self._piece_pos(item.square, item))

    # ── Highlights ───────────────────────────────────────────────────────

    def _apply_deltas(self, deltas: list[HighlightDelta] | tuple[HighlightDelta, ...]) -> None:
        for delta in deltas:
            key = (delta.square, delta.kind)
            if not delta.on:
                overlay = self._overlays.pop(key, None)
                if overlay is not None:
                    self.removeItem(overlay)
            elif key not in self._overlays and self._overlay_visible(delta.kind):
                self._overlays[key] = self._make_overlay(delta.square, delta.kind)

    def _rebuild_overlays(self) -> None:
        """Re-create every overlay from the controller's current state."""
        for overlay in self._overlays.values():
            self.removeItem(overlay)
        self._overlays.clear()

        deltas: list[HighlightDelta] = []
        hover = self._controller.hover
        if hover is not None:
            deltas.append(HighlightDelta(hover, HighlightKind.HOVER, True))
        deltas.extend(
            HighlightDelta(sq, HighlightKind.LEGAL_MOVE, True)
            for sq in self._controller.selection.legal_moves
        )
        self._apply_deltas(deltas)
        self._update_selected_marker()

    def _update_selected_marker(self) -> None:
        if self._selected_item is not None:
            self.removeItem(self._selected_item)
            self._selected_item = None
        piece = self._controller.selection.piece
        if piece is None:
            return
        origin = self._controller.grid.locate(piece)
        if origin is None:
            return
        self._selected_item = self._make_highlight(
            origin, self._theme.highlight_selected, _Z_SELECTED
        )

    def _overlay_visible(self, kind: HighlightKind) -> bool:
        if kind == HighlightKind.HOVER:
            return self._show_hover
        return self._show_legal_moves

    def _make_overlay(self, sq: Square, kind: HighlightKind) -> QGraphicsRectItem:
        if kind == HighlightKind.HOVER:
            return self._make_highlight(sq, self._theme.highlight_hover, _Z_HOVER)
        return self._make_highlight(sq, self._theme.highlight_move, _Z_MOVE)

    def _make_highlight(self, sq: Square, color: QColor, z: float) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        vx, vy = self._visual_coords(sq)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _resolve_target(self, pos: QPointF) -> ClickTarget:
        """Map a press to a click target.

        A press on a highlighted legal square is a square click even when a
        piece stands there, so the selected queen can capture it.
        """
        sq = self._pos_to_square(pos)
        if sq is not None and sq in self._controller.selection.legal_moves:
            return SquareTarget(sq)
        for item in self.items(pos):
            if isinstance(item, PieceItem):
                return PieceTarget(item.piece_id)
        if sq is None:
            return MISS
        piece = self._controller.grid.occupant(sq)
        if piece is not None:
            return PieceTarget(piece.id)
        return SquareTarget(sq)

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board file/rank → visual column/row (rank 1 at the bottom)."""
        return sq.file, BOARD_SIZE - 1 - sq.rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square, None when off the board."""
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Square(col, BOARD_SIZE - 1 - row)

    def _piece_pos(self, sq: Square, item: PieceItem) -> QPointF:
        t = self._tile
        vx, vy = self._visual_coords(sq)
        return QPointF(vx * t + item.margin, vy * t + item.margin)

    def _on_session_started(self, _placed: list[tuple[Piece, Square]]) -> None:
        self._sync_pieces()
        self._rebuild_overlays()
