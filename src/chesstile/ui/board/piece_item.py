"""PieceItem — a piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QCursor, QFont, QPainter, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsObject, QStyleOptionGraphicsItem, QWidget

from chesstile.core.piece import Piece, PieceId
from chesstile.core.types import Square


class PieceItem(QGraphicsObject):
    """A single piece on the board.

    Stores its logical *square*; ``pos`` is animatable because this is a
    :class:`QGraphicsObject`.
    """

    _MARGIN_RATIO = 0.06
    _GLYPH_RATIO = 0.78

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self._fill = fill
        self._outline = outline
        self._tile_size = tile_size
        self._margin = 0.0
        self._update_size(tile_size)

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setZValue(1)

    @property
    def piece_id(self) -> PieceId:
        return self.piece.id

    @property
    def margin(self) -> float:
        """Inner margin to keep the glyph away from tile edges."""
        return self._margin

    def set_tile_size(self, size: int) -> None:
        """Update tile size and re-render."""
        self.prepareGeometryChange()
        self._update_size(size)
        self.update()

    def boundingRect(self) -> QRectF:
        side = max(float(self._tile_size) - 2.0 * self._margin, 1.0)
        return QRectF(0.0, 0.0, side, side)

    def paint(
        self,
        painter: QPainter | None,
        option: QStyleOptionGraphicsItem | None,
        widget: QWidget | None = None,
    ) -> None:
        if painter is None:
            return
        font = QFont()
        font.setPixelSize(max(int(self._tile_size * self._GLYPH_RATIO), 1))
        painter.setFont(font)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = self.boundingRect()

        # Shadow pass for contrast on light squares, then the glyph itself.
        painter.setPen(QPen(self._outline))
        painter.drawText(rect.translated(1.0, 1.0), Qt.AlignmentFlag.AlignCenter, self.piece.symbol)
        painter.setPen(QPen(self._fill))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.piece.symbol)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        self._margin = float(size) * self._MARGIN_RATIO
