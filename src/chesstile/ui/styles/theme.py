"""Visual theme constants and QSS styles for Chesstile."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_hover: QColor  # tile under the pointer
    highlight_move: QColor  # legal move targets
    highlight_selected: QColor  # selected piece origin
    piece_fill: QColor
    piece_outline: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_hover=QColor(255, 255, 255, 90),
            highlight_move=QColor(255, 255, 0, 110),  # yellow transparent
            highlight_selected=QColor(155, 199, 0, 120),  # green
            piece_fill=QColor(250, 250, 250),
            piece_outline=QColor(30, 30, 30),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_hover=QColor(255, 255, 255, 90),
            highlight_move=QColor(255, 255, 0, 110),
            highlight_selected=QColor(155, 199, 0, 120),
            piece_fill=QColor(250, 250, 250),
            piece_outline=QColor(30, 30, 30),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_hover=QColor(255, 255, 255, 90),
            highlight_move=QColor(255, 255, 0, 110),
            highlight_selected=QColor(155, 199, 0, 120),
            piece_fill=QColor(250, 250, 250),
            piece_outline=QColor(30, 30, 30),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Preset by display name; unknown names fall back to the default."""
        presets = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return presets.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Green")


APP_STYLE = """
QMainWindow {
    background-color: #262522;
}
QStatusBar {
    background-color: #1e1d1b;
    color: #c8c8c8;
}
QMenuBar {
    background-color: #1e1d1b;
    color: #e0e0e0;
}
QMenuBar::item:selected, QMenu::item:selected {
    background-color: #3a3936;
}
QMenu {
    background-color: #2b2a27;
    color: #e0e0e0;
}
"""
