"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

import random

from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QMenu, QStatusBar

from chesstile.core.board import BoardGrid
from chesstile.game.controller import BoardController
from chesstile.game.interfaces import MoveRecord, Selection
from chesstile.ui.board.board_scene import BoardScene
from chesstile.ui.board.board_view import BoardView
from chesstile.ui.settings import AppSettings, apply_settings
from chesstile.ui.styles.theme import THEME_NAMES


def describe_selection(selection: Selection, grid: BoardGrid) -> str:
    """Status-bar text for the current selection."""
    piece = selection.piece
    if piece is None:
        return "Click a piece to select it"
    origin = grid.locate(piece)
    where = f" on {origin}" if origin is not None else ""
    count = len(selection.legal_moves)
    if count == 0:
        return f"{piece.kind.name.title()}{where}: no legal moves"
    noun = "move" if count == 1 else "moves"
    return f"{piece.kind.name.title()}{where}: {count} legal {noun}"


def describe_move(move: MoveRecord, controller: BoardController) -> str:
    piece = controller.piece(move.piece_id)
    name = piece.kind.name.title() if piece is not None else "Piece"
    text = f"{name} {move.from_sq} → {move.to_sq}"
    if move.captured is not None:
        text += " (capture)"
    return text


class MainWindow(QMainWindow):
    """Main application window for Chesstile."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chesstile")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings if settings is not None else AppSettings()
        self._rng = random.Random(self._settings.layout_seed)
        self._controller = BoardController()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self._apply_settings()
        self.new_layout()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_view.board_scene

    # ── Actions ──────────────────────────────────────────────────────────

    def new_layout(self) -> None:
        """Clear the board and place the pieces at new random squares."""
        self._controller.new_session(rng=self._rng)
        self._status_label.setText(
            describe_selection(self._controller.selection, self._controller.grid)
        )

    def set_board_theme(self, name: str) -> None:
        """Switch the board colours to the preset called *name*."""
        self._settings.board_theme = name
        act = self._theme_actions.get(name)
        if act is not None and not act.isChecked():
            act.setChecked(True)
        self._apply_settings()

    def _set_flag(self, field: str, value: bool) -> None:
        setattr(self._settings, field, value)
        self._apply_settings()

    def _apply_settings(self) -> None:
        apply_settings(self._board_view.board_scene, self._settings)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        scene = BoardScene(self._controller, self)
        self._board_view = BoardView(scene, self)
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status = QStatusBar(self)
        status.addWidget(self._status_label, 1)
        self.setStatusBar(status)

    def _setup_menu(self) -> None:
        self._theme_actions: dict[str, QAction] = {}
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        self._act_new = QAction("&New layout", self)
        self._act_new.setShortcut(QKeySequence.StandardKey.New)
        self._act_new.triggered.connect(self.new_layout)
        game_menu.addAction(self._act_new)

        game_menu.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self._act_quit.triggered.connect(self.close)
        game_menu.addAction(self._act_quit)

        # Settings menu
        settings_menu = menu_bar.addMenu("&Settings")
        if settings_menu is None:
            return

        theme_menu = settings_menu.addMenu("Board &theme")
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        for name in THEME_NAMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._settings.board_theme)
            act.triggered.connect(lambda _checked=False, n=name: self.set_board_theme(n))
            self._theme_group.addAction(act)
            if theme_menu is not None:
                theme_menu.addAction(act)
            self._theme_actions[name] = act

        settings_menu.addSeparator()
        self._act_legal = self._add_toggle(
            settings_menu, "Show &legal moves", "show_legal_moves"
        )
        self._act_hover = self._add_toggle(settings_menu, "Show &hover", "show_hover")
        self._act_animate = self._add_toggle(settings_menu, "&Animate moves", "animate_moves")

    def _add_toggle(self, menu: QMenu, text: str, field: str) -> QAction:
        act = QAction(text, self)
        act.setCheckable(True)
        act.setChecked(bool(getattr(self._settings, field)))
        act.toggled.connect(lambda checked, f=field: self._set_flag(f, checked))
        menu.addAction(act)
        return act

    def _connect_signals(self) -> None:
        scene = self._board_view.board_scene
        scene.selection_changed.connect(self._on_selection_changed)
        scene.piece_moved.connect(self._on_piece_moved)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_selection_changed(self, selection: Selection) -> None:
        self._status_label.setText(describe_selection(selection, self._controller.grid))

    def _on_piece_moved(self, move: MoveRecord) -> None:
        self._status_label.setText(describe_move(move, self._controller))
