"""Application settings and helpers that push them into the UI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesstile.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesstile.ui.board.board_scene import BoardScene

_TRUE_VALUES = ("true", "1", "yes")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 80  # px per square
    show_legal_moves: bool = True
    show_hover: bool = True
    animate_moves: bool = True

    # Session
    layout_seed: int | None = None  # None → fresh random layout each time

    # Diagnostics
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        """Build settings from ``CHESSTILE_*`` environment variables.

        Unset variables keep their defaults; malformed numbers raise
        ``ValueError``.
        """
        defaults = cls()
        seed = os.getenv("CHESSTILE_SEED", "").strip()
        return cls(
            board_theme=os.getenv("CHESSTILE_THEME", defaults.board_theme),
            tile_size=int(os.getenv("CHESSTILE_TILE_SIZE", str(defaults.tile_size))),
            show_legal_moves=_env_flag("CHESSTILE_SHOW_LEGAL_MOVES", defaults.show_legal_moves),
            show_hover=_env_flag("CHESSTILE_SHOW_HOVER", defaults.show_hover),
            animate_moves=_env_flag("CHESSTILE_ANIMATE", defaults.animate_moves),
            layout_seed=int(seed) if seed else None,
            log_level=os.getenv("CHESSTILE_LOG_LEVEL", defaults.log_level),
        )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def apply_settings(scene: BoardScene, settings: AppSettings) -> None:
    scene.set_theme(BoardTheme.by_name(settings.board_theme))
    scene.set_tile_size(settings.tile_size)
    scene.set_show_legal_moves(settings.show_legal_moves)
    scene.set_show_hover(settings.show_hover)
    scene.set_animate_moves(settings.animate_moves)
