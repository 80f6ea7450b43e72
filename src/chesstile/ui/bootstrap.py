"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chesstile.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr at *level* (e.g. ``"DEBUG"``)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
        _LOGGER.warning("Unknown log level %r, using INFO", level)
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)
    logging.getLogger("chesstile").setLevel(numeric)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesstile.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chesstile")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesstile.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings.from_env()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    _LOGGER.debug("Entering Qt event loop")
    return app.exec()
