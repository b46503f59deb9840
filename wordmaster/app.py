"""Application entry point and setup for Word Master."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from wordmaster.core.config import load_config
from wordmaster.core.engine import GameEngine
from wordmaster.core.words import WordDatabase
from wordmaster.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings and words, then open the game window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Word Master")
    app.setApplicationDisplayName("Word Master")

    config = load_config()
    if config.words_file:
        words = WordDatabase.from_file(config.words_file)
    else:
        words = WordDatabase.bundled()

    engine = GameEngine(
        words,
        duration_ms=config.duration_ms,
        center=config.center,
        jitter=config.notice_jitter,
        warning_threshold_ms=config.warning_threshold_ms,
    )

    window = MainWindow(engine=engine, config=config)
    window.show()
    logging.info("Word Master window opened (%d words)", len(words))

    sys.exit(app.exec())
