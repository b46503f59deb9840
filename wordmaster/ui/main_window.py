from __future__ import annotations

from PySide6.QtWidgets import QMainWindow

from wordmaster.core.config import GameConfig
from wordmaster.core.engine import GameEngine
from wordmaster.ui.game_panel import GamePanel


class MainWindow(QMainWindow):
    """Top-level window holding a single game panel. Closes on the quit key."""

    def __init__(self, engine: GameEngine, config: GameConfig) -> None:
        super().__init__()
        self.setWindowTitle("Word Master")
        self._panel = GamePanel(engine, config, self)
        self._panel.quit_requested.connect(self.close)
        self.setCentralWidget(self._panel)
        self.setFixedSize(self._panel.size())
        self._panel.setFocus()
