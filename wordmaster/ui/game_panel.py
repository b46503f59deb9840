"""Game panel widget: paints the engine snapshot and feeds it keys and ticks."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QColor, QFont, QKeyEvent, QPainter
from PySide6.QtWidgets import QWidget

from wordmaster.core.config import GameConfig
from wordmaster.core.engine import GameEngine, GameSnapshot, GameState, KeyOutcome
from wordmaster.ui.colors import GameColors, hex_to_rgb
from wordmaster.ui.keys import key_name

_FONT_FAMILY = "Arial"


class GamePanel(QWidget):
    """Fixed-size panel that hosts one ``GameEngine``.

    A ``QTimer`` fires every ``tick_interval_ms`` and advances the engine by
    exactly that interval. Key presses and timer ticks both arrive on the GUI
    thread, so the engine never sees concurrent calls.
    """

    quit_requested = Signal()

    def __init__(
        self, engine: GameEngine, config: GameConfig, parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._config = config
        self._big_font = QFont(_FONT_FAMILY, 28, QFont.Weight.Bold)
        self._score_font = QFont(_FONT_FAMILY, 20, QFont.Weight.Bold)
        self._notice_font = QFont(_FONT_FAMILY, 14, QFont.Weight.Bold)

        self.setFixedSize(config.panel_width, config.panel_height)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), QColor(GameColors.BACKGROUND))
        self.setPalette(palette)

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(config.tick_interval_ms)
        self._tick_timer.timeout.connect(self._on_tick)
        self._tick_timer.start()

    @property
    def engine(self) -> GameEngine:
        return self._engine

    def _on_tick(self) -> None:
        self._engine.tick(self._config.tick_interval_ms)
        self.update()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        name = key_name(event.key(), event.text())
        if name is None:
            super().keyPressEvent(event)
            return
        if self._engine.handle_key(name) is KeyOutcome.QUIT:
            self._tick_timer.stop()
            self.quit_requested.emit()
            return
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        snapshot = self._engine.snapshot()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        try:
            self._draw_background_panels(painter)
            if snapshot.state is GameState.PLAYING:
                self._draw_current_word(painter, snapshot)
            elif snapshot.state is GameState.GAME_OVER:
                self._draw_centered(painter, ["Game Over!", "Press SPACE to Restart!"])
            else:
                self._draw_centered(painter, ["Press SPACE to Start!"])
            self._draw_time(painter, snapshot)
            self._draw_score(painter, snapshot)
            self._draw_notices(painter, snapshot)
        finally:
            painter.end()

    def _draw_background_panels(self, painter: QPainter) -> None:
        w, h = self.width(), self.height()
        painter.fillRect(0, 0, w, 60, QColor(GameColors.PANEL))
        painter.fillRect(0, h - 150, w, 150, QColor(GameColors.PANEL))
        painter.fillRect(0, 50, w, 10, QColor(GameColors.PANEL_EDGE))
        painter.fillRect(0, h - 150, w, 10, QColor(GameColors.PANEL_EDGE))

    def _draw_current_word(self, painter: QPainter, snapshot: GameSnapshot) -> None:
        painter.setFont(self._big_font)
        metrics = painter.fontMetrics()
        completed = snapshot.completed_part
        remaining = snapshot.remaining_part
        completed_width = metrics.horizontalAdvance(completed)
        total_width = completed_width + metrics.horizontalAdvance(remaining)
        x = self.width() // 2 - total_width // 2
        y = self.height() // 2

        painter.setPen(QColor(GameColors.COMPLETED))
        painter.drawText(x, y, completed)
        painter.setPen(QColor(GameColors.ERROR if snapshot.last_input_was_wrong else GameColors.TEXT))
        painter.drawText(x + completed_width, y, remaining)

    def _draw_centered(self, painter: QPainter, lines: list[str]) -> None:
        painter.setFont(self._big_font)
        painter.setPen(QColor(GameColors.TEXT))
        metrics = painter.fontMetrics()
        y = self.height() // 2
        for line in lines:
            painter.drawText(self.width() // 2 - metrics.horizontalAdvance(line) // 2, y, line)
            y += 40

    def _draw_time(self, painter: QPainter, snapshot: GameSnapshot) -> None:
        painter.setFont(self._big_font)
        painter.setPen(QColor(GameColors.ERROR if snapshot.time_running_low else GameColors.TEXT))
        width = painter.fontMetrics().horizontalAdvance(snapshot.time_text)
        painter.drawText(self.width() // 2 - width // 2, 40, snapshot.time_text)

    def _draw_score(self, painter: QPainter, snapshot: GameSnapshot) -> None:
        painter.setFont(self._score_font)
        painter.setPen(QColor(GameColors.TEXT))
        y = self.height() - 60
        painter.drawText(40, y, f"Score: {snapshot.total_score}")
        wrong_text = f"Incorrect: {snapshot.total_wrong}"
        wrong_width = painter.fontMetrics().horizontalAdvance(wrong_text)
        painter.drawText(self.width() - wrong_width - 40, y, wrong_text)

    def _draw_notices(self, painter: QPainter, snapshot: GameSnapshot) -> None:
        painter.setFont(self._notice_font)
        for notice in snapshot.notices:
            r, g, b = hex_to_rgb(notice.color)
            painter.setPen(QColor(r, g, b, notice.opacity))
            painter.drawText(notice.x, notice.y, notice.text)
