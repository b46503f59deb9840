from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from wordmaster.core.notice import FadeOutNotice
from wordmaster.core.timer import CountdownTimer
from wordmaster.core.words import SENTINEL_WORD, WordSource, is_typeable

logger = logging.getLogger(__name__)

QUIT_KEY = "Escape"
BEGIN_KEY = "Space"

DEFAULT_DURATION_MS = 2 * 60 * 1000
DEFAULT_CENTER = (250, 250)
DEFAULT_JITTER = 150
DEFAULT_WARNING_THRESHOLD_MS = 5000
NOTICE_COLOR = "#000000"


class GameState(Enum):
    STARTING = "starting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class KeyOutcome(Enum):
    """What ``GameEngine.handle_key`` did with a key."""

    HANDLED = "handled"
    IGNORED = "ignored"
    QUIT = "quit"


@dataclass(frozen=True)
class NoticeSnapshot:
    text: str
    x: int
    y: int
    color: str
    opacity: int


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the renderer needs for one frame."""

    state: GameState
    current_word: str
    cursor: int
    last_input_was_wrong: bool
    time_text: str
    time_remaining: int
    time_running_low: bool
    total_score: int
    total_wrong: int
    notices: Tuple[NoticeSnapshot, ...]

    @property
    def completed_part(self) -> str:
        return self.current_word[: self.cursor]

    @property
    def remaining_part(self) -> str:
        return self.current_word[self.cursor :]


class GameEngine:
    """State machine and scoring for a timed word typing round.

    The engine is driven by two inputs from its host: ``tick`` at a fixed
    cadence and ``handle_key`` for each key press. Both must arrive on the
    same thread.

    Scoring: a completed word is worth its length minus the mistakes made
    while typing it, but never less than one point.
    """

    def __init__(
        self,
        word_source: WordSource,
        duration_ms: int = DEFAULT_DURATION_MS,
        center: Tuple[int, int] = DEFAULT_CENTER,
        jitter: int = DEFAULT_JITTER,
        rng: Optional[random.Random] = None,
        warning_threshold_ms: int = DEFAULT_WARNING_THRESHOLD_MS,
    ) -> None:
        if jitter < 0:
            raise ValueError(f"Notice jitter must not be negative, got {jitter}")
        self._word_source = word_source
        self._timer = CountdownTimer(duration_ms)
        self._center = center
        self._jitter = jitter
        self._rng = rng or random.Random()
        self._warning_threshold_ms = warning_threshold_ms

        self._state = GameState.STARTING
        self._current_word = ""
        self._cursor = 0
        self._wrong_in_current_word = 0
        self._total_wrong = 0
        self._total_score = 0
        self._last_input_was_wrong = False
        self._notices: List[FadeOutNotice] = []
        self.next_word()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_word(self) -> str:
        return self._current_word

    @property
    def cursor(self) -> int:
        """Index of the next expected character in ``current_word``."""
        return self._cursor

    @property
    def wrong_in_current_word(self) -> int:
        return self._wrong_in_current_word

    @property
    def total_wrong(self) -> int:
        return self._total_wrong

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def last_input_was_wrong(self) -> bool:
        return self._last_input_was_wrong

    @property
    def timer(self) -> CountdownTimer:
        return self._timer

    @property
    def notices(self) -> Tuple[FadeOutNotice, ...]:
        return tuple(self._notices)

    def begin(self) -> None:
        """Leave an idle state and start playing.

        From STARTING only a new word is picked; totals are already zero at
        launch. From GAME_OVER the whole round is restarted.
        """
        if self._state is GameState.PLAYING:
            return
        if self._state is GameState.GAME_OVER:
            self.restart()
            return
        self.next_word()
        self._timer.reset()
        self._state = GameState.PLAYING
        logger.info("Game started")

    def restart(self) -> None:
        self._total_score = 0
        self._total_wrong = 0
        self._last_input_was_wrong = False
        self.next_word()
        self._state = GameState.PLAYING
        self._timer.reset()
        logger.info("Game restarted")

    def next_word(self) -> None:
        self._cursor = 0
        self._wrong_in_current_word = 0
        word = self._word_source.next_word().strip().upper()
        if not is_typeable(word):
            logger.warning("Word source returned untypeable word %r, using %s", word, SENTINEL_WORD)
            word = SENTINEL_WORD
        self._current_word = word

    def tick(self, delta_time: int) -> None:
        if self._state is GameState.PLAYING:
            self._timer.tick(delta_time)
            if self._timer.is_triggered():
                self._state = GameState.GAME_OVER
                logger.info(
                    "Game over: score %d, %d incorrect", self._total_score, self._total_wrong
                )

        for notice in self._notices:
            notice.update(delta_time)
        self._notices = [n for n in self._notices if not n.is_expired()]

    def handle_key(self, key: str) -> KeyOutcome:
        """Apply one key press.

        ``key`` is ``QUIT_KEY``, ``BEGIN_KEY`` or a single character. The
        caller is expected to end the program when ``KeyOutcome.QUIT`` comes
        back; the engine itself is left untouched.
        """
        if key == QUIT_KEY:
            return KeyOutcome.QUIT
        if key == BEGIN_KEY:
            if self._state is GameState.PLAYING:
                return KeyOutcome.IGNORED
            self.begin()
            return KeyOutcome.HANDLED
        if self._state is GameState.PLAYING and len(key) == 1 and key.isascii() and key.isalpha():
            self.submit_char(key.upper())
            return KeyOutcome.HANDLED
        return KeyOutcome.IGNORED

    def submit_char(self, ch: str) -> None:
        """Check ``ch`` against the next expected letter of the current word."""
        if self._state is not GameState.PLAYING:
            return
        if ch != self._current_word[self._cursor]:
            self._total_wrong += 1
            self._wrong_in_current_word += 1
            self._last_input_was_wrong = True
            return

        self._cursor += 1
        self._last_input_was_wrong = False
        if self._cursor == len(self._current_word):
            self._complete_word()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self._state,
            current_word=self._current_word,
            cursor=self._cursor,
            last_input_was_wrong=self._last_input_was_wrong,
            time_text=self._timer.formatted(),
            time_remaining=self._timer.remaining,
            time_running_low=self._timer.remaining <= self._warning_threshold_ms,
            total_score=self._total_score,
            total_wrong=self._total_wrong,
            notices=tuple(
                NoticeSnapshot(text=n.text, x=n.x, y=n.y, color=n.color, opacity=n.opacity)
                for n in self._notices
            ),
        )

    def _complete_word(self) -> None:
        wrong = self._wrong_in_current_word
        score_added = max(len(self._current_word) - wrong, 1)
        self._total_score += score_added
        logger.debug("Completed %s: +%d (%d wrong)", self._current_word, score_added, wrong)

        text = f"+{score_added}"
        if wrong > 0:
            text += f" ({wrong} wrong)"
        self._add_notice(text)
        self.next_word()

    def _add_notice(self, text: str) -> None:
        cx, cy = self._center
        x = cx + self._rng.randint(-self._jitter, self._jitter)
        y = cy + self._rng.randint(-self._jitter, self._jitter)
        self._notices.append(FadeOutNotice(text=text, x=x, y=y, color=NOTICE_COLOR))
