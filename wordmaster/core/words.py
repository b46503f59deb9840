from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

logger = logging.getLogger(__name__)

SENTINEL_WORD = "FILEREADERROR"
BUNDLED_WORDS_FILE = Path(__file__).resolve().parent.parent / "data" / "words.txt"


class WordSource(Protocol):
    def next_word(self) -> str:
        """Return a non-empty word."""
        ...


def is_typeable(word: str) -> bool:
    """True when ``word`` is made only of the letters A-Z in either case."""
    return word.isascii() and word.isalpha()


class WordDatabase:
    """Fixed vocabulary that hands out random words.

    Never empty: when no usable word is available the vocabulary falls back
    to ``SENTINEL_WORD`` so the game keeps running in a visibly degraded way.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        cleaned = [w.strip() for w in words if w.strip()]
        self._words: List[str] = [w for w in cleaned if is_typeable(w)]
        skipped = len(cleaned) - len(self._words)
        if skipped:
            logger.debug("Skipped %d words containing characters other than A-Z", skipped)
        self._degraded = not self._words
        if self._degraded:
            self._words = [SENTINEL_WORD]

    @classmethod
    def from_file(
        cls, path: Union[str, Path], rng: Optional[random.Random] = None
    ) -> "WordDatabase":
        """Load one word per non-empty line. Unreadable files yield the sentinel word."""
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load word list from %s: %s", file_path, e)
            return cls([], rng=rng)
        database = cls(text.splitlines(), rng=rng)
        if database.is_degraded:
            logger.warning("Word list %s has no usable words", file_path)
        else:
            logger.info("Loaded %d words from %s", len(database), file_path)
        return database

    @classmethod
    def bundled(cls, rng: Optional[random.Random] = None) -> "WordDatabase":
        return cls.from_file(BUNDLED_WORDS_FILE, rng=rng)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def is_degraded(self) -> bool:
        """True when only the sentinel word is available."""
        return self._degraded

    def next_word(self) -> str:
        return self._rng.choice(self._words)

    def __len__(self) -> int:
        return len(self._words)
