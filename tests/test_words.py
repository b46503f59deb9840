"""Tests for wordmaster.core.words – word list loading and selection."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest

from wordmaster.core.words import BUNDLED_WORDS_FILE, SENTINEL_WORD, WordDatabase


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


# ---------------------------------------------------------------------------
# Construction from a list
# ---------------------------------------------------------------------------

class TestWordDatabase:
    def test_keeps_words(self, rng):
        db = WordDatabase(["cat", "dog"], rng=rng)
        assert db.words == ["cat", "dog"]
        assert len(db) == 2
        assert not db.is_degraded

    def test_strips_and_skips_blank(self, rng):
        db = WordDatabase(["  cat ", "", "   ", "dog\r"], rng=rng)
        assert db.words == ["cat", "dog"]

    def test_skips_untypeable_words(self, rng):
        db = WordDatabase(["cat", "ice-cream", "naïve", "r2d2", "dog"], rng=rng)
        assert db.words == ["cat", "dog"]

    def test_empty_falls_back_to_sentinel(self, rng):
        db = WordDatabase([], rng=rng)
        assert db.words == [SENTINEL_WORD]
        assert db.is_degraded
        assert db.next_word() == SENTINEL_WORD

    def test_next_word_comes_from_vocabulary(self, rng):
        vocab = ["alpha", "beta", "gamma"]
        db = WordDatabase(vocab, rng=rng)
        for _ in range(50):
            assert db.next_word() in vocab

    def test_seeded_rng_is_repeatable(self):
        vocab = ["alpha", "beta", "gamma", "delta"]
        a = WordDatabase(vocab, rng=random.Random(7))
        b = WordDatabase(vocab, rng=random.Random(7))
        assert [a.next_word() for _ in range(10)] == [b.next_word() for _ in range(10)]

    def test_words_returns_copy(self, rng):
        db = WordDatabase(["cat"], rng=rng)
        db.words.append("dog")
        assert db.words == ["cat"]


# ---------------------------------------------------------------------------
# Loading from files
# ---------------------------------------------------------------------------

class TestFromFile:
    def test_reads_one_word_per_line(self, tmp_path: Path, rng):
        f = tmp_path / "words.txt"
        f.write_text("apple\n\nbanana\ncherry\n", encoding="utf-8")
        db = WordDatabase.from_file(f, rng=rng)
        assert db.words == ["apple", "banana", "cherry"]

    def test_missing_file_degrades(self, tmp_path: Path, rng, caplog):
        with caplog.at_level(logging.WARNING):
            db = WordDatabase.from_file(tmp_path / "nope.txt", rng=rng)
        assert db.is_degraded
        assert db.next_word() == SENTINEL_WORD
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1

    def test_empty_file_degrades(self, tmp_path: Path, rng, caplog):
        f = tmp_path / "empty.txt"
        f.write_text("\n\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            db = WordDatabase.from_file(f, rng=rng)
        assert db.is_degraded
        assert "no usable words" in caplog.text

    def test_directory_degrades(self, tmp_path: Path, rng):
        db = WordDatabase.from_file(tmp_path, rng=rng)
        assert db.words == [SENTINEL_WORD]

    def test_accepts_str_path(self, tmp_path: Path, rng):
        f = tmp_path / "words.txt"
        f.write_text("apple\n", encoding="utf-8")
        assert WordDatabase.from_file(str(f), rng=rng).words == ["apple"]


class TestBundled:
    def test_bundled_file_exists(self):
        assert BUNDLED_WORDS_FILE.exists()

    def test_bundled_list_loads(self, rng):
        db = WordDatabase.bundled(rng=rng)
        assert not db.is_degraded
        assert len(db) > 100
        assert all(w.isalpha() for w in db.words)
