"""
Vocabulary: the fixed pool of candidate words for a game.

A WordSource owns the word list and hands out one word per round, chosen
uniformly at random WITH replacement (the same word may come up twice in a
row). The random generator is injected so tests can pin selections with a
seeded `random.Random`.

An empty vocabulary is a configuration problem, not a gameplay state, so it
is rejected at construction time, before any round can start.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Tuple

from .io import read_lines

log = logging.getLogger(__name__)

# Bundled default vocabulary (one lowercase word per line).
DEFAULT_WORDS_PATH = Path(__file__).resolve().parent / "data" / "words.txt"


class ConfigurationError(ValueError):
    """Raised when the game cannot be configured (e.g. no words to play)."""


class WordSource:
    """Uniform random word picker over a fixed vocabulary."""

    def __init__(self, words: Iterable[str], *, rng: random.Random | None = None):
        # Normalize: trim + lowercase, drop blanks
        cleaned = [w.strip().lower() for w in words if w and w.strip()]
        if not cleaned:
            raise ConfigurationError("vocabulary is empty; at least one word is required")
        self._words: Tuple[str, ...] = tuple(cleaned)
        self.rng = rng if rng is not None else random.Random()
        log.debug("vocabulary ready with %d words", len(self._words))

    @classmethod
    def from_file(cls, path: Path | str, *, rng: random.Random | None = None) -> "WordSource":
        """Load a newline-separated word list."""
        try:
            lines = read_lines(path)
        except FileNotFoundError as e:
            raise ConfigurationError(f"vocabulary file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"vocabulary file unreadable: {path} ({e})") from e
        log.info("loaded vocabulary from %s", path)
        return cls(lines, rng=rng)

    @classmethod
    def default(cls, *, rng: random.Random | None = None) -> "WordSource":
        return cls.from_file(DEFAULT_WORDS_PATH, rng=rng)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def get_random_word(self) -> str:
        i = self.rng.randrange(len(self._words))
        return self._words[i]
