"""
Re-roll-once scrambler.

Strategy:
  - Shuffle as ShuffleScrambler does.
  - If the result reads exactly like the original and the word has at least
    two distinct letters, shuffle one more time and keep that result.

Notes:
  - Only one retry, so an unscrambled puzzle is rarer but still possible for
    short words ("ab" comes back as "ab" a quarter of the time).
  - Words like "aaa" can never look different; they are not retried.
"""

from __future__ import annotations

import logging
from .base import register
from .shuffle import ShuffleScrambler

log = logging.getLogger(__name__)


@register
class RerollScrambler(ShuffleScrambler):
    id = "reroll"
    name = "Shuffle (re-roll once)"
    version = "1.0.0"

    def scramble(self, word: str) -> str:
        out = super().scramble(word)
        if out == word and len(set(word)) > 1:
            log.debug("shuffle of %r matched the original; re-rolling", word)
            out = super().scramble(word)
        return out
