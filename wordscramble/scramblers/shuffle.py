"""
Fisher–Yates scrambler.

Strategy:
  - Walk the characters from the last index down to 1 and swap each with a
    uniformly chosen index at or below it. Every permutation is equally
    likely, including the identity.

Notes:
  - Deterministic across runs with the same seed (via BaseScrambler.rng).
  - Words of length <= 1 come back unchanged.
"""

from __future__ import annotations

from typing import List
from .base import BaseScrambler, register


@register
class ShuffleScrambler(BaseScrambler):
    id = "shuffle"
    name = "Fisher-Yates Shuffle"
    version = "1.0.0"

    def scramble(self, word: str) -> str:
        chars: List[str] = list(word)
        for i in range(len(chars) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]
        return "".join(chars)
