"""
Recent-results ledger.

Keeps the last LEDGER_CAPACITY wins, most recent first. New results go in
at the head (index 0); once the ledger is full, each push drops the oldest
entry off the tail. Losses never reach the ledger.

Entries are frozen dataclasses and `entries()` hands out a tuple snapshot,
so callers can't mutate what the ledger holds.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Tuple

log = logging.getLogger(__name__)

# Single source of truth for how many wins the stats board remembers.
LEDGER_CAPACITY = 5


@dataclass(frozen=True)
class RoundResult:
    """One won round: the word and how long the player took (seconds)."""
    word: str
    time_taken: float

    def __post_init__(self) -> None:
        if not self.time_taken >= 0:
            raise ValueError(f"time_taken must be non-negative; got {self.time_taken}")


class ResultLedger:
    def __init__(self, capacity: int = LEDGER_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1; got {capacity}")
        # deque(maxlen) + appendleft == push-front, truncate at the tail
        self._entries: Deque[RoundResult] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen  # type: ignore[return-value]

    def push(self, result: RoundResult) -> None:
        if len(self._entries) == self.capacity:
            log.debug("ledger full; evicting oldest result %r", self._entries[-1].word)
        self._entries.appendleft(result)

    def entries(self) -> Tuple[RoundResult, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RoundResult]:
        return iter(self.entries())
