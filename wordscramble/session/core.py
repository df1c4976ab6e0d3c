"""
Game session orchestration.

- GameSession: one player's sequence of rounds plus the recent-results ledger.
- Explicit state machine:

      IDLE --start_round--> ROUND_IN_PROGRESS --submit_guess--> ROUND_RESOLVED
       ^                                                            |
       +------------------------- acknowledge ----------------------+
      IDLE --quit--> EXIT (terminal)

- Timing is supplied by the caller (an elapsed value, or a clock callable in
  play_round); the session itself never reads a clock.

These functions are UI-agnostic so a terminal app, a test, or any other
front end can drive them without changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple

from wordscramble.datasets import WordSource
from wordscramble.engine import is_correct
from wordscramble.scramblers import BaseScrambler
from wordscramble.stats import (
    BreakdownItem, ResultLedger, RoundResult, TableRow,
    breakdown_view, table_view, timing_summary,
)

log = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_RESOLVED = "round_resolved"
    EXIT = "exit"


class SessionStateError(RuntimeError):
    """Raised when a session method is called in a state that doesn't allow it."""


@dataclass(frozen=True)
class Puzzle:
    word: str       # the answer
    scrambled: str  # what the player sees


@dataclass(frozen=True)
class RoundOutcome:
    correct: bool
    word: str          # always the real answer, so losers can be told
    guess: str
    time_taken: float  # seconds


class GameSession:
    def __init__(self, words: WordSource, scrambler: BaseScrambler,
                 ledger: ResultLedger | None = None):
        self.words = words
        self.scrambler = scrambler
        self.ledger = ledger if ledger is not None else ResultLedger()
        self.state = SessionState.IDLE
        self._puzzle: Puzzle | None = None
        self._last_outcome: RoundOutcome | None = None

    # ---- state machine ----

    def _require(self, *allowed: SessionState) -> None:
        if self.state not in allowed:
            names = ", ".join(s.name for s in allowed)
            raise SessionStateError(f"session is {self.state.name}; expected {names}")

    @property
    def puzzle(self) -> Puzzle | None:
        """The puzzle of the current round, if one has been started."""
        return self._puzzle

    @property
    def last_outcome(self) -> RoundOutcome | None:
        return self._last_outcome

    def start_round(self) -> Puzzle:
        """IDLE -> ROUND_IN_PROGRESS: pick a word and scramble it."""
        self._require(SessionState.IDLE)
        word = self.words.get_random_word()
        self._puzzle = Puzzle(word=word, scrambled=self.scrambler.scramble(word))
        self._last_outcome = None
        self.state = SessionState.ROUND_IN_PROGRESS
        log.info("round started (%d letters)", len(word))
        return self._puzzle

    def submit_guess(self, guess: str, elapsed: float) -> RoundOutcome:
        """
        ROUND_IN_PROGRESS -> ROUND_RESOLVED.

        Args:
            guess:   raw player input (not trimmed here)
            elapsed: seconds between puzzle display and guess receipt

        A correct guess is recorded in the ledger; a wrong one only
        produces a losing outcome.
        """
        self._require(SessionState.ROUND_IN_PROGRESS)
        if not elapsed >= 0:
            raise ValueError(f"elapsed must be non-negative; got {elapsed}")
        assert self._puzzle is not None

        word = self._puzzle.word
        correct = is_correct(guess, word)
        if correct:
            self.ledger.push(RoundResult(word=word, time_taken=elapsed))

        self._last_outcome = RoundOutcome(correct=correct, word=word, guess=guess,
                                          time_taken=elapsed)
        self.state = SessionState.ROUND_RESOLVED
        log.info("round resolved: %s in %.2fs", "win" if correct else "loss", elapsed)
        return self._last_outcome

    def acknowledge(self) -> None:
        """ROUND_RESOLVED -> IDLE (player dismissed the result screen)."""
        self._require(SessionState.ROUND_RESOLVED)
        self._puzzle = None
        self.state = SessionState.IDLE

    def quit(self) -> None:
        """IDLE -> EXIT. Not allowed mid-round."""
        self._require(SessionState.IDLE)
        self.state = SessionState.EXIT
        log.info("session finished with %d result(s) on the board", len(self.ledger))

    def play_round(
            self,
            display: Callable[[Puzzle], None],
            read_guess: Callable[[], str],
            clock: Callable[[], float],
    ) -> RoundOutcome:
        """
        Run one round through presentation callbacks.

        Args:
            display:    shows the puzzle to the player
            read_guess: blocks until the player answers, returns raw input
            clock:      monotonic seconds (e.g. time.perf_counter)

        Timing starts right after the puzzle is displayed and stops as soon
        as the guess comes back. Leaves the session in ROUND_RESOLVED.
        """
        puzzle = self.start_round()
        display(puzzle)
        t0 = clock()
        guess = read_guess()
        elapsed = max(clock() - t0, 0.0)
        return self.submit_guess(guess, elapsed)

    # ---- stats passthroughs ----

    def entries(self) -> Tuple[RoundResult, ...]:
        return self.ledger.entries()

    def table_view(self) -> List[TableRow]:
        return table_view(self.ledger)

    def breakdown_view(self) -> List[BreakdownItem]:
        return breakdown_view(self.ledger)

    def timing_summary(self) -> Dict:
        return timing_summary(self.ledger)
