"""
Read-only views over the results ledger.

- table_view:      rank / word / time rows, one per stored result.
- breakdown_view:  share of each distinct word among stored results.
- timing_summary:  best / worst / mean / median solve time.

These return plain data; formatting (tables, bars, decimals) is left to the
presentation layer.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from .ledger import ResultLedger


@dataclass(frozen=True)
class TableRow:
    rank: int          # 1 = most recent
    word: str
    time_taken: float  # seconds


@dataclass(frozen=True)
class BreakdownItem:
    word: str
    percentage: float  # 0..100, rounded to 2 decimals
    count: int


def table_view(ledger: ResultLedger) -> List[TableRow]:
    """
    One row per stored result, in ledger order. A young ledger simply yields
    fewer rows; there are no placeholder rows for empty slots.
    """
    return [
        TableRow(rank=i, word=r.word, time_taken=r.time_taken)
        for i, r in enumerate(ledger.entries(), start=1)
    ]


def breakdown_view(ledger: ResultLedger) -> List[BreakdownItem]:
    """
    Percentage of stored results per distinct word.

    Repeated words are merged into one item; items keep the order in which
    each word first appears in the ledger (most recent first). An empty
    ledger yields an empty list.

    Example:
      entries [cat, dog, cat] -> [cat 66.67, dog 33.33]
    """
    entries = ledger.entries()
    total = len(entries)
    if total == 0:
        return []

    # Counter preserves insertion order, i.e. first occurrence in the ledger
    counts = Counter(r.word for r in entries)
    return [
        BreakdownItem(word=w, percentage=round(c / total * 100, 2), count=c)
        for w, c in counts.items()
    ]


def timing_summary(ledger: ResultLedger) -> Dict:
    """
    Summary statistics of solve times (seconds).

    Returns a dict with keys: count, best, worst, mean, median. For an empty
    ledger count is 0 and the statistics are None.
    """
    times = np.asarray([r.time_taken for r in ledger.entries()], dtype=float)
    if times.size == 0:
        return {"count": 0, "best": None, "worst": None, "mean": None, "median": None}
    return {
        "count": int(times.size),
        "best": float(times.min()),
        "worst": float(times.max()),
        "mean": float(times.mean()),
        "median": float(np.median(times)),
    }
