"""
Vocabulary validator for wordscramble.

What this module does:
- Validate a single vocabulary file (one word per line).
- Enforce formatting rules (lowercase, a–z only, no blank lines).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_vocabulary, pretty_summary
    rep = validate_vocabulary("wordscramble/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class VocabularyReport:
    """Diagnostics and metadata for one vocabulary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_vocabulary(path: str) -> Dict:
    """
    Validate a vocabulary file.

    Returns a JSON-serializable dictionary (see VocabularyReport). `passed`
    is strict on content (non-empty, no invalid lines) but tolerant of
    duplicates, which only skew the odds of a word being drawn.
    """
    p = Path(path)
    if not p.exists():
        rep = VocabularyReport(path, False, 0, "", 0, 0,
                               passed=False, issues=[f"vocabulary file not found: {path}"])
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p)
    except (OSError, UnicodeDecodeError) as e:
        rep = VocabularyReport(str(p), True, 0, "", 0, 0,
                               passed=False, issues=[f"vocabulary file unreadable: {e}"])
        return asdict(rep)
    rep = VocabularyReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if rep.count == 0:
        rep.issues.append("vocabulary contains 0 valid words")
    if invalid:
        rep.issues.append(f"vocabulary has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("vocabulary contains duplicate lines")

    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        words=60 (uniq=60, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
