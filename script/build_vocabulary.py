"""
Build a clean vocabulary file for wordscramble from raw text.

Features:
- Splits the input on whitespace (one word per line works, so does prose).
- Lowercases and keeps alphabetic tokens of at least --min-length letters.
- Removes duplicates while preserving first-seen order.
- Optional alphabetical sort after dedupe.

Usage:
    python -m script.build_vocabulary --in raw_words.txt \
        --out wordscramble/datasets/data/words.txt --min-length 4 --sort
"""

import argparse
from pathlib import Path

from wordscramble.datasets import read_lines, unique_preserve_order, write_lines


def clean_tokens(lines: list[str], min_length: int) -> list[str]:
    out = []
    for line in lines:
        for tok in line.split():
            w = tok.lower()
            if w.isalpha() and len(w) >= min_length:
                out.append(w)
    return unique_preserve_order(out)


def main():
    ap = argparse.ArgumentParser(description="Build a wordscramble vocabulary file.")
    ap.add_argument("--in", dest="inp", required=True, help="raw input .txt file")
    ap.add_argument("--out", default="wordscramble/datasets/data/words.txt",
                    help="vocabulary file to write")
    ap.add_argument("--min-length", type=int, default=3,
                    help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically after dedupe (otherwise keep input order)")
    args = ap.parse_args()

    lines = read_lines(Path(args.inp))
    words = clean_tokens(lines, args.min_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {args.out} ({len(words)} words)")


if __name__ == "__main__":
    main()
