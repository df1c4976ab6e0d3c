# wordscramble/cli/play.py
"""
Interactive terminal entry point for wordscramble.

This script:
  1) Loads the vocabulary (bundled list or --words) and checks it.
  2) Builds a GameSession with the requested scrambler.
  3) Runs the menu loop: play a round, view the stats board, view the
     breakdown chart, or quit.

Usage:
    python -m wordscramble.cli.play
    python -m wordscramble.cli.play --words my_words.txt --seed 7 --scrambler shuffle
    python -m wordscramble.cli.play --check        # validate the vocabulary and exit
"""

from __future__ import annotations

import argparse
import logging
import random
import time
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from wordscramble.datasets import (
    ConfigurationError, DEFAULT_WORDS_PATH, WordSource, pretty_summary, validate_vocabulary,
)
from wordscramble.scramblers import DEFAULT_SCRAMBLER, create_scrambler, get_scrambler_ids
from wordscramble.session import GameSession, Puzzle

log = logging.getLogger(__name__)

MENU = [
    ("1", "Start Game"),
    ("2", "View Game Stats"),
    ("3", "Breakdown Chart"),
    ("4", "Quit"),
]
BAR_WIDTH = 40  # characters for a 100% bar


def _wait_for_enter(console: Console) -> None:
    console.input("\n[bold green]Press Enter to Return to the Menu...[/]")


def _show_puzzle(console: Console, puzzle: Puzzle) -> None:
    console.clear()
    console.print("[bold green]Unscramble the word:[/]")
    console.print(f"[italic yellow]{puzzle.scrambled}[/]")


def play_one(session: GameSession, console: Console) -> None:
    """Play a round, report the result, wait for the player to dismiss it."""
    outcome = session.play_round(
        display=lambda p: _show_puzzle(console, p),
        read_guess=lambda: console.input("\n[bold cyan]Your Guess (type the word):[/] ").strip(),
        clock=time.perf_counter,
    )
    if outcome.correct:
        console.print("\n[bold green]You Won![/]")
    else:
        console.print("\n[bold red]You Lost![/]")
        console.print(f"[bold]Correct Word:[/] {outcome.word}")
    console.print(f"[bold]Time Taken:[/] {outcome.time_taken:.2f} Seconds")
    _wait_for_enter(console)
    session.acknowledge()


def show_stats(session: GameSession, console: Console) -> None:
    """Stats board: the last few wins, most recent first."""
    console.clear()
    table = Table(title="Game Stats")
    table.add_column("#")
    table.add_column("Word")
    table.add_column("Time Taken (s)", justify="right")
    for row in session.table_view():
        table.add_row(str(row.rank), row.word, f"{row.time_taken:.2f}")
    console.print(table)

    summary = session.timing_summary()
    if summary["count"]:
        console.print(
            f"best {summary['best']:.2f}s | mean {summary['mean']:.2f}s "
            f"| median {summary['median']:.2f}s | worst {summary['worst']:.2f}s"
        )
    else:
        console.print("[dim]No wins yet.[/]")
    _wait_for_enter(console)


def show_breakdown(session: GameSession, console: Console) -> None:
    """Breakdown chart: one bar per distinct word on the board."""
    console.clear()
    items = session.breakdown_view()
    if not items:
        console.print("[dim]No wins yet.[/]")
    else:
        chart = Table(title="Breakdown", show_header=False, box=None)
        chart.add_column("Word")
        chart.add_column("Bar")
        chart.add_column("Share", justify="right")
        for item in items:
            bar = "█" * max(1, round(item.percentage / 100 * BAR_WIDTH))
            chart.add_row(item.word, f"[green]{bar}[/]", f"{item.percentage:.2f}%")
        console.print(chart)
    _wait_for_enter(console)


def run_menu(session: GameSession, console: Console) -> None:
    """Loop on the main menu until the player quits."""
    labels = "\n".join(f"  {key}) {label}" for key, label in MENU)
    while True:
        console.clear()
        console.print("[bold yellow]Word Scramble[/]")
        console.print(labels)
        choice = Prompt.ask("Choose", choices=[key for key, _ in MENU], console=console)
        if choice == "1":
            play_one(session, console)
        elif choice == "2":
            show_stats(session, console)
        elif choice == "3":
            show_breakdown(session, console)
        else:
            session.quit()
            return


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble — unscramble the word against the clock")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="path to a vocabulary file (one word per line)")
    ap.add_argument("--scrambler", default=DEFAULT_SCRAMBLER, choices=get_scrambler_ids(),
                    help="how puzzles are scrambled")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducible puzzles)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity (logs go to stderr)")
    ap.add_argument("--check", action="store_true",
                    help="validate the vocabulary, print a summary and exit")
    return ap


def main(argv: List[str] | None = None, console: Console | None = None) -> int:
    """
    Parse CLI args, load the vocabulary, and run the game.

    Returns a process exit code: 0 ok, 1 failed --check, 2 bad configuration.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = console or Console()

    rep = validate_vocabulary(args.words)
    if args.check:
        console.print(pretty_summary(rep))
        for issue in rep["issues"]:
            console.print(f"  - {escape(issue)}")
        return 0 if rep["passed"] else 1
    log.info(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("vocabulary: %s", issue)

    rng = random.Random(args.seed)
    try:
        words = WordSource.from_file(args.words, rng=rng)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/] {escape(str(e))}")
        return 2

    session = GameSession(words, create_scrambler(args.scrambler, rng=rng))
    try:
        run_menu(session, console)
    except (KeyboardInterrupt, EOFError):
        console.print("\nBye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
