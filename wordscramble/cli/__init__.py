"""Terminal front end; run with `python -m wordscramble.cli.play`."""
