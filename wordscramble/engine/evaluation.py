"""
Guess evaluation.

This module answers the question: "Did the player unscramble the word?"
A guess is correct iff:
  - it is a string
  - it matches the target character for character, ignoring case

Whitespace is significant: " apple" is not "apple". Trimming belongs to the
input layer, not here.
"""


def is_correct(guess: str, target: str) -> bool:
    """
    Return True if `guess` spells `target` (case-insensitive).

    Examples:
      is_correct("Apple", "apple") -> True
      is_correct("aple", "apple")  -> False
      is_correct("", "")           -> True
    """
    if not isinstance(guess, str) or not isinstance(target, str):
        return False
    return guess.lower() == target.lower()
