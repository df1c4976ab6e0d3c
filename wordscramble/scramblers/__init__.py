from __future__ import annotations
import random
from typing import List
from .base import BaseScrambler, REGISTRY, register

from . import shuffle  # noqa: F401
from . import reroll  # noqa: F401

# Used when the caller does not pick one explicitly.
DEFAULT_SCRAMBLER = "reroll"


def create_scrambler(scrambler_id: str = DEFAULT_SCRAMBLER,
                     rng: random.Random | None = None) -> BaseScrambler:
    """
    Factory: instantiate a registered scrambler by id.
    """
    try:
        cls = REGISTRY[scrambler_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown scrambler id: {scrambler_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(rng=rng)


def get_scrambler_ids() -> List[str]:
    """
    Return all registered scrambler ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseScrambler", "REGISTRY", "register", "create_scrambler",
           "get_scrambler_ids", "DEFAULT_SCRAMBLER"]
