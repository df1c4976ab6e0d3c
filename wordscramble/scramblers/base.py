from __future__ import annotations
import random
from typing import Dict, Type

# ---- Global scrambler registry ----
REGISTRY: Dict[str, Type["BaseScrambler"]] = {}


def register(cls: Type["BaseScrambler"]) -> Type["BaseScrambler"]:
    """
    Decorator: @register on a scrambler class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate scrambler id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that scramblers inherit ----
class BaseScrambler:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def scramble(self, word: str) -> str:
        raise NotImplementedError("Override in subclass")
