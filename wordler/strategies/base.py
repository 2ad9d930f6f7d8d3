from __future__ import annotations
from typing import Dict, Type

from wordler.engine.frequency import FrequencyTable

# ---- Global strategy registry (insertion order = display order) ----
REGISTRY: Dict[str, Type["ScoringStrategy"]] = {}


def register(cls: Type["ScoringStrategy"]) -> Type["ScoringStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that strategies inherit ----
class ScoringStrategy:
    """
    Maps a candidate word to a desirability score; higher is better.

    Strategies only see the static frequency table, never the game state.
    """
    id = "base"
    name = "Base"

    def __init__(self, frequencies: FrequencyTable):
        self.frequencies = frequencies

    def score(self, word: str) -> float:
        raise NotImplementedError("Override in subclass")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
