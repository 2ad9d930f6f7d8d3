from __future__ import annotations
from typing import List

from wordler.engine.frequency import FrequencyTable
from .base import ScoringStrategy, REGISTRY, register

from . import sum_unique  # noqa: F401
from . import mul_unique  # noqa: F401

__all__ = ["ScoringStrategy", "REGISTRY", "register", "create_strategy",
           "get_strategy_ids", "DEFAULT_STRATEGY"]


def create_strategy(strategy_id: str, frequencies: FrequencyTable) -> ScoringStrategy:
    """
    Factory: instantiate a registered strategy by id over `frequencies`.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {get_strategy_ids()}") from e
    return cls(frequencies)


def get_strategy_ids() -> List[str]:
    """
    Registered strategy ids in registration order; the first is the default.
    """
    return list(REGISTRY.keys())


DEFAULT_STRATEGY = get_strategy_ids()[0]
