from __future__ import annotations
from typing import List
from .base import BaseScorer, REGISTRY, register

from . import static_weight  # noqa: F401
from . import positional  # noqa: F401

from .static_weight import StaticWeightScorer, ENGLISH_LETTER_WEIGHTS
from .positional import PositionalCommonalityScorer, NEUTRAL_COMMONALITY


def create_scorer(scorer_id: str, **config) -> BaseScorer:
    """
    Factory: instantiate a registered scorer by id, passing `config`
    through as constructor keyword arguments.
    """
    try:
        cls = REGISTRY[scorer_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown scorer id: {scorer_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**config)


def get_scorer_ids() -> List[str]:
    """
    Return all registered scorer ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseScorer", "REGISTRY", "register", "create_scorer", "get_scorer_ids",
    "StaticWeightScorer", "ENGLISH_LETTER_WEIGHTS",
    "PositionalCommonalityScorer", "NEUTRAL_COMMONALITY",
]
