from __future__ import annotations
from typing import Any, Dict, Sequence, Type

# ---- Global scorer registry ----
REGISTRY: Dict[str, Type["BaseScorer"]] = {}


def register(cls: Type["BaseScorer"]) -> Type["BaseScorer"]:
    """
    Decorator: @register on a scorer class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate scorer id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that scorers inherit ----
class BaseScorer:
    """
    A scoring strategy.

    prepare(candidates) is called once per turn and returns whatever the
    strategy needs to score words against the current candidate set
    (None if nothing). score(word, context) must be pure and >= 0.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def prepare(self, candidates: Sequence[str]) -> Any:
        return None

    def score(self, word: str, context: Any = None) -> float:
        raise NotImplementedError("Override in subclass")

    def describe(self) -> Dict[str, Any]:
        """Config summary for run manifests."""
        return {"id": self.id, "name": self.name, "version": self.version}
