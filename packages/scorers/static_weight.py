"""
Static letter-weight scoring.

Each letter carries a fixed weight (default: relative frequency of the
letter in English dictionary words); a word scores the sum of its five
letters' weights. Repeated letters count every time.

Used when no commonality data is available. Ignores the candidate set,
so prepare() has nothing to do.
"""

from __future__ import annotations
from typing import Dict, Mapping

from packages.engine.letters import Letter, to_letter
from .base import BaseScorer, register

# Letter frequency in English dictionary words, scaled so 'q' == 1.
ENGLISH_LETTER_WEIGHTS: Mapping[str, float] = {
    "e": 56.88, "a": 43.31, "r": 38.64, "i": 38.45, "o": 36.51,
    "t": 35.43, "n": 33.92, "s": 29.23, "l": 27.98, "c": 23.13,
    "u": 18.51, "d": 17.25, "p": 16.14, "m": 15.36, "h": 15.31,
    "g": 12.59, "b": 10.56, "f": 9.24, "y": 9.06, "w": 6.57,
    "k": 5.61, "v": 5.13, "x": 1.48, "z": 1.39, "j": 1.01,
    "q": 1.00,
}


def resolve_weights(weights: Mapping[str, float]) -> Dict[Letter, float]:
    """
    Validate a weight table: all 26 letters, each a non-negative number.
    Raises ValueError otherwise.
    """
    table: Dict[Letter, float] = {}
    for k, v in weights.items():
        w = float(v)
        if w < 0:
            raise ValueError(f"weight for {k!r} must be >= 0, got {v!r}")
        table[to_letter(k)] = w
    missing = [l.value for l in Letter if l not in table]
    if missing:
        raise ValueError(f"weight table missing letters: {''.join(missing)}")
    return table


@register
class StaticWeightScorer(BaseScorer):
    id = "static"
    name = "Static Letter Weights"
    version = "1.0.0"

    def __init__(self, weights: Mapping[str, float] | None = None):
        table = resolve_weights(weights if weights is not None else ENGLISH_LETTER_WEIGHTS)
        # keyed by plain char for the hot loop
        self._weights: Dict[str, float] = {l.value: w for l, w in table.items()}

    def score(self, word: str, context=None) -> float:
        return sum(self._weights[ch] for ch in word)

    def describe(self):
        d = super().describe()
        d["weights_total"] = round(sum(self._weights.values()), 2)
        return d
