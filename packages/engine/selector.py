"""
Pick the best candidate.

select_next scores every candidate once and keeps the first one with the
strictly greatest score, so exact ties go to whichever word came first in
the input. Candidates arrive in lexicon order from the filter, which makes
results reproducible across runs.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import NoCandidatesRemaining
from .letters import Word


def select_next(candidates: Sequence[Word], scorer) -> Word:
    """
    Return the top-scoring candidate.

    Args:
      candidates : words still consistent with the feedback
      scorer     : object with prepare(candidates) and score(word, context)

    Raises:
      NoCandidatesRemaining if `candidates` is empty.
    """
    if not candidates:
        raise NoCandidatesRemaining()

    context = scorer.prepare(candidates)
    best = None
    best_score = None
    for w in candidates:
        s = scorer.score(w, context)
        if best_score is None or s > best_score:
            best, best_score = w, s
    return best


def rank(candidates: Sequence[Word], scorer, k: int | None = None) -> List[Tuple[Word, float]]:
    """
    Return (word, score) pairs, best first. Stable: equal scores keep
    input order. `k` limits the result length.
    """
    if not candidates:
        return []
    context = scorer.prepare(candidates)
    scored = [(w, scorer.score(w, context)) for w in candidates]
    scored.sort(key=lambda ws: ws[1], reverse=True)
    return scored if k is None else scored[:k]
