"""
WordSolver: the engine entry point.

Holds the read-only LexiconIndex and a scorer; every call takes the
caller's GuessState. No per-session state lives here, so one solver can
serve any number of concurrent sessions.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .constraints import filter_candidates
from .lexicon import LexiconIndex
from .letters import Word
from .selector import rank, select_next
from .state import GuessState

log = logging.getLogger(__name__)


class WordSolver:
    def __init__(self, index: LexiconIndex, scorer, *, strict: bool = False):
        self.index = index
        self.scorer = scorer
        self.strict = strict

    @classmethod
    def from_words(cls, raw_words: Iterable[str], scorer, *, strict: bool = False) -> "WordSolver":
        return cls(LexiconIndex.build(raw_words), scorer, strict=strict)

    def candidates(self, state: GuessState) -> List[Word]:
        """Words consistent with `state` (lexicon order)."""
        if self.strict:
            state.check_consistency()
        return filter_candidates(self.index, state)

    def suggest(self, state: GuessState) -> Word:
        """
        Next guess for `state`.
        Raises NoCandidatesRemaining (and ContradictoryState when strict).
        """
        cand = self.candidates(state)
        word = select_next(cand, self.scorer)
        log.debug("%d candidates -> %s", len(cand), word)
        return word

    def rank(self, state: GuessState, k: int | None = 10) -> List[Tuple[Word, float]]:
        return rank(self.candidates(state), self.scorer, k)
