"""
Candidate filtering given accumulated feedback.

Given:
  - a LexiconIndex (built once)
  - a GuessState (correct / present / absent facts)

Return:
  - the lexicon words consistent with every fact, in lexicon order.

Three passes, each narrowing the previous result:
  1) correct : intersect the position buckets of every (letter, position)
  2) present : intersect with "contains letter" minus "letter at an
               excluded position", once per present letter
  3) absent  : drop words where an absent letter occurs at an index that
               no correct fact explains, unless that letter is also present

Pass 3 works per occurrence: a letter can be gray in one slot and green in
another within the same guess ("speed" vs "abide" style duplicates).
"""

from __future__ import annotations

import logging
from typing import FrozenSet, List

from .lexicon import LexiconIndex
from .letters import Word
from .state import GuessState

log = logging.getLogger(__name__)


def filter_candidates(index: LexiconIndex, state: GuessState) -> List[Word]:
    """
    Keep only words consistent with `state`. Never mutates `index` or `state`.

    Returns:
      List[Word] in lexicon order (empty if nothing fits).
    """
    # 1) correct-position narrowing
    if state.correct:
        buckets = [index.at(letter, pos) for letter, pos in state.correct]
        # smallest first keeps the running intersection small
        buckets.sort(key=len)
        cand: FrozenSet[Word] = buckets[0].intersection(*buckets[1:])
    else:
        cand = index.members
    log.debug("after correct: %d", len(cand))

    # 2) presence narrowing
    for letter, excluded in state.present.items():
        allowed = index.having(letter)
        for pos in excluded:
            allowed = allowed - index.at(letter, pos)
        cand = cand & allowed
    log.debug("after present: %d", len(cand))

    # 3) absence narrowing (per occurrence)
    if state.absent:
        cand = frozenset(w for w in cand if not _violates_absent(w, state))
    log.debug("after absent: %d", len(cand))

    return index.in_order(cand)


def _violates_absent(word: str, state: GuessState) -> bool:
    for letter in state.absent:
        if letter in state.present:
            continue
        ch = letter.value
        for i, c in enumerate(word):
            if c == ch and (letter, i) not in state.correct:
                return True
    return False
