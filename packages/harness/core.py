"""
Session simulation primitives.

- run_case:  play one puzzle (one hidden answer) with a WordSolver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).

The harness plays the game's role: it computes the feedback pattern for
each guess and folds it into a fresh GuessState. The solver itself holds
no session state.

Session flow:  Start -> (guess, observe feedback, update state) x N
               -> success | exhausted | no_candidates
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, List, Sequence, Tuple

from packages.engine import (
    ALL_GREEN, GuessState, NoCandidatesRemaining, feedback_pattern, parse_word, select_next,
)
from .config import OPENING_WORDS, WORDLE_MAX_TURNS

log = logging.getLogger(__name__)

SUCCESS = "success"
EXHAUSTED = "exhausted"
NO_CANDIDATES = "no_candidates"


def pick_opening(solver, *, opening: str | None = None,
                 opening_words: Sequence[str] = OPENING_WORDS,
                 rng: random.Random | None = None) -> str:
    """
    First guess of a session:
      - `opening` if given,
      - else a random pick among `opening_words` that the lexicon knows,
      - else whatever the solver suggests for an empty state.
    """
    if opening:
        return parse_word(opening)
    known = [w for w in opening_words if w in solver.index]
    if known:
        return (rng or random).choice(known)
    return solver.suggest(GuessState())


def case_seed(seed: int | None, idx: int) -> int | None:
    """Per-case seed: base seed + case index, or unseeded if no base seed."""
    return None if seed is None else seed + idx


def run_case(
        solver,
        answer: str,
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        opening: str | None = None,
        opening_words: Sequence[str] = OPENING_WORDS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver wins, runs out of turns or runs out of
    candidates.

    Args:
        solver:        a WordSolver
        answer:        the hidden word for this case
        max_turns:     turn budget (Wordle uses 6)
        opening:       fixed first guess (overrides opening_words)
        opening_words: pool for a random first guess
        seed:          RNG seed for the opening pick

    Returns:
        dict with keys:
            answer, success, outcome, guesses, time_ms,
            history (list[(guess, pattern)]), candidates_left
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")
    answer = parse_word(answer)
    rng = random.Random(seed)

    state = GuessState()
    history: List[Tuple[str, str]] = []
    outcome = EXHAUSTED
    candidates_left = len(solver.index)

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        try:
            if turn == 1:
                guess = pick_opening(solver, opening=opening, opening_words=opening_words, rng=rng)
            else:
                cand = solver.candidates(state)
                candidates_left = len(cand)
                guess = select_next(cand, solver.scorer)
        except NoCandidatesRemaining:
            log.info("no candidates left for %s after %d guesses", answer, len(history))
            candidates_left = 0
            outcome = NO_CANDIDATES
            break

        patt = feedback_pattern(guess, answer)
        history.append((guess, patt))

        if patt == ALL_GREEN:
            outcome = SUCCESS
            break

        state.observe(guess, patt)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "success": outcome == SUCCESS,
        "outcome": outcome,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "candidates_left": candidates_left,
    }


def run_batch(
        solver,
        answers: Sequence[str],
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        opening: str | None = None,
        opening_words: Sequence[str] = OPENING_WORDS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used.

    Each case's seed is derived from the base seed (seed + index) so runs
    are reproducible but not identical across cases.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        out.append(run_case(
            solver, ans, max_turns=max_turns, opening=opening,
            opening_words=opening_words, seed=case_seed(seed, idx),
        ))
    return out
