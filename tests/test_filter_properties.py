"""
Seeded-random checks of the filter invariants.

States are built by playing real feedback (GuessState.observe), which
never produces absent/present overlaps, so every state here is consistent.
"""

import random

import pytest
from packages.engine import (
    GuessState, LexiconIndex, feedback_pattern, filter_candidates,
)

ALPHABET = "aeinorst"
SEEDS = [1, 2, 3, 5, 8, 13, 21, 34]


def _lexicon(rng: random.Random, n: int = 250):
    words = {"".join(rng.choice(ALPHABET) for _ in range(5)) for _ in range(n)}
    return sorted(words)


def _played_state(rng: random.Random, words, turns: int):
    answer = rng.choice(words)
    st = GuessState()
    for _ in range(turns):
        guess = rng.choice(words)
        st.observe(guess, feedback_pattern(guess, answer))
    return answer, st


def _facts(st: GuessState):
    facts = [("correct", f) for f in st.correct]
    for letter, excluded in st.present.items():
        facts.append(("present", letter))
        facts += [("excluded", (letter, p)) for p in excluded]
    facts += [("absent", l) for l in st.absent]
    return facts


def _without(st: GuessState, fact) -> GuessState:
    kind, val = fact
    out = st.copy()
    if kind == "correct":
        out.correct.discard(val)
    elif kind == "present":
        del out.present[val]
    elif kind == "excluded":
        out.present[val[0]].discard(val[1])
    else:
        out.absent.discard(val)
    return out


@pytest.mark.parametrize("seed", SEEDS)
def test_answer_always_survives(seed):
    rng = random.Random(seed)
    words = _lexicon(rng)
    idx = LexiconIndex.build(words)
    for turns in (1, 2, 3, 4):
        answer, st = _played_state(rng, words, turns)
        st.check_consistency()
        assert answer in filter_candidates(idx, st)


@pytest.mark.parametrize("seed", SEEDS)
def test_removing_a_fact_never_shrinks(seed):
    rng = random.Random(seed)
    words = _lexicon(rng)
    idx = LexiconIndex.build(words)
    _, st = _played_state(rng, words, 2)
    narrow = set(filter_candidates(idx, st))
    for fact in _facts(st):
        wider = set(filter_candidates(idx, _without(st, fact)))
        assert narrow <= wider, fact


@pytest.mark.parametrize("seed", SEEDS)
def test_refiltering_is_idempotent(seed):
    rng = random.Random(seed)
    words = _lexicon(rng)
    idx = LexiconIndex.build(words)
    _, st = _played_state(rng, words, 2)
    first = filter_candidates(idx, st)
    if not first:
        return
    again = filter_candidates(LexiconIndex.build(first), st)
    assert again == first


@pytest.mark.parametrize("seed", SEEDS)
def test_wrong_guess_is_always_eliminated(seed):
    rng = random.Random(seed)
    words = _lexicon(rng)
    idx = LexiconIndex.build(words)
    answer = rng.choice(words)
    for guess in rng.sample(words, 20):
        if guess == answer:
            continue
        st = GuessState()
        st.observe(guess, feedback_pattern(guess, answer))
        assert guess not in filter_candidates(idx, st)
