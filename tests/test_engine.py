import pytest
from packages.engine import (
    ContradictoryState, GuessState, InvalidWord, Letter, LexiconIndex,
    feedback_pattern, filter_candidates, parse_word,
)


# --- feedback golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("speed", "abide", "--Y-Y"),
])
def test_feedback_golden(guess, answer, expected):
    assert feedback_pattern(guess, answer) == expected


# --- words ---
@pytest.mark.parametrize("raw", ["abcdef", "ab1de", "Crane", "cran", " rane", "", "cr-ne"])
def test_parse_word_rejects(raw):
    with pytest.raises(InvalidWord) as ei:
        parse_word(raw)
    assert ei.value.word == raw


def test_parse_word_accepts():
    assert parse_word("crane") == "crane"


# --- index ---
def test_build_index_dedupes_and_keeps_order():
    idx = LexiconIndex.build(["crane", "slate", "crane", "abide"])
    assert idx.words == ("crane", "slate", "abide")
    assert len(idx) == 3
    assert "slate" in idx and "stale" not in idx


def test_build_index_buckets():
    idx = LexiconIndex.build(["crane", "slate", "eerie"])
    assert idx.at(Letter.E, 4) == {"crane", "slate", "eerie"}
    assert idx.at(Letter.E, 0) == {"eerie"}
    assert idx.having(Letter.A) == {"crane", "slate"}
    # every letter has a bucket at every position
    assert all(len(p) == 26 for p in idx.positions)
    assert idx.having(Letter.Z) == frozenset()


@pytest.mark.parametrize("bad", ["abcdef", "ab1de"])
def test_build_index_reports_offending_entry(bad):
    with pytest.raises(InvalidWord) as ei:
        LexiconIndex.build(["crane", "slate", bad, "abide"])
    assert ei.value.word == bad
    assert bad in str(ei.value)


# --- filter ---
WORDS = ["crane", "slate", "eerie", "apple", "crepe", "abide", "speed"]


def test_filter_empty_state_returns_lexicon():
    idx = LexiconIndex.build(WORDS)
    assert filter_candidates(idx, GuessState()) == WORDS


def test_filter_correct_position():
    idx = LexiconIndex.build(["apple", "eerie", "crepe"])
    st = GuessState()
    st.add_correct("e", 1)
    assert filter_candidates(idx, st) == ["eerie"]


def test_filter_present_and_absent():
    idx = LexiconIndex.build(["abcde", "zabcd", "bcdea"])
    st = GuessState.from_dict({
        "present": [{"letter": "a", "excludedPositions": [0]}],
        "absent": ["z"],
    })
    assert filter_candidates(idx, st) == ["bcdea"]


def test_filter_absent_occurrence_covered_by_correct():
    idx = LexiconIndex.build(["crane", "eerie", "grove", "those"])
    st = GuessState()
    st.add_correct("e", 4)
    st.add_absent("e")
    # only 'eerie' has an 'e' that the correct fact does not explain
    assert filter_candidates(idx, st) == ["crane", "grove", "those"]


def test_filter_absent_ignored_when_letter_present():
    idx = LexiconIndex.build(["crepe", "eerie", "slate"])
    st = GuessState()
    st.add_present("e", 0)
    st.add_absent("e")
    assert filter_candidates(idx, st) == ["crepe", "slate"]


def test_filter_does_not_mutate_inputs():
    idx = LexiconIndex.build(WORDS)
    st = GuessState.from_dict({"correct": [{"letter": "e", "position": 4}], "absent": ["s"]})
    before = st.to_dict()
    filter_candidates(idx, st)
    filter_candidates(idx, st)
    assert st.to_dict() == before
    assert idx.words == tuple(WORDS)


def test_filter_multiple_correct_intersect():
    idx = LexiconIndex.build(["crane", "crate", "grate", "slate"])
    st = GuessState()
    st.add_correct("r", 1)
    st.add_correct("t", 3)
    assert filter_candidates(idx, st) == ["crate", "grate"]


# --- state ---
def test_observe_duplicate_gray_does_not_mark_absent():
    st = GuessState()
    st.observe("speed", feedback_pattern("speed", "abide"))
    assert st.absent == {Letter.S, Letter.P}
    assert st.present[Letter.E] == {2, 3}
    assert st.present[Letter.D] == {4}
    st.check_consistency()


def test_observe_gray_duplicate_of_green():
    st = GuessState()
    st.observe("eerie", feedback_pattern("eerie", "crane"))  # "--Y-G"
    assert (Letter.E, 4) in st.correct
    assert Letter.E not in st.absent
    assert st.present[Letter.E] == {0, 1}
    assert st.present[Letter.R] == {2}
    assert st.absent == {Letter.I}


def test_observe_rejects_bad_pattern():
    with pytest.raises(ValueError):
        GuessState().observe("crane", "GGX--")
    with pytest.raises(InvalidWord):
        GuessState().observe("cranes", "GG---")


def test_check_consistency_absent_vs_correct():
    st = GuessState()
    st.add_correct("e", 4)
    st.add_absent("e")
    with pytest.raises(ContradictoryState) as ei:
        st.check_consistency()
    assert ei.value.letters == ["e"]


def test_check_consistency_two_letters_same_position():
    st = GuessState()
    st.add_correct("a", 0)
    st.add_correct("b", 0)
    with pytest.raises(ContradictoryState):
        st.check_consistency()


def test_state_dict_form():
    data = {
        "correct": [{"letter": "e", "position": 4}],
        "present": [{"letter": "a", "excludedPositions": [0, 2]}],
        "absent": ["s", "z"],
    }
    st = GuessState.from_dict(data)
    assert st.to_dict() == data
    # singular key is accepted too
    st2 = GuessState.from_dict({"present": [{"letter": "a", "excludedPosition": [0]}]})
    assert st2.present == {Letter.A: {0}}


@pytest.mark.parametrize("data", [
    {"absent": ["A"]},
    {"absent": ["ab"]},
    {"correct": [{"letter": "e", "position": 5}]},
    {"present": [{"letter": "e", "excludedPositions": [-1]}]},
    [],
    "correct",
    {"correct": ["e"]},
    {"correct": [{"letter": "e"}]},
    {"present": [{"excludedPositions": [0]}]},
    {"present": [{"letter": "a", "excludedPositions": 3}]},
    {"present": [{"letter": "a", "excludedPositions": 0}]},
    {"absent": "z"},
])
def test_state_from_dict_rejects(data):
    with pytest.raises(ValueError):
        GuessState.from_dict(data)


def test_state_copy_is_independent():
    st = GuessState()
    st.add_present("a", 0)
    cp = st.copy()
    cp.add_present("a", 1)
    cp.add_absent("z")
    assert st.present == {Letter.A: {0}}
    assert not st.absent
    assert GuessState().is_empty() and not st.is_empty()


def test_state_from_dict_accepts_null_lists():
    st = GuessState.from_dict({"correct": None, "present": [{"letter": "a", "excludedPositions": None}]})
    assert st.to_dict() == {"correct": [], "present": [{"letter": "a", "excludedPositions": []}], "absent": []}
