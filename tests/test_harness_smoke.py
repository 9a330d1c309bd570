import json

import pytest
from packages.engine import WordSolver
from packages.harness import (
    EXHAUSTED, NO_CANDIDATES, SUCCESS, RunConfig, case_seed, load_config, run_batch, run_case,
    summarize,
)
from packages.harness.io import write_csv
from packages.scorers import create_scorer

LEXICON = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]


@pytest.mark.parametrize("scorer_id", ["static", "positional"])
def test_run_case_smoke(scorer_id):
    solver = WordSolver.from_words(LEXICON, create_scorer(scorer_id))
    for answer in LEXICON:
        r = run_case(solver, answer, max_turns=6, seed=42)
        assert r["success"] is True and r["outcome"] == SUCCESS
        assert r["history"][-1] == (answer, "GGGGG")
        assert r["guesses"] <= 6


def test_run_case_uses_opening():
    solver = WordSolver.from_words(LEXICON, create_scorer("static"))
    r = run_case(solver, "crane", opening="alone", seed=1)
    assert r["history"][0][0] == "alone"
    # only 'raise' of the default openers is in the lexicon
    r = run_case(solver, "crane", seed=1)
    assert r["history"][0][0] == "raise"


def test_run_case_exhausted():
    solver = WordSolver.from_words(LEXICON, create_scorer("static"))
    r = run_case(solver, "crane", opening="raise", max_turns=1)
    assert r["success"] is False
    assert r["outcome"] == EXHAUSTED
    assert r["guesses"] == 1


def test_run_case_answer_outside_lexicon():
    solver = WordSolver.from_words(["crane", "raise"], create_scorer("positional"))
    r = run_case(solver, "stare", opening="raise")
    assert r["outcome"] == NO_CANDIDATES
    assert r["guesses"] == 1
    assert r["candidates_left"] == 0


def test_run_batch_and_outputs(tmp_path):
    solver = WordSolver.from_words(LEXICON, create_scorer("positional"))
    results = run_batch(solver, LEXICON, seed=7, sample=4)
    assert [r["answer"] for r in results] == LEXICON[:4]

    s = summarize(results)
    assert s["games"] == 4 and s["wins"] == 4 and s["win_rate"] == 1.0

    for r in results:
        r["scorer_id"] = solver.scorer.id
    out = write_csv(results, str(tmp_path / "run.csv"), max_turns=6)
    lines = (tmp_path / "run.csv").read_text(encoding="utf-8").splitlines()
    assert out.endswith("run.csv")
    assert lines[0].startswith("scorer,answer,success,outcome")
    assert len(lines) == 5
    assert "'GGGGG" in (tmp_path / "run.csv").read_text(encoding="utf-8")


def test_config_file_and_overrides(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"scorer": "static", "max_turns": 8}), encoding="utf-8")
    cfg = load_config(p)
    assert cfg.scorer == "static" and cfg.max_turns == 8

    cfg = cfg.merged({"seed": 9, "max_turns": None, "lexicon": "ignored"})
    assert cfg.seed == 9 and cfg.max_turns == 8

    p.write_text(json.dumps({"scorer": "static", "turns": 8}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)
    with pytest.raises(ValueError):
        RunConfig(max_turns=0)


def test_config_null_seed_runs_unseeded(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"scorer": "static", "seed": None, "opening": "raise"}), encoding="utf-8")
    cfg = load_config(p)
    assert cfg.seed is None
    assert case_seed(cfg.seed, 3) is None
    assert case_seed(10, 3) == 13

    solver = WordSolver.from_words(LEXICON, create_scorer(cfg.scorer))
    results = run_batch(solver, LEXICON[:3], opening=cfg.opening, seed=cfg.seed)
    assert [r["success"] for r in results] == [True, True, True]


@pytest.mark.parametrize("data", [
    {"max_turns": "6"},
    {"max_turns": 6.0},
    {"max_turns": True},
    {"seed": "123"},
    {"neutral_weight": "0.5"},
    {"sample": 2.5},
    {"scorer": 1},
    {"opening": 5},
    {"opening_words": "raise"},
    {"opening_words": ["raise", 1]},
    {"strict": "yes"},
])
def test_config_rejects_wrong_types(tmp_path, data):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_run_batch_seeds_each_case():
    solver = WordSolver.from_words(LEXICON, create_scorer("static"))
    a = run_batch(solver, LEXICON, seed=7, sample=4)
    b = [run_case(solver, ans, seed=case_seed(7, i)) for i, ans in enumerate(LEXICON[:4], start=1)]
    assert [r["history"] for r in a] == [r["history"] for r in b]
