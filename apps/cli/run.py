# apps/cli/run.py
"""
CLI entry point for batch simulation runs.

This script:
  1) Validates the lexicon (and answers list, if given) and prints a summary.
  2) Builds the lexicon index and the requested scorer once.
  3) Plays every answer (or a seeded sample) with a live progress indicator
     and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with resolved config, lexicon hashes, git commit, summary

Usage:
    python -m apps.cli.run --lexicon data/lexicon.txt --answers data/answers.txt \
        --scorer positional --commonality text_data/commonality.json --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_commonality, load_lexicon, pretty_summary, validate_lexicon
from packages.engine import EngineError, WordSolver
from packages.harness import RunConfig, case_seed, load_config, run_case, summarize
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from packages.scorers import create_scorer, get_scorer_ids

log = logging.getLogger("run")


def build_solver(cfg: RunConfig, words, commonality_path: str | None) -> WordSolver:
    """Scorer from config, commonality table only for scorers that take one."""
    kwargs = {}
    if cfg.scorer == "positional":
        kwargs["neutral_weight"] = cfg.neutral_weight
        if commonality_path:
            kwargs["commonality"] = load_commonality(commonality_path)
    elif commonality_path:
        log.warning("--commonality ignored by scorer %r", cfg.scorer)
    scorer = create_scorer(cfg.scorer, **kwargs)
    return WordSolver.from_words(words, scorer, strict=cfg.strict)


def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="wordsieve — run solver simulations")
    ap.add_argument("--lexicon", required=True, help="lexicon file (one word per line)")
    ap.add_argument("--answers", help="answers to play (default: the whole lexicon)")
    ap.add_argument("--commonality", help="JSON word -> frequency table")
    ap.add_argument("--config", help="JSON RunConfig file; flags below override it")
    ap.add_argument("--scorer", help=f"scorer id (one of: {', '.join(get_scorer_ids())})")
    ap.add_argument("--neutral-weight", type=float, dest="neutral_weight",
                    help="commonality for words the corpus never saw")
    ap.add_argument("--max-turns", type=int, dest="max_turns")
    ap.add_argument("--opening", help="fixed first guess")
    ap.add_argument("--sample", type=int, help="play only a seeded subset of answers")
    ap.add_argument("--seed", type=int, help="base RNG seed (for reproducibility)")
    ap.add_argument("--strict", action="store_true", default=None,
                    help="reject contradictory feedback states")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_config(args.config) if args.config else RunConfig()
        cfg = cfg.merged(vars(args))
    except (OSError, ValueError) as e:
        print(f"config error: {e}", file=sys.stderr)
        return 1

    # 1) Validate and summarise the word lists
    rep = validate_lexicon(args.lexicon, args.answers)
    print(pretty_summary(rep))

    # 2) Build solver (fails fast on any invalid lexicon entry)
    try:
        words = load_lexicon(args.lexicon)
        answers = load_lexicon(args.answers) if args.answers else list(words)
        solver = build_solver(cfg, words, args.commonality)
    except (OSError, ValueError, EngineError) as e:
        print(f"load error: {e}", file=sys.stderr)
        return 1

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(cfg.seed)
    if cfg.sample and cfg.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: cfg.sample]
    else:
        cases = list(answers)
    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        try:
            r = run_case(solver, ans, max_turns=cfg.max_turns, opening=cfg.opening,
                         opening_words=cfg.opening_words, seed=case_seed(cfg.seed, idx))
        except EngineError as e:
            log.error("case %s aborted: %s", ans, e)
            return 1
        r["scorer_id"] = solver.scorer.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=cfg.max_turns)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": cfg.as_dict(),
        "paths": {"lexicon": args.lexicon, "answers": args.answers, "commonality": args.commonality},
        "lexicon": rep,
        "scorer": solver.scorer.describe(),
        "num_cases": len(results),
        "summary": summary,
    }, str(manifest_path))

    print(f"win rate {summary['win_rate']:.2%} | mean guesses {summary['mean_guesses']} | {summary['outcomes']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
