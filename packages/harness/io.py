"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes and metadata.
- summarize:      aggregate stats for the console and the manifest.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt
import json
import subprocess


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      scorer, answer, success, outcome, guesses, candidates_left, time_ms,
      guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["scorer", "answer", "success", "outcome", "guesses", "candidates_left", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "scorer": r.get("scorer_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "outcome": r.get("outcome", ""),
                "guesses": r["guesses"],
                "candidates_left": r.get("candidates_left", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: games, wins, win rate, mean guesses over wins,
    outcome counts and the guess-count distribution of wins.
    """
    n = len(results)
    wins = [r for r in results if r["success"]]
    dist = Counter(r["guesses"] for r in wins)
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": round(len(wins) / n, 4) if n else 0.0,
        "mean_guesses": round(sum(r["guesses"] for r in wins) / len(wins), 4) if wins else None,
        "outcomes": dict(Counter(r.get("outcome", "") for r in results)),
        "distribution": {str(k): dist[k] for k in sorted(dist)},
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset summary.

    Typical keys:
      - run_id, git_commit
      - config: resolved RunConfig
      - lexicon: output of datasets.validate_lexicon(...)
      - scorer: scorer.describe()
      - summary: summarize(results)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
