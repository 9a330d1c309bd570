"""
Run configuration.

One dataclass holds every knob a batch run needs. Defaults mirror the CLI
defaults; a JSON file can override them and CLI flags override the file.

Example config.json:
    {"scorer": "positional", "neutral_weight": 0.5, "max_turns": 6,
     "seed": 123, "opening_words": ["soare", "raise"]}
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping

# Openers that score well against the standard answer list.
OPENING_WORDS: List[str] = ["soare", "serai", "raise", "arise", "arose", "aesir", "osier"]

WORDLE_MAX_TURNS = 6


@dataclass
class RunConfig:
    scorer: str = "positional"
    neutral_weight: float = 0.5
    max_turns: int = WORDLE_MAX_TURNS
    seed: int | None = 123
    sample: int | None = None
    opening: str | None = None
    opening_words: List[str] = field(default_factory=lambda: list(OPENING_WORDS))
    strict: bool = False

    def __post_init__(self):
        _check_type("scorer", self.scorer, str)
        _check_type("neutral_weight", self.neutral_weight, (int, float))
        _check_type("max_turns", self.max_turns, int)
        _check_type("seed", self.seed, int, optional=True)
        _check_type("sample", self.sample, int, optional=True)
        _check_type("opening", self.opening, str, optional=True)
        _check_type("strict", self.strict, bool)
        if not isinstance(self.opening_words, (list, tuple)) or \
                not all(isinstance(w, str) for w in self.opening_words):
            raise ValueError(f"opening_words must be a list of strings; got {self.opening_words!r}")

        if self.max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {self.max_turns}")
        if not self.neutral_weight > 0:
            raise ValueError(f"neutral_weight must be > 0; got {self.neutral_weight}")
        if self.sample is not None and self.sample < 1:
            raise ValueError(f"sample must be >= 1; got {self.sample}")

    def merged(self, overrides: Mapping[str, Any]) -> "RunConfig":
        """Return a copy with non-None `overrides` applied."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in known and v is not None})

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: str | Path) -> RunConfig:
    """
    Read a RunConfig from a JSON object. Unknown keys raise ValueError so
    typos don't silently fall back to defaults.
    """
    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{p}: config must be a JSON object")
    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{p}: unknown config key(s): {unknown}")
    return RunConfig(**data)


def _check_type(name: str, value, types, optional: bool = False) -> None:
    # bool is an int subclass; only accept it where bool is asked for
    if value is None and optional:
        return
    wants_bool = types is bool
    if (isinstance(value, bool) and not wants_bool) or not isinstance(value, types):
        raise ValueError(f"{name} has wrong type: {value!r}")
