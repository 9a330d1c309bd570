from .core import run_case, run_batch, pick_opening, case_seed, SUCCESS, EXHAUSTED, NO_CANDIDATES
from .config import RunConfig, load_config, OPENING_WORDS, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest, summarize

__all__ = [
    "run_case", "run_batch", "pick_opening", "case_seed", "SUCCESS", "EXHAUSTED", "NO_CANDIDATES",
    "RunConfig", "load_config", "OPENING_WORDS", "WORDLE_MAX_TURNS",
    "write_csv", "write_manifest", "summarize",
]
