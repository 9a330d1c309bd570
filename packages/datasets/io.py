from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, List, Mapping


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_lexicon(p: Path | str) -> List[str]:
    """
    Read a one-word-per-line lexicon. Surrounding whitespace is stripped
    and blank lines are skipped; everything else is passed through as-is
    so LexiconIndex.build can reject malformed entries.
    """
    return [ln.strip() for ln in read_lines(p) if ln.strip()]


def load_commonality(p: Path | str) -> Dict[str, float]:
    """
    Read a commonality table (JSON object: word -> frequency).
    Raises ValueError if the file is not a JSON object of numbers.
    """
    p = Path(p)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{p}: commonality table must be a JSON object")
    out: Dict[str, float] = {}
    for word, freq in data.items():
        if isinstance(freq, bool) or not isinstance(freq, (int, float)):
            raise ValueError(f"{p}: frequency for {word!r} is not a number: {freq!r}")
        out[word] = freq
    return out


def save_commonality(table: Mapping[str, float], p: Path | str) -> str:
    """Write a commonality table as JSON with sorted keys."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(dict(table), sort_keys=True) + "\n", encoding="utf-8")
    return str(p)
