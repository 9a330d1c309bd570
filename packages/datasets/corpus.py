"""
Commonality table construction from raw text corpora.

Offline only: the solver reads the JSON this produces, never the corpus.

Tokenising rules:
  - split on whitespace, lowercase
  - keep 5-letter a-z tokens
  - fold 6-letter tokens ending in "s" to their 5-letter stem
    ("crane" and "cranes" both count toward "crane")
  - only words in the lexicon are counted

Sources may be plain text files or .zip archives (every member is read
as UTF-8 text, undecodable bytes replaced).
"""

from __future__ import annotations

import io
import logging
import zipfile
from collections import Counter
from pathlib import Path
from typing import Collection, Iterable, Iterator, TextIO

from packages.engine.letters import WORD_LENGTH

log = logging.getLogger(__name__)

_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyz")


def normalize_token(tok: str) -> str | None:
    """Map a raw token to a 5-letter word, or None if it doesn't qualify."""
    t = tok.lower()
    if len(t) == WORD_LENGTH + 1 and t.endswith("s"):
        t = t[:WORD_LENGTH]
    if len(t) != WORD_LENGTH or not set(t) <= _ALPHA:
        return None
    return t


def iter_words(stream: TextIO) -> Iterator[str]:
    """Yield normalised 5-letter words from a text stream, line by line."""
    for line in stream:
        for tok in line.split():
            w = normalize_token(tok)
            if w is not None:
                yield w


def iter_source(path: Path | str) -> Iterator[str]:
    """Yield normalised words from a text file or every member of a zip."""
    p = Path(path)
    if zipfile.is_zipfile(p):
        with zipfile.ZipFile(p) as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                log.info("reading %s:%s", p.name, info.filename)
                with zf.open(info) as raw:
                    yield from iter_words(io.TextIOWrapper(raw, encoding="utf-8", errors="replace"))
    else:
        log.info("reading %s", p.name)
        with p.open("r", encoding="utf-8", errors="replace") as f:
            yield from iter_words(f)


def count_commonality(sources: Iterable[Path | str], lexicon: Collection[str]) -> Counter:
    """
    Count occurrences of lexicon words across all `sources`.
    Words never seen are simply absent from the result.
    """
    known = lexicon if isinstance(lexicon, (set, frozenset)) else set(lexicon)
    counts: Counter = Counter()
    for src in sources:
        before = sum(counts.values())
        counts.update(w for w in iter_source(src) if w in known)
        log.info("%s: %d lexicon hits", Path(src).name, sum(counts.values()) - before)
    return counts
