"""
Lexicon index.

Built once from the word list, read-only afterwards:
  - positions[p][letter] : words with `letter` at position p
  - contains[letter]     : words with `letter` anywhere

Every letter has a bucket (possibly empty) at every position, so lookups
never need a membership check. Buckets are frozensets; the filter only
intersects and subtracts them, it never mutates.

Loading is validate-then-commit: every entry is parsed before any bucket
is filled, so InvalidWord leaves no partially built index behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set, Tuple

from .letters import POSITIONS, Letter, Word, letters_of, parse_word

log = logging.getLogger(__name__)

LetterBuckets = Mapping[Letter, FrozenSet[Word]]


@dataclass(frozen=True)
class LexiconIndex:
    words: Tuple[Word, ...]
    members: FrozenSet[Word]
    positions: Tuple[LetterBuckets, ...]
    contains: LetterBuckets

    @classmethod
    def build(cls, raw_words: Iterable[str]) -> "LexiconIndex":
        """
        Validate and index `raw_words`.

        Duplicates collapse to their first occurrence; input order is kept.
        Raises InvalidWord for the first entry that is not a valid word.
        """
        raw = list(raw_words)

        # Validate everything first.
        words: List[Word] = []
        seen: Set[Word] = set()
        for entry in raw:
            w = parse_word(entry)
            if w not in seen:
                seen.add(w)
                words.append(w)

        pos_buckets: List[Dict[Letter, Set[Word]]] = [
            {letter: set() for letter in Letter} for _ in POSITIONS
        ]
        contains_buckets: Dict[Letter, Set[Word]] = {letter: set() for letter in Letter}

        for w in words:
            for i, letter in enumerate(letters_of(w)):
                pos_buckets[i][letter].add(w)
                contains_buckets[letter].add(w)

        log.debug("indexed %d words (%d duplicates dropped)", len(words), len(raw) - len(words))
        return cls(
            words=tuple(words),
            members=frozenset(words),
            positions=tuple(
                {letter: frozenset(b) for letter, b in buckets.items()} for buckets in pos_buckets
            ),
            contains={letter: frozenset(b) for letter, b in contains_buckets.items()},
        )

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.members

    def at(self, letter: Letter, position: int) -> FrozenSet[Word]:
        """Words with `letter` at `position`."""
        return self.positions[position][letter]

    def having(self, letter: Letter) -> FrozenSet[Word]:
        """Words containing `letter` anywhere."""
        return self.contains[letter]

    def in_order(self, subset: Iterable[Word]) -> List[Word]:
        """Return the words of `subset` in lexicon order."""
        keep = subset if isinstance(subset, (set, frozenset)) else set(subset)
        return [w for w in self.words if w in keep]
