"""
Accumulated feedback for one solving session.

GuessState holds three independent kinds of fact:
  - correct : (letter, position) pairs, letter confirmed at that position
  - present : letter -> positions it is known NOT to occupy
  - absent  : letters known not to be in the answer

Facts are only ever added. The session that owns the state feeds it one
pattern per turn via `observe`, or the external collaborator builds it
from the list form with `from_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Set, Tuple

from .errors import ContradictoryState
from .letters import WORD_LENGTH, Letter, letters_of, parse_word, to_letter, to_position

# Pattern characters, same convention as feedback.py
GREEN, YELLOW, GRAY = "G", "Y", "-"


@dataclass
class GuessState:
    correct: Set[Tuple[Letter, int]] = field(default_factory=set)
    present: Dict[Letter, Set[int]] = field(default_factory=dict)
    absent: Set[Letter] = field(default_factory=set)

    # ---- additive updates ----

    def add_correct(self, letter, position: int) -> None:
        self.correct.add((to_letter(letter), to_position(position)))

    def add_present(self, letter, excluded_position: int | None = None) -> None:
        """
        Record `letter` as present. If `excluded_position` is given, the
        letter is additionally known not to sit there.
        """
        excluded = self.present.setdefault(to_letter(letter), set())
        if excluded_position is not None:
            excluded.add(to_position(excluded_position))

    def add_absent(self, letter) -> None:
        self.absent.add(to_letter(letter))

    def observe(self, guess: str, pattern: str) -> None:
        """
        Fold one turn of feedback into the state.

        G -> correct at that position
        Y -> present, excluded at that position
        - -> absent, unless the same letter is confirmed elsewhere (in this
             guess or earlier); then it only excludes this position.

        The gray rule keeps the state free of absent/present overlaps even
        when the guess repeats a letter the answer holds fewer times.
        """
        guess = parse_word(guess)
        if len(pattern) != WORD_LENGTH or any(c not in (GREEN, YELLOW, GRAY) for c in pattern):
            raise ValueError(f"pattern must be {WORD_LENGTH} chars of G/Y/-, got {pattern!r}")

        letters = letters_of(guess)
        confirmed = {l for l, c in zip(letters, pattern) if c != GRAY}

        for i, (letter, mark) in enumerate(zip(letters, pattern)):
            if mark == GREEN:
                self.add_correct(letter, i)
            elif mark == YELLOW:
                self.add_present(letter, i)

        for i, (letter, mark) in enumerate(zip(letters, pattern)):
            if mark != GRAY:
                continue
            if letter in confirmed or self.knows_present(letter):
                self.add_present(letter, i)
            else:
                self.add_absent(letter)

    # ---- queries ----

    def knows_present(self, letter: Letter) -> bool:
        """True if `letter` is confirmed somewhere in the answer."""
        return letter in self.present or any(l == letter for l, _ in self.correct)

    def is_empty(self) -> bool:
        return not (self.correct or self.present or self.absent)

    def check_consistency(self) -> None:
        """
        Raise ContradictoryState if the facts cannot all hold.

        Checked:
          - a letter both absent and correct/present
          - two different letters correct at the same position
        """
        overlap = {l for l in self.absent if self.knows_present(l)}
        if overlap:
            raise ContradictoryState(overlap, "marked absent but also confirmed present")

        by_pos: Dict[int, Set[Letter]] = {}
        for letter, pos in self.correct:
            by_pos.setdefault(pos, set()).add(letter)
        clash = {l for letters in by_pos.values() if len(letters) > 1 for l in letters}
        if clash:
            raise ContradictoryState(clash, "more than one letter correct at the same position")

    def copy(self) -> "GuessState":
        return GuessState(
            correct=set(self.correct),
            present={l: set(p) for l, p in self.present.items()},
            absent=set(self.absent),
        )

    # ---- list form (boundary with the feedback collaborator) ----

    def to_dict(self) -> Dict[str, List]:
        """
        Serialise to the list form:
          {"correct": [{"letter", "position"}],
           "present": [{"letter", "excludedPositions"}],
           "absent":  [letter]}
        Lists are sorted so equal states serialise identically.
        """
        return {
            "correct": [
                {"letter": l.value, "position": p}
                for l, p in sorted(self.correct, key=lambda lp: (lp[1], lp[0].value))
            ],
            "present": [
                {"letter": l.value, "excludedPositions": sorted(ps)}
                for l, ps in sorted(self.present.items(), key=lambda kv: kv[0].value)
            ],
            "absent": sorted(l.value for l in self.absent),
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "GuessState":
        """
        Build a state from the list form. Missing keys mean "no facts".
        Also accepts `excludedPosition` (singular) for present entries.
        Raises ValueError on malformed input, unknown letters or
        out-of-range positions.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"state must be an object, got {type(data).__name__}")
        st = cls()
        for item in _entries(data, "correct"):
            st.add_correct(_field(item, "letter"), _field(item, "position"))
        for item in _entries(data, "present"):
            letter = _field(item, "letter")
            excluded = item.get("excludedPositions", item.get("excludedPosition", []))
            if excluded is None:
                excluded = []
            if not isinstance(excluded, (list, tuple)):
                raise ValueError(f"excludedPositions must be a list, got {excluded!r}")
            st.add_present(letter)
            for p in excluded:
                st.add_present(letter, p)
        for letter in _list_of(data, "absent"):
            st.add_absent(letter)
        return st


def _list_of(data: Mapping, key: str) -> List:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key!r} must be a list, got {value!r}")
    return list(value)


def _entries(data: Mapping, key: str) -> List[Mapping]:
    items = _list_of(data, key)
    for item in items:
        if not isinstance(item, Mapping):
            raise ValueError(f"{key!r} entries must be objects, got {item!r}")
    return items


def _field(item: Mapping, name: str):
    try:
        return item[name]
    except KeyError:
        raise ValueError(f"entry {dict(item)!r} is missing {name!r}") from None
