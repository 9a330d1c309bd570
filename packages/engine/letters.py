"""
Letters and words.

A Letter is one of the 26 lowercase ASCII letters, modelled as a closed
enumeration so every letter-keyed table can be built exhaustively up front.
A Word is a validated 5-letter lowercase string.

Validation is strict: no stripping, no case folding. Loaders that want to
be lenient normalise BEFORE calling parse_word.
"""

from __future__ import annotations

from enum import Enum
from typing import NewType, Tuple

from .errors import InvalidWord

WORD_LENGTH = 5
POSITIONS: Tuple[int, ...] = tuple(range(WORD_LENGTH))

Word = NewType("Word", str)


class Letter(str, Enum):
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    def __str__(self) -> str:
        return self.value


_BY_CHAR = {m.value: m for m in Letter}


def to_letter(ch) -> Letter:
    """
    Coerce a one-character string (or a Letter) into a Letter.
    Raises ValueError for anything outside a-z.
    """
    if isinstance(ch, Letter):
        return ch
    try:
        return _BY_CHAR[ch]
    except (KeyError, TypeError):
        raise ValueError(f"not a letter: {ch!r}") from None


def to_position(p) -> int:
    """Validate a board position (0..4)."""
    if isinstance(p, bool) or not isinstance(p, int) or not 0 <= p < WORD_LENGTH:
        raise ValueError(f"position must be an int in 0..{WORD_LENGTH - 1}, got {p!r}")
    return p


def parse_word(raw: str) -> Word:
    """
    Validate `raw` as a Word.

    Raises:
      InvalidWord if `raw` is not a string of exactly 5 characters a-z.

    Examples:
      parse_word("crane")  -> "crane"
      parse_word("abcdef") -> InvalidWord (length)
      parse_word("ab1de")  -> InvalidWord (alphabet)
    """
    if not isinstance(raw, str):
        raise InvalidWord(raw, "not a string")
    if len(raw) != WORD_LENGTH:
        raise InvalidWord(raw, f"length {len(raw)} != {WORD_LENGTH}")
    for ch in raw:
        if ch not in _BY_CHAR:
            raise InvalidWord(raw, f"character {ch!r} outside a-z")
    return Word(raw)


def letters_of(word: str) -> Tuple[Letter, ...]:
    """Split an already-validated word into its Letters."""
    return tuple(_BY_CHAR[ch] for ch in word)
