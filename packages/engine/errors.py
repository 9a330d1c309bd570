"""Typed failures surfaced by the engine. Nothing here is retried internally."""

from __future__ import annotations

from typing import Iterable


class EngineError(Exception):
    """Base class for all engine errors."""


class InvalidWord(EngineError, ValueError):
    """A lexicon or corpus entry is not a 5-letter a-z word."""

    def __init__(self, word, reason: str = "invalid word"):
        self.word = word
        self.reason = reason
        super().__init__(f"{word!r}: {reason}")


class NoCandidatesRemaining(EngineError):
    """
    The filter produced an empty candidate set.

    Terminal for the current session, but not a crash: feedback may be
    contradictory, or the answer is simply not in the lexicon.
    """

    def __init__(self, message: str = "no candidate words remain"):
        super().__init__(message)


class ContradictoryState(EngineError, ValueError):
    """A GuessState asserts facts that cannot all hold at once."""

    def __init__(self, letters: Iterable[str], detail: str = ""):
        self.letters = sorted(str(l) for l in letters)
        msg = f"contradictory feedback for letter(s) {', '.join(self.letters)}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
