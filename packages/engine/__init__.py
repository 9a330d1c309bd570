from .errors import EngineError, InvalidWord, NoCandidatesRemaining, ContradictoryState
from .letters import Letter, Word, WORD_LENGTH, parse_word
from .lexicon import LexiconIndex
from .state import GuessState
from .constraints import filter_candidates
from .feedback import feedback_pattern, ALL_GREEN
from .selector import select_next, rank
from .solver import WordSolver

__all__ = [
    "EngineError", "InvalidWord", "NoCandidatesRemaining", "ContradictoryState",
    "Letter", "Word", "WORD_LENGTH", "parse_word",
    "LexiconIndex", "GuessState", "filter_candidates",
    "feedback_pattern", "ALL_GREEN", "select_next", "rank", "WordSolver",
]
