from .validator import validate_lexicon, pretty_summary
from .io import read_lines, load_lexicon, load_commonality, save_commonality
from .corpus import count_commonality

__all__ = [
    "validate_lexicon", "pretty_summary",
    "read_lines", "load_lexicon", "load_commonality", "save_commonality",
    "count_commonality",
]
