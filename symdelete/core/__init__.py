"""Core spelling correction logic for symdelete."""

from .config import Config, load_config
from .distance import damerau_levenshtein
from .engine import SymSpell, verified_distance
from .store import DictionaryStore
from .tokenizer import Tokenizer, tokenize, tokenize_lines
from .types import (
    DeletionCandidate,
    DictionaryEntry,
    DictionaryKey,
    Mode,
    NearbyTerm,
    Suggestion,
)
from .variants import generate_variants

__all__ = [
    "Config",
    "DeletionCandidate",
    "DictionaryEntry",
    "DictionaryKey",
    "DictionaryStore",
    "Mode",
    "NearbyTerm",
    "Suggestion",
    "SymSpell",
    "Tokenizer",
    "damerau_levenshtein",
    "generate_variants",
    "load_config",
    "tokenize",
    "tokenize_lines",
    "verified_distance",
]
