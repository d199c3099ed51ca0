"""Default corpus tokenizer."""

import re
from typing import Callable, Sequence

# Word characters, at most one hyphen between two of them, and an optional
# English contraction suffix, repeated.
WORD_PATTERN = re.compile(r"(?:\w(?:-\w)?(?:'(?:t|d|s|m|ll|re|ve))?)+")

Tokenizer = Callable[[str], Sequence[str]]


def tokenize(corpus: str) -> list[str]:
    """Lower-case a corpus and split it into word-like terms.

    >>> tokenize("Don't stop-gap, we'll see")
    ["don't", 'stop-gap', "we'll", 'see']
    """
    if not isinstance(corpus, str):
        raise TypeError(f"corpus must be a string, got {type(corpus)}")
    return WORD_PATTERN.findall(corpus.lower())


def tokenize_lines(corpus: str) -> list[str]:
    """Treat each non-blank line as one term (for pre-tokenized word lists)."""
    return [line.strip().lower() for line in corpus.splitlines() if line.strip()]
