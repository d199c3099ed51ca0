"""Dictionary sources for symdelete."""

from symdelete.data.dictionary import (
    load_corpus,
    load_frequency_dictionary,
    load_source_words,
    load_word_list,
)

__all__ = [
    "load_corpus",
    "load_frequency_dictionary",
    "load_source_words",
    "load_word_list",
]
