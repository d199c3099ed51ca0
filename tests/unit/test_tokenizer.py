"""Unit tests for the default tokenizer.

Tests verify tokenization behavior. Each test has exactly one assertion.
"""

import pytest

from symdelete.core import tokenize, tokenize_lines


class TestTokenize:
    """Test splitting raw text into terms."""

    def test_lower_cases_words(self) -> None:
        """Upper-case input is normalized."""
        assert tokenize("Hello World") == ["hello", "world"]

    def test_ignores_punctuation(self) -> None:
        """Punctuation separates words and is dropped."""
        assert tokenize("ten, tent; tend.") == ["ten", "tent", "tend"]

    def test_keeps_single_internal_hyphen(self) -> None:
        """Hyphenated compound stays one term."""
        assert tokenize("a stop-gap fix") == ["a", "stop-gap", "fix"]

    def test_splits_on_double_hyphen(self) -> None:
        """Two hyphens in a row break the word."""
        assert tokenize("well--known") == ["well", "known"]

    @pytest.mark.parametrize("word", ["don't", "we'll", "they're", "i'm", "she'd", "it's", "we've"])
    def test_keeps_contraction_suffix(self, word: str) -> None:
        """English contraction suffixes stay attached."""
        assert tokenize(word) == [word]

    def test_drops_unknown_apostrophe_suffix(self) -> None:
        """Apostrophe not followed by a contraction splits the word."""
        assert tokenize("rock'n") == ["rock", "n"]

    def test_keeps_digits_and_underscores(self) -> None:
        """Word characters include digits and underscores."""
        assert tokenize("mp3 snake_case") == ["mp3", "snake_case"]

    def test_empty_corpus_has_no_terms(self) -> None:
        """Empty input yields no terms."""
        assert tokenize("") == []

    def test_rejects_non_string(self) -> None:
        """Non-string corpus raises TypeError."""
        with pytest.raises(TypeError):
            tokenize(None)  # type: ignore[arg-type]


class TestTokenizeLines:
    """Test line-based tokenization of word lists."""

    def test_one_term_per_non_blank_line(self) -> None:
        """Blank lines are skipped and terms stripped and lower-cased."""
        assert tokenize_lines("Foo\n\n  bar \n") == ["foo", "bar"]

    def test_keeps_spaces_inside_line(self) -> None:
        """Multi-word lines stay one term."""
        assert tokenize_lines("new york\n") == ["new york"]
