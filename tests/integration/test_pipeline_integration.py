"""Integration tests for the full pipeline and command-line entry point."""

import io
import json
import sys

import pytest

from symdelete.__main__ import main
from symdelete.core import Config
from symdelete.processing import run_pipeline


@pytest.fixture
def word_list(tmp_path):
    """A small word list file."""
    path = tmp_path / "words.txt"
    path.write_text("ten\ntent\ntend\n")
    return path


class TestRunPipeline:
    """Test pipeline runs end to end."""

    def test_writes_text_results(self, word_list) -> None:
        """Text output lists each word with its suggestions."""
        stream = io.StringIO()
        run_pipeline(Config(word_list=str(word_list), words=["tn"]), stream=stream)
        assert stream.getvalue() == "tn -> ten (1, 1)\n"

    def test_marks_words_without_suggestions(self, word_list) -> None:
        """Words without suggestions are shown with '?'."""
        stream = io.StringIO()
        run_pipeline(Config(word_list=str(word_list), words=["zzzzz"]), stream=stream)
        assert stream.getvalue() == "zzzzz -> ?\n"

    def test_writes_json_results_to_file(self, word_list, tmp_path) -> None:
        """JSON output holds one object per word."""
        output = tmp_path / "out" / "results.json"
        config = Config(
            word_list=str(word_list), words=["tn"], output=str(output), output_format="json"
        )
        run_pipeline(config)
        assert json.loads(output.read_text())[0]["suggestions"][0]["term"] == "ten"

    def test_reports_dictionary_size(self, word_list) -> None:
        """The result records how many words were indexed."""
        result = run_pipeline(Config(word_list=str(word_list)), stream=io.StringIO())
        assert result.dictionary.word_count == 3

    def test_ranks_by_frequency_dictionary_counts(self, tmp_path) -> None:
        """Counts from a frequency dictionary order equal-distance suggestions."""
        freq_file = tmp_path / "freq.txt"
        freq_file.write_text("cat 1\ncast 5\n")
        result = run_pipeline(
            Config(frequency_dictionary=str(freq_file), words=["cas"]), stream=io.StringIO()
        )
        assert result.lookups.results["cas"][0].term == "cast"

    def test_tokenizes_corpus_and_input_file(self, tmp_path) -> None:
        """Input file words are tokenized and looked up in order."""
        corpus = tmp_path / "corpus.txt"
        corpus.write_text("The spelling of the words.")
        input_file = tmp_path / "input.txt"
        input_file.write_text("Teh speling")
        result = run_pipeline(
            Config(corpus=str(corpus), input=str(input_file)), stream=io.StringIO()
        )
        assert list(result.lookups.results) == ["teh", "speling"]

    def test_corrects_input_words(self, tmp_path) -> None:
        """A misspelled corpus word is corrected."""
        corpus = tmp_path / "corpus.txt"
        corpus.write_text("The spelling of the words.")
        result = run_pipeline(
            Config(corpus=str(corpus), words=["speling"], mode="top"), stream=io.StringIO()
        )
        assert result.lookups.results["speling"][0].term == "spelling"


class TestMain:
    """Test the command-line entry point."""

    def test_prints_suggestions(self, word_list, monkeypatch, capsys) -> None:
        """Words on the command line are corrected to stdout."""
        monkeypatch.setattr(sys, "argv", ["symdelete", "--word-list", str(word_list), "tn"])
        main()
        assert capsys.readouterr().out == "tn -> ten (1, 1)\n"

    def test_exits_without_dictionary_source(self, monkeypatch) -> None:
        """Missing dictionary source is a usage error."""
        monkeypatch.setattr(sys, "argv", ["symdelete", "tn"])
        with pytest.raises(SystemExit):
            main()
