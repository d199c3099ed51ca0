"""Unit tests for configuration loading.

Tests verify Config validation and CLI/JSON precedence. Each test has a single
assertion.
"""

import json

from pydantic import ValidationError
import pytest

from symdelete.cli import create_parser
from symdelete.core import Config, Mode, load_config


class TestConfig:
    """Test Config model validation."""

    def test_defaults_to_distance_two(self) -> None:
        """Default maximum edit distance is 2."""
        assert Config(word_list="words.txt").max_edit_distance == 2

    def test_defaults_to_und_language(self) -> None:
        """Default language identifier is 'und'."""
        assert Config(word_list="words.txt").language == "und"

    def test_parses_mode_name(self) -> None:
        """Mode is parsed from its name in any case."""
        assert Config(word_list="words.txt", mode="TOP").mode is Mode.TOP

    def test_rejects_unknown_mode(self) -> None:
        """Unknown mode fails validation."""
        with pytest.raises(ValidationError):
            Config(word_list="words.txt", mode="closest")

    def test_rejects_negative_distance(self) -> None:
        """Negative distance fails validation."""
        with pytest.raises(ValidationError):
            Config(word_list="words.txt", max_edit_distance=-1)

    def test_requires_a_dictionary_source(self) -> None:
        """Config without any dictionary source fails validation."""
        with pytest.raises(ValidationError, match="at least one"):
            Config()

    def test_parses_comma_separated_words(self) -> None:
        """Words given as a comma-separated string become a list."""
        assert Config(top_n=10, words="teh, speling").words == ["teh", "speling"]


class TestLoadConfig:
    """Test merging of CLI arguments and JSON files."""

    def test_uses_cli_values(self) -> None:
        """Explicit CLI arguments are used without a JSON file."""
        parser = create_parser()
        args = parser.parse_args(["--word-list", "words.txt", "--mode", "top"])
        assert load_config(None, args, parser).mode is Mode.TOP

    def test_uses_json_when_cli_not_set(self, tmp_path) -> None:
        """JSON values fill in arguments left at their defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"word_list": "words.txt", "max_edit_distance": 1}))
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(str(config_file), args, parser).max_edit_distance == 1

    def test_cli_overrides_json(self, tmp_path) -> None:
        """CLI arguments win over JSON values."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"word_list": "words.txt", "language": "fr"}))
        parser = create_parser()
        args = parser.parse_args(["--language", "en"])
        assert load_config(str(config_file), args, parser).language == "en"

    def test_reads_words_from_json(self, tmp_path) -> None:
        """Words to correct may come from the JSON file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"top_n": 100, "words": ["teh"]}))
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(str(config_file), args, parser).words == ["teh"]

    def test_invalid_json_raises_value_error(self, tmp_path) -> None:
        """Malformed JSON raises ValueError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        parser = create_parser()
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(str(config_file), parser.parse_args([]), parser)

    def test_missing_file_raises(self, tmp_path) -> None:
        """Missing config file raises FileNotFoundError."""
        parser = create_parser()
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"), parser.parse_args([]), parser)

    def test_invalid_values_raise_value_error(self) -> None:
        """Configuration without a dictionary source raises ValueError."""
        parser = create_parser()
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(None, parser.parse_args(["teh"]), parser)
