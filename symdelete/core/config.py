"""Configuration management for symdelete."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from symdelete.core.types import Mode
from symdelete.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for building a dictionary and correcting words."""

    max_edit_distance: int = Field(
        Constants.DEFAULT_MAX_EDIT_DISTANCE, ge=0, description="Maximum edit distance"
    )
    mode: Mode = Field(Mode.ALL, description="Which suggestions to return")
    language: str = Field(Constants.DEFAULT_LANGUAGE, min_length=1)

    # Dictionary sources
    corpus: str | None = Field(None, description="Free text file tokenized into words")
    word_list: str | None = Field(None, description="One word per line")
    frequency_dictionary: str | None = Field(None, description="Lines of 'term count'")
    top_n: int | None = Field(None, ge=1, description="Top N words from wordfreq")

    # Words to correct
    words: list[str] = Field(default_factory=list)
    input: str | None = None

    output: str | None = None
    output_format: Literal["text", "json"] = "text"
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v):
        """Accept mode names in any case."""
        if v is None:
            return Mode.ALL
        return Mode.parse(v)

    @field_validator("words", mode="before")
    @classmethod
    def parse_word_list(cls, v):
        """Parse comma-separated string or array into a list of words."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [s.strip() for s in v if s.strip()]

    @model_validator(mode="after")
    def validate_sources(self):
        """At least one dictionary source is required."""
        if not (self.corpus or self.word_list or self.frequency_dictionary or self.top_n):
            raise ValueError(
                "Must specify at least one of corpus, word_list, "
                "frequency_dictionary or top_n"
            )
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "max_edit_distance": get_value("max_edit_distance", Constants.DEFAULT_MAX_EDIT_DISTANCE),
        "mode": get_value("mode", Mode.ALL.value),
        "language": get_value("language", Constants.DEFAULT_LANGUAGE),
        "corpus": get_value("corpus", None),
        "word_list": get_value("word_list", None),
        "frequency_dictionary": get_value("frequency_dictionary", None),
        "top_n": get_value("top_n", None),
        "words": get_value("words", []),
        "input": get_value("input", None),
        "output": get_value("output", None),
        "output_format": get_value("output_format", "text"),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
