"""Command-line interface for the symdelete project."""

import argparse

from symdelete.core.types import Mode
from symdelete.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="symdelete",
        description="Suggest spelling corrections using the Symmetric Delete algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build a dictionary from free text and correct two words
  %(prog)s --corpus big.txt speling korrect

  # Use the 50000 most common English words, only the best suggestion
  %(prog)s --top-n 50000 --language en --mode top --input typos.txt -o fixed.txt

  # Frequency dictionary ("term count" per line), JSON output
  %(prog)s --frequency-dictionary frequency_en.txt --format json teh

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "word_list": "words.txt",
  "max_edit_distance": 2,
  "mode": "smallest",
  "language": "en",
  "input": "typos.txt",
  "output": "suggestions.json",
  "output_format": "json",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "words",
        nargs="*",
        default=[],
        help="Words to correct",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Dictionary sources
    parser.add_argument("--corpus", type=str, help="Text file tokenized into dictionary words")
    parser.add_argument("--word-list", type=str, help="File with one dictionary word per line")
    parser.add_argument(
        "--frequency-dictionary",
        type=str,
        help="File with 'term count' per line",
    )
    parser.add_argument("--top-n", type=int, help="Add the top N most common words (wordfreq)")
    parser.add_argument(
        "-l",
        "--language",
        type=str,
        default=Constants.DEFAULT_LANGUAGE,
        help=f"Language identifier (default: {Constants.DEFAULT_LANGUAGE})",
    )

    # Parameters
    parser.add_argument(
        "--max-edit-distance",
        type=int,
        default=Constants.DEFAULT_MAX_EDIT_DISTANCE,
        help="Maximum edit distance of suggestions",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in Mode],
        default=Mode.ALL.value,
        help="top: best suggestion only, smallest: all at the smallest distance, "
        "all: everything within the maximum distance",
    )

    # Input / output
    parser.add_argument("-i", "--input", type=str, help="File with words to correct")
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--format",
        dest="output_format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser
