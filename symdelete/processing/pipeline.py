"""Main processing pipeline orchestration."""

import time
from typing import TextIO

from loguru import logger

from symdelete.core import Config
from symdelete.processing.stages import (
    PipelineResult,
    build_dictionary,
    collect_input_words,
    lookup_words,
    write_results,
)


def run_pipeline(config: Config, stream: TextIO | None = None) -> PipelineResult:
    """Build the dictionary, correct the requested words and write the results.

    Args:
        config: Configuration object containing all settings
        stream: Where to write results when no output path is configured
            (default: stdout)
    """
    start_time = time.time()
    verbose = config.verbose

    # Stage 1: Build dictionary
    dictionary = build_dictionary(config, verbose)

    # Stage 2: Look up words
    words = collect_input_words(config.words, config.input, verbose)
    if not words:
        logger.warning("No words to correct")
    lookups = lookup_words(dictionary.engine, words, config.language, verbose)

    # Stage 3: Output
    write_results(lookups, config.output, config.output_format, verbose, stream)

    elapsed_time = time.time() - start_time
    if verbose:
        logger.info(f"Total time: {elapsed_time:.2f}s")

    return PipelineResult(dictionary=dictionary, lookups=lookups, elapsed_time=elapsed_time)
