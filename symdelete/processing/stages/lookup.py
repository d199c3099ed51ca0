"""Stage 2: Look up suggestions for every input word."""

import time

from loguru import logger

from symdelete.core import SymSpell, tokenize
from symdelete.data import load_corpus
from symdelete.processing.stages.data_models import LookupData


def collect_input_words(
    words: list[str], input_path: str | None, verbose: bool = False
) -> list[str]:
    """Gather words to correct from the command line and the input file.

    Words are lower-cased to match the normalization of dictionary terms and
    returned without duplicates, in first-seen order.
    """
    collected = [word.lower() for word in words]
    if input_path:
        collected.extend(tokenize(load_corpus(input_path, verbose)))
    return list(dict.fromkeys(collected))


def lookup_words(
    engine: SymSpell, words: list[str], language: str, verbose: bool = False
) -> LookupData:
    """Look up every word and collect the suggestions."""
    start_time = time.time()

    if verbose:
        logger.info(f"Stage 2: Looking up {len(words)} words...")

    results = {word: engine.lookup(word, language) for word in words}
    lookups = LookupData(results=results, elapsed_time=time.time() - start_time)

    if verbose:
        logger.info(f"  Corrected {lookups.corrected_count} words")
        if lookups.unknown_count:
            logger.info(f"  No suggestions for {lookups.unknown_count} words")
        logger.info("")

    return lookups
