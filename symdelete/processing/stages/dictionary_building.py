"""Stage 1: Build the dictionary from every configured source."""

import time

from loguru import logger
from tqdm import tqdm

from symdelete.core import Config, SymSpell
from symdelete.data import (
    load_corpus,
    load_frequency_dictionary,
    load_source_words,
    load_word_list,
)
from symdelete.processing.stages.data_models import DictionaryData
from symdelete.utils import Constants


def _add_counted_terms(
    engine: SymSpell, entries: list[tuple[str, int]], language: str, desc: str, verbose: bool
) -> int:
    """Add (term, count) pairs, with a progress bar when verbose."""
    entries_iter = tqdm(entries, desc=desc, unit="word") if verbose else entries
    occurrences = 0
    for term, count in entries_iter:
        engine.add_term(term, language, count=count)
        occurrences += count
    return occurrences


def _wordfreq_language(language: str) -> str:
    if language == Constants.DEFAULT_LANGUAGE:
        return Constants.WORDFREQ_LANGUAGE
    return language


def build_dictionary(config: Config, verbose: bool = False) -> DictionaryData:
    """Create an engine and feed it every configured dictionary source.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        DictionaryData holding the populated engine
    """
    start_time = time.time()

    if verbose:
        logger.info("Stage 1: Building dictionary...")
    if config.max_edit_distance > Constants.MAX_EDIT_DISTANCE_WARNING:
        logger.warning(
            f"⚠️  max_edit_distance {config.max_edit_distance} indexes a very large number "
            "of delete-variants per word; expect high memory use"
        )

    engine = SymSpell(config.max_edit_distance, config.mode)
    language = config.language
    occurrences = 0
    sources = []

    if config.corpus:
        corpus = load_corpus(config.corpus, verbose)
        occurrences += engine.add_words(corpus, language)
        sources.append(config.corpus)

    if config.word_list:
        words = load_word_list(config.word_list, verbose)
        occurrences += _add_counted_terms(
            engine, [(word, 1) for word in words], language, "Indexing word list", verbose
        )
        sources.append(config.word_list)

    if config.frequency_dictionary:
        entries = load_frequency_dictionary(config.frequency_dictionary, verbose)
        occurrences += _add_counted_terms(
            engine, entries, language, "Indexing frequency dictionary", verbose
        )
        sources.append(config.frequency_dictionary)

    if config.top_n:
        entries = load_source_words(config.top_n, _wordfreq_language(language), verbose)
        occurrences += _add_counted_terms(engine, entries, language, "Indexing wordfreq", verbose)
        sources.append(f"wordfreq:top-{config.top_n}")

    word_count = engine.store.canonical_count(language)
    elapsed_time = time.time() - start_time

    if verbose:
        logger.info(
            f"  Indexed {word_count} words ({occurrences} occurrences, "
            f"{len(engine.store)} keys) in {elapsed_time:.2f}s"
        )
        logger.info("")

    return DictionaryData(
        engine=engine,
        occurrences=occurrences,
        word_count=word_count,
        sources=sources,
        elapsed_time=elapsed_time,
    )
