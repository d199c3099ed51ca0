"""Dictionary source loading."""

import itertools

from loguru import logger
from wordfreq import top_n_list

from symdelete.utils import Constants, read_text_file


def load_corpus(filepath: str | None, verbose: bool = False) -> str:
    """Load a free text corpus to be tokenized into dictionary words."""
    if not filepath:
        return ""

    corpus = read_text_file(filepath, "corpus file")
    if verbose:
        logger.info(f"  Loaded corpus of {len(corpus)} characters from {filepath}")
    return corpus


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load a word list with one word per line.

    Blank lines and lines starting with ``#`` are skipped; words are lower-cased.
    """
    if not filepath:
        return []

    words = []
    invalid_count = 0
    for line in read_text_file(filepath, "word list file").splitlines():
        line = line.strip().lower()
        if not line or line.startswith(Constants.COMMENT_PREFIX):
            continue
        if any(c in line for c in ["\t", "\\"]):
            invalid_count += 1
            continue
        words.append(line)

    if verbose:
        logger.info(f"  Loaded {len(words)} words from {filepath}")
        if invalid_count > 0:
            logger.info(f"  Skipped {invalid_count} words with invalid characters")

    return words


def load_frequency_dictionary(filepath: str | None, verbose: bool = False) -> list[tuple[str, int]]:
    """Load a frequency dictionary of ``term count`` lines.

    Term and count may be separated by any whitespace. Lines without a
    positive integer count are skipped with a warning.
    """
    if not filepath:
        return []

    entries = []
    for line in read_text_file(filepath, "frequency dictionary").splitlines():
        line = line.strip()
        if not line or line.startswith(Constants.COMMENT_PREFIX):
            continue
        parts = line.split()
        try:
            term, count = parts[0].lower(), int(parts[1])
        except (IndexError, ValueError):
            logger.warning(f"Skipping malformed line in {filepath}: {line}")
            continue
        if count < 1:
            logger.warning(f"Skipping non-positive count in {filepath}: {line}")
            continue
        entries.append((term, count))

    if verbose:
        logger.info(f"  Loaded {len(entries)} frequency entries from {filepath}")

    return entries


def load_source_words(
    top_n: int | None, language: str = Constants.WORDFREQ_LANGUAGE, verbose: bool = False
) -> list[tuple[str, int]]:
    """Get the top N words from wordfreq, most common first.

    Each word is paired with a pseudo-count so that more common words rank
    higher among suggestions at the same distance.
    """
    if not top_n:
        return []

    if verbose:
        logger.info(f"  Loading top {top_n} '{language}' words from wordfreq...")

    try:
        all_words = top_n_list(language, top_n * Constants.WORDFREQ_MULTIPLIER)
    except Exception as e:
        logger.error(f"✗ Failed to load words from wordfreq: {e}")
        logger.error("  This may indicate a problem with the 'wordfreq' package")
        logger.error("  or an unsupported language code")
        raise RuntimeError("Failed to load source words from wordfreq") from e

    valid_words = (
        word.lower() for word in all_words if word and not any(c in word for c in "\n\r\t\\")
    )
    words = list(itertools.islice(valid_words, top_n))
    return [(word, len(words) - rank) for rank, word in enumerate(words)]
