"""Symmetric Delete spelling correction engine."""

from collections import deque

from loguru import logger

from symdelete.core.distance import damerau_levenshtein
from symdelete.core.store import DictionaryStore
from symdelete.core.tokenizer import Tokenizer, tokenize
from symdelete.core.types import (
    DeletionCandidate,
    DictionaryEntry,
    Mode,
    NearbyTerm,
    Suggestion,
)
from symdelete.core.variants import generate_variants
from symdelete.utils.constants import Constants


def verified_distance(nearby: NearbyTerm, candidate: DeletionCandidate, input_word: str) -> int:
    """Resolve the true distance between a nearby dictionary term and the input.

    Deletion counts are used directly when one side reached the shared key
    without deleting anything; otherwise the full edit distance is computed.
    """
    if nearby.term == input_word:
        return 0
    if nearby.distance == 0:
        return candidate.distance
    if candidate.distance == 0:
        return nearby.distance
    return damerau_levenshtein(nearby.term, input_word)


class SymSpell:
    """Spelling corrector built on the Symmetric Delete algorithm.

    Every added word is indexed under all strings reachable by deleting up to
    ``max_edit_distance`` characters. A lookup deletes characters from the
    input in the same way, breadth first, and meets the dictionary in the
    middle, so edit distances are only computed for the few words that share
    a delete-variant with the input.

    The engine is not thread-safe. Callers sharing one instance across
    threads must serialize ``add_term`` against everything else.

    Usage:
        >>> speller = SymSpell()
        >>> speller.add_words("all the words in your dictionary", "en")
        6
        >>> [s.term for s in speller.lookup("nn", "en")]
        ['in']
    """

    def __init__(
        self,
        max_edit_distance: int = Constants.DEFAULT_MAX_EDIT_DISTANCE,
        mode: Mode | str = Mode.ALL,
    ) -> None:
        if not isinstance(max_edit_distance, int) or isinstance(max_edit_distance, bool):
            raise TypeError(f"max_edit_distance must be an int, got {type(max_edit_distance)}")
        if max_edit_distance < 0:
            raise ValueError(f"max_edit_distance must be >= 0, got {max_edit_distance}")
        self.max_edit_distance = max_edit_distance
        self.mode = Mode.parse(mode)
        self.store = DictionaryStore()

    def add_words(
        self,
        corpus: str,
        language: str = Constants.DEFAULT_LANGUAGE,
        tokenizer: Tokenizer | None = None,
    ) -> int:
        """Add every term of a corpus to the dictionary.

        Args:
            corpus: Raw text containing the words to add
            language: Language identifier the words belong to
            tokenizer: Function splitting the corpus into terms (default: tokenize)

        Returns:
            Number of term occurrences added
        """
        tokenizer = tokenizer or tokenize
        terms = tokenizer(corpus)
        for term in terms:
            self.add_term(term, language)
        logger.debug(f"Added {len(terms)} terms to language '{language}'")
        return len(terms)

    def add_term(
        self, term: str, language: str = Constants.DEFAULT_LANGUAGE, count: int = 1
    ) -> None:
        """Add ``count`` occurrences of a term to the dictionary.

        The first time a term is seen all of its delete-variants are indexed;
        later additions only raise its count.
        """
        if not isinstance(term, str):
            raise TypeError(f"term must be a string, got {type(term)}")
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")

        key = (language, term)
        entry = self.store.get(key)
        if entry is not None and entry.is_canonical:
            entry.count += count
            return

        entry = self.store.get_or_create(key)
        entry.canonical_term = term
        entry.count = count

        if self.max_edit_distance == 0:
            return

        for variant in generate_variants(term, 0, self.max_edit_distance):
            nearby = NearbyTerm(term, variant.distance)
            variant_key = (language, variant.term)
            variant_entry = self.store.get(variant_key)
            if variant_entry is None:
                self.store.put(variant_key, DictionaryEntry(nearby_terms=[nearby]))
            elif not variant_entry.references(term):
                self._register_nearby(variant_entry.nearby_terms, nearby)

    def _register_nearby(self, nearby_terms: list[NearbyTerm], nearby: NearbyTerm) -> None:
        # Outside ALL mode only the closest references are kept, so the first
        # element always carries the minimal distance.
        if self.mode is Mode.ALL:
            nearby_terms.append(nearby)
            return
        if nearby_terms and nearby_terms[0].distance > nearby.distance:
            nearby_terms.clear()
        if not nearby_terms or nearby_terms[0].distance >= nearby.distance:
            nearby_terms.append(nearby)

    def lookup(self, term: str, language: str = Constants.DEFAULT_LANGUAGE) -> list[Suggestion]:
        """Suggest corrections for a term.

        Args:
            term: The input to correct
            language: Language identifier to search in

        Returns:
            Suggestions sorted by distance ascending, then count descending.
            In TOP mode at most one suggestion is returned; in SMALLEST mode
            only those sharing the smallest distance found.
        """
        if not isinstance(term, str):
            raise TypeError(f"term must be a string, got {type(term)}")

        suggestions: list[Suggestion] = []
        suggested: set[str] = set()
        queue: deque[DeletionCandidate] = deque([DeletionCandidate(term, 0)])
        queued = {term}

        def record(suggestion: Suggestion) -> None:
            suggestions.append(suggestion)
            suggested.add(suggestion.term)

        while queue:
            candidate = queue.popleft()
            if candidate.distance > self.max_edit_distance or (
                self.mode is not Mode.ALL
                and suggestions
                and candidate.distance > suggestions[0].distance
            ):
                break

            entry = self.store.get((language, candidate.term))
            if entry is not None:
                if entry.is_canonical and entry.canonical_term not in suggested:
                    record(Suggestion(entry.canonical_term, candidate.distance, entry.count))
                    if self.mode is not Mode.ALL and candidate.distance == 0:
                        break

                for nearby in entry.nearby_terms:
                    if nearby.term in suggested:
                        continue
                    distance = verified_distance(nearby, candidate, term)
                    if self.mode is not Mode.ALL and suggestions:
                        if distance < suggestions[0].distance:
                            suggestions.clear()
                            suggested.clear()
                        elif distance > suggestions[0].distance:
                            continue
                    if distance < self.max_edit_distance:
                        target = self.store.get((language, nearby.term))
                        if target is not None and target.is_canonical:
                            record(Suggestion(target.canonical_term, distance, target.count))

            if candidate.distance < self.max_edit_distance:
                for variant in generate_variants(candidate.term, candidate.distance):
                    if variant.term not in queued:
                        queued.add(variant.term)
                        queue.append(variant)

        result = self._finalize(suggestions)
        logger.debug("Lookup {!r} ({}): {} suggestions", term, language, len(result))
        return result

    def _finalize(self, suggestions: list[Suggestion]) -> list[Suggestion]:
        ranked = sorted(
            (s for s in suggestions if s.term),
            key=lambda s: (s.distance, -s.count),
        )
        if self.mode is Mode.TOP and len(ranked) > 1:
            return ranked[:1]
        return ranked

    def correct(self, term: str, language: str = Constants.DEFAULT_LANGUAGE) -> str:
        """Return the best correction for ``term``, or ``term`` if there is none."""
        suggestions = self.lookup(term, language)
        return suggestions[0].term if suggestions else term

    def contains(self, term: str, language: str = Constants.DEFAULT_LANGUAGE) -> bool:
        """Check whether ``term`` was added as a word."""
        entry = self.store.get((language, term))
        return entry is not None and entry.is_canonical

    def frequency(self, term: str, language: str = Constants.DEFAULT_LANGUAGE) -> int:
        """Number of times ``term`` was added (0 if never)."""
        entry = self.store.get((language, term))
        return entry.count if entry is not None and entry.is_canonical else 0

    @property
    def word_count(self) -> int:
        """Number of distinct words across all languages."""
        return self.store.canonical_count()
