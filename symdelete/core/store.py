"""In-memory dictionary store keyed by (language, string)."""

from collections.abc import Iterator

from symdelete.core.types import DictionaryEntry, DictionaryKey


class DictionaryStore:
    """Mapping from dictionary keys to entries.

    Keys are created on first use and never removed. There is no size bound:
    memory grows with vocabulary size and with the number of delete-variants
    each word fans out to.
    """

    def __init__(self) -> None:
        self._entries: dict[DictionaryKey, DictionaryEntry] = {}

    def get(self, key: DictionaryKey) -> DictionaryEntry | None:
        """Return the entry at ``key``, or None if nothing touched it yet."""
        return self._entries.get(key)

    def put(self, key: DictionaryKey, entry: DictionaryEntry) -> None:
        """Store ``entry`` at ``key``, replacing any previous entry."""
        self._entries[key] = entry

    def get_or_create(self, key: DictionaryKey) -> DictionaryEntry:
        """Return the entry at ``key``, creating an empty one if absent."""
        entry = self._entries.get(key)
        if entry is None:
            entry = DictionaryEntry()
            self._entries[key] = entry
        return entry

    def canonical_count(self, language: str | None = None) -> int:
        """Count entries that are real words, optionally for one language."""
        return sum(
            1
            for (lang, _), entry in self._entries.items()
            if entry.is_canonical and (language is None or lang == language)
        )

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictionaryKey]:
        return iter(self._entries)
