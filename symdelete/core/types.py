"""Type definitions for symdelete."""

from dataclasses import dataclass, field
from enum import Enum


class Mode(Enum):
    """Which suggestions a lookup returns."""

    TOP = "top"  # Only the single best suggestion
    SMALLEST = "smallest"  # Every suggestion sharing the smallest distance
    ALL = "all"  # Every suggestion within the edit distance bound

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        """Accept a Mode or its name/value in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key in (mode.value, mode.name.lower()):
                    return mode
        raise ValueError(f"Unknown mode: {value!r} (expected one of top, smallest, all)")


# Key into the dictionary store: (language, string)
DictionaryKey = tuple[str, str]


@dataclass(frozen=True)
class NearbyTerm:
    """Reference from a delete-variant back to the canonical term it came from."""

    term: str
    distance: int = field(compare=False)


@dataclass(frozen=True)
class DeletionCandidate:
    """A string reached by deleting characters, with the deletions spent so far."""

    term: str
    distance: int = field(compare=False)


@dataclass(frozen=True)
class Suggestion:
    """A correction candidate returned by a lookup.

    Equality and hashing use ``term`` only, so a term is suggested at most once.
    """

    term: str
    distance: int = field(compare=False)
    count: int = field(compare=False)


@dataclass
class DictionaryEntry:
    """Everything the store knows about one key.

    An entry may be a real word (``canonical_term`` set), a delete-variant of
    other words (``nearby_terms`` non-empty), or both at once.
    """

    canonical_term: str | None = None
    count: int = 0
    nearby_terms: list[NearbyTerm] = field(default_factory=list)

    @property
    def is_canonical(self) -> bool:
        """True when this key was added as a word in its own right."""
        return self.canonical_term is not None

    def references(self, term: str) -> bool:
        """Check whether ``term`` is already among the nearby terms."""
        return any(nearby.term == term for nearby in self.nearby_terms)
