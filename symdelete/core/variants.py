"""Delete-variant generation."""

from symdelete.core.types import DeletionCandidate


def generate_variants(
    term: str, distance_spent: int = 0, max_additional: int | None = None
) -> list[DeletionCandidate]:
    """Generate the strings reachable by deleting characters from ``term``.

    Each variant is tagged with its cumulative distance, i.e. ``distance_spent``
    plus the number of characters deleted to reach it. Variants are unique by
    string and returned in the order they are first reached.

    With ``max_additional`` unset or 0 only one level of deletion is applied;
    this is how lookups walk outwards one level at a time. With a larger value
    the expansion recurses until that many characters have been deleted.

    Terms of one character or fewer have no variants.
    """
    if not isinstance(term, str):
        raise TypeError(f"term must be a string, got {type(term)}")

    depth = max(max_additional or 0, 1)
    seen: dict[str, DeletionCandidate] = {}
    _delete_recursive(term, distance_spent, 1, depth, seen)
    return list(seen.values())


def _delete_recursive(
    word: str,
    distance_spent: int,
    level: int,
    depth: int,
    seen: dict[str, DeletionCandidate],
) -> None:
    if len(word) <= 1:
        return
    for i in range(len(word)):
        variant = word[:i] + word[i + 1 :]
        if variant in seen:
            continue
        seen[variant] = DeletionCandidate(variant, distance_spent + level)
        if level < depth:
            _delete_recursive(variant, distance_spent, level + 1, depth, seen)
