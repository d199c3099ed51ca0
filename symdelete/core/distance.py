"""Damerau-Levenshtein edit distance."""


def damerau_levenshtein(source: str, target: str) -> int:
    """Return the true Damerau-Levenshtein distance between two strings.

    Counts insertions, deletions, substitutions and transpositions of adjacent
    characters. Unlike the optimal string alignment variant, a transposed pair
    may be edited again afterwards, so ``"ca" -> "abc"`` costs 2, not 3.

    Args:
        source: String to transform
        target: String to reach

    Returns:
        Minimum number of edits, 0 when the strings are equal
    """
    if not isinstance(source, str) or not isinstance(target, str):
        raise TypeError(f"strings required, got {type(source)} and {type(target)}")
    if not source:
        return len(target)
    if not target:
        return len(source)

    m, n = len(source), len(target)
    inf = m + n

    # score[i + 1][j + 1] holds the distance between source[:i] and target[:j];
    # row 0 and column 0 are sentinels that block transpositions off the edge.
    score = [[0] * (n + 2) for _ in range(m + 2)]
    score[0][0] = inf
    for i in range(m + 1):
        score[i + 1][0] = inf
        score[i + 1][1] = i
    for j in range(n + 1):
        score[0][j + 1] = inf
        score[1][j + 1] = j

    # Last source row in which each character was seen
    last_row: dict[str, int] = {}

    for i in range(1, m + 1):
        last_match_col = 0
        for j in range(1, n + 1):
            i1 = last_row.get(target[j - 1], 0)
            j1 = last_match_col
            if source[i - 1] == target[j - 1]:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            score[i + 1][j + 1] = min(
                score[i][j] + cost,
                score[i + 1][j] + 1,
                score[i][j + 1] + 1,
                score[i1][j1] + (i - i1 - 1) + 1 + (j - j1 - 1),
            )
        last_row[source[i - 1]] = i

    return score[m + 1][n + 1]
