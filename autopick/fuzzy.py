from __future__ import annotations

from collections.abc import Sequence

# Query characters that never narrow the match.
SKIPPED_CHARACTERS = frozenset({" ", "\t"})


def is_skipped_character(ch: str) -> bool:
    return ch in SKIPPED_CHARACTERS


def effective_query(query: str) -> str:
    """Return ``query`` without skipped characters."""
    return "".join(ch for ch in query if not is_skipped_character(ch))


def matches_query(candidate: str, query: str) -> bool:
    """Return whether ``candidate`` matches the anchored subsequence of ``query``.

    Equivalent to a case-insensitive full match of ``q0.*q1.*...qn.*`` with every
    query character taken literally: the first query character must open the
    candidate and the rest must follow in order, not necessarily adjacent.
    """
    needles = effective_query(query).lower()
    if not needles:
        return True
    haystack = candidate.lower()
    if not haystack or haystack[0] != needles[0]:
        return False

    idx = 0
    for needle in needles[1:]:
        idx = haystack.find(needle, idx + 1)
        if idx < 0:
            return False
    return True


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost edit distance between ``a`` and ``b``."""
    distances = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        distances[i][0] = i
    for j in range(len(b) + 1):
        distances[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                distances[i][j] = distances[i - 1][j - 1]
            else:
                distances[i][j] = 1 + min(
                    distances[i - 1][j],
                    distances[i][j - 1],
                    distances[i - 1][j - 1],
                )
    return distances[len(a)][len(b)]


def match_candidates(candidates: Sequence[str], query: str) -> list[str]:
    """Return candidates matching ``query``, closest edit distance first.

    Candidates at equal distance keep their input order.
    """
    matched = [candidate for candidate in candidates if matches_query(candidate, query)]
    matched.sort(key=lambda candidate: levenshtein_distance(query, candidate))
    return matched


__all__ = [
    "SKIPPED_CHARACTERS",
    "effective_query",
    "is_skipped_character",
    "levenshtein_distance",
    "match_candidates",
    "matches_query",
]
