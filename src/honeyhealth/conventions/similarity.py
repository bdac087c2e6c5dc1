"""
Jaro string similarity.

Plain Jaro (no Winkler prefix boost), matching characters within a window
of ``max(len) // 2 - 1`` and counting half-transpositions.  Works on code
points, so non-ASCII names compare per character.
"""

from __future__ import annotations


def jaro(s1: str, s2: str) -> float:
    """Return the Jaro similarity of ``s1`` and ``s2`` in ``[0.0, 1.0]``.

    Two empty strings are identical (1.0); one empty string matches
    nothing (0.0).

    Examples:
        >>> jaro("http.method", "http.method")
        1.0
        >>> jaro("abc", "xyz")
        0.0
    """
    len1, len2 = len(s1), len(s2)
    if len1 == 0 and len2 == 0:
        return 1.0
    if len1 == 0 or len2 == 0:
        return 0.0

    window = max(max(len1, len2) // 2 - 1, 0)
    flags1 = [False] * len1
    flags2 = [False] * len2

    matches = 0
    for i, ch in enumerate(s1):
        lo = max(i - window, 0)
        hi = min(i + window + 1, len2)
        for j in range(lo, hi):
            if not flags2[j] and s2[j] == ch:
                flags1[i] = flags2[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    # Matched characters out of order, counted in pairs
    transpositions = 0
    j = 0
    for i in range(len1):
        if not flags1[i]:
            continue
        while not flags2[j]:
            j += 1
        if s1[i] != s2[j]:
            transpositions += 1
        j += 1
    transpositions //= 2

    return (
        matches / len1
        + matches / len2
        + (matches - transpositions) / matches
    ) / 3.0
