"""Levenshtein edit distance.

The distance is the minimum number of single code point insertions,
deletions or substitutions that turn one string into the other.  It is
computed with the classic dynamic-programming table where ``dp[i][j]``
holds the distance between the first ``i`` code points of ``a`` and the
first ``j`` code points of ``b``.

Properties relied on elsewhere:

- ``distance(a, a) == 0``
- ``distance(a, b) == distance(b, a)``
- ``0 <= distance(a, b) <= max(len(a), len(b))``
- ``distance(a, c) <= distance(a, b) + distance(b, c)``
"""
from __future__ import annotations


def distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between ``a`` and ``b``.

    Python strings index by code point, so multi-byte characters count
    as a single edit.

    Example
    -------
    ::

        distance("kitten", "sitting")  # 3
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    len_a = len(a)
    len_b = len(b)

    # dp[0][j] = j insertions, dp[i][0] = i deletions
    dp = [[0] * (len_b + 1) for _ in range(len_a + 1)]
    for j in range(len_b + 1):
        dp[0][j] = j
    for i in range(len_a + 1):
        dp[i][0] = i

    for i in range(1, len_a + 1):
        for j in range(1, len_b + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # deletion
                dp[i][j - 1] + 1,  # insertion
                dp[i - 1][j - 1] + cost,  # substitution
            )

    return dp[len_a][len_b]


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance(a, b) / max(len(a), len(b))``.

    The result lies in ``[0.0, 1.0]``; two empty strings are identical
    and score ``1.0``.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - distance(a, b) / longest
