from __future__ import annotations

"""Damerau-Levenshtein (optimal string alignment) edit distance."""

from typing import Sequence


def damerau_levenshtein(a: Sequence[str] | str, b: Sequence[str] | str) -> int:
    """Return the edit distance between *a* and *b*.

    Insertions, deletions, substitutions and swaps of two adjacent characters
    each cost one. Only three rolling rows along the shorter sequence are kept,
    so memory stays proportional to ``min(len(a), len(b))``.
    """

    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    width = len(b) + 1
    before = [0] * width
    previous = list(range(width))
    for i in range(1, len(a) + 1):
        char_a = a[i - 1]
        current = [i] + [0] * len(b)
        for j in range(1, width):
            char_b = b[j - 1]
            cost = 0 if char_a == char_b else 1
            best = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
            # adjacent transposition: a[i-2:i] == reversed b[j-2:j]
            if i > 1 and j > 1 and char_a == b[j - 2] and a[i - 2] == char_b:
                best = min(best, before[j - 2] + cost)
            current[j] = best
        before, previous = previous, current
    return previous[-1]


__all__ = ["damerau_levenshtein"]
