from __future__ import annotations

"""Similarity percentage derived from the edit distance."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..utils.edit_distance import damerau_levenshtein

Text = Sequence[str] | str

PERFECT_SCORE = 100.0


class InvalidInputError(ValueError):
    """Raised when a comparison operand is missing."""


@dataclass(frozen=True)
class ScoreOutcome:
    """Either a similarity value or the reason none could be computed."""

    value: Optional[float] = None
    error: Optional[InvalidInputError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def percentage_from_distance(distance: int, length: int, *, clamp: bool = False) -> float:
    """Convert a raw distance into a percentage of *length*.

    The result is not clamped unless asked: a distance larger than *length*
    yields a negative percentage.
    """

    if length == 0:
        return PERFECT_SCORE
    value = (1 - distance / length) * 100
    if clamp:
        return max(value, 0.0)
    return value


def _same_elements(a: Text, b: Text) -> bool:
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def measure(a: Text, b: Text, *, clamp: bool = False) -> Tuple[int, float]:
    """Return ``(distance, percentage)`` for two non-None texts."""

    if _same_elements(a, b):
        return 0, PERFECT_SCORE
    distance = damerau_levenshtein(a, b)
    length = max(len(a), len(b))
    return distance, percentage_from_distance(distance, length, clamp=clamp)


def score(a: Optional[Text], b: Optional[Text], *, clamp: bool = False) -> ScoreOutcome:
    """Result-style similarity: invalid input is returned, never raised."""

    if a is None or b is None:
        return ScoreOutcome(error=InvalidInputError("Texts must not be None"))
    _, value = measure(a, b, clamp=clamp)
    return ScoreOutcome(value=value)


def similarity(a: Optional[Text], b: Optional[Text], *, clamp: bool = False) -> float:
    """Return the similarity of *a* and *b* as a percentage.

    Identical inputs (including two empty ones) score exactly 100.0.
    """

    return score(a, b, clamp=clamp).unwrap()


__all__ = [
    "InvalidInputError",
    "PERFECT_SCORE",
    "ScoreOutcome",
    "measure",
    "percentage_from_distance",
    "score",
    "similarity",
]
