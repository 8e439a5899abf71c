from .similarity import (
    InvalidInputError,
    ScoreOutcome,
    measure,
    percentage_from_distance,
    score,
    similarity,
)
from .formatting import format_percentage

__all__ = [
    "InvalidInputError",
    "ScoreOutcome",
    "measure",
    "percentage_from_distance",
    "score",
    "similarity",
    "format_percentage",
]
