from __future__ import annotations

"""Fixed-precision rendering of similarity percentages."""

from decimal import ROUND_HALF_UP, Decimal


def format_percentage(value: float, decimals: int = 2) -> str:
    """Render *value* with exactly *decimals* fractional digits.

    Rounds half up on the shortest decimal form of the float, so ``0.005``
    becomes ``"0.01"`` rather than the ``"0.00"`` of binary round-half-even.
    """

    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{decimals}f}"
