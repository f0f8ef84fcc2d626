"""Rounding helpers."""

import math


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in round() uses banker's rounding (round(2.5) == 2),
    which would disagree with the targets the mobile app has always shown.

    Example:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(2797.75)
        2798
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
