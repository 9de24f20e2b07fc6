"""Rounding and ratio helpers shared by the pipeline stages."""

import math
from typing import Optional


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves rounded up (2.5 -> 3)."""
    return math.floor(x + 0.5)


def round1(x: float) -> float:
    """Round to one decimal place (0.45 -> 0.5)."""
    return math.floor(x * 10 + 0.5) / 10


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    """
    ``round1(numerator / denominator)``, or None when the denominator is zero.

    A zero pot or current bet can occur in rule variants without blinds;
    the ratio is undefined there rather than an error.
    """
    if not denominator:
        return None
    return round1(numerator / denominator)
