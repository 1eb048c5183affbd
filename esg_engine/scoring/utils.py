"""
Decimal Utilities
esg_engine/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero (72.5 -> 73)."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def mean(values: List[Decimal]) -> Decimal:
    """
    Arithmetic mean.

    Returns Decimal("0") for an empty list.
    """
    if not values:
        return Decimal("0")
    return sum(values, Decimal("0")) / Decimal(len(values))
