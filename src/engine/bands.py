"""Numeric helpers shared by the sub-score functions."""

from decimal import Decimal

from src.engine.tables import MAX_SCORE, MIN_SCORE


def to_decimal(value) -> Decimal:
    """Coerce an int/float/str/Decimal input to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def clamp(value: Decimal, low: Decimal = MIN_SCORE, high: Decimal = MAX_SCORE) -> Decimal:
    return max(low, min(high, value))


def band_score(value: Decimal, low: Decimal, high: Decimal) -> Decimal:
    """Map `value` linearly onto 10 (at `low`) down to 2 (at `high`), clamped to [1, 10].

    Lower is better: anything at or under the band floor scores 10.
    """
    return clamp(MAX_SCORE - (value - low) / (high - low) * 8)
