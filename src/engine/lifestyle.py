"""Lifestyle sub-score: noise level and pet policy around a neutral baseline."""

from decimal import Decimal

from src.engine.bands import clamp, to_decimal
from src.engine.tables import NEUTRAL_SCORE
from src.models.property import PropertyData

MAX_NOISE_PENALTY = Decimal("-3")


def score_lifestyle(prop: PropertyData) -> Decimal:
    """Neutral 5, adjusted for noise (1 = quiet) and pet-friendliness."""
    score = NEUTRAL_SCORE

    if prop.noise_level is not None:
        score += max(MAX_NOISE_PENALTY, (5 - to_decimal(prop.noise_level)) * Decimal("0.8"))

    if prop.pet_friendly is True:
        score += 1

    return clamp(score)
