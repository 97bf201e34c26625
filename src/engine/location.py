"""Location and neighborhood sub-scores.

Location blend (each term on a 0-10 scale):
  Walk score:        30%
  Transit score:     30%
  Bike score:        10%
  Park proximity:    10%
  Subway proximity:  10%
  Safety:            10%
"""

from decimal import Decimal

from src.engine.bands import clamp, to_decimal
from src.models.property import PropertyData

DEFAULT_MOBILITY_SCORE = 50  # walk/transit/bike when not reported
DEFAULT_SAFETY_SCORE = Decimal("6")
NEUTRAL_PROXIMITY = Decimal("5")

PARK_DECAY_PER_MINUTE = Decimal("0.5")
SUBWAY_DECAY_PER_MINUTE = Decimal("1.0")


def _mobility(score: int | None) -> Decimal:
    """0-100 walk/transit/bike score on a 0-10 scale."""
    if score is None:
        score = DEFAULT_MOBILITY_SCORE
    return to_decimal(score) / 10


def proximity_score(minutes, decay_per_minute: Decimal) -> Decimal:
    """10 at the door, losing `decay_per_minute` points per minute walked, floored at 0."""
    if minutes is None:
        return NEUTRAL_PROXIMITY
    minutes = max(Decimal("0"), to_decimal(minutes))
    return clamp(10 - minutes * decay_per_minute, Decimal("0"), Decimal("10"))


def score_location(prop: PropertyData) -> Decimal:
    safety = DEFAULT_SAFETY_SCORE if prop.safety_score is None else to_decimal(prop.safety_score)

    combined = (
        _mobility(prop.walk_score) * Decimal("0.3")
        + _mobility(prop.transit_score) * Decimal("0.3")
        + _mobility(prop.bike_score) * Decimal("0.1")
        + proximity_score(prop.proximity_to_park, PARK_DECAY_PER_MINUTE) * Decimal("0.1")
        + proximity_score(prop.proximity_to_subway, SUBWAY_DECAY_PER_MINUTE) * Decimal("0.1")
        + safety * Decimal("0.1")
    )
    return clamp(combined)


def score_neighborhood(prop: PropertyData) -> Decimal:
    """Bike score as a stand-in for neighborhood character."""
    return clamp(_mobility(prop.bike_score))
