"""Composite listing score.

Pure function: PropertyData + ScoringWeights in, ScoreBreakdown out. No I/O.

Sub-scores (1-10 each) and default weights:
  Price value:     25%
  Location:        20%
  Schools:         15%
  Building:        15%
  Amenities:        8%
  Neighborhood:    10%
  Market context:   4%
  Lifestyle:        3%

Sub-scores enter the weighted sum at full precision; rounding to one decimal
happens only on the returned breakdown.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable

from src.config import settings
from src.engine.amenities import score_amenities
from src.engine.bands import clamp, to_decimal
from src.engine.building import score_building
from src.engine.lifestyle import score_lifestyle
from src.engine.location import score_location, score_neighborhood
from src.engine.market import score_market_context
from src.engine.price_value import price_basis, score_price_value
from src.engine.tables import MAX_SCORE, MIN_SCORE, NEUTRAL_SCORE, SCHOOL_DISTRICT_SCORES
from src.models.property import PropertyData
from src.models.scoring import DEFAULT_WEIGHTS, ScoreBreakdown, ScoringWeights

logger = logging.getLogger(__name__)

ONE_PLACE = Decimal("0.1")


def score_school(prop: PropertyData) -> Decimal:
    district = (prop.school_district or "").strip()
    rating = SCHOOL_DISTRICT_SCORES.get(district)
    if rating is None:
        logger.debug("Unrated school district %r, using neutral score", district)
        return NEUTRAL_SCORE
    return Decimal(rating)


def _guarded(name: str, sub_score: Callable[..., Decimal], *args) -> Decimal:
    """Run a sub-score, substituting the neutral baseline for any non-finite outcome."""
    try:
        value = sub_score(*args)
    except ArithmeticError as e:
        logger.warning("%s sub-score failed (%s), using neutral score", name, e)
        return NEUTRAL_SCORE
    if not value.is_finite():
        logger.warning("%s sub-score was %s, using neutral score", name, value)
        return NEUTRAL_SCORE
    return value


def _round_one(value: Decimal) -> Decimal:
    return value.quantize(ONE_PLACE, ROUND_HALF_UP)


def compute_subscores(prop: PropertyData, reference_year: int | None = None) -> dict[str, Decimal]:
    """Unrounded sub-scores keyed by name, each finite and within [1, 10]."""
    year = reference_year if reference_year is not None else settings.reference_year
    return {
        "price_value": _guarded("price_value", score_price_value, prop),
        "location": _guarded("location", score_location, prop),
        "schools": _guarded("schools", score_school, prop),
        "building": _guarded("building", score_building, prop, year),
        "amenities": _guarded("amenities", score_amenities, prop),
        "neighborhood": _guarded("neighborhood", score_neighborhood, prop),
        "market_context": _guarded("market_context", score_market_context, prop),
        "lifestyle": _guarded("lifestyle", score_lifestyle, prop),
    }


def weighted_total(subscores: dict[str, Decimal], weights: ScoringWeights) -> Decimal:
    """Weighted sum of the sub-scores. Weights are used as given, never normalised."""
    weight_map = weights.as_dict()
    return sum(
        (value * to_decimal(weight_map[name]) for name, value in subscores.items()),
        Decimal("0"),
    )


def compute_score(
    prop: PropertyData,
    weights: ScoringWeights | None = None,
    *,
    reference_year: int | None = None,
) -> ScoreBreakdown:
    """Score a listing.

    Args:
        prop: Listing attributes.
        weights: Sub-score weights (defaults sum to 1.0; custom sets are not validated).
        reference_year: Year renovations are aged against (defaults to settings.reference_year).

    Returns:
        ScoreBreakdown with an integer overall in [1, 10] and sub-scores rounded to 0.1.
    """
    weights = weights or DEFAULT_WEIGHTS
    subscores = compute_subscores(prop, reference_year)

    total = weighted_total(subscores, weights)
    if not total.is_finite():
        logger.warning("Weighted total for %s was %s, using neutral score", prop.address, total)
        total = NEUTRAL_SCORE
    overall = int(clamp(total.quantize(Decimal("1"), ROUND_HALF_UP), MIN_SCORE, MAX_SCORE))

    return ScoreBreakdown(
        overall=overall,
        confidence=price_basis(prop),
        **{name: _round_one(value) for name, value in subscores.items()},
    )
