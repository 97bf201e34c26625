"""Price-value sub-score.

Combines a purchase-price score (per sqft, or per room when square footage is
missing) with a monthly carrying-cost score, then rewards listings that have
sat on the market long enough to give the buyer leverage.
"""

import logging
from decimal import Decimal

from src.engine.bands import band_score, clamp, to_decimal
from src.engine.tables import (
    MARKET_TREND_BAND_MULTIPLIERS,
    MONTHLY_BURDEN_BAND,
    NEUTRAL_SCORE,
    PRICE_PER_ROOM_TIERS,
    PRICE_PER_SQFT_BAND,
)
from src.models.property import MarketTrend, PropertyData
from src.models.scoring import Confidence

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def price_per_room_tier(price_per_room: Decimal) -> tuple[str, tuple[Decimal, Decimal]]:
    """Classify a price per room into its tier and return (tier name, band)."""
    for tier, floor_price, band in PRICE_PER_ROOM_TIERS:
        if price_per_room > floor_price:
            return tier, band
    tier, _, band = PRICE_PER_ROOM_TIERS[-1]
    return tier, band


def _trend_multiplier(trend: MarketTrend | None) -> Decimal:
    if trend is None:
        return Decimal("1.0")
    return MARKET_TREND_BAND_MULTIPLIERS.get(MarketTrend(trend), Decimal("1.0"))


def price_basis(prop: PropertyData) -> Confidence:
    """HIGH when the price can be judged per sqft, LOW on the per-room estimate."""
    return Confidence.HIGH if prop.square_feet and prop.square_feet > 0 else Confidence.LOW


def purchase_price_score(prop: PropertyData) -> Decimal:
    price = max(ZERO, to_decimal(prop.price))

    if price_basis(prop) is Confidence.HIGH:
        multiplier = _trend_multiplier(prop.market_trend)
        low, high = (bound * multiplier for bound in PRICE_PER_SQFT_BAND)
        return band_score(price / to_decimal(prop.square_feet), low, high)

    # No floor area: judge the price per room against its tier's band.
    rooms = max(1, prop.bedrooms or 0)  # studios count as one room
    per_room = price / rooms
    tier, (low, high) = price_per_room_tier(per_room)
    logger.debug("No square footage for %s, scoring $%s/room as %s tier", prop.address, per_room, tier)
    return band_score(per_room, low, high)


def monthly_burden(prop: PropertyData) -> Decimal:
    """Common charges plus one month of property tax."""
    taxes = to_decimal(prop.property_taxes) if prop.property_taxes is not None else ZERO
    return to_decimal(prop.monthly_fees) + taxes / 12


def monthly_cost_score(prop: PropertyData) -> Decimal:
    burden = max(ZERO, monthly_burden(prop))
    low, high = MONTHLY_BURDEN_BAND
    return band_score(burden, low, high)


def market_time_bonus(days_on_market: int | None) -> Decimal:
    """1.0 up to 30 days on market, +1% per extra day, capped at 1.5."""
    if days_on_market is None:
        return Decimal("1.0")
    return clamp(1 + (to_decimal(days_on_market) - 30) / 100, Decimal("1.0"), Decimal("1.5"))


def score_price_value(prop: PropertyData) -> Decimal:
    combined = (purchase_price_score(prop) + monthly_cost_score(prop)) / 2
    result = clamp(combined * market_time_bonus(prop.days_on_market))
    if not result.is_finite():
        return NEUTRAL_SCORE
    return result
