"""Market-context sub-score.

Starts from a baseline (5, or keyed by market trend) and adds:
  Price history:    simple enum, or tiered % change + event heuristics
  Days on market:   stale (>90d) or fresh (<7d) listings get a small bump
  Assessment ratio: under-assessed relative to market is rewarded
"""

import re
from decimal import Decimal

from src.engine.bands import clamp, to_decimal
from src.engine.tables import MARKET_TREND_BASELINES, NEUTRAL_SCORE, PRICE_HISTORY_ADJUSTMENTS
from src.models.property import MarketTrend, PriceHistory, PriceHistoryDetails, PropertyData

ZERO = Decimal("0")

RECENT_TIMEFRAME = re.compile(
    r"\b(recent(ly)?|today|yesterday|\d+\s+(days?|weeks?)|(this|last|past)\s+(week|month))\b",
    re.IGNORECASE,
)
PRICE_REDUCTION = re.compile(
    r"\b(price\s+(decrease|drop|cut|reduc)\w*|reduced|reduction)\b",
    re.IGNORECASE,
)

RECENT_DROP_BONUS = Decimal("0.3")
FREQUENT_EVENTS_PENALTY = Decimal("-0.3")
FREQUENT_EVENTS_THRESHOLD = 5
SINGLE_EVENT_BONUS = Decimal("0.2")
RECENT_REDUCTION_BONUS = Decimal("0.8")


def _baseline(trend: MarketTrend | None) -> Decimal:
    if trend is None:
        return NEUTRAL_SCORE
    return MARKET_TREND_BASELINES.get(MarketTrend(trend), NEUTRAL_SCORE)


def _percentage_change_adjustment(pct: Decimal) -> Decimal:
    if pct < -10:
        return Decimal("2.0")
    if pct <= -5:
        return Decimal("1.0")
    if pct > 15:
        return Decimal("-1.5")
    if pct >= 5:
        return Decimal("-0.5")
    return ZERO


def price_history_details_adjustment(details: PriceHistoryDetails) -> Decimal:
    pct = to_decimal(details.percentage_change)
    adjustment = _percentage_change_adjustment(pct)

    if pct < 0 and details.time_context and RECENT_TIMEFRAME.search(details.time_context):
        adjustment += RECENT_DROP_BONUS

    events = details.events or ()
    if len(events) >= FREQUENT_EVENTS_THRESHOLD:
        adjustment += FREQUENT_EVENTS_PENALTY
    elif len(events) == 1:
        adjustment += SINGLE_EVENT_BONUS

    latest = sorted(events, key=lambda e: e.date)[-2:]
    if any(PRICE_REDUCTION.search(e.event or "") for e in latest):
        adjustment += RECENT_REDUCTION_BONUS

    return adjustment


def days_on_market_adjustment(days_on_market: int | None) -> Decimal:
    if days_on_market is None:
        return ZERO
    if days_on_market > 90:
        return Decimal("0.5")  # stale, room to negotiate
    if days_on_market < 7:
        return Decimal("0.3")  # fresh, priced to move
    return ZERO


def assessment_adjustment(assessment_ratio) -> Decimal:
    if assessment_ratio is None:
        return ZERO
    ratio = to_decimal(assessment_ratio)
    if ratio <= 0:
        return ZERO
    return clamp((Decimal("0.8") - ratio) * 5, Decimal("-2"), Decimal("2"))


def score_market_context(prop: PropertyData) -> Decimal:
    score = _baseline(prop.market_trend)

    if prop.price_history_details is not None:
        score += price_history_details_adjustment(prop.price_history_details)
    elif prop.price_history is not None:
        score += PRICE_HISTORY_ADJUSTMENTS.get(PriceHistory(prop.price_history), ZERO)

    score += days_on_market_adjustment(prop.days_on_market)
    score += assessment_adjustment(prop.assessment_ratio)
    return clamp(score)
