"""Tests for the price-value sub-score."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.engine.price_value import (
    market_time_bonus,
    monthly_burden,
    monthly_cost_score,
    price_basis,
    price_per_room_tier,
    purchase_price_score,
    score_price_value,
)
from src.models.property import MarketTrend, PropertyData
from src.models.scoring import Confidence


class TestPurchasePriceScore:
    def test_price_per_sqft_banding(self, canonical_listing):
        """$1,250/sqft against the $800-$2,000 band → 10 - 450/1200*8 = 7."""
        assert purchase_price_score(canonical_listing) == Decimal("7")

    def test_band_floor_scores_ten(self, canonical_listing):
        cheap = replace(canonical_listing, price=Decimal("700000"))
        assert purchase_price_score(cheap) == Decimal("10")

    def test_band_ceiling_scores_two(self, canonical_listing):
        at_ceiling = replace(canonical_listing, price=Decimal("2000000"))
        assert purchase_price_score(at_ceiling) == Decimal("2")

    def test_far_above_band_clamps_to_one(self, canonical_listing):
        extreme = replace(canonical_listing, price=Decimal("9000000"))
        assert purchase_price_score(extreme) == Decimal("1")

    def test_hot_market_raises_score(self, canonical_listing):
        base = purchase_price_score(canonical_listing)
        hot = purchase_price_score(replace(canonical_listing, market_trend=MarketTrend.HOT))
        cold = purchase_price_score(replace(canonical_listing, market_trend=MarketTrend.COLD))
        assert hot > base > cold

    def test_unknown_trend_leaves_band_alone(self, canonical_listing):
        unknown = replace(canonical_listing, market_trend=MarketTrend.UNKNOWN)
        assert purchase_price_score(unknown) == purchase_price_score(canonical_listing)

    def test_zero_price_is_finite(self, canonical_listing):
        free = replace(canonical_listing, price=Decimal("0"))
        assert purchase_price_score(free) == Decimal("10")


class TestPerRoomFallback:
    def test_tiers(self):
        assert price_per_room_tier(Decimal("1200000"))[0] == "luxury"
        assert price_per_room_tier(Decimal("900000"))[0] == "premium"
        assert price_per_room_tier(Decimal("500000"))[0] == "standard"
        assert price_per_room_tier(Decimal("250000"))[0] == "affordable"

    def test_tier_boundaries_are_exclusive(self):
        assert price_per_room_tier(Decimal("1000000"))[0] == "premium"
        assert price_per_room_tier(Decimal("700000"))[0] == "standard"
        assert price_per_room_tier(Decimal("300000"))[0] == "affordable"

    def test_premium_one_bedroom(self, no_sqft_listing):
        """$900K/room in the $600K-$1.2M premium band → 10 - 300/600*8 = 6."""
        assert purchase_price_score(no_sqft_listing) == Decimal("6")

    def test_studio_counts_as_one_room(self, no_sqft_listing):
        studio = replace(no_sqft_listing, bedrooms=0)
        assert purchase_price_score(studio) == purchase_price_score(no_sqft_listing)

    def test_zero_price_and_area_is_finite(self, no_sqft_listing):
        listing = replace(no_sqft_listing, price=Decimal("0"))
        score = purchase_price_score(listing)
        assert score.is_finite()
        assert Decimal("1") <= score <= Decimal("10")

    def test_confidence_reflects_path(self, canonical_listing, no_sqft_listing):
        assert price_basis(canonical_listing) is Confidence.HIGH
        assert price_basis(no_sqft_listing) is Confidence.LOW


class TestMonthlyBurden:
    def test_fees_without_taxes(self):
        listing = PropertyData(address="x", price=Decimal("1"), monthly_fees=Decimal("1200"))
        assert monthly_burden(listing) == Decimal("1200")

    def test_annual_taxes_spread_monthly(self):
        listing = PropertyData(
            address="x",
            price=Decimal("1"),
            monthly_fees=Decimal("800"),
            property_taxes=Decimal("9600"),
        )
        assert monthly_burden(listing) == Decimal("1600")

    def test_float_inputs_coerced_without_noise(self):
        listing = PropertyData(address="x", price=Decimal("1"), monthly_fees=1200.1, property_taxes=1200)
        assert monthly_burden(listing) == Decimal("1300.1")


class TestMonthlyCostScore:
    def test_fees_only(self, canonical_listing):
        """$1,200/mo in the $400-$1,600 band → 10 - 800/1200*8 ≈ 4.67."""
        score = monthly_cost_score(canonical_listing)
        assert abs(score - Decimal("4.6667")) < Decimal("0.001")

    def test_taxes_added_monthly(self):
        listing = PropertyData(
            address="x",
            price=Decimal("1000000"),
            monthly_fees=Decimal("600"),
            property_taxes=Decimal("12000"),
        )
        # $600 + $1,000 = $1,600/mo → band ceiling
        assert monthly_cost_score(listing) == Decimal("2")

    def test_no_fees_scores_ten(self, no_sqft_listing):
        assert monthly_cost_score(no_sqft_listing) == Decimal("10")


class TestMarketTimeBonus:
    @pytest.mark.parametrize(
        "days,expected",
        [
            (None, Decimal("1.0")),
            (10, Decimal("1.0")),
            (30, Decimal("1.0")),
            (55, Decimal("1.25")),
            (80, Decimal("1.5")),
            (400, Decimal("1.5")),
        ],
    )
    def test_bonus(self, days, expected):
        assert market_time_bonus(days) == expected


class TestScorePriceValue:
    def test_scenario_mid_range(self, canonical_listing):
        """($1,250/sqft score 7 + monthly ≈4.67) / 2 ≈ 5.83 with no time bonus."""
        score = score_price_value(canonical_listing)
        assert Decimal("5") <= score <= Decimal("6")
        assert abs(score - Decimal("5.8333")) < Decimal("0.001")

    def test_per_room_fallback(self, no_sqft_listing):
        # (6 + 10) / 2
        assert score_price_value(no_sqft_listing) == Decimal("8")

    def test_long_listing_gets_leverage_bonus(self, canonical_listing):
        stale = replace(canonical_listing, days_on_market=80)
        assert score_price_value(stale) == pytest.approx(
            score_price_value(canonical_listing) * Decimal("1.5")
        )

    def test_bonus_is_clamped_to_ten(self, no_sqft_listing):
        stale = replace(no_sqft_listing, days_on_market=200)
        assert score_price_value(stale) == Decimal("10")

    def test_non_increasing_in_price(self, canonical_listing):
        scores = [
            score_price_value(replace(canonical_listing, price=Decimal(price)))
            for price in range(0, 5_000_001, 100_000)
        ]
        assert all(a >= b for a, b in zip(scores, scores[1:]))
