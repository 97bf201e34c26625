"""Tests for listing data types."""

from decimal import Decimal

import pytest

from src.models.property import (
    BuildingType,
    ConstructionQuality,
    MarketTrend,
    OutdoorSpace,
    ParkingType,
    PriceHistory,
    PropertyData,
)
from src.models.scoring import Confidence, ScoreBreakdown


class TestClosedEnums:
    def test_exact_values(self):
        assert BuildingType("prewar") is BuildingType.PREWAR
        assert ConstructionQuality("ultra-luxury") is ConstructionQuality.ULTRA_LUXURY

    def test_case_and_separator_folding(self):
        assert BuildingType("PREWAR") is BuildingType.PREWAR
        assert ConstructionQuality("Ultra_Luxury") is ConstructionQuality.ULTRA_LUXURY
        assert OutdoorSpace(" Rooftop ") is OutdoorSpace.ROOFTOP

    @pytest.mark.parametrize(
        "enum_cls,fallback",
        [
            (BuildingType, BuildingType.OTHER),
            (ConstructionQuality, ConstructionQuality.UNKNOWN),
            (ParkingType, ParkingType.UNKNOWN),
            (OutdoorSpace, OutdoorSpace.UNKNOWN),
            (PriceHistory, PriceHistory.UNKNOWN),
            (MarketTrend, MarketTrend.UNKNOWN),
        ],
    )
    def test_malformed_values_fall_back(self, enum_cls, fallback):
        assert enum_cls("not-a-real-value") is fallback
        assert enum_cls(42) is fallback


class TestPropertyData:
    def test_frozen(self):
        listing = PropertyData(address="x", price=Decimal("1"))
        with pytest.raises(AttributeError):
            listing.price = Decimal("2")


class TestScoreBreakdown:
    def _breakdown(self) -> ScoreBreakdown:
        return ScoreBreakdown(
            overall=7,
            price_value=Decimal("5.8"),
            location=Decimal("8.2"),
            schools=Decimal("10.0"),
            building=Decimal("6.3"),
            amenities=Decimal("4.0"),
            neighborhood=Decimal("5.0"),
            market_context=Decimal("7.5"),
            lifestyle=Decimal("9.2"),
            confidence=Confidence.HIGH,
        )

    def test_subscores_order(self):
        assert list(self._breakdown().subscores()) == [
            "price_value", "location", "schools", "building",
            "amenities", "neighborhood", "market_context", "lifestyle",
        ]

    def test_rescaled_to_hundred(self):
        scaled = self._breakdown().rescaled(100)
        assert scaled.overall == 70
        assert scaled.price_value == Decimal("58")
        assert scaled.lifestyle == Decimal("92")
        assert scaled.scale == 100
        assert scaled.confidence is Confidence.HIGH
