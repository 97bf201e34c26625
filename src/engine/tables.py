"""Fixed lookup tables for the scoring engine.

Read-only views built once at import; nothing mutates them at runtime.
"""

from decimal import Decimal
from types import MappingProxyType

from src.models.property import (
    BuildingType,
    ConstructionQuality,
    MarketTrend,
    OutdoorSpace,
    ParkingType,
    PriceHistory,
)

NEUTRAL_SCORE = Decimal("5")
MIN_SCORE = Decimal("1")
MAX_SCORE = Decimal("10")

SCHOOL_DISTRICT_SCORES = MappingProxyType({
    "District 1": 9,
    "District 2": 8,
    "District 3": 7,
    "District 15": 8,
    "District 20": 6,
    "District 22": 5,
    "Stuyvesant HS Zone": 10,
    "Bronx Science Zone": 9,
    "Brooklyn Tech Zone": 8,
    "Other": 5,
})

# ---- Price value ----

PRICE_PER_SQFT_BAND = (Decimal("800"), Decimal("2000"))

# Hot markets widen what counts as a fair price per sqft.
MARKET_TREND_BAND_MULTIPLIERS = MappingProxyType({
    MarketTrend.HOT: Decimal("1.2"),
    MarketTrend.WARM: Decimal("1.1"),
    MarketTrend.COOL: Decimal("0.9"),
    MarketTrend.COLD: Decimal("0.8"),
    MarketTrend.UNKNOWN: Decimal("1.0"),
})

# Price-per-room tiers, checked top down: (tier, floor price per room, band).
PRICE_PER_ROOM_TIERS: tuple[tuple[str, Decimal, tuple[Decimal, Decimal]], ...] = (
    ("luxury", Decimal("1000000"), (Decimal("800000"), Decimal("1500000"))),  # UES, UWS, Tribeca, SoHo
    ("premium", Decimal("700000"), (Decimal("600000"), Decimal("1200000"))),  # Chelsea, Village, Park Slope
    ("standard", Decimal("300000"), (Decimal("400000"), Decimal("800000"))),  # Midtown, LES, Williamsburg
    ("affordable", Decimal("0"), (Decimal("200000"), Decimal("600000"))),  # Queens, Bronx, outer Brooklyn
)

MONTHLY_BURDEN_BAND = (Decimal("400"), Decimal("1600"))

# ---- Building ----

BUILDING_TYPE_SCORES = MappingProxyType({
    BuildingType.PREWAR: Decimal("8.5"),  # classic charm, solid construction
    BuildingType.POSTWAR: Decimal("6.5"),
    BuildingType.MODERN: Decimal("8.0"),
    BuildingType.LUXURY: Decimal("9.5"),
    BuildingType.HISTORIC: Decimal("8.0"),  # character, but upkeep
    BuildingType.OTHER: Decimal("6.0"),
})

CONSTRUCTION_QUALITY_MULTIPLIERS = MappingProxyType({
    ConstructionQuality.BASIC: Decimal("0.8"),
    ConstructionQuality.GOOD: Decimal("1.0"),
    ConstructionQuality.LUXURY: Decimal("1.3"),
    ConstructionQuality.ULTRA_LUXURY: Decimal("1.5"),
    ConstructionQuality.UNKNOWN: Decimal("1.0"),
})

# ---- Amenities ----

PREMIUM_HOME_FEATURES = frozenset({
    "fireplace",
    "private outdoor space",
    "washer/dryer",
    "central air",
})

PARKING_BONUSES = MappingProxyType({
    ParkingType.GARAGE: Decimal("1.0"),
    ParkingType.ASSIGNED: Decimal("0.7"),
    ParkingType.STREET: Decimal("0.3"),
    ParkingType.NONE: Decimal("0"),
    ParkingType.UNKNOWN: Decimal("0"),
})

OUTDOOR_SPACE_BONUSES = MappingProxyType({
    OutdoorSpace.GARDEN: Decimal("1.0"),
    OutdoorSpace.ROOFTOP: Decimal("0.8"),
    OutdoorSpace.TERRACE: Decimal("0.6"),
    OutdoorSpace.BALCONY: Decimal("0.4"),
    OutdoorSpace.NONE: Decimal("0"),
    OutdoorSpace.UNKNOWN: Decimal("0"),
})

# ---- Market context ----

# Baseline before adjustments. Cooler markets give the buyer more leverage.
MARKET_TREND_BASELINES = MappingProxyType({
    MarketTrend.HOT: Decimal("2"),
    MarketTrend.WARM: Decimal("4"),
    MarketTrend.COOL: Decimal("6.5"),
    MarketTrend.COLD: Decimal("8"),
    MarketTrend.UNKNOWN: NEUTRAL_SCORE,
})

PRICE_HISTORY_ADJUSTMENTS = MappingProxyType({
    PriceHistory.DECREASED: Decimal("1.0"),
    PriceHistory.INCREASED: Decimal("-0.5"),
    PriceHistory.STABLE: Decimal("0"),
    PriceHistory.UNKNOWN: Decimal("0"),
})
