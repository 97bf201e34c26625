"""Listing attributes consumed by the scoring engine."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class _ClosedEnum(Enum):
    """Enum that folds case and absorbs unrecognised values into a fallback member."""

    @classmethod
    def _fallback(cls) -> "_ClosedEnum":
        return cls("unknown")

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == key:
                    return member
        return cls._fallback()


class BuildingType(_ClosedEnum):
    PREWAR = "prewar"
    POSTWAR = "postwar"
    MODERN = "modern"
    LUXURY = "luxury"
    HISTORIC = "historic"
    OTHER = "other"

    @classmethod
    def _fallback(cls) -> "BuildingType":
        return cls.OTHER


class ConstructionQuality(_ClosedEnum):
    BASIC = "basic"
    GOOD = "good"
    LUXURY = "luxury"
    ULTRA_LUXURY = "ultra-luxury"
    UNKNOWN = "unknown"


class ParkingType(_ClosedEnum):
    GARAGE = "garage"
    ASSIGNED = "assigned"
    STREET = "street"
    NONE = "none"
    UNKNOWN = "unknown"


class OutdoorSpace(_ClosedEnum):
    GARDEN = "garden"
    ROOFTOP = "rooftop"
    TERRACE = "terrace"
    BALCONY = "balcony"
    NONE = "none"
    UNKNOWN = "unknown"


class PriceHistory(_ClosedEnum):
    INCREASED = "increased"
    DECREASED = "decreased"
    STABLE = "stable"
    UNKNOWN = "unknown"


class MarketTrend(_ClosedEnum):
    HOT = "hot"
    WARM = "warm"
    COOL = "cool"
    COLD = "cold"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PriceHistoryEvent:
    date: date
    price: Decimal
    event: str  # e.g. "Listed", "Price decreased", "Sold"


@dataclass(frozen=True)
class PriceHistoryDetails:
    percentage_change: Decimal  # -15 means the price fell 15%
    time_context: str = ""  # e.g. "over the last 2 weeks"
    analysis: str = ""
    events: tuple[PriceHistoryEvent, ...] = ()


@dataclass(frozen=True)
class PropertyData:
    address: str
    price: Decimal

    # Financial
    monthly_fees: Decimal = Decimal("0")
    property_taxes: Decimal | None = None  # annual
    assessment_ratio: Decimal | None = None  # assessed / market value

    # Physical
    square_feet: int = 0  # 0 = unknown
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("0")
    floor: int = 0
    total_floors: int = 0
    building_age: int = 0
    building_type: BuildingType = BuildingType.OTHER
    construction_quality: ConstructionQuality | None = None
    renovation_year: int | None = None

    # Location
    school_district: str = "Other"
    neighborhood: str | None = None
    walk_score: int | None = None  # 0-100
    transit_score: int | None = None  # 0-100
    bike_score: int | None = None  # 0-100
    proximity_to_park: Decimal | None = None  # minutes walk
    proximity_to_subway: Decimal | None = None  # minutes walk
    safety_score: Decimal | None = None  # 1-10

    # Amenities
    amenities: tuple[str, ...] = ()  # building-level
    home_features: tuple[str, ...] = ()  # unit-level
    has_parking: bool | None = None
    parking_type: ParkingType | None = None
    outdoor_space: OutdoorSpace | None = None

    # Market / lifestyle
    days_on_market: int | None = None
    price_history: PriceHistory | None = None
    price_history_details: PriceHistoryDetails | None = None
    market_trend: MarketTrend | None = None
    noise_level: int | None = None  # 1-10, 1 = quiet
    pet_friendly: bool | None = None
