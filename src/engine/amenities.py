"""Amenities sub-score.

Building amenity count sets a base of at most 8; unit features, parking and
private outdoor space fill the headroom up to 10.
"""

from decimal import Decimal

from src.engine.bands import clamp
from src.engine.tables import OUTDOOR_SPACE_BONUSES, PARKING_BONUSES, PREMIUM_HOME_FEATURES
from src.models.property import OutdoorSpace, ParkingType, PropertyData

HOME_FEATURE_BONUS = Decimal("0.5")
PREMIUM_FEATURE_BONUS = Decimal("0.3")


def _normalize(feature: str) -> str:
    return " ".join(feature.lower().split())


def parking_bonus(has_parking: bool | None, parking_type: ParkingType | None) -> Decimal:
    if parking_type is not None:
        return PARKING_BONUSES.get(ParkingType(parking_type), Decimal("0"))
    if has_parking:
        return PARKING_BONUSES[ParkingType.ASSIGNED]
    return Decimal("0")


def outdoor_space_bonus(outdoor_space: OutdoorSpace | None) -> Decimal:
    if outdoor_space is None:
        return Decimal("0")
    return OUTDOOR_SPACE_BONUSES.get(OutdoorSpace(outdoor_space), Decimal("0"))


def score_amenities(prop: PropertyData) -> Decimal:
    base = clamp(Decimal(len(prop.amenities) + 2), Decimal("1"), Decimal("8"))

    features = prop.home_features or ()
    premium_count = sum(1 for f in features if _normalize(f) in PREMIUM_HOME_FEATURES)

    score = (
        base
        + HOME_FEATURE_BONUS * len(features)
        + PREMIUM_FEATURE_BONUS * premium_count
        + parking_bonus(prop.has_parking, prop.parking_type)
        + outdoor_space_bonus(prop.outdoor_space)
    )
    return clamp(score)
