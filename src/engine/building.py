"""Building sub-score: age, type, floor position, construction quality, renovation."""

from decimal import Decimal

from src.engine.bands import clamp, to_decimal
from src.engine.tables import BUILDING_TYPE_SCORES, CONSTRUCTION_QUALITY_MULTIPLIERS
from src.models.property import BuildingType, ConstructionQuality, PropertyData

ONE = Decimal("1.0")

MAX_RENOVATION_BONUS = Decimal("1.8")
RENOVATION_DECAY_PER_YEAR = Decimal("0.04")  # back to 1.0x after 20 years


def age_score(building_age) -> Decimal:
    return clamp(10 - max(Decimal("0"), to_decimal(building_age)) / 15)


def floor_multiplier(floor: int, total_floors: int) -> Decimal:
    """Middle floors preferred: bottom fifth x0.8, top fifth x0.9."""
    if not total_floors or total_floors <= 0:
        return ONE
    ratio = to_decimal(floor) / to_decimal(total_floors)
    if ratio < Decimal("0.2"):
        return Decimal("0.8")
    if ratio > Decimal("0.8"):
        return Decimal("0.9")
    return ONE


def renovation_bonus(renovation_year: int | None, reference_year: int) -> Decimal:
    if renovation_year is None:
        return ONE
    years_since = max(0, reference_year - renovation_year)
    return max(ONE, MAX_RENOVATION_BONUS - RENOVATION_DECAY_PER_YEAR * years_since)


def score_building(prop: PropertyData, reference_year: int) -> Decimal:
    type_score = BUILDING_TYPE_SCORES.get(
        BuildingType(prop.building_type), BUILDING_TYPE_SCORES[BuildingType.OTHER]
    )
    base_multiplier = floor_multiplier(prop.floor, prop.total_floors)

    rich = prop.construction_quality is not None or prop.renovation_year is not None
    if not rich:
        combined = age_score(prop.building_age) * Decimal("0.5") + type_score * Decimal("0.5")
        return clamp(combined * base_multiplier)

    quality = ONE
    if prop.construction_quality is not None:
        quality = CONSTRUCTION_QUALITY_MULTIPLIERS.get(
            ConstructionQuality(prop.construction_quality), ONE
        )
    combined = age_score(prop.building_age) * Decimal("0.4") + type_score * Decimal("0.6")
    return clamp(
        combined
        * base_multiplier
        * quality
        * renovation_bonus(prop.renovation_year, reference_year)
    )
