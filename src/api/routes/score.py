"""Scoring routes, the primary API entry point."""

from fastapi import APIRouter

from src.api.schemas import (
    SchoolDistrictResponse,
    ScoreRequest,
    ScoreResponse,
    SubScoreResponse,
    WeightsRequest,
)
from src.config import settings
from src.engine.grading import SUBSCORE_DESCRIPTIONS, score_to_color_category, score_to_label
from src.engine.scoring import compute_score
from src.engine.tables import SCHOOL_DISTRICT_SCORES
from src.models.property import (
    BuildingType,
    ConstructionQuality,
    MarketTrend,
    OutdoorSpace,
    ParkingType,
    PriceHistory,
    PriceHistoryDetails,
    PriceHistoryEvent,
    PropertyData,
)
from src.models.scoring import DEFAULT_WEIGHTS, ScoreBreakdown, ScoringWeights

router = APIRouter(prefix="/api/v1/score", tags=["score"])


def _optional(enum_cls, value):
    return enum_cls(value) if value is not None else None


def build_property(req: ScoreRequest) -> PropertyData:
    """Convert a validated request into engine input. Unknown enum strings fall back, never fail."""
    details = None
    if req.price_history_details is not None:
        d = req.price_history_details
        details = PriceHistoryDetails(
            percentage_change=d.percentage_change,
            time_context=d.time_context,
            analysis=d.analysis,
            events=tuple(
                PriceHistoryEvent(date=e.date, price=e.price, event=e.event) for e in d.events
            ),
        )

    return PropertyData(
        address=req.address,
        price=req.price,
        monthly_fees=req.monthly_fees,
        property_taxes=req.property_taxes,
        assessment_ratio=req.assessment_ratio,
        square_feet=req.square_feet,
        bedrooms=req.bedrooms,
        bathrooms=req.bathrooms,
        floor=req.floor,
        total_floors=req.total_floors,
        building_age=req.building_age,
        building_type=BuildingType(req.building_type or "other"),
        construction_quality=_optional(ConstructionQuality, req.construction_quality),
        renovation_year=req.renovation_year,
        school_district=req.school_district,
        neighborhood=req.neighborhood,
        walk_score=req.walk_score,
        transit_score=req.transit_score,
        bike_score=req.bike_score,
        proximity_to_park=req.proximity_to_park,
        proximity_to_subway=req.proximity_to_subway,
        safety_score=req.safety_score,
        amenities=tuple(dict.fromkeys(req.amenities)),
        home_features=tuple(dict.fromkeys(req.home_features)),
        has_parking=req.has_parking,
        parking_type=_optional(ParkingType, req.parking_type),
        outdoor_space=_optional(OutdoorSpace, req.outdoor_space),
        days_on_market=req.days_on_market,
        price_history=_optional(PriceHistory, req.price_history),
        price_history_details=details,
        market_trend=_optional(MarketTrend, req.market_trend),
        noise_level=req.noise_level,
        pet_friendly=req.pet_friendly,
    )


def breakdown_to_response(
    address: str, breakdown: ScoreBreakdown, weights: ScoringWeights
) -> ScoreResponse:
    scale = breakdown.scale
    subscores = []
    for name, value in breakdown.subscores().items():
        label, description = SUBSCORE_DESCRIPTIONS[name]
        subscores.append(
            SubScoreResponse(
                name=name,
                label=label,
                description=description,
                score=value,
                category=score_to_color_category(value, scale).value,
                rating=score_to_label(value, scale),
            )
        )

    return ScoreResponse(
        address=address,
        overall=breakdown.overall,
        category=score_to_color_category(breakdown.overall, scale).value,
        rating=score_to_label(breakdown.overall, scale),
        scale=scale,
        confidence=breakdown.confidence.value if breakdown.confidence else None,
        subscores=subscores,
        weights=WeightsRequest(**weights.as_dict()),
    )


def score_request(req: ScoreRequest) -> ScoreResponse:
    """Score a validated request on the requested (or configured) display scale."""
    weights = ScoringWeights(**req.weights.model_dump()) if req.weights else DEFAULT_WEIGHTS
    breakdown = compute_score(build_property(req), weights)
    scale = req.scale or settings.score_scale
    if scale != breakdown.scale:
        breakdown = breakdown.rescaled(scale)
    return breakdown_to_response(req.address, breakdown, weights)


@router.post("", response_model=ScoreResponse)
async def score_listing(req: ScoreRequest):
    """Primary endpoint: listing attributes → score breakdown."""
    return score_request(req)


@router.get("/weights", response_model=WeightsRequest)
async def default_weights():
    """Default sub-score weights (sum to 1.0)."""
    return WeightsRequest(**DEFAULT_WEIGHTS.as_dict())


@router.get("/school-districts", response_model=list[SchoolDistrictResponse])
async def school_districts():
    """School district ratings used by the schools sub-score."""
    return [
        SchoolDistrictResponse(district=district, rating=rating)
        for district, rating in SCHOOL_DISTRICT_SCORES.items()
    ]
