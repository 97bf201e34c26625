"""Pydantic schemas for API request/response models."""

import datetime
from typing import Literal
from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class PriceHistoryEventRequest(BaseModel):
    date: datetime.date
    price: Decimal
    event: str = ""


class PriceHistoryDetailsRequest(BaseModel):
    percentage_change: Decimal
    time_context: str = ""
    analysis: str = ""
    events: list[PriceHistoryEventRequest] = []


class WeightsRequest(BaseModel):
    """Sub-score weights. Not required to sum to 1."""
    price_value: Decimal = Decimal("0.25")
    location: Decimal = Decimal("0.20")
    schools: Decimal = Decimal("0.15")
    building: Decimal = Decimal("0.15")
    amenities: Decimal = Decimal("0.08")
    neighborhood: Decimal = Decimal("0.10")
    market_context: Decimal = Decimal("0.04")
    lifestyle: Decimal = Decimal("0.03")


class ScoreRequest(BaseModel):
    address: str = Field(..., description="Listing address (display only)")
    price: Decimal = Field(..., ge=0)
    monthly_fees: Decimal = Field(Decimal("0"), ge=0, description="Common charges / maintenance per month")
    property_taxes: Decimal | None = Field(None, ge=0, description="Annual property tax")
    assessment_ratio: Decimal | None = Field(None, ge=0)

    square_feet: int = Field(0, ge=0, description="0 when unknown")
    bedrooms: int = Field(0, ge=0)
    bathrooms: Decimal = Field(Decimal("0"), ge=0)
    floor: int = Field(0, ge=0)
    total_floors: int = Field(0, ge=0)
    building_age: int = Field(0, ge=0)
    building_type: str | None = None
    construction_quality: str | None = None
    renovation_year: int | None = None

    school_district: str = "Other"
    neighborhood: str | None = None
    walk_score: int | None = Field(None, ge=0, le=100)
    transit_score: int | None = Field(None, ge=0, le=100)
    bike_score: int | None = Field(None, ge=0, le=100)
    proximity_to_park: Decimal | None = Field(None, ge=0, description="Minutes walk")
    proximity_to_subway: Decimal | None = Field(None, ge=0, description="Minutes walk")
    safety_score: Decimal | None = Field(None, ge=0, le=10)

    amenities: list[str] = []
    home_features: list[str] = []
    has_parking: bool | None = None
    parking_type: str | None = None
    outdoor_space: str | None = None

    days_on_market: int | None = Field(None, ge=0)
    price_history: str | None = None
    price_history_details: PriceHistoryDetailsRequest | None = None
    market_trend: str | None = None
    noise_level: int | None = Field(None, ge=1, le=10)
    pet_friendly: bool | None = None

    weights: WeightsRequest | None = None
    scale: Literal[10, 100] | None = Field(None, description="Display scale (default from settings)")


# ---- Response schemas ----

class SubScoreResponse(BaseModel):
    name: str
    label: str
    description: str
    score: Decimal
    category: str
    rating: str


class ScoreResponse(BaseModel):
    address: str
    overall: int
    category: str
    rating: str
    scale: int
    confidence: str | None = None
    subscores: list[SubScoreResponse]
    weights: WeightsRequest


class SchoolDistrictResponse(BaseModel):
    district: str
    rating: int
