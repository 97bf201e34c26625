"""Score presentation: color category, label, and per-sub-score descriptions."""

from decimal import Decimal

from src.engine.bands import to_decimal
from src.models.scoring import ScoreCategory

# Thresholds on the 1-10 scale, checked top down.
CATEGORY_THRESHOLDS: tuple[tuple[Decimal, ScoreCategory], ...] = (
    (Decimal("8"), ScoreCategory.EXCELLENT),
    (Decimal("6.5"), ScoreCategory.GOOD),
    (Decimal("5"), ScoreCategory.AVERAGE),
)

CATEGORY_LABELS: dict[ScoreCategory, str] = {
    ScoreCategory.EXCELLENT: "Excellent",
    ScoreCategory.GOOD: "Good",
    ScoreCategory.AVERAGE: "Average",
    ScoreCategory.POOR: "Poor",
}

SUBSCORE_DESCRIPTIONS: dict[str, tuple[str, str]] = {
    "price_value": ("Price Value", "Price per sq ft, fees, and market timing"),
    "location": ("Location", "Walk, transit, safety, and proximity scores"),
    "schools": ("Schools", "School district quality"),
    "building": ("Building", "Type, age, quality, and renovation"),
    "amenities": ("Amenities", "Building features, parking, and outdoor space"),
    "neighborhood": ("Neighborhood", "Local attractions and bike accessibility"),
    "market_context": ("Market Context", "Market trends and price history"),
    "lifestyle": ("Lifestyle", "Noise level and pet-friendliness"),
}


def score_to_color_category(score, scale: int = 10) -> ScoreCategory:
    normalized = to_decimal(score) * 10 / scale
    for threshold, category in CATEGORY_THRESHOLDS:
        if normalized >= threshold:
            return category
    return ScoreCategory.POOR


def score_to_label(score, scale: int = 10) -> str:
    return CATEGORY_LABELS[score_to_color_category(score, scale)]
