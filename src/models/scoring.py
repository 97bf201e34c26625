"""Scoring configuration and result types."""

from dataclasses import dataclass, fields, replace
from decimal import Decimal
from enum import Enum


class Confidence(Enum):
    HIGH = "high"  # priced per square foot
    LOW = "low"  # per-room estimate, or no usable price


class ScoreCategory(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"

    @property
    def css_class(self) -> str:
        return f"score-{self.value}"


SUBSCORE_NAMES: tuple[str, ...] = (
    "price_value",
    "location",
    "schools",
    "building",
    "amenities",
    "neighborhood",
    "market_context",
    "lifestyle",
)


@dataclass(frozen=True)
class ScoringWeights:
    """Fractional contribution of each sub-score to the overall score.

    The defaults sum to 1.0. Custom sets are used as given: a set summing to
    more (or less) than 1 stretches (or shrinks) the overall score before the
    final clamp.
    """
    price_value: Decimal = Decimal("0.25")
    location: Decimal = Decimal("0.20")
    schools: Decimal = Decimal("0.15")
    building: Decimal = Decimal("0.15")
    amenities: Decimal = Decimal("0.08")
    neighborhood: Decimal = Decimal("0.10")
    market_context: Decimal = Decimal("0.04")
    lifestyle: Decimal = Decimal("0.03")

    def as_dict(self) -> dict[str, Decimal]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def total(self) -> Decimal:
        return sum((Decimal(str(w)) for w in self.as_dict().values()), Decimal("0"))


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class ScoreBreakdown:
    overall: int
    price_value: Decimal
    location: Decimal
    schools: Decimal
    building: Decimal
    amenities: Decimal
    neighborhood: Decimal
    market_context: Decimal
    lifestyle: Decimal
    confidence: Confidence | None = None
    scale: int = 10

    def subscores(self) -> dict[str, Decimal]:
        return {name: getattr(self, name) for name in SUBSCORE_NAMES}

    def rescaled(self, scale: int = 100) -> "ScoreBreakdown":
        """Presentation copy on a 0-`scale` range. Only 10 and 100 are meaningful."""
        factor = Decimal(scale) / Decimal(self.scale)
        return replace(
            self,
            overall=int(self.overall * factor),
            scale=scale,
            **{name: value * factor for name, value in self.subscores().items()},
        )
