"""Rule-based farm recommendations."""

from farmadvisor.recommend.engine import (
    Recommendation,
    RecommendationEngine,
    generate_recommendations,
)
from farmadvisor.recommend.rules import (
    DEFAULT_RULES,
    RecommendationCategory,
    RecommendationKind,
    Rule,
    confidence_label,
    format_currency,
)
from farmadvisor.recommend.snapshot import CropSummary, FarmSnapshot, LivestockSummary

__all__ = [
    "DEFAULT_RULES",
    "CropSummary",
    "FarmSnapshot",
    "LivestockSummary",
    "Recommendation",
    "RecommendationCategory",
    "RecommendationEngine",
    "RecommendationKind",
    "Rule",
    "confidence_label",
    "format_currency",
    "generate_recommendations",
]
