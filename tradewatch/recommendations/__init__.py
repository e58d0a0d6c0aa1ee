"""Trade recommendation extraction: models, pipeline stages, evaluator."""

from tradewatch.recommendations.evaluator import TradeEvaluator
from tradewatch.recommendations.history import format_recommendations
from tradewatch.recommendations.models import (
    Candidate,
    Conviction,
    Recommendation,
    RecommendationType,
)
from tradewatch.recommendations.validator import filter_recommendations, rejection_reason

__all__ = [
    "Candidate",
    "Conviction",
    "Recommendation",
    "RecommendationType",
    "TradeEvaluator",
    "filter_recommendations",
    "format_recommendations",
    "rejection_reason",
]
