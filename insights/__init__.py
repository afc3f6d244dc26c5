"""
Insights — score, headline metrics, and what-if suggestions for a built path.
"""

from .score import NO_FI_PENALTY, calculate_path_score, score_projection
from .metrics import PathMetrics, compute_path_metrics
from .suggestions import (
    SUGGESTION_RULES,
    Suggestion,
    SuggestionRule,
    generate_suggestions,
    rank_suggestions,
    suggestions_to_dataframe,
)

__all__ = [
    "NO_FI_PENALTY",
    "calculate_path_score",
    "score_projection",
    "PathMetrics",
    "compute_path_metrics",
    "SUGGESTION_RULES",
    "Suggestion",
    "SuggestionRule",
    "generate_suggestions",
    "rank_suggestions",
    "suggestions_to_dataframe",
]
