from .templates import (
    ProfileSignals,
    get_recommendation_reasons,
    get_template_recommendations,
    get_top_recommendations,
    is_template_recommended,
    profile_signals,
    score_template,
)

__all__ = [
    "ProfileSignals",
    "get_recommendation_reasons",
    "get_template_recommendations",
    "get_top_recommendations",
    "is_template_recommended",
    "profile_signals",
    "score_template",
]
