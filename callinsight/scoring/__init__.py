from .aggregate import (
    CALL_QUALITY_WEIGHTS,
    VOCALYTICS_WEIGHTS,
    balance_score,
    comparison_metrics,
    compute_call_quality,
    compute_vocalytics_score,
    filler_words_score,
    industry_comparison,
    interruption_score,
    speaking_rate_score,
)
from .delivery import (
    score_breath_control,
    score_emotional_stability,
    score_energy,
    score_pacing,
    score_rhythm,
    score_tonal_variation,
)
from .scorers import (
    clamp_score,
    score_assertiveness,
    score_clarity,
    score_confidence,
    score_empathy,
    score_engagement_clarity,
    score_enthusiasm,
    score_general_sentiment,
    score_politeness,
    score_professionalism,
    score_vocal_empathy,
    score_vocal_enthusiasm,
)

__all__ = [
    "CALL_QUALITY_WEIGHTS",
    "VOCALYTICS_WEIGHTS",
    "balance_score",
    "clamp_score",
    "comparison_metrics",
    "compute_call_quality",
    "compute_vocalytics_score",
    "filler_words_score",
    "industry_comparison",
    "interruption_score",
    "score_assertiveness",
    "score_breath_control",
    "score_clarity",
    "score_confidence",
    "score_emotional_stability",
    "score_empathy",
    "score_energy",
    "score_engagement_clarity",
    "score_enthusiasm",
    "score_general_sentiment",
    "score_pacing",
    "score_politeness",
    "score_professionalism",
    "score_rhythm",
    "score_tonal_variation",
    "score_vocal_empathy",
    "score_vocal_enthusiasm",
    "speaking_rate_score",
]
