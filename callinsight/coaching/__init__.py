from .plan import generate_coaching_insights, generate_improvement_plan, keyword_empathy_score
from .speaker import (
    analyze_agent_behavior,
    analyze_prospect_behavior,
    build_agent_insights,
    build_prospect_insights,
    detect_profanity,
    generate_agent_coaching,
    generate_agent_context,
    generate_prospect_context,
)
from .vocal import (
    GENERAL_RECOMMENDATIONS,
    INSIGHTS_FALLBACK,
    empty_voice_coaching,
    generate_vocal_insights,
    generate_vocal_recommendations,
    generate_voice_coaching,
)

__all__ = [
    "GENERAL_RECOMMENDATIONS",
    "INSIGHTS_FALLBACK",
    "analyze_agent_behavior",
    "analyze_prospect_behavior",
    "build_agent_insights",
    "build_prospect_insights",
    "detect_profanity",
    "empty_voice_coaching",
    "generate_agent_coaching",
    "generate_agent_context",
    "generate_coaching_insights",
    "generate_improvement_plan",
    "generate_prospect_context",
    "generate_vocal_insights",
    "generate_vocal_recommendations",
    "generate_voice_coaching",
    "keyword_empathy_score",
]
