"""
Narrative insight text for the sentiment analysis: agent coaching, agent and prospect
context paragraphs, behavioral breakdowns and profanity detection.
"""

from callinsight.schemas import DetailedAnalysis, SentimentMetrics, SpeakerInsights
from callinsight.scoring.lexicon import PROFANITY_RULES, count_table, term_pattern

AGENT_COACHING_FALLBACK = (
    "The agent demonstrates good communication skills. Continue maintaining professional standards "
    "while focusing on building stronger emotional connections with prospects."
)


def _mentions(text: str, *phrases: str) -> bool:
    return any(term_pattern(p).search(text) for p in phrases)


def detect_profanity(text: str) -> tuple[bool, int]:
    count = count_table(text.lower(), PROFANITY_RULES)
    return count > 0, count


def generate_agent_coaching(text: str, metrics: SentimentMetrics) -> str:
    lower = text.lower()
    suggestions = []

    if metrics.empathy.agent < 60:
        suggestions.append(
            "To improve, the agent should focus on actively listening to the prospect's concerns and "
            "demonstrating more empathy. Building rapport by acknowledging their frustrations and tailoring "
            "the conversation to their specific needs would enhance the customer experience."
        )
    if metrics.engagement_and_clarity.agent < 70:
        suggestions.append(
            "Enhance engagement by asking more open-ended questions and providing clearer explanations. "
            "Use specific examples and avoid industry jargon that might confuse the prospect."
        )
    if metrics.enthusiasm.agent < 50:
        suggestions.append(
            "Increase enthusiasm and energy in your delivery. Use more positive language and vary your "
            "vocal tone to maintain prospect interest throughout the conversation."
        )
    if metrics.politeness_level.agent < 80:
        suggestions.append(
            "Maintain higher levels of professional courtesy by using 'please' and 'thank you' more "
            "frequently. This creates a more respectful and professional atmosphere."
        )
    if not _mentions(lower, "understand", "i see"):
        suggestions.append(
            "Practice active listening techniques by using phrases like 'I understand' and 'I see' to "
            "acknowledge the prospect's responses."
        )
    if not _mentions(lower, "help", "assist"):
        suggestions.append(
            "Emphasize your role as a helper by using phrases like 'I'm here to help' and 'Let me assist you' "
            "to build trust."
        )
    if _mentions(lower, "i don't know", "not sure"):
        suggestions.append(
            "Additionally, gaining a deeper understanding of the products and eligibility requirements would "
            "enable the agent to provide more comprehensive and helpful information."
        )

    return " ".join(suggestions or [AGENT_COACHING_FALLBACK])


def generate_agent_context(text: str, metrics: SentimentMetrics) -> str:
    lower = text.lower()
    parts = ["The agent maintains a"]

    sentiment = metrics.general_sentiment.agent
    if sentiment > 70:
        parts.append(
            "generally positive and professional sentiment, focusing on gathering information and "
            "presenting potential benefits."
        )
    elif sentiment > 50:
        parts.append("generally neutral sentiment, focusing on gathering information and presenting potential benefits.")
    else:
        parts.append("somewhat reserved sentiment that could benefit from more warmth and positivity.")

    if metrics.engagement_and_clarity.agent > 70:
        parts.append("Their engagement is adequate, though they could show more enthusiasm to build rapport.")
    else:
        parts.append("Their engagement level needs improvement to better connect with prospects.")

    politeness = metrics.politeness_level.agent
    if politeness > 85:
        parts.append("Politeness is consistently high,")
    elif politeness > 70:
        parts.append("Politeness is adequate,")
    else:
        parts.append("Politeness could be enhanced,")

    if metrics.empathy.agent > 60:
        parts.append("and empathy is demonstrated through active listening.")
    else:
        parts.append(
            "but empathy is somewhat lacking, as the agent doesn't fully address the prospect's specific "
            "concerns or acknowledge their frustrations."
        )

    if _mentions(lower, "clearly", "professional"):
        parts.append("The agent consistently speaks clearly and professionally,")

    if _mentions(lower, "i don't know", "not sure"):
        parts.append("though gaps in product knowledge hinder the conversation.")
    else:
        parts.append("and demonstrates good product knowledge.")

    return " ".join(parts)


def generate_prospect_context(text: str, metrics: SentimentMetrics) -> str:
    lower = text.lower()
    parts = ["The prospect expresses a"]

    sentiment = metrics.general_sentiment.customer
    if sentiment > 60:
        parts.append("positive sentiment overall, showing interest in the conversation.")
    elif sentiment > 40:
        parts.append("somewhat negative sentiment overall, suggesting the offer does not fully match their needs.")
    else:
        parts.append("negative sentiment, indicating frustration or disinterest in the offering.")

    if metrics.engagement_and_clarity.customer > 70:
        parts.append("Their engagement is moderate as they explain their situation and share their experiences.")
    else:
        parts.append("Their engagement is limited, providing brief responses to questions.")

    parts.append("Politeness is maintained," if metrics.politeness_level.customer > 75 else "Politeness is adequate,")

    if metrics.enthusiasm.customer > 50:
        parts.append("and they show some enthusiasm when discussing topics of interest.")
    else:
        parts.append("but their enthusiasm is low due to the perceived lack of relevant benefits.")

    if _mentions(lower, "understand", "see"):
        parts.append("They show some empathy in acknowledging that the agent might not know their specific circumstances.")

    parts.append("The prospect articulates their concerns and questions clearly.")

    if _mentions(lower, "not interested", "no thank"):
        parts.append("However, their frustration with the offer leads to a less positive interaction.")
    elif _mentions(lower, "interested", "tell me more"):
        parts.append("They demonstrate genuine interest in learning more about the available options.")

    return " ".join(parts)


def analyze_agent_behavior(text: str, metrics: SentimentMetrics) -> DetailedAnalysis:
    lower = text.lower()
    politeness = metrics.politeness_level.agent
    if politeness > 80:
        style = "Professional and courteous"
    elif politeness > 60:
        style = "Generally professional"
    else:
        style = "Needs improvement"

    strengths = []
    if politeness > 80:
        strengths.append("Maintains professional courtesy")
    if metrics.engagement_and_clarity.agent > 70:
        strengths.append("Clear communication")
    if metrics.empathy.agent > 60:
        strengths.append("Shows empathy and understanding")
    if _mentions(lower, "help", "assist"):
        strengths.append("Service-oriented approach")

    weaknesses = []
    if metrics.empathy.agent < 60:
        weaknesses.append("Limited empathy demonstration")
    if metrics.enthusiasm.agent < 50:
        weaknesses.append("Low energy and enthusiasm")
    if metrics.engagement_and_clarity.agent < 70:
        weaknesses.append("Could improve engagement")

    patterns = []
    if "?" in lower:
        patterns.append("Asks qualifying questions")
    if _mentions(lower, "understand", "see"):
        patterns.append("Uses acknowledgment phrases")
    if _mentions(lower, "benefits", "coverage", "plan", "product", "price"):
        patterns.append("Focuses on product features")

    return DetailedAnalysis(
        communication_style=style,
        strengths=strengths or ["Maintains basic professional standards"],
        weaknesses=weaknesses or ["Minor areas for improvement"],
        behavioral_patterns=patterns or ["Standard call handling approach"],
    )


def analyze_prospect_behavior(text: str, metrics: SentimentMetrics) -> DetailedAnalysis:
    lower = text.lower()
    politeness = metrics.politeness_level.customer
    if politeness > 80:
        style = "Polite and respectful"
    elif politeness > 60:
        style = "Generally courteous"
    else:
        style = "Direct communication"

    strengths = []
    if politeness > 75:
        strengths.append("Maintains respectful tone")
    if metrics.engagement_and_clarity.customer > 70:
        strengths.append("Provides clear responses")
    if "?" in lower:
        strengths.append("Asks relevant questions")

    weaknesses = []
    if metrics.enthusiasm.customer < 40:
        weaknesses.append("Low enthusiasm level")
    if metrics.general_sentiment.customer < 50:
        weaknesses.append("Negative sentiment indicators")

    patterns = []
    if _mentions(lower, "already", "have"):
        patterns.append("References existing solutions")
    if _mentions(lower, "not interested"):
        patterns.append("Expresses disinterest")
    if "?" in lower:
        patterns.append("Seeks clarification")

    return DetailedAnalysis(
        communication_style=style,
        strengths=strengths or ["Participates in conversation"],
        weaknesses=weaknesses or ["Standard prospect responses"],
        behavioral_patterns=patterns or ["Typical prospect interaction"],
    )


def build_agent_insights(text: str, metrics: SentimentMetrics) -> SpeakerInsights:
    detected, count = detect_profanity(text)
    return SpeakerInsights(
        profanity_detected=detected,
        profanity_count=count,
        coaching=generate_agent_coaching(text, metrics),
        context=generate_agent_context(text, metrics),
        detailed_analysis=analyze_agent_behavior(text, metrics),
    )


def build_prospect_insights(text: str, metrics: SentimentMetrics) -> SpeakerInsights:
    """Prospects get context and behavior, never coaching."""
    detected, count = detect_profanity(text)
    return SpeakerInsights(
        profanity_detected=detected,
        profanity_count=count,
        coaching="",
        context=generate_prospect_context(text, metrics),
        detailed_analysis=analyze_prospect_behavior(text, metrics),
    )
