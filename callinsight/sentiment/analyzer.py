"""
Speaker sentiment analysis over a transcript and the provider's intelligence payload.
Scores agent and prospect on five metrics, writes coaching/context text and a 70/30 call quality.
"""

import logging
from typing import Any

from callinsight.analysis import summarize_turn_taking
from callinsight.coaching import build_agent_insights, build_prospect_insights
from callinsight.schemas import (
    DeepgramSentimentAnalysis,
    DetailedAnalysis,
    SentimentMetrics,
    SentimentSegment,
    SpeakerInsights,
    SpeakerRole,
    SpeakerScores,
    SpeakerSegments,
    parse_deepgram_response,
)
from callinsight.scoring import (
    compute_call_quality,
    score_empathy,
    score_engagement_clarity,
    score_enthusiasm,
    score_general_sentiment,
    score_politeness,
)
from callinsight.segmentation import segment

logger = logging.getLogger(__name__)

MIN_TRANSCRIPT_CHARS = 50


def empty_sentiment_analysis(call_metadata: dict[str, Any] | None = None) -> DeepgramSentimentAnalysis:
    return DeepgramSentimentAnalysis(
        agent_insights=SpeakerInsights(
            coaching="No transcript available for analysis",
            context="Unable to analyze agent performance without transcript data",
            detailed_analysis=DetailedAnalysis(),
        ),
        prospect_insights=SpeakerInsights(
            coaching="",
            context="Unable to analyze prospect behavior without transcript data",
            detailed_analysis=DetailedAnalysis(),
        ),
        call_metadata=dict(call_metadata or {}),
    )


def score_speakers(segments: SpeakerSegments, sentiment_segments: list[SentimentSegment]) -> SentimentMetrics:
    """ScoreSet for both roles. A role that never spoke scores 0 on every metric."""
    agent_text = segments.text_for(SpeakerRole.AGENT)
    customer_text = segments.text_for(SpeakerRole.CUSTOMER)
    agent_turns = len(segments.agent_segments)
    customer_turns = len(segments.customer_segments)

    return SentimentMetrics(
        empathy=SpeakerScores(
            agent=score_empathy(agent_text, True),
            customer=score_empathy(customer_text, False),
        ),
        engagement_and_clarity=SpeakerScores(
            agent=score_engagement_clarity(agent_text, True, agent_turns),
            customer=score_engagement_clarity(customer_text, False, customer_turns),
        ),
        enthusiasm=SpeakerScores(
            agent=score_enthusiasm(agent_text, True),
            customer=score_enthusiasm(customer_text, False),
        ),
        general_sentiment=SpeakerScores(
            agent=score_general_sentiment(agent_text, True, sentiment_segments),
            customer=score_general_sentiment(customer_text, False, sentiment_segments),
        ),
        politeness_level=SpeakerScores(
            agent=score_politeness(agent_text, True),
            customer=score_politeness(customer_text, False),
        ),
    )


def analyze_deepgram_sentiment(
    transcript: str,
    deepgram_response: Any = None,
    call_metadata: dict[str, Any] | None = None,
) -> DeepgramSentimentAnalysis:
    """
    Falls back to text-only segmentation when the payload lacks utterances;
    transcripts under 50 non-blank characters get the empty analysis.
    """
    if not transcript or len(transcript.strip()) < MIN_TRANSCRIPT_CHARS:
        logger.warning("Insufficient transcript for sentiment analysis (%d chars)", len((transcript or "").strip()))
        return empty_sentiment_analysis(call_metadata)

    payload = parse_deepgram_response(deepgram_response)
    segments = segment(transcript, payload.utterances, payload.words)

    metrics = score_speakers(segments, payload.sentiment_segments)
    agent_text = segments.text_for(SpeakerRole.AGENT)
    customer_text = segments.text_for(SpeakerRole.CUSTOMER)
    agent_insights = build_agent_insights(agent_text, metrics)
    prospect_insights = build_prospect_insights(customer_text, metrics)

    quality = compute_call_quality(
        metrics,
        agent_profanity=agent_insights.profanity_detected,
        prospect_profanity=prospect_insights.profanity_detected,
    )
    logger.info(
        "Sentiment analysis via %s: call quality %d (agent sentiment %d, prospect sentiment %d)",
        segments.method.value,
        quality,
        metrics.general_sentiment.agent,
        metrics.general_sentiment.customer,
    )

    return DeepgramSentimentAnalysis(
        metrics=metrics,
        agent_insights=agent_insights,
        prospect_insights=prospect_insights,
        overall_call_quality=quality,
        conversation_flow=summarize_turn_taking(payload.utterances),
        topics=payload.topics,
        intents=payload.intents,
        call_metadata=dict(call_metadata or {}),
    )
