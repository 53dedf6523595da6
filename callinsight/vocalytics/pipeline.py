"""
Vocalytics pipeline.
Phase 1: coerce provider words/utterances → segment speakers.
Phase 2: per-speaker metrics and quality → events and flow.
Phase 3: insights, recommendations, coaching → weighted overall score.
"""

import hashlib
import json
import logging
from typing import Any

from callinsight.analysis import (
    analyze_communication_flow,
    analyze_vocal_quality,
    calculate_vocal_metrics,
    extract_speech_patterns,
    generate_real_time_metrics,
)
from callinsight.coaching import (
    GENERAL_RECOMMENDATIONS,
    INSIGHTS_FALLBACK,
    empty_voice_coaching,
    generate_vocal_insights,
    generate_vocal_recommendations,
    generate_voice_coaching,
)
from callinsight.schemas import Utterance, VocalyticsReport, Word, coerce_utterances, coerce_words
from callinsight.scoring import comparison_metrics, compute_vocalytics_score
from callinsight.segmentation import estimate_duration, segment

logger = logging.getLogger(__name__)

CALL_ID_PREFIX = "vocal_"
CALL_ID_DIGEST_LENGTH = 12


def make_call_id(transcript: str, words: list[Word], utterances: list[Utterance]) -> str:
    """Stable id derived from the inputs, so repeated runs produce identical reports."""
    payload = json.dumps(
        {
            "transcript": transcript,
            "words": [w.model_dump(mode="json") for w in words],
            "utterances": [u.model_dump(mode="json") for u in utterances],
        },
        sort_keys=True,
    )
    return CALL_ID_PREFIX + hashlib.sha1(payload.encode("utf-8")).hexdigest()[:CALL_ID_DIGEST_LENGTH]


def call_duration(transcript: str, words: list[Word], utterances: list[Utterance]) -> float:
    """Last word end, else last utterance end, else a 150 wpm estimate."""
    if words and words[-1].end > 0:
        return words[-1].end
    ends = [u.end for u in utterances if u.end is not None]
    if ends:
        return max(ends)
    return estimate_duration(transcript or "")


def empty_report(call_id: str) -> VocalyticsReport:
    return VocalyticsReport(
        call_id=call_id,
        insights=[INSIGHTS_FALLBACK],
        recommendations=list(GENERAL_RECOMMENDATIONS),
        comparison_metrics=comparison_metrics(0.0),
        voice_coaching=empty_voice_coaching(),
    )


def analyze_vocalytics(
    transcript: str,
    words: list[Word | dict[str, Any]] | None = None,
    utterances: list[Utterance | dict[str, Any]] | None = None,
    *,
    call_id: str | None = None,
) -> VocalyticsReport:
    """Full heuristic vocal report for one call. Never raises on missing or partial input."""
    transcript = transcript or ""
    words = coerce_words(words or [])
    utterances = coerce_utterances(utterances or [])
    call_id = call_id or make_call_id(transcript, words, utterances)

    if not transcript.strip() and not words and not utterances:
        logger.info("Vocalytics %s: empty input, returning empty report", call_id)
        return empty_report(call_id)

    duration = call_duration(transcript, words, utterances)
    segments = segment(transcript, utterances, words)

    agent_metrics = calculate_vocal_metrics(segments.agent_segments, duration, words)
    customer_metrics = calculate_vocal_metrics(segments.customer_segments, duration, words)
    agent_quality = analyze_vocal_quality(segments.agent_segments)
    customer_quality = analyze_vocal_quality(segments.customer_segments)

    patterns = extract_speech_patterns(segments)
    flow = analyze_communication_flow(segments.agent_segments, segments.customer_segments)

    overall, breakdown = compute_vocalytics_score(agent_metrics, agent_quality, flow)
    logger.debug("Vocalytics %s breakdown: %s", call_id, breakdown)

    report = VocalyticsReport(
        call_id=call_id,
        duration=duration,
        segmentation_method=segments.method,
        agent_speaker=segments.agent_speaker,
        agent_metrics=agent_metrics,
        customer_metrics=customer_metrics,
        agent_vocal_quality=agent_quality,
        customer_vocal_quality=customer_quality,
        speech_patterns=patterns,
        communication_flow=flow,
        insights=generate_vocal_insights(agent_metrics, agent_quality),
        recommendations=generate_vocal_recommendations(agent_metrics, agent_quality),
        overall_score=overall,
        score_breakdown=breakdown,
        comparison_metrics=comparison_metrics(overall),
        voice_coaching=generate_voice_coaching(agent_metrics, agent_quality),
        real_time_metrics=generate_real_time_metrics(words),
    )
    logger.info(
        "Vocalytics %s: score %.1f via %s (%d agent / %d customer segments)",
        call_id,
        overall,
        segments.method.value,
        len(segments.agent_segments),
        len(segments.customer_segments),
    )
    return report
