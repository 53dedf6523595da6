"""
Per-speaker vocal metrics and vocal quality.
Timing comes from segments; word confidences (restricted to the speaker's own
segment windows) refine clarity and volume consistency.
"""

import logging

from callinsight.schemas import SpeechSegment, VocalMetrics, VocalQuality, Word
from callinsight.scoring import (
    score_assertiveness,
    score_breath_control,
    score_clarity,
    score_confidence,
    score_emotional_stability,
    score_energy,
    score_pacing,
    score_professionalism,
    score_rhythm,
    score_tonal_variation,
    score_vocal_empathy,
    score_vocal_enthusiasm,
)
from callinsight.scoring.lexicon import INTERRUPTION_RULES, METRIC_FILLER_WORDS, count_table, rules

logger = logging.getLogger(__name__)

METRIC_FILLER_RULES = rules(METRIC_FILLER_WORDS, 1, "filler")

MIN_PAUSE_GAP = 0.5  # seconds
DEFAULT_PAUSE_LENGTH = 1.5
FILLER_CLARITY_PENALTY = 3
CLARITY_TEXT_SHARE = 0.7
CLARITY_CONFIDENCE_SHARE = 0.3
DEFAULT_VOLUME_CONSISTENCY = 75
MIN_VOLUME_CONSISTENCY = 50
VOLUME_VARIANCE_PENALTY = 200
OVERTALK_SECONDS_PER_INTERRUPTION = 2
WORD_TIMING_TOLERANCE = 0.05


def words_in_segments(segments: list[SpeechSegment], words: list[Word]) -> list[Word]:
    """Words whose timing falls inside any of the given segments."""
    windows = [(s.start - WORD_TIMING_TOLERANCE, s.end + WORD_TIMING_TOLERANCE) for s in segments]
    return [w for w in words if any(lo <= w.start and w.end <= hi for lo, hi in windows)]


def _joined(segments: list[SpeechSegment]) -> str:
    return " ".join(s.text for s in segments)


def _pauses(segments: list[SpeechSegment]) -> float:
    gaps = [b.start - a.end for a, b in zip(segments, segments[1:])]
    gaps = [g for g in gaps if g > MIN_PAUSE_GAP]
    return round(sum(gaps) / len(gaps), 1) if gaps else DEFAULT_PAUSE_LENGTH


def calculate_vocal_metrics(
    segments: list[SpeechSegment],
    total_duration: float,
    words: list[Word] | None = None,
) -> VocalMetrics:
    """All-zero metrics when the speaker never spoke."""
    if not segments:
        return VocalMetrics()

    words = words_in_segments(segments, words or [])
    text = _joined(segments)
    lower = text.lower()

    total_words = sum(s.word_count for s in segments)
    speaking_time = sum(s.duration for s in segments)
    speaking_rate = round(total_words / speaking_time * 60) if speaking_time > 0 else 0

    filler_count = count_table(lower, METRIC_FILLER_RULES)
    filler_rate = round(filler_count / speaking_time * 60, 1) if speaking_time > 0 else 0.0

    pause_frequency = 0.0
    if len(segments) > 1 and total_duration > 0:
        pause_frequency = round((len(segments) - 1) / (total_duration / 60), 1)
    average_pause = _pauses(segments)

    speech_clarity = float(max(0, 100 - filler_count * FILLER_CLARITY_PENALTY))
    volume_consistency = float(DEFAULT_VOLUME_CONSISTENCY)
    if words:
        confidences = [w.confidence for w in words]
        mean_confidence = sum(confidences) / len(confidences)
        speech_clarity = speech_clarity * CLARITY_TEXT_SHARE + mean_confidence * 100 * CLARITY_CONFIDENCE_SHARE
        variance = sum((c - mean_confidence) ** 2 for c in confidences) / len(confidences)
        volume_consistency = max(MIN_VOLUME_CONSISTENCY, 100 - variance * VOLUME_VARIANCE_PENALTY)
    speech_clarity = round(speech_clarity)
    volume_consistency = round(volume_consistency)

    tonal_variation = score_tonal_variation(text)
    interruptions = sum(count_table(s.text.lower(), INTERRUPTION_RULES) for s in segments)

    metrics = VocalMetrics(
        speaking_rate=speaking_rate,
        pause_frequency=pause_frequency,
        average_pause_length=average_pause,
        speech_clarity=speech_clarity,
        volume_consistency=volume_consistency,
        tonal_variation=tonal_variation,
        filler_word_count=filler_count,
        filler_word_rate=filler_rate,
        interruption_count=interruptions,
        overtalking_duration=interruptions * OVERTALK_SECONDS_PER_INTERRUPTION,
        energy_level=score_energy(text, speaking_rate, filler_rate),
        speech_rhythm=score_rhythm([s.duration for s in segments], pause_frequency, speaking_rate),
        articulation_clarity=round((speech_clarity + volume_consistency) / 2),
        breath_control=score_breath_control(text, pause_frequency, average_pause),
        pacing_consistency=score_pacing([s.word_count for s in segments], speaking_rate),
        emotional_stability=score_emotional_stability(text, tonal_variation),
    )
    logger.debug(
        "Vocal metrics: %d wpm, %d fillers, clarity %d over %d segments",
        speaking_rate,
        filler_count,
        speech_clarity,
        len(segments),
    )
    return metrics


def analyze_vocal_quality(segments: list[SpeechSegment]) -> VocalQuality:
    if not segments:
        return VocalQuality()
    text = _joined(segments)
    return VocalQuality(
        clarity=score_clarity(text),
        confidence=score_confidence(text),
        enthusiasm=score_vocal_enthusiasm(text),
        professionalism=score_professionalism(text),
        empathy=score_vocal_empathy(text),
        assertiveness=score_assertiveness(text),
    )
