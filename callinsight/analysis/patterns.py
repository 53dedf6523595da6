"""
Speech pattern events: questions, fillers, interruptions, exclamations and inter-turn pauses,
located on the call timeline.
"""

import logging
import re

from callinsight.schemas import PatternType, SpeakerSegments, SpeechPatternEvent, SpeechSegment
from callinsight.scoring.lexicon import FILLER_WORDS, INTERRUPTION_RULES, term_pattern

logger = logging.getLogger(__name__)

LEADING_QUESTION_WORD = re.compile(
    r"^\s*(what|how|when|where|why|who|which|can|could|would|will|do|does|is|are)\b", re.I
)
FILLER_PATTERNS = [(word, re.compile(term_pattern(word).pattern, re.I)) for word in FILLER_WORDS]
EXCLAMATION_WORDS = re.compile(r"\b(wow|oh|ah|really|amazing|fantastic|terrible)\b", re.I)

QUESTION_SNIPPET = 50
EXCLAMATION_SNIPPET = 30
MAX_QUESTION_DURATION = 3.0
FILLER_DURATION = 0.5
MARKER_DURATION = 1.0
PAUSE_THRESHOLD = 1.0  # seconds of silence between adjacent turns

# Detection confidence, 0–1
QUESTION_MARK_CONFIDENCE = 0.95
QUESTION_WORD_CONFIDENCE = 0.75
FILLER_CONFIDENCE = 0.98
INTERRUPTION_CONFIDENCE = 0.9
EXCLAMATION_MARK_CONFIDENCE = 0.95
EXCLAMATION_WORD_CONFIDENCE = 0.8
PAUSE_CONFIDENCE = 0.85


def _snippet(text: str, limit: int) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def _event(
    segment: SpeechSegment,
    pattern_type: PatternType,
    confidence: float,
    snippet: str,
    *,
    timestamp: float | None = None,
    duration: float = MARKER_DURATION,
) -> SpeechPatternEvent:
    # ids are assigned once the timeline is sorted
    return SpeechPatternEvent(
        id="",
        timestamp=segment.start if timestamp is None else timestamp,
        duration=duration,
        speaker_role=segment.speaker_role,
        pattern_type=pattern_type,
        confidence=confidence,
        text_snippet=snippet,
    )


def _segment_events(segment: SpeechSegment) -> list[SpeechPatternEvent]:
    text = segment.text
    events = []

    has_mark = "?" in text
    if has_mark or LEADING_QUESTION_WORD.match(text):
        events.append(
            _event(
                segment,
                PatternType.QUESTION,
                QUESTION_MARK_CONFIDENCE if has_mark else QUESTION_WORD_CONFIDENCE,
                _snippet(text, QUESTION_SNIPPET),
                duration=min(segment.duration, MAX_QUESTION_DURATION),
            )
        )

    for word, pattern in FILLER_PATTERNS:
        for match in pattern.finditer(text):
            offset = match.start() / len(text) * segment.duration
            events.append(
                _event(
                    segment,
                    PatternType.FILLER,
                    FILLER_CONFIDENCE,
                    word,
                    timestamp=segment.start + offset,
                    duration=FILLER_DURATION,
                )
            )

    lower = text.lower()
    for rule in INTERRUPTION_RULES:
        if rule.hits(lower):
            events.append(_event(segment, PatternType.INTERRUPTION, INTERRUPTION_CONFIDENCE, "Interruption detected"))

    has_bang = "!" in text
    if has_bang or EXCLAMATION_WORDS.search(text):
        events.append(
            _event(
                segment,
                PatternType.EXCLAMATION,
                EXCLAMATION_MARK_CONFIDENCE if has_bang else EXCLAMATION_WORD_CONFIDENCE,
                _snippet(text, EXCLAMATION_SNIPPET),
            )
        )
    return events


def _pause_events(timeline: list[SpeechSegment]) -> list[SpeechPatternEvent]:
    events = []
    for current, following in zip(timeline, timeline[1:]):
        gap = following.start - current.end
        if gap > PAUSE_THRESHOLD:
            events.append(
                _event(
                    current,
                    PatternType.PAUSE,
                    PAUSE_CONFIDENCE,
                    f"{gap:.1f}s pause",
                    timestamp=current.end,
                    duration=gap,
                )
            )
    return events


def extract_speech_patterns(segments: SpeakerSegments | list[SpeechSegment]) -> list[SpeechPatternEvent]:
    """Events for every segment plus pauses between adjacent turns, ordered by timestamp."""
    if isinstance(segments, SpeakerSegments):
        timeline = segments.timeline()
    else:
        timeline = sorted(segments, key=lambda s: s.start)

    events = []
    for segment in timeline:
        if segment.text:
            events.extend(_segment_events(segment))
    events.extend(_pause_events(timeline))

    events.sort(key=lambda e: e.timestamp)
    ordered = [e.model_copy(update={"id": f"pattern_{i}"}) for i, e in enumerate(events)]
    logger.debug("Extracted %d speech pattern events from %d segments", len(ordered), len(timeline))
    return ordered
