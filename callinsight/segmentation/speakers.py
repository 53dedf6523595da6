"""
Speaker segmentation: raw transcript (+ optional utterances / words) → agent and customer segments.

Priority: provider utterances → "Speaker N:" lines → role-labelled lines → sentence heuristics.
Word timings, when present, refine the segments' offsets and confidence.
"""

import logging
import re

from callinsight.schemas import (
    SegmentationMethod,
    SpeakerRole,
    SpeakerSegments,
    SpeechSegment,
    Utterance,
    Word,
)
from callinsight.segmentation.roles import identify_agent_speaker

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 150
DEFAULT_UTTERANCE_SECONDS = 5.0
LINE_SPACING_SECONDS = 5.0
SENTENCE_SPACING_SECONDS = 3.0
LABELLED_LINE_CONFIDENCE = 0.9
SENTENCE_CONFIDENCE = 0.7
WORD_TIMING_TOLERANCE = 0.05  # seconds

AGENT_LABEL = re.compile(
    r"^\s*(agent|representative|rep|support|operator|assistant|advisor|specialist)\s*:", re.I
)
CUSTOMER_LABEL = re.compile(r"^\s*(customer|caller|client|user|prospect)\s*:", re.I)
SPEAKER_ID_LABEL = re.compile(r"^\s*speaker\s*(\d+)\s*:\s*", re.I)
ANY_LABEL = re.compile(r"^\s*\w+\s*:\s*")

AGENT_LINE_PHRASES = re.compile(r"thank you for calling|how can i help|my name is|i can assist", re.I)
CUSTOMER_LINE_PHRASES = re.compile(r"\b(hello|hi|i need|i have a problem|i'm calling about)\b", re.I)

SENTENCE_SPLIT = re.compile(r"[.!?]+")
AGENT_SENTENCE_PHRASES = (
    "thank you for calling",
    "how can i help",
    "i can assist",
    "let me check",
    "i understand",
    "i apologize",
    "is there anything else",
    "have a great day",
    "my name is",
    "i'll be happy to",
    "let me transfer",
    "please hold",
)
PROFESSIONAL_INDICATORS = (
    "certainly",
    "absolutely",
    "of course",
    "i'd be happy to",
    "please",
    "sir",
    "madam",
    "may i",
    "would you like",
)


def estimate_duration(text: str) -> float:
    """Seconds to speak `text` at 150 words per minute."""
    return len(text.split()) / WORDS_PER_MINUTE * 60


def _split(segments: list[SpeechSegment]) -> tuple[list[SpeechSegment], list[SpeechSegment]]:
    agent = [s for s in segments if s.speaker_role == SpeakerRole.AGENT]
    customer = [s for s in segments if s.speaker_role == SpeakerRole.CUSTOMER]
    return agent, customer


def _words_within(words: list[Word], start: float, end: float) -> list[Word]:
    return [
        w for w in words
        if w.start >= start - WORD_TIMING_TOLERANCE and w.end <= end + WORD_TIMING_TOLERANCE
    ]


def _refine_with_words(segment: SpeechSegment, words: list[Word]) -> SpeechSegment:
    if not words:
        return segment
    start = words[0].start
    return segment.model_copy(
        update={
            "start": start,
            "duration": max(0.0, words[-1].end - start),
            "confidence": sum(w.confidence for w in words) / len(words),
        }
    )


def _align_to_words(
    segments: list[SpeechSegment],
    words: list[Word],
    skipped: list[int] | None = None,
) -> list[SpeechSegment]:
    """
    Walk the word stream in order, giving each estimated segment the timings of its words.
    skipped[i] is the number of words spoken on dropped lines just before segment i.
    """
    if not words:
        return segments
    skipped = skipped or [0] * len(segments)
    aligned = []
    cursor = 0
    for segment, skip in zip(segments, skipped):
        cursor += skip
        n = segment.word_count
        chunk = words[cursor:cursor + n]
        if n == 0 or len(chunk) < n:
            aligned.append(segment)
            continue
        cursor += n
        aligned.append(_refine_with_words(segment, chunk))
    return aligned


# --- Method 1: diarized utterances ---


def _segments_from_utterances(
    utterances: list[Utterance],
    words: list[Word],
) -> tuple[list[SpeechSegment], int | str | None]:
    assignment = identify_agent_speaker(utterances)
    segments = []
    for utterance in utterances:
        end = utterance.end if utterance.end is not None else utterance.start + DEFAULT_UTTERANCE_SECONDS
        segment = SpeechSegment(
            text=utterance.text.strip(),
            speaker_role=assignment.role_of(utterance.speaker),
            start=utterance.start,
            duration=max(0.0, end - utterance.start),
            confidence=utterance.confidence,
        )
        segments.append(_refine_with_words(segment, _words_within(words, utterance.start, end)))
    return segments, assignment.agent_speaker


def _utterances_from_speaker_lines(lines: list[str]) -> list[Utterance]:
    """'Speaker 0: ...' lines become pseudo-utterances; unlabelled lines continue the previous turn."""
    turns: list[tuple[str, str]] = []
    for line in lines:
        match = SPEAKER_ID_LABEL.match(line)
        if match:
            turns.append((match.group(1), line[match.end():].strip()))
        elif turns:
            speaker, text = turns[-1]
            turns[-1] = (speaker, f"{text} {line.strip()}".strip())

    utterances = []
    for index, (speaker, text) in enumerate(turns):
        start = index * LINE_SPACING_SECONDS
        utterances.append(
            Utterance(
                text=text,
                start=start,
                end=start + estimate_duration(text),
                speaker=int(speaker),
                confidence=LABELLED_LINE_CONFIDENCE,
            )
        )
    return utterances


# --- Method 2: role-labelled lines ---


def classify_line(line: str) -> SpeakerRole | None:
    """Explicit label first, then agent phrases, then customer phrases; None when unmarked."""
    if AGENT_LABEL.match(line):
        return SpeakerRole.AGENT
    if CUSTOMER_LABEL.match(line):
        return SpeakerRole.CUSTOMER
    if AGENT_LINE_PHRASES.search(line):
        return SpeakerRole.AGENT
    if CUSTOMER_LINE_PHRASES.search(line):
        return SpeakerRole.CUSTOMER
    return None


def strip_label(line: str) -> str:
    return ANY_LABEL.sub("", line, count=1).strip()


def _segments_from_labelled_lines(lines: list[str]) -> tuple[list[SpeechSegment], list[int]]:
    """Segments for role-marked lines, plus the dropped-line word count preceding each."""
    segments = []
    skipped = []
    pending = 0
    for index, line in enumerate(lines):
        role = classify_line(line)
        text = strip_label(line)
        if role is None or not text:
            pending += len(text.split())
            continue
        skipped.append(pending)
        pending = 0
        segments.append(
            SpeechSegment(
                text=text,
                speaker_role=role,
                start=index * LINE_SPACING_SECONDS,
                duration=estimate_duration(text),
                confidence=LABELLED_LINE_CONFIDENCE,
            )
        )
    return segments, skipped


# --- Method 3: sentence heuristics ---


def agent_phrase_score(text: str) -> int:
    lower = text.lower()
    return (
        sum(2 for phrase in AGENT_SENTENCE_PHRASES if phrase in lower)
        + sum(1 for phrase in PROFESSIONAL_INDICATORS if phrase in lower)
    )


def _segments_from_sentences(transcript: str) -> list[SpeechSegment]:
    sentences = [s.strip() for s in SENTENCE_SPLIT.split(transcript) if s.strip()]
    return [
        SpeechSegment(
            text=sentence,
            speaker_role=SpeakerRole.AGENT if agent_phrase_score(sentence) > 0 else SpeakerRole.CUSTOMER,
            start=index * SENTENCE_SPACING_SECONDS,
            duration=estimate_duration(sentence),
            confidence=SENTENCE_CONFIDENCE,
        )
        for index, sentence in enumerate(sentences)
    ]


def segment(
    transcript: str,
    utterances: list[Utterance] | None = None,
    words: list[Word] | None = None,
) -> SpeakerSegments:
    """Split a transcript into ordered agent and customer segments. Never raises on empty input."""
    words = words or []
    spoken = [u for u in (utterances or []) if u.text.strip()]
    agent_speaker = None

    if spoken:
        method = SegmentationMethod.UTTERANCES
        segments, agent_speaker = _segments_from_utterances(spoken, words)
    else:
        lines = [line for line in (transcript or "").splitlines() if line.strip()]
        pseudo = _utterances_from_speaker_lines(lines) if any(SPEAKER_ID_LABEL.match(line) for line in lines) else []
        skipped = None
        if pseudo:
            method = SegmentationMethod.SPEAKER_LABELS
            segments, agent_speaker = _segments_from_utterances(pseudo, [])
            # lines before the first "Speaker N:" belong to no turn
            leading = 0
            for line in lines:
                if SPEAKER_ID_LABEL.match(line):
                    break
                leading += len(line.split())
            skipped = [leading] + [0] * (len(segments) - 1)
        else:
            method = SegmentationMethod.ROLE_LABELS
            segments, skipped = _segments_from_labelled_lines(lines)
        if not segments:
            method = SegmentationMethod.SENTENCES
            segments = _segments_from_sentences(transcript or "")
            skipped = None
        segments = _align_to_words(segments, words, skipped)

    if not segments:
        method = SegmentationMethod.NONE

    agent, customer = _split(segments)
    logger.debug(
        "Segmented by %s: %d agent / %d customer segments", method.value, len(agent), len(customer)
    )
    return SpeakerSegments(
        agent_segments=agent,
        customer_segments=customer,
        method=method,
        agent_speaker=agent_speaker,
    )
