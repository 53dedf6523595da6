"""
Role identification for diarized calls.
Diarization ids are arbitrary; the speaker who sounds most like an agent
(professional language, questions, empathy, conversational control, volume) is the agent.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from callinsight.schemas import SpeakerRole, Utterance

logger = logging.getLogger(__name__)

PROFESSIONAL_PATTERNS = [
    re.compile(p, re.I)
    for p in (
        r"thank you for calling",
        r"benefits center",
        r"my name is",
        r"\blicensed\b",
        r"\bcoordinator\b",
        r"\bspecialist\b",
        r"\bprequalified\b",
        r"\bcoverage\b",
        r"\bpolicy\b",
        r"\bpremium\b",
        r"what state",
        r"zip code",
        r"date of birth",
        r"how can i help",
        r"let me assist",
    )
]

QUESTION_PATTERNS = [
    re.compile(r"\?"),
    re.compile(r"^\s*(what|how|when|where|why|who|do you|are you|would you|can you|could you)\b", re.I),
    re.compile(r"may i ask", re.I),
    re.compile(r"can you tell me", re.I),
    re.compile(r"would you like", re.I),
]

EMPATHY_PATTERNS = [
    re.compile(p, re.I)
    for p in (
        r"\bi understand\b",
        r"\bi see\b",
        r"that makes sense",
        r"i hear you",
        r"\bi appreciate\b",
        r"thank you for\b",
        r"\bi'm sorry\b",
        r"\bi apologize\b",
    )
]

CONTROL_PATTERNS = [
    re.compile(p, re.I)
    for p in (
        r"\blet me\b",
        r"\bi'll\b",
        r"\bwe can\b",
        r"\bi can help\b",
        r"what i'll do",
        r"here's what",
        r"the next step",
    )
]

PROFESSIONAL_WEIGHT = 3
QUESTION_WEIGHT = 2
EMPATHY_WEIGHT = 1.5
CONTROL_WEIGHT = 2
WORD_BONUS = 5  # agents usually talk more
WORD_BONUS_THRESHOLD = 100
DURATION_BONUS = 3
DURATION_BONUS_THRESHOLD = 60  # seconds


def _count(patterns: list[re.Pattern], text: str) -> int:
    return sum(len(p.findall(text)) for p in patterns)


@dataclass
class SpeakerRoleScore:
    speaker: int | str | None
    utterance_count: int = 0
    total_words: int = 0
    total_duration: float = 0.0
    professional: int = 0
    questions: int = 0
    empathy: int = 0
    control: int = 0

    def add(self, utterance: Utterance) -> None:
        text = utterance.text
        self.utterance_count += 1
        self.total_words += len(text.split())
        if utterance.end is not None:
            self.total_duration += max(0.0, utterance.end - utterance.start)
        self.professional += _count(PROFESSIONAL_PATTERNS, text)
        self.questions += _count(QUESTION_PATTERNS, text)
        self.empathy += _count(EMPATHY_PATTERNS, text)
        self.control += _count(CONTROL_PATTERNS, text)

    @property
    def score(self) -> float:
        return (
            self.professional * PROFESSIONAL_WEIGHT
            + self.questions * QUESTION_WEIGHT
            + self.empathy * EMPATHY_WEIGHT
            + self.control * CONTROL_WEIGHT
            + (WORD_BONUS if self.total_words > WORD_BONUS_THRESHOLD else 0)
            + (DURATION_BONUS if self.total_duration > DURATION_BONUS_THRESHOLD else 0)
        )

    def breakdown(self) -> dict[str, Any]:
        return {
            "professional": self.professional,
            "questions": self.questions,
            "empathy": self.empathy,
            "control": self.control,
            "total_words": self.total_words,
            "total_duration": round(self.total_duration, 1),
            "score": self.score,
        }


@dataclass
class RoleAssignment:
    agent_speaker: int | str | None = None
    scores: dict[Any, SpeakerRoleScore] = field(default_factory=dict)  # first-seen order

    def role_of(self, speaker: int | str | None) -> SpeakerRole:
        if self.scores and speaker == self.agent_speaker:
            return SpeakerRole.AGENT
        return SpeakerRole.CUSTOMER

    def breakdown(self) -> dict[Any, dict[str, Any]]:
        return {speaker: s.breakdown() for speaker, s in self.scores.items()}


def identify_agent_speaker(utterances: list[Utterance]) -> RoleAssignment:
    """
    Score every distinct speaker id; the highest score is the agent.
    Ties go to the speaker encountered first.
    """
    scores: dict[Any, SpeakerRoleScore] = {}
    for utterance in utterances:
        if utterance.speaker not in scores:
            scores[utterance.speaker] = SpeakerRoleScore(speaker=utterance.speaker)
        scores[utterance.speaker].add(utterance)

    if not scores:
        return RoleAssignment()

    best: SpeakerRoleScore | None = None
    for candidate in scores.values():
        if best is None or candidate.score > best.score:
            best = candidate

    logger.debug("Agent speaker %r (score %.1f) among %d speakers", best.speaker, best.score, len(scores))
    return RoleAssignment(agent_speaker=best.speaker, scores=scores)
