"""
Analysis contract: one transcript in, one report out.
Every analyzer reads the input shapes below and writes into the result shapes.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_WORD_CONFIDENCE = 0.8


class SpeakerRole(str, Enum):
    AGENT = "agent"
    CUSTOMER = "customer"


class PatternType(str, Enum):
    QUESTION = "question"
    STATEMENT = "statement"
    EXCLAMATION = "exclamation"
    PAUSE = "pause"
    FILLER = "filler"
    INTERRUPTION = "interruption"


class SegmentationMethod(str, Enum):
    UTTERANCES = "utterances"
    SPEAKER_LABELS = "speaker_labels"
    ROLE_LABELS = "role_labels"
    SENTENCES = "sentences"
    NONE = "none"


# --- Transcription input (provider output shapes) ---


class Word(BaseModel):
    """One recognized word, offsets in seconds from call start."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(validation_alias=AliasChoices("text", "punctuated_word", "word"))
    start: float = 0.0
    end: float = 0.0
    confidence: float = Field(default=DEFAULT_WORD_CONFIDENCE, ge=0, le=1)
    speaker: int | str | None = None

    @field_validator("confidence", mode="before")
    @classmethod
    def default_confidence(cls, value):
        # Providers send null or 0 when they have no estimate.
        if value in (None, "", 0):
            return DEFAULT_WORD_CONFIDENCE
        return value


class Utterance(BaseModel):
    """A diarized speech turn. `speaker` is an arbitrary provider id."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(default="", validation_alias=AliasChoices("text", "transcript"))
    start: float = 0.0
    end: float | None = None
    speaker: int | str | None = None
    confidence: float = Field(default=DEFAULT_WORD_CONFIDENCE, ge=0, le=1)

    @field_validator("confidence", mode="before")
    @classmethod
    def default_confidence(cls, value):
        # Providers send null or 0 when they have no estimate.
        if value in (None, "", 0):
            return DEFAULT_WORD_CONFIDENCE
        return value


class SentimentSegment(BaseModel):
    text: str = ""
    sentiment: str = "neutral"
    sentiment_score: float | None = None


class TranscriptInput(BaseModel):
    transcript: str = ""
    words: list[Word] = Field(default_factory=list)
    utterances: list[Utterance] = Field(default_factory=list)


# --- Segmentation ---


class SpeechSegment(BaseModel):
    """Speaker-attributed stretch of speech. Built once per run, never mutated."""

    model_config = ConfigDict(frozen=True)

    text: str
    speaker_role: SpeakerRole
    start: float = 0.0
    duration: float = 0.0
    confidence: float = DEFAULT_WORD_CONFIDENCE

    @property
    def end(self) -> float:
        return self.start + self.duration

    @property
    def word_count(self) -> int:
        return len(self.text.split())


class SpeakerSegments(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_segments: list[SpeechSegment] = Field(default_factory=list)
    customer_segments: list[SpeechSegment] = Field(default_factory=list)
    method: SegmentationMethod = SegmentationMethod.NONE
    agent_speaker: int | str | None = None

    def timeline(self) -> list[SpeechSegment]:
        """All segments ordered by start offset; ties keep agent-first order."""
        return sorted(self.agent_segments + self.customer_segments, key=lambda s: s.start)

    def text_for(self, role: SpeakerRole) -> str:
        segments = self.agent_segments if role == SpeakerRole.AGENT else self.customer_segments
        return " ".join(s.text for s in segments if s.text)

    @property
    def is_empty(self) -> bool:
        return not self.agent_segments and not self.customer_segments


# --- Scores and events ---


class SpeakerScores(BaseModel):
    agent: int = Field(default=0, ge=0, le=100)
    customer: int = Field(default=0, ge=0, le=100)


class SpeechPatternEvent(BaseModel):
    id: str
    timestamp: float
    duration: float
    speaker_role: SpeakerRole
    pattern_type: PatternType
    confidence: float = Field(ge=0, le=1)
    text_snippet: str = ""


class CommunicationFlow(BaseModel):
    total_turns: int = 0
    average_turn_length: float = 0.0
    longest_monologue: float = 0.0
    shortest_response: float = 0.0
    response_time_variability: float = 0.0
    conversation_balance: int = 50  # agent share of speaking time, 50 = even
