"""Vocalytics report: per-speaker delivery metrics, quality, events, coaching, overall score."""

from pydantic import BaseModel, Field

from callinsight.schemas.contract import CommunicationFlow, SegmentationMethod, SpeechPatternEvent


class VocalMetrics(BaseModel):
    """Timing- and text-derived delivery metrics for one speaker role."""

    speaking_rate: int = 0  # words per minute of speaking time
    pause_frequency: float = 0.0  # pauses per minute of call
    average_pause_length: float = 0.0
    speech_clarity: int = 0
    volume_consistency: int = 0
    tonal_variation: int = 0
    filler_word_count: int = 0
    filler_word_rate: float = 0.0  # per minute of speaking time
    interruption_count: int = 0
    overtalking_duration: int = 0
    energy_level: int = 0
    speech_rhythm: int = 0
    articulation_clarity: int = 0
    breath_control: int = 0
    pacing_consistency: int = 0
    emotional_stability: int = 0


class VocalQuality(BaseModel):
    clarity: int = 0
    confidence: int = 0
    enthusiasm: int = 0
    professionalism: int = 0
    empathy: int = 0
    assertiveness: int = 0


class IndustryComparison(BaseModel):
    percentile: int = 0
    ranking: str = "Not Rated"


class VoiceCoaching(BaseModel):
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    specific_recommendations: list[str] = Field(default_factory=list)
    practice_exercises: list[str] = Field(default_factory=list)
    industry_comparison: IndustryComparison = Field(default_factory=IndustryComparison)


class RealTimeMetrics(BaseModel):
    """Parallel series, one entry per non-empty 5-second window."""

    timestamps: list[float] = Field(default_factory=list)
    confidence_scores: list[int] = Field(default_factory=list)
    energy_levels: list[int] = Field(default_factory=list)
    speaking_rates: list[int] = Field(default_factory=list)
    sentiment_scores: list[int] = Field(default_factory=list)


class ComparisonMetrics(BaseModel):
    industry_benchmark: float = 75.0
    team_average: float = 70.0
    personal_best: float = 85.0


class VocalyticsReport(BaseModel):
    """One call → this structure. Built fresh per analysis, never mutated."""

    call_id: str
    duration: float = 0.0
    segmentation_method: SegmentationMethod = SegmentationMethod.NONE
    agent_speaker: int | str | None = None
    agent_metrics: VocalMetrics = Field(default_factory=VocalMetrics)
    customer_metrics: VocalMetrics = Field(default_factory=VocalMetrics)
    agent_vocal_quality: VocalQuality = Field(default_factory=VocalQuality)
    customer_vocal_quality: VocalQuality = Field(default_factory=VocalQuality)
    speech_patterns: list[SpeechPatternEvent] = Field(default_factory=list)
    communication_flow: CommunicationFlow = Field(default_factory=CommunicationFlow)
    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    overall_score: float = 0.0
    score_breakdown: dict[str, float] = Field(default_factory=dict)
    comparison_metrics: ComparisonMetrics = Field(default_factory=ComparisonMetrics)
    voice_coaching: VoiceCoaching = Field(default_factory=VoiceCoaching)
    real_time_metrics: RealTimeMetrics | None = None
