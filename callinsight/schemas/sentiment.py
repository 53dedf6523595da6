"""Speaker sentiment analysis shapes (agent vs prospect)."""

from typing import Any

from pydantic import BaseModel, Field

from callinsight.schemas.contract import SpeakerScores

NO_DATA = "No data available"


class SentimentMetrics(BaseModel):
    """ScoreSet: each metric scored 0–100 for agent and customer."""

    empathy: SpeakerScores = Field(default_factory=SpeakerScores)
    engagement_and_clarity: SpeakerScores = Field(default_factory=SpeakerScores)
    enthusiasm: SpeakerScores = Field(default_factory=SpeakerScores)
    general_sentiment: SpeakerScores = Field(default_factory=SpeakerScores)
    politeness_level: SpeakerScores = Field(default_factory=SpeakerScores)

    def as_score_set(self) -> dict[str, SpeakerScores]:
        return {
            "empathy": self.empathy,
            "engagement_and_clarity": self.engagement_and_clarity,
            "enthusiasm": self.enthusiasm,
            "general_sentiment": self.general_sentiment,
            "politeness_level": self.politeness_level,
        }


class DetailedAnalysis(BaseModel):
    communication_style: str = "Unknown"
    strengths: list[str] = Field(default_factory=lambda: [NO_DATA])
    weaknesses: list[str] = Field(default_factory=lambda: [NO_DATA])
    behavioral_patterns: list[str] = Field(default_factory=lambda: [NO_DATA])


class SpeakerInsights(BaseModel):
    profanity_detected: bool = False
    profanity_count: int = 0
    coaching: str = ""  # agents only
    context: str = ""
    detailed_analysis: DetailedAnalysis = Field(default_factory=DetailedAnalysis)


class ConversationFlowSummary(BaseModel):
    turn_taking: float = 0.0
    interruptions: int = 0
    silences: int = 0
    overlap: int = 0


class DeepgramSentimentAnalysis(BaseModel):
    metrics: SentimentMetrics = Field(default_factory=SentimentMetrics)
    agent_insights: SpeakerInsights = Field(default_factory=SpeakerInsights)
    prospect_insights: SpeakerInsights = Field(default_factory=SpeakerInsights)
    overall_call_quality: int = 0
    conversation_flow: ConversationFlowSummary = Field(default_factory=ConversationFlowSummary)
    topics: list[str] = Field(default_factory=list)
    intents: list[str] = Field(default_factory=list)
    call_metadata: dict[str, Any] = Field(default_factory=dict)
