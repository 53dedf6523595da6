"""Request shapes for the analysis API."""

from typing import Any

from pydantic import BaseModel, Field

from callinsight.schemas import AgentPerformance, CallPerformanceRecord, NameExtractionOptions, TranscriptInput


class VocalyticsRequest(TranscriptInput):
    call_id: str | None = None  # optional; derived from the inputs if missing


class SentimentRequest(BaseModel):
    """Transcript plus the raw provider response, passed through as-is."""

    transcript: str = ""
    deepgram_response: dict[str, Any] | None = None
    call_metadata: dict[str, Any] = Field(default_factory=dict)


class ProspectNameRequest(BaseModel):
    transcript: str = ""
    options: NameExtractionOptions | None = None


class TranscriptRequest(BaseModel):
    transcript: str = ""


class CoachingRequest(BaseModel):
    transcript: str
    agent_performance: AgentPerformance


class ImprovementPlanRequest(BaseModel):
    records: list[CallPerformanceRecord] = Field(default_factory=list)
