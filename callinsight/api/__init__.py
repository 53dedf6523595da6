from .payloads import (
    CoachingRequest,
    ImprovementPlanRequest,
    ProspectNameRequest,
    SentimentRequest,
    TranscriptRequest,
    VocalyticsRequest,
)
from .router import router

__all__ = [
    "CoachingRequest",
    "ImprovementPlanRequest",
    "ProspectNameRequest",
    "SentimentRequest",
    "TranscriptRequest",
    "VocalyticsRequest",
    "router",
]
