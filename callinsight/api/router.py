"""Analysis API: run the heuristic analyzers in-process on a posted transcript."""

from fastapi import APIRouter, HTTPException

from callinsight.api.payloads import (
    CoachingRequest,
    ImprovementPlanRequest,
    ProspectNameRequest,
    SentimentRequest,
    TranscriptRequest,
    VocalyticsRequest,
)
from callinsight.coaching import generate_coaching_insights, generate_improvement_plan
from callinsight.config import get_settings
from callinsight.names import extract_prospect_name, get_extraction_stats
from callinsight.schemas import (
    CoachingInsights,
    DeepgramSentimentAnalysis,
    ExtractionStats,
    ImprovementPlan,
    NameExtractionOptions,
    NameExtractionResult,
    VocalyticsReport,
)
from callinsight.sentiment import analyze_deepgram_sentiment
from callinsight.vocalytics import analyze_vocalytics
from callinsight.workers import normalize_transcript, normalize_utterances, redact_phone_numbers

router = APIRouter(prefix="/analysis", tags=["analysis"])


def _clean(transcript: str) -> str:
    """Normalize, then redact phone numbers when configured."""
    text = normalize_transcript(transcript)
    if get_settings().redact_phones:
        text = redact_phone_numbers(text)
    return text


@router.post("/vocalytics", response_model=VocalyticsReport)
def vocalytics(payload: VocalyticsRequest) -> VocalyticsReport:
    """Transcript (+ words, utterances) → full vocal report."""
    utterances = normalize_utterances(payload.utterances)
    if get_settings().redact_phones:
        utterances = [u.model_copy(update={"text": redact_phone_numbers(u.text)}) for u in utterances]
    return analyze_vocalytics(
        _clean(payload.transcript),
        payload.words,
        utterances,
        call_id=payload.call_id,
    )


@router.post("/sentiment", response_model=DeepgramSentimentAnalysis)
def sentiment(payload: SentimentRequest) -> DeepgramSentimentAnalysis:
    """Transcript + provider response → agent/prospect sentiment, insights and call quality."""
    return analyze_deepgram_sentiment(
        _clean(payload.transcript),
        payload.deepgram_response,
        payload.call_metadata,
    )


@router.post("/prospect-name", response_model=NameExtractionResult)
def prospect_name(payload: ProspectNameRequest) -> NameExtractionResult:
    """Best prospect name; empty result (is_valid false) when none is found."""
    options = payload.options or NameExtractionOptions(minimum_confidence=get_settings().name_min_confidence)
    return extract_prospect_name(normalize_transcript(payload.transcript), options)


@router.post("/prospect-name/stats", response_model=ExtractionStats)
def prospect_name_stats(payload: TranscriptRequest) -> ExtractionStats:
    return get_extraction_stats(normalize_transcript(payload.transcript))


@router.post("/coaching", response_model=CoachingInsights)
def coaching(payload: CoachingRequest) -> CoachingInsights:
    """LLM agent-performance scores + transcript → coaching insights."""
    transcript = normalize_transcript(payload.transcript)
    if not transcript:
        raise HTTPException(status_code=400, detail="transcript required")
    return generate_coaching_insights(transcript, payload.agent_performance)


@router.post("/improvement-plan", response_model=ImprovementPlan)
def improvement_plan(payload: ImprovementPlanRequest) -> ImprovementPlan:
    """Several scored calls → 12-week improvement plan."""
    return generate_improvement_plan(payload.records)
