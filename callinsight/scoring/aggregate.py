"""
Aggregate scores. Business-first, no ML: fixed-weight linear formulas, explainable breakdowns.

Vocalytics (0–100): speech clarity 20 + confidence 15 + professionalism 15 + empathy 10
+ speaking rate 10 + filler words 10 + conversation balance 10 + interruptions 10 (%).
Call quality (0–100): agent 70% / prospect 30% of a five-metric weighted mean, minus profanity penalties.
"""

from callinsight.schemas import (
    CommunicationFlow,
    ComparisonMetrics,
    IndustryComparison,
    SentimentMetrics,
    VocalMetrics,
    VocalQuality,
)

VOCALYTICS_WEIGHTS: dict[str, float] = {
    "speech_clarity": 0.20,
    "confidence": 0.15,
    "professionalism": 0.15,
    "empathy": 0.10,
    "speaking_rate": 0.10,
    "filler_words": 0.10,
    "conversation_balance": 0.10,
    "interruptions": 0.10,
}

# Speaking rate (words per minute)
OPTIMAL_RATE = (140, 170)
ACCEPTABLE_RATE = (120, 190)
RATE_CENTER = 155
RATE_PENALTY_PER_WPM = 2
ACCEPTABLE_RATE_SCORE = 80

FILLER_PENALTY_PER_RATE = 15
IDEAL_BALANCE = 60  # agent share for service calls
BALANCE_PENALTY_PER_POINT = 2
INTERRUPTION_PENALTY = 20

CALL_QUALITY_WEIGHTS: dict[str, float] = {
    "empathy": 0.20,
    "engagement_and_clarity": 0.25,
    "enthusiasm": 0.15,
    "general_sentiment": 0.25,
    "politeness_level": 0.15,
}
AGENT_SHARE = 0.7
PROSPECT_SHARE = 0.3
AGENT_PROFANITY_PENALTY = 20
PROSPECT_PROFANITY_PENALTY = 10

INDUSTRY_BENCHMARK = 75.0
TEAM_AVERAGE_FLOOR = 70.0
PERSONAL_BEST_FLOOR = 85.0

# (exclusive lower bound of composite, percentile, ranking), checked top-down
INDUSTRY_BANDS = [
    (85, 90, "Excellent"),
    (75, 75, "Above Average"),
    (65, 60, "Good"),
]
BELOW_AVERAGE_LIMIT = 50


def speaking_rate_score(wpm: float) -> float:
    """140–170 → 100, 120–190 → 80, else linear penalty away from 155."""
    if OPTIMAL_RATE[0] <= wpm <= OPTIMAL_RATE[1]:
        return 100.0
    if ACCEPTABLE_RATE[0] <= wpm <= ACCEPTABLE_RATE[1]:
        return float(ACCEPTABLE_RATE_SCORE)
    return max(0.0, 100 - abs(wpm - RATE_CENTER) * RATE_PENALTY_PER_WPM)


def filler_words_score(filler_rate: float) -> float:
    return max(0.0, 100 - filler_rate * FILLER_PENALTY_PER_RATE)


def balance_score(conversation_balance: float) -> float:
    return max(0.0, 100 - abs(conversation_balance - IDEAL_BALANCE) * BALANCE_PENALTY_PER_POINT)


def interruption_score(interruptions: int) -> float:
    return max(0.0, 100.0 - interruptions * INTERRUPTION_PENALTY)


def compute_vocalytics_score(
    metrics: VocalMetrics,
    quality: VocalQuality,
    flow: CommunicationFlow,
) -> tuple[float, dict[str, float]]:
    """
    Returns (score 0–100, breakdown).
    Breakdown holds each component's 0–100 sub-score plus the rounded total.
    """
    components = {
        "speech_clarity": float(metrics.speech_clarity),
        "confidence": float(quality.confidence),
        "professionalism": float(quality.professionalism),
        "empathy": float(quality.empathy),
        "speaking_rate": speaking_rate_score(metrics.speaking_rate),
        "filler_words": filler_words_score(metrics.filler_word_rate),
        "conversation_balance": balance_score(flow.conversation_balance),
        "interruptions": interruption_score(metrics.interruption_count),
    }
    score = sum(components[name] * weight for name, weight in VOCALYTICS_WEIGHTS.items())
    score = max(0.0, min(100.0, score))

    breakdown = {name: round(value, 1) for name, value in components.items()}
    breakdown["total"] = round(score, 1)
    return round(score, 1), breakdown


def _speaker_quality(metrics: SentimentMetrics, role: str) -> float:
    score_set = metrics.as_score_set()
    return sum(getattr(score_set[name], role) * weight for name, weight in CALL_QUALITY_WEIGHTS.items())


def compute_call_quality(
    metrics: SentimentMetrics,
    *,
    agent_profanity: bool = False,
    prospect_profanity: bool = False,
) -> int:
    score = _speaker_quality(metrics, "agent") * AGENT_SHARE + _speaker_quality(metrics, "customer") * PROSPECT_SHARE
    if agent_profanity:
        score -= AGENT_PROFANITY_PENALTY
    if prospect_profanity:
        score -= PROSPECT_PROFANITY_PENALTY
    return max(0, min(100, round(score)))


def industry_comparison(metrics: VocalMetrics, quality: VocalQuality) -> IndustryComparison:
    composite = (
        quality.confidence
        + quality.professionalism
        + quality.clarity
        + min(100, metrics.speech_clarity)
        + min(100, 200 - metrics.filler_word_rate * 10)
    ) / 5
    for floor, percentile, ranking in INDUSTRY_BANDS:
        if composite > floor:
            return IndustryComparison(percentile=percentile, ranking=ranking)
    if composite < BELOW_AVERAGE_LIMIT:
        return IndustryComparison(percentile=25, ranking="Needs Improvement")
    return IndustryComparison(percentile=50, ranking="Average")


def comparison_metrics(overall_score: float) -> ComparisonMetrics:
    return ComparisonMetrics(
        industry_benchmark=INDUSTRY_BENCHMARK,
        team_average=max(TEAM_AVERAGE_FLOOR, overall_score - 5),
        personal_best=max(overall_score, PERSONAL_BEST_FLOOR),
    )

