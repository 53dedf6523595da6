"""Tests for the weighted aggregate scores."""

import pytest

from callinsight.schemas import CommunicationFlow, SentimentMetrics, SpeakerScores, VocalMetrics, VocalQuality
from callinsight.scoring import (
    CALL_QUALITY_WEIGHTS,
    VOCALYTICS_WEIGHTS,
    balance_score,
    comparison_metrics,
    compute_call_quality,
    compute_vocalytics_score,
    filler_words_score,
    industry_comparison,
    interruption_score,
    speaking_rate_score,
)


def _uniform_metrics(value: int) -> SentimentMetrics:
    scores = SpeakerScores(agent=value, customer=value)
    return SentimentMetrics(
        empathy=scores,
        engagement_and_clarity=scores,
        enthusiasm=scores,
        general_sentiment=scores,
        politeness_level=scores,
    )


@pytest.mark.parametrize("weights", [VOCALYTICS_WEIGHTS, CALL_QUALITY_WEIGHTS])
def test_weights_sum_to_one(weights):
    assert abs(sum(weights.values()) - 1.0) < 1e-9


class TestComponentScores:
    """Tests for the 0-100 component scores."""

    @pytest.mark.parametrize("wpm, expected", [(150, 100.0), (130, 80.0), (100, 0.0), (200, 10.0)])
    def test_speaking_rate(self, wpm, expected):
        assert speaking_rate_score(wpm) == expected

    def test_balance(self):
        assert balance_score(60) == 100.0
        assert balance_score(50) == 80.0

    def test_fillers_and_interruptions(self):
        assert filler_words_score(2) == 70.0
        assert interruption_score(6) == 0.0


class TestVocalyticsScore:
    def test_breakdown_lists_every_component_and_total(self):
        score, breakdown = compute_vocalytics_score(VocalMetrics(), VocalQuality(), CommunicationFlow())
        assert set(breakdown) == set(VOCALYTICS_WEIGHTS) | {"total"}
        assert score == 28.0
        assert breakdown["total"] == score

    def test_perfect_inputs(self):
        metrics = VocalMetrics(speaking_rate=150, speech_clarity=100)
        quality = VocalQuality(confidence=100, professionalism=100, empathy=100)
        score, _ = compute_vocalytics_score(metrics, quality, CommunicationFlow(conversation_balance=60))
        assert score == 100.0


class TestCallQuality:
    """Tests for the agent/prospect blended call quality."""

    def test_perfect_call(self):
        assert compute_call_quality(_uniform_metrics(100)) == 100

    def test_profanity_penalties(self):
        metrics = _uniform_metrics(100)
        assert compute_call_quality(metrics, agent_profanity=True) == 80
        assert compute_call_quality(metrics, agent_profanity=True, prospect_profanity=True) == 70

    def test_floor_at_zero(self):
        assert compute_call_quality(_uniform_metrics(0), agent_profanity=True) == 0


class TestIndustryComparison:
    def test_needs_improvement(self):
        comparison = industry_comparison(VocalMetrics(), VocalQuality())
        assert comparison.percentile == 25
        assert comparison.ranking == "Needs Improvement"

    def test_excellent(self):
        quality = VocalQuality(confidence=100, professionalism=100, clarity=100)
        comparison = industry_comparison(VocalMetrics(speech_clarity=100), quality)
        assert (comparison.percentile, comparison.ranking) == (90, "Excellent")

    def test_average(self):
        quality = VocalQuality(confidence=50, professionalism=50, clarity=50)
        comparison = industry_comparison(VocalMetrics(speech_clarity=50, filler_word_rate=15.0), quality)
        assert (comparison.percentile, comparison.ranking) == (50, "Average")


@pytest.mark.parametrize("overall, team, best", [(90.0, 85.0, 90.0), (50.0, 70.0, 85.0)])
def test_comparison_metrics(overall, team, best):
    metrics = comparison_metrics(overall)
    assert metrics.industry_benchmark == 75.0
    assert metrics.team_average == team
    assert metrics.personal_best == best
