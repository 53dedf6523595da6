"""Tests for vocal coaching text, speaker insights and the LLM-score coaching plan."""

import pytest

from callinsight.coaching import (
    GENERAL_RECOMMENDATIONS,
    INSIGHTS_FALLBACK,
    analyze_prospect_behavior,
    build_agent_insights,
    build_prospect_insights,
    detect_profanity,
    empty_voice_coaching,
    generate_agent_coaching,
    generate_agent_context,
    generate_coaching_insights,
    generate_improvement_plan,
    generate_vocal_insights,
    generate_vocal_recommendations,
    generate_voice_coaching,
    keyword_empathy_score,
)
from callinsight.schemas import (
    AgentPerformance,
    CallPerformanceRecord,
    ResourceType,
    SentimentMetrics,
    SpeakerScores,
    VocalMetrics,
    VocalQuality,
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


def _record(overall, communication, problem_solving, product_knowledge, customer_service):
    return CallPerformanceRecord(
        overall_score=overall,
        agent_performance=AgentPerformance(
            communication_skills=communication,
            problem_solving=problem_solving,
            product_knowledge=product_knowledge,
            customer_service=customer_service,
        ),
    )


class TestVocalInsights:
    """Tests for threshold-driven vocal insight text."""

    def test_mid_band_values_fall_back(self):
        metrics = VocalMetrics(
            speaking_rate=130,
            filler_word_count=5,
            interruption_count=2,
            speech_clarity=80,
            energy_level=70,
        )
        quality = VocalQuality(confidence=75, empathy=60, professionalism=70)
        assert generate_vocal_insights(metrics, quality) == [INSIGHTS_FALLBACK]

    def test_fast_speaker(self):
        insights = generate_vocal_insights(VocalMetrics(speaking_rate=200), VocalQuality())
        assert insights[0].startswith("Speaking rate is 200 WPM - consider slowing down")

    def test_recommendations_end_with_general_advice(self):
        recommendations = generate_vocal_recommendations(VocalMetrics(speaking_rate=200), VocalQuality())
        assert recommendations[0].startswith("Practice speaking at 140-170 words per minute")
        assert recommendations[-2:] == list(GENERAL_RECOMMENDATIONS)

    def test_strong_speaker_gets_only_general_advice(self):
        metrics = VocalMetrics(speaking_rate=150, speech_clarity=90, energy_level=80, speech_rhythm=80, breath_control=80)
        quality = VocalQuality(confidence=80, empathy=70, professionalism=80)
        assert generate_vocal_recommendations(metrics, quality) == list(GENERAL_RECOMMENDATIONS)


class TestVoiceCoaching:
    def test_zero_metrics(self):
        coaching = generate_voice_coaching(VocalMetrics(), VocalQuality())
        assert "Excellent control of filler words and speech flow" in coaching.strengths
        assert "Excellent listening skills with no interruptions" in coaching.strengths
        assert "Speaking rate too slow (0 WPM)" in coaching.weaknesses
        assert coaching.industry_comparison.ranking == "Needs Improvement"

    def test_empty_coaching_uses_fallbacks(self):
        coaching = empty_voice_coaching()
        assert len(coaching.strengths) == 1
        assert len(coaching.practice_exercises) == 1
        assert coaching.industry_comparison.ranking == "Not Rated"


class TestSpeakerInsights:
    """Tests for agent and prospect narrative text."""

    def test_strong_agent_gets_fallback_coaching(self):
        coaching = generate_agent_coaching("I understand, let me help you.", _uniform_metrics(100))
        assert coaching.startswith("The agent demonstrates good communication skills.")

    def test_weak_agent_gets_targeted_coaching(self):
        coaching = generate_agent_coaching("", _uniform_metrics(0))
        assert "actively listening" in coaching
        assert "open-ended questions" in coaching
        assert "products and eligibility requirements" not in coaching

    def test_knowledge_gap_is_flagged(self):
        coaching = generate_agent_coaching("Honestly I don't know.", _uniform_metrics(100))
        assert "products and eligibility requirements" in coaching

    def test_agent_context(self):
        context = generate_agent_context("I understand", _uniform_metrics(100))
        assert context.startswith("The agent maintains a generally positive and professional sentiment")
        assert context.endswith("and demonstrates good product knowledge.")

    def test_prospect_behavior(self):
        analysis = analyze_prospect_behavior("I'm not interested, I already have a plan.", _uniform_metrics(0))
        assert analysis.communication_style == "Direct communication"
        assert "References existing solutions" in analysis.behavioral_patterns
        assert "Expresses disinterest" in analysis.behavioral_patterns
        assert analysis.weaknesses == ["Low enthusiasm level", "Negative sentiment indicators"]

    def test_prospect_never_gets_coaching(self):
        insights = build_prospect_insights("This is a damn mess.", _uniform_metrics(50))
        assert insights.coaching == ""
        assert insights.profanity_detected is True
        assert insights.profanity_count == 1

    def test_agent_insights_have_coaching(self):
        insights = build_agent_insights("Thank you for calling.", _uniform_metrics(50))
        assert insights.coaching
        assert insights.profanity_detected is False


@pytest.mark.parametrize(
    "text, expected",
    [("what the hell, damn it", (True, 2)), ("a classic assessment", (False, 0)), ("", (False, 0))],
)
def test_detect_profanity(text, expected):
    assert detect_profanity(text) == expected


class TestCoachingInsights:
    """Tests for coaching from LLM performance scores."""

    def test_keyword_empathy(self):
        assert keyword_empathy_score("") == 5
        assert keyword_empathy_score("I understand, sorry, I appreciate your concern") == 9
        assert keyword_empathy_score("That's impossible, no way, I can't and won't") == 1

    def test_strong_agent(self):
        performance = AgentPerformance(communication_skills=8, problem_solving=8, product_knowledge=8)
        insights = generate_coaching_insights("Thank you, I understand.", performance)
        assert insights.coaching_score == 75
        assert len(insights.positive_points) == 4
        assert insights.improvement_areas == ["Continue maintaining current standards"]
        assert [tip.title for tip in insights.actionable_tips] == ["Enhance Empathy Expression"]
        assert [r.type for r in insights.learning_resources] == [ResourceType.VIDEO]
        assert insights.specific_feedback.empathy.score == 6

    def test_weak_agent(self):
        performance = AgentPerformance(communication_skills=5, problem_solving=5, product_knowledge=5)
        insights = generate_coaching_insights("", performance)
        assert insights.coaching_score == 50
        assert insights.positive_points == ["Completed the call professionally"]
        assert len(insights.improvement_areas) == 4
        assert len(insights.actionable_tips) == 3
        assert len(insights.learning_resources) == 3


class TestImprovementPlan:
    """Tests for the multi-call improvement plan."""

    def test_no_records(self):
        plan = generate_improvement_plan([])
        assert plan.current_score == 0.0
        assert plan.target_score == 1.5
        assert plan.estimated_improvement == "+1.5"
        assert len(plan.priority_areas) == 3

    def test_priorities_are_weakest_areas(self):
        plan = generate_improvement_plan([_record(6, 5, 8, 4, 9), _record(7, 7, 8, 6, 9)])
        assert plan.current_score == 6.5
        assert plan.target_score == 8.0
        assert plan.estimated_improvement == "+1.5"
        assert plan.priority_areas == [
            "Product Knowledge & Technical Skills",
            "Communication Skills & Clarity",
            "Problem-Solving Methodology",
        ]
        assert [m.week for m in plan.milestones] == [2, 4, 8, 12]
        assert plan.timeframe == "12 weeks"

    def test_target_capped_at_ten(self):
        plan = generate_improvement_plan([_record(9.5, 9, 9, 9, 9)])
        assert plan.target_score == 10.0
        assert plan.estimated_improvement == "+0.5"
