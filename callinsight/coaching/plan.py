"""
Agent coaching from LLM performance scores (1–10 scale).
Single call → CoachingInsights; several calls → 12-week ImprovementPlan.
"""

import logging

from callinsight.schemas import (
    ActionableTip,
    AgentPerformance,
    CallPerformanceRecord,
    CoachingInsights,
    FeedbackItem,
    ImprovementPlan,
    LearningResource,
    Milestone,
    ResourceType,
    SpecificFeedback,
)

logger = logging.getLogger(__name__)

EMPATHY_KEYWORDS = (
    "understand", "sorry", "apologize", "feel", "frustrating", "appreciate", "concern", "help", "support", "care",
)
NEGATIVE_KEYWORDS = ("can't", "won't", "impossible", "no way", "not possible")
EMPATHY_BASELINE = 5

TARGET_UPLIFT = 1.5
MAX_SCORE = 10.0
PRIORITY_AREA_COUNT = 3

AREA_LABELS = {
    "communication": "Communication Skills & Clarity",
    "problem_solving": "Problem-Solving Methodology",
    "product_knowledge": "Product Knowledge & Technical Skills",
    "customer_service": "Customer Service Excellence",
}

WEEKLY_GOALS = [
    "Complete 3 practice scenarios focusing on your priority areas",
    "Review and reflect on 2 previous calls each week",
    "Implement 1 new technique learned from coaching feedback",
    "Achieve 10% improvement in lowest-scoring performance area",
]

LEARNING_PATH = [
    "Week 1-2: Foundation Skills Assessment & Basic Improvements",
    "Week 3-4: Advanced Communication Techniques",
    "Week 5-6: Problem-Solving Mastery",
    "Week 7-8: Product Knowledge Enhancement",
    "Week 9-10: Integration & Advanced Scenarios",
    "Week 11-12: Performance Review & Goal Setting",
]

MILESTONES = [
    (2, "Complete initial skills assessment", ["Baseline performance established", "Priority areas identified"]),
    (4, "Show improvement in communication", ["Communication score +0.5", "Customer satisfaction feedback"]),
    (8, "Demonstrate problem-solving mastery", ["Problem-solving score +1.0", "First-call resolution rate +10%"]),
    (12, "Achieve target performance level", ["Overall score improvement", "Consistent high performance"]),
]


def keyword_empathy_score(transcript: str) -> int:
    """5 + empathy keywords present − negative phrases present, kept within 1–10."""
    text = transcript.lower()
    positive = sum(1 for word in EMPATHY_KEYWORDS if word in text)
    negative = sum(1 for word in NEGATIVE_KEYWORDS if word in text)
    return min(10, max(1, EMPATHY_BASELINE + positive - negative))


def generate_coaching_insights(transcript: str, performance: AgentPerformance) -> CoachingInsights:
    text = transcript.lower()
    communication = performance.communication_skills
    empathy = keyword_empathy_score(transcript)
    problem_solving = performance.problem_solving
    product_knowledge = performance.product_knowledge

    coaching_score = round((communication + empathy + problem_solving + product_knowledge) / 4 * 10)

    positives = []
    if communication >= 8:
        positives.append("Excellent communication clarity and professionalism")
    if empathy >= 7:
        positives.append("Demonstrated strong empathy and understanding")
    if problem_solving >= 8:
        positives.append("Effective problem-solving approach")
    if "thank" in text:
        positives.append("Good use of courtesy and appreciation")
    if "understand" in text:
        positives.append("Showed active listening and understanding")

    areas = []
    if communication < 7:
        areas.append("Communication clarity and structure")
    if empathy < 6:
        areas.append("Empathy and emotional connection with customers")
    if problem_solving < 7:
        areas.append("Problem-solving methodology and efficiency")
    if product_knowledge < 7:
        areas.append("Product knowledge and technical expertise")

    tips = []
    if communication < 8:
        tips.append(
            ActionableTip(
                title="Improve Communication Structure",
                description="Use the STAR method (Situation, Task, Action, Result) to structure your responses",
                example="Let me understand the situation first, then I'll walk you through the solution step by step.",
            )
        )
    if empathy < 7:
        tips.append(
            ActionableTip(
                title="Enhance Empathy Expression",
                description="Acknowledge customer emotions before jumping into solutions",
                example="I can understand how frustrating this must be for you. Let me help resolve this right away.",
            )
        )
    if problem_solving < 8:
        tips.append(
            ActionableTip(
                title="Systematic Problem Solving",
                description="Follow a structured approach: Listen → Clarify → Diagnose → Solve → Confirm",
                example="Let me make sure I understand the issue correctly before we proceed with the solution.",
            )
        )

    resources = []
    if communication < 8:
        resources.append(
            LearningResource(
                title="Effective Communication in Customer Service",
                description="Learn advanced communication techniques for better customer interactions",
                type=ResourceType.COURSE,
            )
        )
    if empathy < 7:
        resources.append(
            LearningResource(
                title="Building Customer Empathy",
                description="Develop emotional intelligence and empathy skills",
                type=ResourceType.VIDEO,
            )
        )
    if product_knowledge < 8:
        resources.append(
            LearningResource(
                title="Product Knowledge Deep Dive",
                description="Comprehensive training on product features and troubleshooting",
                type=ResourceType.COURSE,
            )
        )

    feedback = SpecificFeedback(
        communication=FeedbackItem(
            score=communication,
            feedback="Excellent communication skills demonstrated"
            if communication >= 8
            else "Focus on clearer, more structured communication",
        ),
        empathy=FeedbackItem(
            score=empathy,
            feedback="Strong empathy and customer connection"
            if empathy >= 7
            else "Work on acknowledging and validating customer emotions",
        ),
        problem_solving=FeedbackItem(
            score=problem_solving,
            feedback="Effective problem-solving approach"
            if problem_solving >= 8
            else "Develop more systematic problem-solving methodology",
        ),
        product_knowledge=FeedbackItem(
            score=product_knowledge,
            feedback="Strong product knowledge demonstrated"
            if product_knowledge >= 8
            else "Enhance product knowledge and technical expertise",
        ),
    )

    return CoachingInsights(
        coaching_score=coaching_score,
        positive_points=positives or ["Completed the call professionally"],
        improvement_areas=areas or ["Continue maintaining current standards"],
        actionable_tips=tips,
        learning_resources=resources,
        specific_feedback=feedback,
    )


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def generate_improvement_plan(records: list[CallPerformanceRecord]) -> ImprovementPlan:
    """Priorities are the three weakest averaged areas; ties keep the listed area order."""
    if not records:
        logger.info("Improvement plan requested with no call records; using zero averages")

    average = _mean([r.overall_score for r in records])
    areas = {
        "communication": _mean([r.agent_performance.communication_skills for r in records]),
        "problem_solving": _mean([r.agent_performance.problem_solving for r in records]),
        "product_knowledge": _mean([r.agent_performance.product_knowledge for r in records]),
        "customer_service": _mean([r.agent_performance.customer_service for r in records]),
    }
    weakest = sorted(areas, key=areas.get)[:PRIORITY_AREA_COUNT]

    current = round(average, 1)
    target = min(MAX_SCORE, round(average + TARGET_UPLIFT, 1))

    return ImprovementPlan(
        current_score=current,
        target_score=target,
        timeframe="12 weeks",
        estimated_improvement=f"+{target - current:.1f}",
        priority_areas=[AREA_LABELS[area] for area in weakest],
        weekly_goals=list(WEEKLY_GOALS),
        learning_path=list(LEARNING_PATH),
        milestones=[Milestone(week=w, goal=g, metrics=list(m)) for w, g, m in MILESTONES],
    )
