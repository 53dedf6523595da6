"""Coaching insights from LLM agent-performance scores, and the multi-call improvement plan."""

from enum import Enum

from pydantic import BaseModel, Field


class ResourceType(str, Enum):
    VIDEO = "video"
    ARTICLE = "article"
    COURSE = "course"
    PRACTICE = "practice"


class AgentPerformance(BaseModel):
    """Scores on a 1–10 scale, as produced by the external LLM analyzer."""

    communication_skills: float = Field(ge=0, le=10)
    problem_solving: float = Field(ge=0, le=10)
    product_knowledge: float = Field(ge=0, le=10)
    customer_service: float = Field(default=5.0, ge=0, le=10)


class ActionableTip(BaseModel):
    title: str
    description: str
    example: str | None = None


class LearningResource(BaseModel):
    title: str
    description: str
    type: ResourceType


class FeedbackItem(BaseModel):
    score: float
    feedback: str


class SpecificFeedback(BaseModel):
    communication: FeedbackItem
    empathy: FeedbackItem
    problem_solving: FeedbackItem
    product_knowledge: FeedbackItem


class CoachingInsights(BaseModel):
    coaching_score: int
    positive_points: list[str] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list)
    actionable_tips: list[ActionableTip] = Field(default_factory=list)
    learning_resources: list[LearningResource] = Field(default_factory=list)
    specific_feedback: SpecificFeedback


class CallPerformanceRecord(BaseModel):
    """One analyzed call as input to the improvement plan."""

    overall_score: float = Field(ge=0, le=10)
    agent_performance: AgentPerformance


class Milestone(BaseModel):
    week: int
    goal: str
    metrics: list[str] = Field(default_factory=list)


class ImprovementPlan(BaseModel):
    current_score: float
    target_score: float
    timeframe: str = "12 weeks"
    estimated_improvement: str
    priority_areas: list[str] = Field(default_factory=list)
    weekly_goals: list[str] = Field(default_factory=list)
    learning_path: list[str] = Field(default_factory=list)
    milestones: list[Milestone] = Field(default_factory=list)
