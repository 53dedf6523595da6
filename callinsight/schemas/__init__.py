from .coaching import (
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
from .contract import (
    CommunicationFlow,
    PatternType,
    SegmentationMethod,
    SentimentSegment,
    SpeakerRole,
    SpeakerScores,
    SpeakerSegments,
    SpeechPatternEvent,
    SpeechSegment,
    TranscriptInput,
    Utterance,
    Word,
)
from .deepgram import (
    DeepgramPayload,
    coerce_sentiment_segments,
    coerce_utterances,
    coerce_words,
    parse_deepgram_response,
)
from .names import ExtractionStats, NameExtractionOptions, NameExtractionResult
from .report import (
    ComparisonMetrics,
    IndustryComparison,
    RealTimeMetrics,
    VocalMetrics,
    VocalQuality,
    VocalyticsReport,
    VoiceCoaching,
)
from .sentiment import (
    ConversationFlowSummary,
    DeepgramSentimentAnalysis,
    DetailedAnalysis,
    SentimentMetrics,
    SpeakerInsights,
)

__all__ = [
    "ActionableTip",
    "AgentPerformance",
    "CallPerformanceRecord",
    "CoachingInsights",
    "CommunicationFlow",
    "ComparisonMetrics",
    "ConversationFlowSummary",
    "DeepgramPayload",
    "DeepgramSentimentAnalysis",
    "DetailedAnalysis",
    "ExtractionStats",
    "FeedbackItem",
    "ImprovementPlan",
    "IndustryComparison",
    "LearningResource",
    "Milestone",
    "NameExtractionOptions",
    "NameExtractionResult",
    "PatternType",
    "RealTimeMetrics",
    "ResourceType",
    "SegmentationMethod",
    "SentimentMetrics",
    "SentimentSegment",
    "SpeakerInsights",
    "SpeakerRole",
    "SpeakerScores",
    "SpeakerSegments",
    "SpecificFeedback",
    "SpeechPatternEvent",
    "SpeechSegment",
    "TranscriptInput",
    "Utterance",
    "VocalMetrics",
    "VocalQuality",
    "VocalyticsReport",
    "VoiceCoaching",
    "Word",
    "coerce_sentiment_segments",
    "coerce_utterances",
    "coerce_words",
    "parse_deepgram_response",
]
