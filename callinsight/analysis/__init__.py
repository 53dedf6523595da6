from .flow import analyze_communication_flow, summarize_turn_taking
from .metrics import analyze_vocal_quality, calculate_vocal_metrics, words_in_segments
from .patterns import extract_speech_patterns
from .realtime import generate_real_time_metrics, window_sentiment

__all__ = [
    "analyze_communication_flow",
    "analyze_vocal_quality",
    "calculate_vocal_metrics",
    "extract_speech_patterns",
    "generate_real_time_metrics",
    "summarize_turn_taking",
    "window_sentiment",
    "words_in_segments",
]
