from .analyzer import analyze_deepgram_sentiment, empty_sentiment_analysis, score_speakers

__all__ = ["analyze_deepgram_sentiment", "empty_sentiment_analysis", "score_speakers"]
