"""Heuristic call-center analytics: vocalytics, speaker sentiment, prospect names and coaching."""

__version__ = "0.1.0"
