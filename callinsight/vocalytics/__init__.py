from .pipeline import analyze_vocalytics, call_duration, empty_report, make_call_id

__all__ = ["analyze_vocalytics", "call_duration", "empty_report", "make_call_id"]
