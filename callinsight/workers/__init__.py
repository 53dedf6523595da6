from .normalization import (
    normalize_text,
    normalize_transcript,
    normalize_utterances,
    redact_phone_number,
    redact_phone_number_partial,
    redact_phone_numbers,
)

__all__ = [
    "normalize_text",
    "normalize_transcript",
    "normalize_utterances",
    "redact_phone_number",
    "redact_phone_number_partial",
    "redact_phone_numbers",
]
