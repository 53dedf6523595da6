"""Text Normalization Worker: raw transcript → clean, redacted text for analysis."""

import re
from unicodedata import normalize as unicode_normalize

from callinsight.schemas import Utterance

# 7+ digit runs allowing spaces, dots, dashes and parentheses, with an optional leading +
PHONE_NUMBER = re.compile(r"(?<![\w+])\+?\(?\d(?:[ ().-]*\d){6,14}(?!\w)")


def normalize_text(text: str) -> str:
    """
    Normalize a single line: NFC, collapse whitespace, strip.
    No fancy personalization; keep predictable.
    """
    if not text:
        return ""
    t = unicode_normalize("NFC", text)
    t = re.sub(r"\s+", " ", t)
    return t.strip()


def normalize_transcript(transcript: str) -> str:
    """Per-line normalization; line breaks survive because speaker labels depend on them."""
    if not transcript:
        return ""
    lines = (normalize_text(line) for line in transcript.splitlines())
    return "\n".join(line for line in lines if line)


def normalize_utterances(utterances: list[Utterance]) -> list[Utterance]:
    return [u.model_copy(update={"text": normalize_text(u.text)}) for u in utterances]


def redact_phone_number(phone_number: str) -> str:
    """Every digit becomes '*'."""
    if not phone_number:
        return phone_number
    return re.sub(r"\d", "*", phone_number)


def redact_phone_number_partial(phone_number: str, visible_digits: int = 4) -> str:
    """Mask all but the last `visible_digits` digits; formatting characters are kept."""
    if not phone_number:
        return phone_number
    to_redact = sum(ch.isdigit() for ch in phone_number) - visible_digits
    if to_redact <= 0:
        return phone_number

    out = []
    for ch in phone_number:
        if ch.isdigit() and to_redact > 0:
            out.append("*")
            to_redact -= 1
        else:
            out.append(ch)
    return "".join(out)


def redact_phone_numbers(text: str, visible_digits: int = 4) -> str:
    """Partially redact every phone-number-like run in free text."""
    if not text:
        return text
    return PHONE_NUMBER.sub(lambda m: redact_phone_number_partial(m.group(0), visible_digits), text)
