"""
Prospect name extraction.
Map free text → ranked name candidates → the most likely non-agent name.
Trigger phrases match case-insensitively; the name itself must be capitalized.
"""

import logging
import re
from dataclasses import dataclass

from callinsight.schemas import ExtractionStats, NameExtractionOptions, NameExtractionResult

logger = logging.getLogger(__name__)

# One capitalized name word: "John", "O'Brien", "Mary-Jane"
_NAME_WORD = r"[A-Z](?:[a-z]+|'[A-Z][a-z]+)(?:-[A-Z][a-z]+)?"


def _name(max_words: int) -> str:
    if max_words == 1:
        return rf"(?P<name>{_NAME_WORD})"
    return rf"(?P<name>{_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{0,{max_words - 1}}})"


_TITLE = r"(?P<title>(?i:mrs|mr|ms|dr|miss))\.?"


@dataclass(frozen=True)
class NamePattern:
    method: str
    confidence: float
    regex: re.Pattern


# Ordered by confidence; every pattern runs, nothing short-circuits.
NAME_PATTERNS = [
    NamePattern("self_introduction", 0.95, re.compile(rf"\b(?i:my name is|i'm|i am|this is)\s+{_name(3)}")),
    NamePattern("call_me", 0.90, re.compile(rf"\b(?i:you can call me|call me)\s+{_name(2)}")),
    NamePattern("formal_title", 0.85, re.compile(rf"\b{_TITLE}\s+{_name(2)}")),
    NamePattern("greeting_title", 0.80, re.compile(rf"\b(?i:hello|hi)\s+{_TITLE}\s+{_name(1)}")),
    NamePattern(
        "customer_identification",
        0.80,
        re.compile(rf"\b(?i:customer|caller|prospect)\s+(?i:is|named)\s+{_name(2)}"),
    ),
    NamePattern("speaking_with", 0.75, re.compile(rf"\b(?i:speaking with|calling for|this is)\s+{_name(2)}")),
    NamePattern("thank_you", 0.70, re.compile(rf"\b(?i:thank you|thanks),?\s+{_name(1)}")),
    NamePattern("contact_context", 0.70, re.compile(rf"\b(?i:phone number|contact)\s+for\s+{_name(2)}")),
    NamePattern("help_context", 0.65, re.compile(rf"\b(?i:help|assist)\s+{_name(2)}")),
    NamePattern("phone_context", 0.65, re.compile(rf"\b{_name(2)}\s+(?i:at|phone|number)\b")),
    NamePattern("question_context", 0.60, re.compile(rf"\b{_name(1)},?\s+(?i:how can|what can|may i)\b")),
]

NON_NAME_WORDS = frozenset(
    {
        "hello", "hi", "hey", "yes", "no", "ok", "okay", "right", "sure", "thanks", "thank",
        "speaking", "calling", "help", "assist", "customer", "service", "support", "agent",
        "representative", "mr", "mrs", "ms", "dr", "miss", "sir", "madam", "my", "your", "our",
        "the", "this", "that", "there", "here", "what", "how", "we", "you", "it", "good", "great",
        "well", "so", "just", "not", "sorry", "please",
    }
)
VALID_NAME = re.compile(r"^[A-Za-z\s'-]+$")

# {name} is substituted with the escaped, lower-cased candidate.
AGENT_INDICATORS = (
    r"(?:my name is|this is|i'm|i am) {name}\b.*(?:how can i help|how may i help|may i assist|representative|from)",
    r"this is {name} from",
    r"{name} speaking.*(?:how may i|how can i|customer service|support)",
)
CUSTOMER_INDICATORS = (
    r"help {name}\b",
    r"{name}\b.*calling about",
    r"this is {name}\b.*i need",
    r"{name}\b.*looking for",
)


def validate_name(name: str) -> bool:
    """Letters, spaces, apostrophes and hyphens only; at least two letters; not a conversational word."""
    if not name or len(name) < 2:
        return False
    if not VALID_NAME.match(name):
        return False
    if name.strip().lower() in NON_NAME_WORDS:
        return False
    return len(re.sub(r"\s", "", name)) >= 2


def clean_name(name: str) -> str:
    return " ".join(part[:1].upper() + part[1:] for part in name.split())


def _title(raw: str | None) -> str:
    return raw.capitalize() if raw else ""


def _result(raw_name: str, confidence: float, method: str, title: str = "") -> NameExtractionResult:
    full_name = clean_name(raw_name)
    parts = full_name.split()
    return NameExtractionResult(
        full_name=full_name,
        first_name=parts[0] if parts else "",
        last_name=" ".join(parts[1:]),
        title=title,
        confidence=confidence,
        extraction_method=method,
        is_valid=validate_name(full_name),
    )


def extract_candidates(transcript: str) -> list[NameExtractionResult]:
    """Every match of every pattern, in pattern order then text order."""
    candidates = []
    for pattern in NAME_PATTERNS:
        for match in pattern.regex.finditer(transcript):
            groups = match.groupdict()
            candidates.append(
                _result(groups["name"], pattern.confidence, pattern.method, _title(groups.get("title")))
            )
    return candidates


def is_likely_customer(candidate: NameExtractionResult, transcript: str) -> bool:
    """
    Agent co-occurrence patterns reject; customer patterns accept;
    otherwise accept when the name first appears in the first half of the transcript.
    """
    lower = transcript.lower()
    name = re.escape(candidate.full_name.lower())
    if not name:
        return False

    for template in AGENT_INDICATORS:
        if re.search(template.format(name=name), lower):
            return False
    for template in CUSTOMER_INDICATORS:
        if re.search(template.format(name=name), lower):
            return True
    return candidate.full_name.lower() in lower[: len(lower) // 2]


def _rank(candidates: list[NameExtractionResult]) -> list[NameExtractionResult]:
    # Stable: equal confidence keeps discovery order.
    return sorted(candidates, key=lambda c: -c.confidence)


def extract_prospect_name(
    transcript: str,
    options: NameExtractionOptions | None = None,
) -> NameExtractionResult:
    """
    Best prospect name, or the empty result.
    Filters: confidence ≥ minimum → valid name → (if preferring customers) not the agent.
    """
    opts = options or NameExtractionOptions()
    if not transcript or not transcript.strip():
        return NameExtractionResult.empty()

    candidates = [c for c in extract_candidates(transcript) if c.confidence >= opts.minimum_confidence]
    if opts.validate_names:
        candidates = [c for c in candidates if c.is_valid]

    if opts.prefer_customer_names:
        customers = [c for c in candidates if is_likely_customer(c, transcript)]
        if opts.include_agent_names:
            others = [c for c in candidates if c not in customers]
            candidates = _rank(customers) + _rank(others)
        else:
            candidates = _rank(customers)
    else:
        candidates = _rank(candidates)

    if not candidates:
        logger.info("No prospect name found in transcript (%d chars)", len(transcript))
        return NameExtractionResult.empty()

    best = candidates[0]
    logger.debug("Prospect name %r via %s (%.2f)", best.full_name, best.extraction_method, best.confidence)
    return best


def extract_all_prospect_candidates(transcript: str) -> list[NameExtractionResult]:
    """Valid, customer-attributed candidates, highest confidence first."""
    if not transcript or not transcript.strip():
        return []
    return _rank(
        [c for c in extract_candidates(transcript) if c.is_valid and is_likely_customer(c, transcript)]
    )


def get_extraction_stats(transcript: str) -> ExtractionStats:
    all_candidates = extract_candidates(transcript) if transcript else []
    valid = [c for c in all_candidates if c.is_valid]
    customers = [c for c in valid if is_likely_customer(c, transcript)]
    best = extract_prospect_name(transcript)
    return ExtractionStats(
        total_candidates=len(all_candidates),
        valid_candidates=len(valid),
        customer_candidates=len(customers),
        best_candidate=best if best.is_valid else None,
        all_candidates=all_candidates,
    )
