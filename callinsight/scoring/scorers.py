"""
Lexical scorers. Each is a pure function of one speaker's text (and role) and
returns an int clamped to 0–100. Blank text scores 0.
"""

from typing import Iterable

from callinsight.schemas import SentimentSegment, SpeakerRole
from callinsight.scoring.lexicon import (
    AGENT_QUESTION_BONUS,
    ASSERTIVENESS_BASE,
    ASSERTIVENESS_RULES,
    CAPS_WORD,
    CLARITY_BASE,
    CLARITY_RULES,
    CONFIDENCE_BASE,
    CONFIDENCE_RULES,
    CUSTOMER_QUESTION_BONUS,
    EMPATHY_BASE,
    EMPATHY_RULES,
    ENGAGEMENT_BAND,
    ENGAGEMENT_BAND_BONUS,
    ENGAGEMENT_BASE,
    ENGAGEMENT_RULES,
    ENGAGEMENT_TOO_LONG,
    ENGAGEMENT_TOO_SHORT,
    ENTHUSIASM_BASE,
    ENTHUSIASM_CAPS_WEIGHT,
    ENTHUSIASM_EXCLAMATION_WEIGHT,
    ENTHUSIASM_RULES,
    EXCLAMATION_MARK,
    FILLER_RATIO_PENALTY,
    FILLER_RULES,
    POLITENESS_BASE,
    POLITENESS_RULES,
    PROFESSIONALISM_BASE,
    PROFESSIONALISM_RULES,
    QUESTION_MARK,
    SENTENCE_SPLIT,
    SENTIMENT_BASE,
    SENTIMENT_LABEL_DEFAULT,
    SENTIMENT_LABEL_VALUES,
    SENTIMENT_MATCH_PREFIX,
    SENTIMENT_RULES,
    VOCAL_EMPATHY_BASE,
    VOCAL_EMPATHY_RULES,
    VOCAL_ENTHUSIASM_BASE,
    VOCAL_ENTHUSIASM_CAPS_WEIGHT,
    VOCAL_ENTHUSIASM_EXCLAMATION_WEIGHT,
    VOCAL_ENTHUSIASM_RULES,
    count_table,
    score_table,
)


def clamp_score(value: float) -> int:
    return max(0, min(100, round(value)))


def _role(is_agent: bool) -> SpeakerRole:
    return SpeakerRole.AGENT if is_agent else SpeakerRole.CUSTOMER


def average_sentence_length(text: str) -> float:
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    if not sentences:
        return 0.0
    return sum(len(s.split()) for s in sentences) / len(sentences)


# --- Role-aware scorers (ScoreSet metrics) ---


def score_empathy(text: str, is_agent: bool) -> int:
    """Empathy phrases, emotional acknowledgment and 'you/we' language; dismissive words subtract."""
    if not text.strip():
        return 0
    role = _role(is_agent)
    return clamp_score(EMPATHY_BASE[role] + score_table(text.lower(), EMPATHY_RULES[role]))


def score_engagement_clarity(text: str, is_agent: bool, utterance_count: int = 0) -> int:
    """
    Rewards an optimal words-per-utterance band, penalizes the filler-word ratio,
    rewards customer questions (and an agent who asks more than two).
    """
    if not text.strip():
        return 0
    role = _role(is_agent)
    lower = text.lower()
    word_count = len(text.split())
    per_utterance = word_count / utterance_count if utterance_count > 0 else word_count

    score = float(ENGAGEMENT_BASE)
    low, high = ENGAGEMENT_BAND[role]
    short_limit, short_penalty = ENGAGEMENT_TOO_SHORT[role]
    if low < per_utterance < high:
        score += ENGAGEMENT_BAND_BONUS[role]
    elif per_utterance < short_limit:
        score += short_penalty
    elif role in ENGAGEMENT_TOO_LONG and per_utterance > ENGAGEMENT_TOO_LONG[role][0]:
        score += ENGAGEMENT_TOO_LONG[role][1]

    filler_ratio = count_table(lower, FILLER_RULES) / max(word_count, 1)
    score -= filler_ratio * FILLER_RATIO_PENALTY

    questions = len(QUESTION_MARK.findall(text))
    if not is_agent:
        score += questions * CUSTOMER_QUESTION_BONUS
    elif questions > 2:
        score += AGENT_QUESTION_BONUS

    score += score_table(lower, ENGAGEMENT_RULES)
    return clamp_score(score)


def score_enthusiasm(text: str, is_agent: bool) -> int:
    if not text.strip():
        return 0
    score = ENTHUSIASM_BASE[_role(is_agent)] + score_table(text.lower(), ENTHUSIASM_RULES)
    score += len(EXCLAMATION_MARK.findall(text)) * ENTHUSIASM_EXCLAMATION_WEIGHT
    score += len(CAPS_WORD.findall(text)) * ENTHUSIASM_CAPS_WEIGHT
    return clamp_score(score)


def score_general_sentiment(
    text: str,
    is_agent: bool,
    sentiment_segments: Iterable[SentimentSegment] = (),
) -> int:
    """
    Keyword tally on top of a baseline. When provider sentiment segments overlap
    this speaker's text (leading-substring match), their mean label value becomes the baseline.
    """
    if not text.strip():
        return 0
    lower = text.lower()
    score = float(SENTIMENT_BASE)

    relevant = [
        seg for seg in sentiment_segments
        if seg.text and seg.text.lower()[:SENTIMENT_MATCH_PREFIX] in lower
    ]
    if relevant:
        values = [SENTIMENT_LABEL_VALUES.get(seg.sentiment, SENTIMENT_LABEL_DEFAULT) for seg in relevant]
        score = sum(values) / len(values) * 100

    score += score_table(lower, SENTIMENT_RULES[_role(is_agent)])
    return clamp_score(score)


def score_politeness(text: str, is_agent: bool) -> int:
    if not text.strip():
        return 0
    return clamp_score(POLITENESS_BASE[_role(is_agent)] + score_table(text.lower(), POLITENESS_RULES))


# --- Vocal quality scorers (role-independent) ---


def score_confidence(text: str) -> int:
    if not text.strip():
        return 0
    return clamp_score(CONFIDENCE_BASE + score_table(text.lower(), CONFIDENCE_RULES))


def score_vocal_enthusiasm(text: str) -> int:
    if not text.strip():
        return 0
    score = VOCAL_ENTHUSIASM_BASE + score_table(text.lower(), VOCAL_ENTHUSIASM_RULES)
    score += len(EXCLAMATION_MARK.findall(text)) * VOCAL_ENTHUSIASM_EXCLAMATION_WEIGHT
    score += len(CAPS_WORD.findall(text)) * VOCAL_ENTHUSIASM_CAPS_WEIGHT
    return clamp_score(score)


def score_professionalism(text: str) -> int:
    if not text.strip():
        return 0
    return clamp_score(PROFESSIONALISM_BASE + score_table(text.lower(), PROFESSIONALISM_RULES))


def score_vocal_empathy(text: str) -> int:
    if not text.strip():
        return 0
    return clamp_score(VOCAL_EMPATHY_BASE + score_table(text.lower(), VOCAL_EMPATHY_RULES))


def score_assertiveness(text: str) -> int:
    if not text.strip():
        return 0
    return clamp_score(ASSERTIVENESS_BASE + score_table(text.lower(), ASSERTIVENESS_RULES))


def score_clarity(text: str) -> int:
    """Filler words subtract; average sentence length inside 5–20 words adds, under 3 subtracts."""
    if not text.strip():
        return 0
    score = CLARITY_BASE + score_table(text.lower(), CLARITY_RULES)
    avg_len = average_sentence_length(text)
    if 5 < avg_len < 20:
        score += 10
    if avg_len < 3:
        score -= 15
    return clamp_score(score)
