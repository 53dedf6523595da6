"""
Lexicon tables for the lexical scorers.
Each rule is {pattern, weight, category}; every table is compiled once at import
and scored against lower-cased text.
"""

import re
from dataclasses import dataclass

from callinsight.schemas import SpeakerRole

AGENT = SpeakerRole.AGENT
CUSTOMER = SpeakerRole.CUSTOMER


@dataclass(frozen=True)
class LexiconRule:
    pattern: re.Pattern
    weight: float
    category: str
    count_all: bool = True  # False: contributes once when present
    min_hits: int = 1  # below this many hits the rule contributes nothing

    def hits(self, text: str) -> int:
        if self.count_all:
            return sum(1 for _ in self.pattern.finditer(text))
        return 1 if self.pattern.search(text) else 0

    def score(self, text: str) -> float:
        n = self.hits(text)
        return self.weight * n if n >= self.min_hits else 0.0


def term_pattern(term: str) -> re.Pattern:
    """Word-like edges get word boundaries; punctuation tokens ("?", "...") match literally."""
    body = re.escape(term)
    if term[:1].isalnum():
        body = r"\b" + body
    if term[-1:].isalnum():
        body += r"\b"
    return re.compile(body)


def rules(
    terms: tuple[str, ...] | list[str],
    weight: float,
    category: str,
    *,
    count_all: bool = True,
    min_hits: int = 1,
) -> tuple[LexiconRule, ...]:
    return tuple(LexiconRule(term_pattern(t), weight, category, count_all, min_hits) for t in terms)


def regex_rule(pattern: str, weight: float, category: str, *, count_all: bool = False) -> LexiconRule:
    return LexiconRule(re.compile(pattern), weight, category, count_all)


def score_table(text: str, table: tuple[LexiconRule, ...]) -> float:
    return sum(rule.score(text) for rule in table)


def count_table(text: str, table: tuple[LexiconRule, ...]) -> int:
    return sum(rule.hits(text) for rule in table)


# --- Shared word lists ---

FILLER_WORDS = ("um", "uh", "like", "you know", "so", "well", "actually", "basically")
METRIC_FILLER_WORDS = FILLER_WORDS + ("right", "okay")
CLARITY_FILLER_WORDS = ("um", "uh", "like", "you know", "so", "well", "actually")
INTERRUPTION_MARKERS = ("--", "[interruption]", "sorry to interrupt", "excuse me", "wait")

EXCLAMATION_MARK = re.compile(r"!")
QUESTION_MARK = re.compile(r"\?")
CAPS_WORD = re.compile(r"\b[A-Z]{2,}\b")
SENTENCE_SPLIT = re.compile(r"[.!?]+")

# --- Empathy (role-aware) ---

EMPATHY_BASE = {AGENT: 40, CUSTOMER: 50}
EMPATHY_PHRASES = (
    "i understand", "i see", "that makes sense", "i hear you", "i can imagine", "that must be",
    "i appreciate", "i'm sorry", "i apologize", "that's frustrating", "i get it", "absolutely",
    "of course", "that's understandable",
)
EMOTIONAL_WORDS = (
    "feel", "feeling", "frustrated", "concerned", "worried", "happy", "satisfied",
    "disappointed", "excited", "nervous", "comfortable",
)
CONNECTION_WORDS = ("you", "your", "we", "us", "together")
DISMISSIVE_WORDS = ("whatever", "anyway", "just", "simply", "obviously")

EMPATHY_RULES = {
    AGENT: rules(EMPATHY_PHRASES, 8, "empathy_phrase")
    + rules(EMOTIONAL_WORDS, 5, "emotional_word", count_all=False)
    + rules(CONNECTION_WORDS, 0.5, "connection")
    + rules(DISMISSIVE_WORDS, -3, "dismissive", count_all=False),
    CUSTOMER: rules(EMPATHY_PHRASES, 6, "empathy_phrase")
    + rules(EMOTIONAL_WORDS, 3, "emotional_word", count_all=False)
    + rules(CONNECTION_WORDS, 0.5, "connection")
    + rules(DISMISSIVE_WORDS, -3, "dismissive", count_all=False),
}

# --- Engagement / clarity ---

# Optimal words-per-utterance band (exclusive bounds) and the short / long cut-offs.
ENGAGEMENT_BASE = 50
ENGAGEMENT_BAND = {AGENT: (15, 40), CUSTOMER: (5, 25)}
ENGAGEMENT_BAND_BONUS = {AGENT: 20, CUSTOMER: 15}
ENGAGEMENT_TOO_SHORT = {AGENT: (8, -15), CUSTOMER: (3, -20)}
ENGAGEMENT_TOO_LONG = {AGENT: (60, -10)}
FILLER_RATIO_PENALTY = 100
CUSTOMER_QUESTION_BONUS = 8
AGENT_QUESTION_BONUS = 10  # once, when the agent asks more than two questions

FILLER_RULES = rules(FILLER_WORDS, 1, "filler")
ENGAGEMENT_RULES = rules(
    ("specifically", "exactly", "precisely", "particular", "detail", "example"),
    5,
    "detail",
    count_all=False,
) + rules(("wait", "hold on", "sorry", "excuse me"), -3, "interruption", count_all=False)

# --- Enthusiasm (role-aware baseline) ---

ENTHUSIASM_BASE = {AGENT: 45, CUSTOMER: 35}
ENTHUSIASM_EXCLAMATION_WEIGHT = 8
ENTHUSIASM_CAPS_WEIGHT = 5
ENTHUSIASM_RULES = (
    rules(
        (
            "great", "excellent", "fantastic", "wonderful", "amazing", "awesome", "perfect", "love",
            "excited", "thrilled", "delighted", "brilliant", "outstanding", "incredible", "superb",
            "marvelous", "terrific",
        ),
        12,
        "energy_word",
    )
    + rules(("absolutely", "definitely", "certainly", "totally", "completely"), 8, "affirmation", count_all=False)
    + rules(
        ("let's do it", "sounds great", "i'm excited", "can't wait", "looking forward"),
        15,
        "energy_phrase",
        count_all=False,
    )
    + rules(("okay", "fine", "whatever", "sure", "i guess", "maybe", "probably"), -4, "low_energy")
    + rules(("yes", "no", "uh-huh", "mm-hmm"), -2, "monotone", min_hits=4)
)

# --- General sentiment ---

SENTIMENT_BASE = 50
SENTIMENT_LABEL_VALUES = {"positive": 0.8, "negative": 0.2}
SENTIMENT_LABEL_DEFAULT = 0.5
SENTIMENT_MATCH_PREFIX = 20  # leading characters of a provider segment used for speaker matching

SENTIMENT_RULES = {
    role: rules(
        (
            "good", "great", "excellent", "wonderful", "fantastic", "amazing", "perfect", "love",
            "happy", "pleased", "satisfied", "thank", "appreciate", "glad", "excited", "thrilled",
            "delighted", "comfortable", "confident", "optimistic",
        ),
        6,
        "positive",
    )
    + rules(
        (
            "bad", "terrible", "awful", "horrible", "hate", "frustrated", "angry", "disappointed",
            "upset", "concerned", "worried", "problem", "issue", "difficult", "hard", "impossible",
            "wrong", "error", "mistake", "fail",
        ),
        -8,
        "negative",
    )
    for role in (AGENT, CUSTOMER)
}
SENTIMENT_RULES[AGENT] += (
    regex_rule(r"\b(?:help|assist)", 5, "service_language"),
    regex_rule(r"\b(?:solution|resolve)", 8, "resolution_language"),
)
SENTIMENT_RULES[CUSTOMER] += (
    regex_rule(r"\b(?:satisfied|happy)\b", 15, "satisfaction"),
    regex_rule(r"\b(?:not interested|no thank)", -20, "rejection"),
)

# --- Politeness (role-aware baseline) ---

POLITENESS_BASE = {AGENT: 70, CUSTOMER: 60}
POLITENESS_RULES = (
    rules(
        (
            "please", "thank you", "thanks", "sorry", "excuse me", "pardon", "sir", "madam", "ma'am",
            "appreciate", "grateful", "kindly",
        ),
        8,
        "polite_word",
    )
    + rules(
        (
            "how may i help", "i'd be happy to", "my pleasure", "you're welcome", "i understand",
            "of course", "certainly", "absolutely", "no problem",
        ),
        12,
        "courtesy_phrase",
        count_all=False,
    )
    + rules(("would", "could", "might", "may", "shall", "ought"), 3, "formal_word")
    + rules(("whatever", "yeah right", "no way", "forget it", "shut up", "stupid"), -25, "impolite", count_all=False)
    + rules(("nope", "nah", "yeah", "uh-huh", "mm-hmm"), -2, "abrupt", min_hits=3)
)

# --- Vocal quality (role-independent) ---

CONFIDENCE_BASE = 50
CONFIDENCE_RULES = rules(
    (
        "certainly", "definitely", "absolutely", "sure", "confident", "yes", "of course", "exactly",
        "precisely", "without a doubt", "i know", "i can", "i will",
    ),
    8,
    "confident",
) + rules(
    (
        "maybe", "perhaps", "i think", "probably", "not sure", "might be", "could be", "i guess",
        "sort of", "kind of", "um", "uh", "well",
    ),
    -5,
    "uncertain",
)

VOCAL_ENTHUSIASM_BASE = 40
VOCAL_ENTHUSIASM_EXCLAMATION_WEIGHT = 5
VOCAL_ENTHUSIASM_CAPS_WEIGHT = 3
VOCAL_ENTHUSIASM_RULES = rules(
    (
        "great", "excellent", "fantastic", "wonderful", "amazing", "awesome", "perfect", "love",
        "excited", "thrilled", "delighted", "brilliant", "outstanding",
    ),
    10,
    "energy_word",
)

PROFESSIONALISM_BASE = 60
PROFESSIONALISM_RULES = rules(
    (
        "please", "thank you", "sir", "madam", "certainly", "of course", "my pleasure", "i apologize",
        "i understand", "let me help", "how may i assist", "professional",
    ),
    8,
    "professional",
) + rules(("yeah", "nope", "whatever", "dude", "guys", "stuff", "things", "like", "totally"), -6, "casual")

VOCAL_EMPATHY_BASE = 40
VOCAL_EMPATHY_RULES = rules(
    (
        "understand", "sorry", "apologize", "feel", "imagine", "appreciate", "concern", "i hear you",
        "that must be", "i can see", "i realize", "sympathize", "empathize",
    ),
    12,
    "empathy",
)

ASSERTIVENESS_BASE = 45
ASSERTIVENESS_RULES = rules(
    (
        "will", "can", "let me", "i'll", "we'll", "i recommend", "i suggest", "should", "must",
        "need to", "have to", "require", "ensure", "guarantee",
    ),
    6,
    "assertive",
)

CLARITY_BASE = 80
CLARITY_RULES = rules(CLARITY_FILLER_WORDS, -4, "filler")

# --- Delivery ---

TONAL_BASE = 30
TONAL_RULES = (
    rules(("great", "excellent", "wonderful", "fantastic", "amazing", "perfect", "love", "happy"), 5, "positive", count_all=False)
    + rules(("terrible", "awful", "horrible", "hate", "frustrated", "angry", "disappointed"), 5, "negative", count_all=False)
    + rules(("okay", "fine", "alright", "sure", "yes", "no"), 5, "neutral", count_all=False)
    + rules(("?", "what", "how", "when", "where", "why", "who"), 5, "question", count_all=False)
    + rules(("!", "wow", "oh", "ah", "really"), 5, "exclamation", count_all=False)
)
ENERGY_RULES = rules(
    ("excited", "enthusiastic", "great", "fantastic", "amazing", "love", "absolutely"), 5, "energy", count_all=False
)
BREATH_RULES = rules(("um", "uh", "..."), -2, "breath")
STABILITY_RULES = rules(
    ("calm", "professional", "understand", "certainly", "absolutely"), 3, "stable", count_all=False
) + rules(("frustrated", "confused", "sorry", "um", "uh"), -2, "unstable", count_all=False)
INTERRUPTION_RULES = rules(INTERRUPTION_MARKERS, 1, "interruption", count_all=False)

WINDOW_SENTIMENT_BASE = 50
WINDOW_SENTIMENT_RULES = rules(
    ("great", "good", "excellent", "wonderful", "amazing", "perfect", "love", "happy"), 10, "positive", count_all=False
) + rules(
    ("bad", "terrible", "awful", "hate", "frustrated", "angry", "disappointed", "problem"), -10, "negative", count_all=False
)

PROFANITY_RULES = rules(
    (
        "damn", "hell", "crap", "shit", "fuck", "bitch", "ass", "bastard", "piss", "bloody",
        "goddamn", "asshole", "dickhead", "bullshit",
    ),
    1,
    "profanity",
)
