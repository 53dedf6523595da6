"""
Delivery scorers: energy, rhythm, breath control, pacing, emotional stability, tonal variation.
Text signals come from the lexicon; timing signals are passed in by the metrics stage.
"""

from callinsight.scoring.lexicon import (
    BREATH_RULES,
    ENERGY_RULES,
    SENTENCE_SPLIT,
    STABILITY_RULES,
    TONAL_BASE,
    TONAL_RULES,
    score_table,
)
from callinsight.scoring.scorers import average_sentence_length, clamp_score

# Optimal bands
ENERGY_FAST_RATE = 160
ENERGY_BRISK_RATE = 140
ENERGY_SLOW_RATE = 100
RHYTHM_PAUSE_BAND = (2, 4)
RHYTHM_RATE_BAND = (120, 180)
BREATH_PAUSE_BAND = (2, 5)
BREATH_PAUSE_LENGTH_BAND = (1, 3)
PACING_OPTIMAL_RATE = (140, 170)
PACING_ACCEPTABLE_RATE = (120, 190)
STABILITY_TONAL_BAND = (40, 70)


def _variance(values: list[float]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def score_tonal_variation(text: str) -> int:
    """+5 per emotional/question/exclamation cue present; longer and more numerous sentences add range."""
    if not text.strip():
        return 0
    lower = text.lower()
    score = TONAL_BASE + score_table(lower, TONAL_RULES)
    sentences = [s for s in SENTENCE_SPLIT.split(lower) if s.strip()]
    if average_sentence_length(lower) > 15:
        score += 10
    if len(sentences) > 5:
        score += 10
    return clamp_score(score)


def score_energy(text: str, speaking_rate: float, filler_rate: float) -> int:
    score = 50.0
    if speaking_rate > ENERGY_FAST_RATE:
        score += 20
    elif speaking_rate > ENERGY_BRISK_RATE:
        score += 10
    elif speaking_rate < ENERGY_SLOW_RATE:
        score -= 20

    if filler_rate < 2:
        score += 15
    elif filler_rate > 5:
        score -= 15

    score += score_table(text.lower(), ENERGY_RULES)
    return clamp_score(score)


def score_rhythm(durations: list[float], pause_frequency: float, speaking_rate: float) -> int:
    score = 50.0
    low, high = RHYTHM_PAUSE_BAND
    if low <= pause_frequency <= high:
        score += 20
    elif pause_frequency > 6:
        score -= 15
    elif pause_frequency < 1:
        score -= 10

    low, high = RHYTHM_RATE_BAND
    score += 20 if low <= speaking_rate <= high else -10

    if len(durations) > 1:
        variance = _variance(durations)
        if variance < 4:
            score += 15
        elif variance > 10:
            score -= 10
    return clamp_score(score)


def score_breath_control(text: str, pause_frequency: float, average_pause: float) -> int:
    """Pauses of healthy frequency and length help; every um / uh / ellipsis costs 2."""
    score = 60.0
    low, high = BREATH_PAUSE_BAND
    if low <= pause_frequency <= high:
        score += 20
    elif pause_frequency > 8:
        score -= 15

    low, high = BREATH_PAUSE_LENGTH_BAND
    if low <= average_pause <= high:
        score += 15
    elif average_pause > 5:
        score -= 10

    score += score_table(text.lower(), BREATH_RULES)
    return clamp_score(score)


def score_pacing(word_counts: list[int], speaking_rate: float) -> int:
    score = 60.0
    if PACING_OPTIMAL_RATE[0] <= speaking_rate <= PACING_OPTIMAL_RATE[1]:
        score += 25
    elif PACING_ACCEPTABLE_RATE[0] <= speaking_rate <= PACING_ACCEPTABLE_RATE[1]:
        score += 15
    else:
        score -= 15

    if word_counts and _variance([float(n) for n in word_counts]) < 25:
        score += 15
    return clamp_score(score)


def score_emotional_stability(text: str, tonal_variation: float) -> int:
    score = 70.0
    low, high = STABILITY_TONAL_BAND
    if low <= tonal_variation <= high:
        score += 20
    elif tonal_variation > 85:
        score -= 15
    score += score_table(text.lower(), STABILITY_RULES)
    return clamp_score(score)
