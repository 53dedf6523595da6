"""Windowed timeline metrics from provider word timings."""

import logging
from collections import defaultdict

from callinsight.schemas import RealTimeMetrics, Word
from callinsight.scoring import clamp_score
from callinsight.scoring.lexicon import WINDOW_SENTIMENT_BASE, WINDOW_SENTIMENT_RULES, score_table

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 5


def window_sentiment(text: str) -> int:
    return clamp_score(WINDOW_SENTIMENT_BASE + score_table(text.lower(), WINDOW_SENTIMENT_RULES))


def generate_real_time_metrics(words: list[Word] | None) -> RealTimeMetrics | None:
    """
    5-second windows keyed on word start; empty windows are skipped.
    None without words.
    """
    if not words:
        return None

    buckets: dict[int, list[Word]] = defaultdict(list)
    for w in words:
        if w.start >= 0:
            buckets[int(w.start // WINDOW_SECONDS)].append(w)

    metrics = RealTimeMetrics()
    for index in sorted(buckets):
        window = buckets[index]
        confidence = sum(w.confidence for w in window) / len(window)
        wpm = len(window) / WINDOW_SECONDS * 60
        metrics.timestamps.append(float(index * WINDOW_SECONDS))
        metrics.confidence_scores.append(round(confidence * 100))
        metrics.speaking_rates.append(round(wpm))
        metrics.energy_levels.append(clamp_score(min(100.0, wpm / 2 + confidence * 50)))
        metrics.sentiment_scores.append(window_sentiment(" ".join(w.text for w in window)))

    logger.debug("Real-time metrics over %d windows", len(metrics.timestamps))
    return metrics
