"""
Tolerant reader for the transcription provider's JSON.
Path: results.channels[0].alternatives[0].{utterances, words, sentiment_segments, topics, intents}.
Anything missing or malformed is treated as absent; single bad items are skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from callinsight.schemas.contract import SentimentSegment, Utterance, Word

logger = logging.getLogger(__name__)


@dataclass
class DeepgramPayload:
    utterances: list[Utterance] = field(default_factory=list)
    words: list[Word] = field(default_factory=list)
    sentiment_segments: list[SentimentSegment] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    intents: list[str] = field(default_factory=list)


def _coerce(items: Any, model: type[BaseModel]) -> list:
    if not isinstance(items, (list, tuple)):
        return []
    out = []
    skipped = 0
    for item in items:
        if isinstance(item, model):
            out.append(item)
            continue
        if not isinstance(item, dict):
            skipped += 1
            continue
        try:
            out.append(model.model_validate(item))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.warning("Skipped %d malformed %s item(s)", skipped, model.__name__)
    return out


def coerce_words(items: list[Any] | None) -> list[Word]:
    return _coerce(items, Word)


def coerce_utterances(items: list[Any] | None) -> list[Utterance]:
    return _coerce(items, Utterance)


def coerce_sentiment_segments(items: list[Any] | None) -> list[SentimentSegment]:
    return _coerce(items, SentimentSegment)


def _get(node: Any, key: str | int) -> Any:
    if isinstance(key, int):
        if isinstance(node, list) and len(node) > key:
            return node[key]
        return None
    if isinstance(node, dict):
        return node.get(key)
    return None


def _labels(items: Any, inner_key: str, label_key: str) -> list[str]:
    """Topic/intent labels; accepts flat [{label}] and nested [{inner: [{label}]}] forms."""
    if not isinstance(items, list):
        return []
    labels: list[str] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        nested = item.get(inner_key)
        entries = nested if isinstance(nested, list) else [item]
        for entry in entries:
            label = entry.get(label_key) if isinstance(entry, dict) else None
            if isinstance(label, str) and label and label not in labels:
                labels.append(label)
    return labels


def parse_deepgram_response(data: Any) -> DeepgramPayload:
    results = _get(data, "results")
    alternative = _get(_get(_get(_get(results, "channels"), 0), "alternatives"), 0)

    utterances = _get(alternative, "utterances")
    if utterances is None:
        utterances = _get(results, "utterances")
    segments = _get(alternative, "sentiment_segments")
    if segments is None:
        segments = _get(_get(results, "sentiments"), "segments")

    payload = DeepgramPayload(
        utterances=coerce_utterances(utterances),
        words=coerce_words(_get(alternative, "words")),
        sentiment_segments=coerce_sentiment_segments(segments),
        topics=_labels(_get(alternative, "topics"), "topics", "topic"),
        intents=_labels(_get(alternative, "intents"), "intents", "intent"),
    )
    logger.debug(
        "Provider payload: %d utterances, %d words, %d sentiment segments, %d topics, %d intents",
        len(payload.utterances),
        len(payload.words),
        len(payload.sentiment_segments),
        len(payload.topics),
        len(payload.intents),
    )
    return payload
