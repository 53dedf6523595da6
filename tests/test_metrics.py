"""Tests for per-speaker vocal metrics, vocal quality and windowed metrics."""

import time

from callinsight.analysis import (
    analyze_vocal_quality,
    calculate_vocal_metrics,
    generate_real_time_metrics,
    window_sentiment,
    words_in_segments,
)
from callinsight.schemas import VocalMetrics, VocalQuality, Word


class TestVocalMetrics:
    """Tests for timing- and text-derived metrics."""

    def test_no_segments_is_all_zero(self):
        assert calculate_vocal_metrics([], 60.0) == VocalMetrics()

    def test_single_segment_without_words(self, make_segment):
        metrics = calculate_vocal_metrics([make_segment("Thank you for calling um", 0.0, 5.0)], 5.0)
        assert metrics.speaking_rate == 60
        assert metrics.filler_word_count == 1
        assert metrics.filler_word_rate == 12.0
        assert metrics.pause_frequency == 0.0
        assert metrics.average_pause_length == 1.5
        assert metrics.speech_clarity == 97
        assert metrics.volume_consistency == 75
        assert metrics.articulation_clarity == 86
        assert metrics.interruption_count == 0
        assert metrics.overtalking_duration == 0

    def test_word_confidence_blends_into_clarity(self, make_segment):
        words = [
            Word(text="Thank", start=0.0, end=0.4, confidence=0.9),
            Word(text="you", start=0.4, end=0.8, confidence=0.9),
        ]
        metrics = calculate_vocal_metrics([make_segment("Thank you for calling um", 0.0, 5.0)], 5.0, words)
        assert metrics.speech_clarity == 95
        assert metrics.volume_consistency == 100

    def test_words_outside_segments_are_ignored(self, make_segment):
        words = [Word(text="other", start=10.0, end=10.5, confidence=0.1)]
        metrics = calculate_vocal_metrics([make_segment("Thank you for calling um", 0.0, 5.0)], 12.0, words)
        assert metrics.speech_clarity == 97
        assert metrics.volume_consistency == 75

    def test_pauses_between_segments(self, make_segment):
        segments = [make_segment("Hello there", 0.0, 2.0), make_segment("Thanks a lot", 5.0, 2.0)]
        metrics = calculate_vocal_metrics(segments, 60.0)
        assert metrics.pause_frequency == 1.0
        assert metrics.average_pause_length == 3.0

    def test_interruptions_drive_overtalk(self, make_segment):
        metrics = calculate_vocal_metrics([make_segment("Wait, excuse me", 0.0, 2.0)], 2.0)
        assert metrics.interruption_count == 2
        assert metrics.overtalking_duration == 4

    def test_scores_are_bounded(self, make_segment):
        text = "um uh like so well " * 30
        metrics = calculate_vocal_metrics([make_segment(text, 0.0, 1.0)], 1.0)
        for name in ("speech_clarity", "energy_level", "speech_rhythm", "breath_control", "emotional_stability"):
            assert 0 <= getattr(metrics, name) <= 100
        assert metrics.speech_clarity == 0


def test_words_in_segments_tolerance(make_segment):
    segment = make_segment("Hello", 1.0, 1.0)
    inside = Word(text="Hello", start=0.97, end=2.03)
    outside = Word(text="later", start=2.5, end=3.0)
    assert words_in_segments([segment], [inside, outside]) == [inside]


class TestVocalQuality:
    def test_empty(self):
        assert analyze_vocal_quality([]) == VocalQuality()

    def test_bounded(self, make_segment):
        quality = analyze_vocal_quality([make_segment("I understand, I'm sorry. I will certainly help.", 0.0, 3.0)])
        for value in quality.model_dump().values():
            assert 0 <= value <= 100
        assert quality.empathy > 40


class TestRealTimeMetrics:
    """Tests for 5-second windowed metrics."""

    def test_no_words(self):
        assert generate_real_time_metrics(None) is None
        assert generate_real_time_metrics([]) is None

    def test_single_window(self):
        words = [
            Word(text="great", start=0.0, end=0.5, confidence=0.9),
            Word(text="service", start=1.0, end=1.5, confidence=0.9),
            Word(text="today", start=2.0, end=2.5, confidence=0.9),
        ]
        metrics = generate_real_time_metrics(words)
        assert metrics.timestamps == [0.0]
        assert metrics.confidence_scores == [90]
        assert metrics.speaking_rates == [36]
        assert metrics.energy_levels == [63]
        assert metrics.sentiment_scores == [60]

    def test_windows_keyed_on_start(self):
        words = [Word(text="hi", start=0.0, end=0.5), Word(text="bye", start=7.0, end=7.5)]
        assert generate_real_time_metrics(words).timestamps == [0.0, 5.0]

    def test_empty_window_is_skipped(self):
        words = [Word(text="hi", start=0.0, end=0.5), Word(text="bye", start=12.0, end=12.5)]
        assert generate_real_time_metrics(words).timestamps == [0.0, 10.0]

    def test_far_out_word_end_stays_one_window(self):
        """A single huge end offset does not walk empty windows up to it."""
        words = [Word(text="hi", start=0.0, end=0.2), Word(text="bye", start=1.0, end=1e9)]
        began = time.perf_counter()
        metrics = generate_real_time_metrics(words)
        assert time.perf_counter() - began < 1.0
        assert metrics.timestamps == [0.0]
        assert metrics.speaking_rates == [24]

    def test_windows_follow_time_order(self):
        words = [Word(text="later", start=11.0, end=11.5), Word(text="first", start=2.0, end=2.5)]
        assert generate_real_time_metrics(words).timestamps == [0.0, 10.0]


def test_window_sentiment():
    assert window_sentiment("") == 50
    assert window_sentiment("terrible problem") == 30
