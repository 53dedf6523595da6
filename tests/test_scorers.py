"""Tests for the lexical scorers."""

import pytest

from callinsight.schemas import SentimentSegment
from callinsight.scoring import (
    clamp_score,
    score_clarity,
    score_confidence,
    score_empathy,
    score_engagement_clarity,
    score_enthusiasm,
    score_general_sentiment,
    score_politeness,
)


@pytest.mark.parametrize("value, expected", [(150, 100), (-5, 0), (49.6, 50), (72, 72)])
def test_clamp_score(value, expected):
    assert clamp_score(value) == expected


class TestBlankText:
    """Every lexical scorer treats blank text as zero."""

    @pytest.mark.parametrize("scorer", [score_empathy, score_enthusiasm, score_politeness, score_general_sentiment])
    def test_role_aware(self, scorer):
        assert scorer("", True) == 0
        assert scorer("   ", False) == 0

    def test_role_independent(self):
        assert score_confidence("") == 0
        assert score_clarity(" ") == 0


class TestRoleAwareScorers:
    """Tests for agent/customer baselines and lexicon weights."""

    def test_empathy_baselines(self):
        assert score_empathy("I understand", True) == 48
        assert score_empathy("I understand", False) == 56

    def test_politeness(self):
        assert score_politeness("please", True) == 78
        assert score_politeness("please", False) == 68
        assert score_politeness("whatever", False) == 35

    def test_enthusiasm_counts_marks_and_caps(self):
        assert score_enthusiasm("GREAT!", True) == 70

    def test_monotone_needs_four_hits(self):
        """Short yes/no answers only count against enthusiasm from the fourth one."""
        assert score_enthusiasm("yes no yes", True) == 45
        assert score_enthusiasm("yes yes yes yes", True) == 37

    def test_engagement_short_customer_question(self):
        assert score_engagement_clarity("Why?", False, utterance_count=1) == 38

    def test_general_sentiment_keywords(self):
        assert score_general_sentiment("great", True) == 56
        assert score_general_sentiment("I am happy", False) == 71

    def test_provider_sentiment_sets_baseline(self):
        """Matching provider segments replace the neutral baseline with their label value."""
        segments = [SentimentSegment(text="great", sentiment="positive")]
        assert score_general_sentiment("great", True, segments) == 86

    def test_unmatched_provider_segments_are_ignored(self):
        segments = [SentimentSegment(text="something else entirely", sentiment="negative")]
        assert score_general_sentiment("great", True, segments) == 56


class TestVocalQualityScorers:
    def test_confidence(self):
        assert score_confidence("I will definitely") == 66
        assert score_confidence("um maybe") == 40

    def test_clarity_short_sentences(self):
        assert score_clarity("Hello") == 65
