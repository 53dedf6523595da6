"""Tests for speaker segmentation and agent identification."""

import pytest

from callinsight.schemas import SegmentationMethod, SpeakerRole, Utterance, Word, coerce_utterances
from callinsight.segmentation import classify_line, estimate_duration, identify_agent_speaker, segment


class TestIdentifyAgentSpeaker:
    """Tests for choosing the agent among diarized speakers."""

    def test_agent_is_highest_scoring_speaker(self, diarized_utterances):
        assignment = identify_agent_speaker(coerce_utterances(diarized_utterances))
        assert assignment.agent_speaker == 0
        assert assignment.role_of(0) == SpeakerRole.AGENT
        assert assignment.role_of(1) == SpeakerRole.CUSTOMER
        assert assignment.scores[0].score > assignment.scores[1].score

    def test_tie_goes_to_first_speaker(self):
        """Identical speech from two speakers keeps the first one as agent."""
        utterances = [
            Utterance(text="Hello there", speaker="B", start=0.0, end=1.0),
            Utterance(text="Hello there", speaker="A", start=1.0, end=2.0),
        ]
        assert identify_agent_speaker(utterances).agent_speaker == "B"

    def test_no_utterances(self):
        assignment = identify_agent_speaker([])
        assert assignment.agent_speaker is None
        assert assignment.role_of(None) == SpeakerRole.CUSTOMER

    def test_breakdown_has_score(self, diarized_utterances):
        breakdown = identify_agent_speaker(coerce_utterances(diarized_utterances)).breakdown()
        assert set(breakdown) == {0, 1}
        assert breakdown[0]["professional"] == 3

    def test_weighted_score(self):
        """Professional x3, questions x2, empathy x1.5, control x2."""
        text = "Thank you for calling. What is your zip code? I understand, let me check."
        assignment = identify_agent_speaker([Utterance(text=text, speaker=0, start=0.0, end=5.0)])
        breakdown = assignment.breakdown()[0]
        assert breakdown["professional"] == 2
        assert breakdown["questions"] == 1
        assert breakdown["empathy"] == 2
        assert breakdown["control"] == 1
        assert breakdown["score"] == 13.0

    def test_talk_volume_bonuses_decide_agent(self):
        """A long-winded speaker outranks a short professional greeting on word and duration bonuses."""
        utterances = [
            Utterance(text="Thank you for calling", speaker=0, start=0.0, end=2.0),
            Utterance(text=" ".join(["okay"] * 101), speaker=1, start=2.0, end=65.0),
        ]
        assignment = identify_agent_speaker(utterances)
        breakdown = assignment.breakdown()
        assert breakdown[0]["score"] == 4.5
        assert breakdown[1]["total_words"] == 101
        assert breakdown[1]["total_duration"] == 63.0
        assert breakdown[1]["score"] == 8
        assert assignment.agent_speaker == 1

    def test_bonus_thresholds_are_strict(self):
        utterances = [
            Utterance(text="Thank you for calling", speaker=0, start=0.0, end=2.0),
            Utterance(text=" ".join(["okay"] * 100), speaker=1, start=2.0, end=62.0),
        ]
        assignment = identify_agent_speaker(utterances)
        assert assignment.breakdown()[1]["score"] == 0
        assert assignment.agent_speaker == 0


class TestClassifyLine:
    """Tests for single-line role classification."""

    @pytest.mark.parametrize(
        "line, role",
        [
            ("Agent: hello", SpeakerRole.AGENT),
            ("Rep: hi", SpeakerRole.AGENT),
            ("Caller: yes", SpeakerRole.CUSTOMER),
            ("Thank you for calling", SpeakerRole.AGENT),
            ("I need a refund", SpeakerRole.CUSTOMER),
            ("nothing to see", None),
        ],
    )
    def test_roles(self, line, role):
        assert classify_line(line) == role


class TestSegment:
    """Tests for the segmentation fallback chain."""

    def test_utterances_win(self, diarized_utterances):
        result = segment("ignored", coerce_utterances(diarized_utterances))
        assert result.method == SegmentationMethod.UTTERANCES
        assert result.agent_speaker == 0
        assert len(result.agent_segments) == 2
        assert len(result.customer_segments) == 2
        assert result.customer_segments[1].start == 16.0
        assert result.customer_segments[1].duration == 2.0

    def test_utterance_without_end_gets_default_length(self):
        result = segment("", [Utterance(text="Thank you for calling", speaker=0, start=3.0)])
        assert result.agent_segments[0].duration == 5.0

    def test_blank_utterances_fall_through_to_transcript(self):
        result = segment("Agent: Hello\nCustomer: Hi", [Utterance(text="   ", speaker=0)])
        assert result.method == SegmentationMethod.ROLE_LABELS

    def test_speaker_labels(self):
        transcript = "Speaker 0: Hello there\nSpeaker 1: Thank you for calling, how can I help?"
        result = segment(transcript)
        assert result.method == SegmentationMethod.SPEAKER_LABELS
        assert result.agent_speaker == 1
        assert result.text_for(SpeakerRole.AGENT) == "Thank you for calling, how can I help?"
        assert result.text_for(SpeakerRole.CUSTOMER) == "Hello there"

    def test_role_labels(self, labelled_transcript):
        result = segment(labelled_transcript)
        assert result.method == SegmentationMethod.ROLE_LABELS
        assert len(result.agent_segments) == 3
        assert len(result.customer_segments) == 2
        assert result.customer_segments[0].start == 5.0
        assert result.text_for(SpeakerRole.CUSTOMER).startswith("Hi, my name is John Smith.")

    def test_sentence_heuristics(self):
        result = segment("The weather is nice. Please hold while I check.")
        assert result.method == SegmentationMethod.SENTENCES
        assert [s.text for s in result.agent_segments] == ["Please hold while I check"]
        assert [s.text for s in result.customer_segments] == ["The weather is nice"]

    @pytest.mark.parametrize("transcript", ["", "   ", "\n\n"])
    def test_empty_transcript(self, transcript):
        result = segment(transcript)
        assert result.method == SegmentationMethod.NONE
        assert result.is_empty

    def test_word_timings_refine_labelled_lines(self):
        """Estimated offsets are replaced by the words' own timings."""
        words = [
            Word(text="Hello", start=1.0, end=1.4, confidence=0.9),
            Word(text="there", start=1.4, end=1.8, confidence=0.9),
            Word(text="Hi", start=3.0, end=3.2, confidence=0.5),
        ]
        result = segment("Agent: Hello there\nCustomer: Hi", words=words)
        agent = result.agent_segments[0]
        assert agent.start == 1.0
        assert agent.duration == pytest.approx(0.8)
        assert agent.confidence == pytest.approx(0.9)
        assert result.customer_segments[0].start == 3.0
        assert result.customer_segments[0].confidence == 0.5

    def test_unmarked_line_words_are_skipped(self):
        """Words spoken on a dropped line do not shift later segments' timings."""
        agent_words = [
            Word(text=t, start=float(i), end=i + 1.0) for i, t in enumerate("Thank you for calling.".split())
        ]
        aside_words = [
            Word(text=t, start=10.0 + 2 * i, end=12.0 + 2 * i)
            for i, t in enumerate("the weather is nice today".split())
        ]
        customer_words = [
            Word(text=t, start=30.0 + i, end=31.0 + i) for i, t in enumerate("I need help.".split())
        ]
        transcript = "Agent: Thank you for calling.\nthe weather is nice today\nCustomer: I need help."

        result = segment(transcript, words=agent_words + aside_words + customer_words)

        assert result.method == SegmentationMethod.ROLE_LABELS
        assert result.agent_segments[0].start == 0.0
        assert result.agent_segments[0].duration == 4.0
        customer = result.customer_segments[0]
        assert customer.start == 30.0
        assert customer.duration == 3.0

    def test_lines_before_first_speaker_label_are_skipped(self):
        words = [
            Word(text="recording", start=0.0, end=1.0),
            Word(text="started", start=1.0, end=2.0),
            Word(text="Hello", start=5.0, end=5.5),
            Word(text="Hi", start=8.0, end=8.5),
        ]
        result = segment("recording started\nSpeaker 0: Hello\nSpeaker 1: Hi", words=words)
        assert result.method == SegmentationMethod.SPEAKER_LABELS
        timeline = result.timeline()
        assert [s.start for s in timeline] == [5.0, 8.0]

    def test_timeline_is_ordered(self, labelled_transcript):
        timeline = segment(labelled_transcript).timeline()
        assert [s.start for s in timeline] == sorted(s.start for s in timeline)
        assert timeline[0].speaker_role == SpeakerRole.AGENT


def test_estimate_duration():
    assert estimate_duration("one two three") == pytest.approx(1.2)
    assert estimate_duration("") == 0
