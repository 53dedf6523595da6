"""Tests for prospect name extraction."""

from callinsight.names import (
    extract_all_prospect_candidates,
    extract_prospect_name,
    get_extraction_stats,
    is_likely_customer,
    validate_name,
)
from callinsight.schemas import NameExtractionOptions, NameExtractionResult

AGENT_INTRO = (
    "Hi, this is Sarah Johnson and I'm a customer service representative. How can I help you today?"
)
INTRO_AND_THANKS = "Hello, my name is John Smith and I need help with my account. Thank you, Bob."


class TestValidateName:
    """Tests for name validation."""

    def test_apostrophe_name_is_valid(self):
        """Apostrophes are allowed inside names."""
        assert validate_name("O'Brien") is True

    def test_digits_are_rejected(self):
        assert validate_name("123") is False

    def test_stoplist_word_is_rejected(self):
        """Conversational words are not names."""
        assert validate_name("ok") is False
        assert validate_name("Thanks") is False

    def test_empty_and_single_letter_are_rejected(self):
        assert validate_name("") is False
        assert validate_name("A") is False

    def test_hyphenated_full_name_is_valid(self):
        assert validate_name("Mary-Jane Watson") is True


class TestExtractProspectName:
    """Tests for the best-candidate selection."""

    def test_empty_transcript_returns_empty_result(self):
        """Empty input yields the canonical invalid result."""
        result = extract_prospect_name("")
        assert result.is_valid is False
        assert result.full_name == ""
        assert result.confidence == 0.0
        assert result.extraction_method == "none"

    def test_agent_self_introduction_is_excluded(self):
        """An agent introducing themselves is never returned as the prospect."""
        result = extract_prospect_name(AGENT_INTRO)
        assert result.is_valid is False
        assert result.full_name == ""

    def test_self_introduction_beats_thank_you_mention(self):
        """Higher-confidence self introduction wins over a contextual mention."""
        result = extract_prospect_name(INTRO_AND_THANKS)
        assert result.full_name == "John Smith"
        assert result.first_name == "John"
        assert result.last_name == "Smith"
        assert result.confidence == 0.95
        assert result.extraction_method == "self_introduction"
        assert result.is_valid is True

    def test_title_is_captured_without_dot(self):
        """Formal titles are split off from the name."""
        result = extract_prospect_name("Good morning, this is Dr. Maria Rodriguez calling about my test results.")
        assert result.full_name == "Maria Rodriguez"
        assert result.title == "Dr"
        assert result.extraction_method == "formal_title"

    def test_include_agent_names_falls_back_to_agent(self):
        """With agent names allowed, an agent-only transcript still yields a name."""
        options = NameExtractionOptions(include_agent_names=True)
        result = extract_prospect_name(AGENT_INTRO, options)
        assert result.full_name == "Sarah Johnson"

    def test_disable_customer_preference(self):
        options = NameExtractionOptions(prefer_customer_names=False)
        result = extract_prospect_name(AGENT_INTRO, options)
        assert result.full_name == "Sarah Johnson"
        assert result.confidence == 0.95

    def test_minimum_confidence_filters_candidates(self):
        """Candidates below the threshold are dropped."""
        options = NameExtractionOptions(minimum_confidence=0.99)
        assert extract_prospect_name(INTRO_AND_THANKS, options).is_valid is False

    def test_uncapitalized_names_are_not_captured(self):
        """Trigger phrases match in any case, name words only when capitalized."""
        transcript = "hello, my name is john smith and i need help with my account"
        assert extract_prospect_name(transcript).is_valid is False
        assert get_extraction_stats(transcript).total_candidates == 0
        assert extract_prospect_name(transcript.replace("john smith", "John Smith")).full_name == "John Smith"

    def test_extraction_is_deterministic(self):
        assert extract_prospect_name(INTRO_AND_THANKS) == extract_prospect_name(INTRO_AND_THANKS)


class TestCandidatesAndStats:
    """Tests for candidate listing and statistics."""

    def test_all_candidates_are_valid_customers_sorted(self):
        candidates = extract_all_prospect_candidates(INTRO_AND_THANKS)
        assert candidates[0].full_name == "John Smith"
        assert all(c.is_valid for c in candidates)
        confidences = [c.confidence for c in candidates]
        assert confidences == sorted(confidences, reverse=True)

    def test_stats_counts(self):
        """Bob is mentioned late in the call, so only John Smith counts as a customer."""
        stats = get_extraction_stats(INTRO_AND_THANKS)
        assert stats.total_candidates == 2
        assert stats.valid_candidates == 2
        assert stats.customer_candidates == 1
        assert stats.best_candidate is not None
        assert stats.best_candidate.full_name == "John Smith"

    def test_stats_for_agent_only_transcript(self):
        stats = get_extraction_stats(AGENT_INTRO)
        assert stats.customer_candidates == 0
        assert stats.best_candidate is None

    def test_customer_pattern_accepts_late_mention(self):
        """A "calling about" phrase after the name marks a customer even late in the call."""
        transcript = (
            "Thanks for holding, I have pulled up the file now and everything looks fine on our side. "
            "Maria Lopez is calling about her bill."
        )
        candidate = NameExtractionResult(full_name="Maria Lopez", confidence=0.7, is_valid=True)
        assert is_likely_customer(candidate, transcript) is True

    def test_agent_pattern_rejects_candidate(self):
        candidate = NameExtractionResult(full_name="Sarah Johnson", confidence=0.95, is_valid=True)
        assert is_likely_customer(candidate, AGENT_INTRO) is False
