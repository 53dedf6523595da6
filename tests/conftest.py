import pytest

from callinsight.schemas import SpeakerRole, SpeechSegment

LABELLED_TRANSCRIPT = (
    "Agent: Thank you for calling, my name is Sarah. How can I help you today?\n"
    "Customer: Hi, my name is John Smith. I'm calling about my policy renewal.\n"
    "Agent: I understand. Let me check that for you. Could you confirm your date of birth?\n"
    "Customer: Sure, um, it's March third. I also wanted to ask about the premium.\n"
    "Agent: Absolutely, I'd be happy to help with that. Is there anything else I can assist with?"
)

@pytest.fixture
def make_segment():
    def _make(text: str, start: float, duration: float, role: SpeakerRole = SpeakerRole.AGENT) -> SpeechSegment:
        return SpeechSegment(text=text, speaker_role=role, start=start, duration=duration)

    return _make


@pytest.fixture
def labelled_transcript() -> str:
    return LABELLED_TRANSCRIPT


@pytest.fixture
def diarized_utterances() -> list[dict]:
    """Provider-shaped utterances: speaker 0 is the agent."""
    return [
        {
            "speaker": 0,
            "start": 0.0,
            "end": 4.0,
            "transcript": "Thank you for calling Acme support, my name is Dana. How can I help you today?",
        },
        {
            "speaker": 1,
            "start": 4.5,
            "end": 9.0,
            "transcript": "Hi, I'm calling about a charge on my bill that I don't recognize.",
        },
        {
            "speaker": 0,
            "start": 8.5,
            "end": 12.0,
            "transcript": "I understand, I'm sorry about that. Let me check your account right away.",
        },
        {
            "speaker": 1,
            "start": 16.0,
            "end": 18.0,
            "transcript": "Thank you, that would be great.",
        },
    ]


@pytest.fixture
def deepgram_response(diarized_utterances) -> dict:
    return {
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {
                            "transcript": " ".join(u["transcript"] for u in diarized_utterances),
                            "words": [
                                {"word": "thank", "punctuated_word": "Thank", "start": 0.0, "end": 0.3, "confidence": 0.98},
                                {"word": "you", "start": 0.3, "end": 0.5, "confidence": 0.97},
                            ],
                            "topics": [{"topics": [{"topic": "Billing", "confidence_score": 0.9}]}],
                            "intents": [{"intents": [{"intent": "Dispute charge", "confidence_score": 0.8}]}],
                        }
                    ]
                }
            ],
            "utterances": diarized_utterances,
        }
    }
