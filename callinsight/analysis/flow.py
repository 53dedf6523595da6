"""Turn-taking statistics over the segmented timeline and over raw provider utterances."""

import logging
import math

from callinsight.schemas import CommunicationFlow, ConversationFlowSummary, SpeechSegment, Utterance

logger = logging.getLogger(__name__)

SILENCE_GAP = 3.0  # seconds


def analyze_communication_flow(
    agent_segments: list[SpeechSegment],
    customer_segments: list[SpeechSegment],
) -> CommunicationFlow:
    """
    Turn count, turn-length stats and agent share of speaking time (0–100).
    No segments, or no speaking time, keeps the balance at 50.
    """
    durations = [s.duration for s in agent_segments + customer_segments]
    if not durations:
        return CommunicationFlow()

    mean = sum(durations) / len(durations)
    variance = sum((d - mean) ** 2 for d in durations) / len(durations)

    agent_time = sum(s.duration for s in agent_segments)
    total_time = sum(durations)
    balance = round(agent_time / total_time * 100) if total_time > 0 else 50

    flow = CommunicationFlow(
        total_turns=len(durations),
        average_turn_length=round(mean, 1),
        longest_monologue=round(max(durations), 1),
        shortest_response=round(min(durations), 1),
        response_time_variability=round(math.sqrt(variance), 1),
        conversation_balance=balance,
    )
    logger.debug("Communication flow: %s", flow.model_dump())
    return flow


def summarize_turn_taking(utterances: list[Utterance]) -> ConversationFlowSummary:
    """Interruptions are speaker changes that start before the previous turn ended."""
    if not utterances:
        return ConversationFlowSummary()

    interruptions = silences = overlap = 0
    for previous, current in zip(utterances, utterances[1:]):
        previous_end = previous.end if previous.end is not None else previous.start
        if current.start < previous_end:
            overlap += 1
            if current.speaker != previous.speaker:
                interruptions += 1
        elif current.start - previous_end > SILENCE_GAP:
            silences += 1

    return ConversationFlowSummary(
        turn_taking=round(len(utterances) / 2, 1),
        interruptions=interruptions,
        silences=silences,
        overlap=overlap,
    )
