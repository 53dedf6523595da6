from .roles import RoleAssignment, SpeakerRoleScore, identify_agent_speaker
from .speakers import classify_line, estimate_duration, segment

__all__ = [
    "RoleAssignment",
    "SpeakerRoleScore",
    "classify_line",
    "estimate_duration",
    "identify_agent_speaker",
    "segment",
]
