"""Environment-driven settings, read once at start-up. The analysis core never reads these."""

import os
from dataclasses import dataclass
from functools import lru_cache

TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: str | None = None
    name_min_confidence: float = 0.6
    redact_phones: bool = True


def _float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def load_settings() -> Settings:
    return Settings(
        log_level=os.environ.get("CALLINSIGHT_LOG_LEVEL", "INFO").upper(),
        log_file=os.environ.get("CALLINSIGHT_LOG_FILE") or None,
        name_min_confidence=_float("CALLINSIGHT_NAME_MIN_CONFIDENCE", 0.6),
        redact_phones=os.environ.get("CALLINSIGHT_REDACT_PHONES", "true").lower() in TRUTHY,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
