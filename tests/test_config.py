"""Tests for environment-driven settings."""

import pytest

from callinsight.config import Settings, load_settings

ENV_VARS = (
    "CALLINSIGHT_LOG_LEVEL",
    "CALLINSIGHT_LOG_FILE",
    "CALLINSIGHT_NAME_MIN_CONFIDENCE",
    "CALLINSIGHT_REDACT_PHONES",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        assert load_settings() == Settings()

    def test_overrides(self, clean_env):
        clean_env.setenv("CALLINSIGHT_LOG_LEVEL", "debug")
        clean_env.setenv("CALLINSIGHT_LOG_FILE", "/tmp/callinsight.log")
        clean_env.setenv("CALLINSIGHT_NAME_MIN_CONFIDENCE", "0.8")
        clean_env.setenv("CALLINSIGHT_REDACT_PHONES", "no")
        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/callinsight.log"
        assert settings.name_min_confidence == 0.8
        assert settings.redact_phones is False

    def test_bad_float_keeps_default(self, clean_env):
        clean_env.setenv("CALLINSIGHT_NAME_MIN_CONFIDENCE", "high")
        assert load_settings().name_min_confidence == 0.6

    @pytest.mark.parametrize("raw", ["1", "TRUE", "yes", "On"])
    def test_truthy_redaction_flag(self, clean_env, raw):
        clean_env.setenv("CALLINSIGHT_REDACT_PHONES", raw)
        assert load_settings().redact_phones is True
