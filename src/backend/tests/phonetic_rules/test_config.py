import pytest

from common.phonetic_rules.config import get_log_level, get_settings
from common.phonetic_rules.errors import ConfigurationError
from common.phonetic_rules.models import NameType


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PHONETIC_RULES_DIR", str(tmp_path))
    monkeypatch.setenv("PHONETIC_RULES_NAME_TYPES", "gen, ash")
    monkeypatch.setenv("PHONETIC_RULES_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.rules_dir == tmp_path
    assert settings.name_types == [NameType.GENERIC, NameType.ASHKENAZI]
    assert settings.log_level == "DEBUG"


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("PHONETIC_RULES_DIR", str(tmp_path))
    monkeypatch.delenv("PHONETIC_RULES_NAME_TYPES", raising=False)
    monkeypatch.delenv("PHONETIC_RULES_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.name_types == list(NameType)
    assert settings.log_level == "WARNING"


def test_missing_rules_dir(monkeypatch):
    monkeypatch.delenv("PHONETIC_RULES_DIR", raising=False)
    with pytest.raises(ConfigurationError, match="PHONETIC_RULES_DIR"):
        get_settings()


def test_invalid_values(monkeypatch, tmp_path):
    monkeypatch.setenv("PHONETIC_RULES_DIR", str(tmp_path))
    monkeypatch.setenv("PHONETIC_RULES_NAME_TYPES", "klingon")
    with pytest.raises(ConfigurationError):
        get_settings()

    monkeypatch.setenv("PHONETIC_RULES_NAME_TYPES", "gen")
    monkeypatch.setenv("PHONETIC_RULES_LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError):
        get_settings()


def test_log_level_without_rules_dir(monkeypatch):
    monkeypatch.delenv("PHONETIC_RULES_DIR", raising=False)
    monkeypatch.setenv("PHONETIC_RULES_LOG_LEVEL", " info ")
    assert get_log_level() == "INFO"

    monkeypatch.setenv("PHONETIC_RULES_LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError):
        get_log_level()
