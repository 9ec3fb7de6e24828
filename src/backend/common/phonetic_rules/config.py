from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .models import NameType


load_dotenv()


class PhoneticRulesSettings(BaseModel):
    rules_dir: Path
    name_types: List[NameType] = Field(default_factory=lambda: list(NameType))
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return _normalize_log_level(value)


def get_settings() -> PhoneticRulesSettings:
    """
    Load settings from environment variables (a local .env file is honored).

    Reads:
      PHONETIC_RULES_DIR (required), PHONETIC_RULES_NAME_TYPES (comma separated,
      e.g. "gen,ash"; defaults to all), PHONETIC_RULES_LOG_LEVEL
    """
    raw_name_types = os.getenv("PHONETIC_RULES_NAME_TYPES", "").strip()
    values = {
        "rules_dir": _require_env("PHONETIC_RULES_DIR"),
        "log_level": os.getenv("PHONETIC_RULES_LOG_LEVEL", "WARNING"),
    }
    if raw_name_types:
        values["name_types"] = [part.strip() for part in raw_name_types.split(",") if part.strip()]

    try:
        return PhoneticRulesSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid phonetic rules configuration: {exc}") from exc


def _require_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value


def get_log_level() -> str:
    """Validated PHONETIC_RULES_LOG_LEVEL, for callers that don't need a rules dir."""
    raw = os.getenv("PHONETIC_RULES_LOG_LEVEL", "WARNING")
    try:
        return _normalize_log_level(raw)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def _normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level
