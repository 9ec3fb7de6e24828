from __future__ import annotations

from typing import Optional


class PhoneticRulesError(Exception):
    """Base class for rule loading and lookup failures."""


class ConfigurationError(PhoneticRulesError, LookupError):
    """A resource is missing or a registry lookup hit an unpopulated key."""


class MalformedExpressionError(PhoneticRulesError, ValueError):
    def __init__(self, message: str, *, line: Optional[int] = None, location: Optional[str] = None):
        self.line = line
        self.location = location
        if line is not None:
            message = f"Problem parsing line {line} in {location}: {message}"
        super().__init__(message)
