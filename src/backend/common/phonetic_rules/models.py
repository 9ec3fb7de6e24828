from __future__ import annotations

from enum import Enum

# Reserved pseudo-language keys.
ANY = "any"
COMMON = "common"


class NameType(str, Enum):
    ASHKENAZI = "ash"
    GENERIC = "gen"
    SEPHARDIC = "sep"


class RuleType(str, Enum):
    APPROX = "approx"
    EXACT = "exact"
    RULES = "rules"
