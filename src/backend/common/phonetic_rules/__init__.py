"""Context-sensitive phonetic rule matching.

This package only contains the rule primitives a transcription driver builds on:
- compiled context matchers and position-based rule matching;
- phonemes tagged with the languages they are valid for;
- the rule file parser and the registry of parsed rule sets.
"""

from .errors import ConfigurationError, MalformedExpressionError, PhoneticRulesError
from .languages import ANY_LANGUAGE, NO_LANGUAGES, LanguageSet, Languages
from .models import ANY, COMMON, NameType, RuleType
from .parser import RuleFileParser
from .patterns import ContextMatcher, MatcherKind, compile_context
from .phonemes import Phoneme, PhonemeExpr, PhonemeList
from .registry import RuleRegistry, build_rule_registry, default_registry
from .resources import DirectoryResourceLoader, MappingResourceLoader, ResourceLoader
from .rule import Rule

__all__ = [
    "ANY",
    "ANY_LANGUAGE",
    "COMMON",
    "NO_LANGUAGES",
    "ConfigurationError",
    "ContextMatcher",
    "DirectoryResourceLoader",
    "LanguageSet",
    "Languages",
    "MalformedExpressionError",
    "MappingResourceLoader",
    "MatcherKind",
    "NameType",
    "Phoneme",
    "PhonemeExpr",
    "PhonemeList",
    "PhoneticRulesError",
    "ResourceLoader",
    "Rule",
    "RuleFileParser",
    "RuleRegistry",
    "RuleType",
    "build_rule_registry",
    "compile_context",
    "default_registry",
]
