from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .config import get_settings
from .errors import ConfigurationError
from .languages import LanguageSet, Languages
from .models import ANY, COMMON, NameType, RuleType
from .parser import RuleFileParser
from .resources import DirectoryResourceLoader, ResourceLoader, rules_resource_name
from .rule import Rule

logger = logging.getLogger(__name__)

RuleTable = Mapping[NameType, Mapping[RuleType, Mapping[str, Tuple[Rule, ...]]]]


class RuleRegistry:
    """Immutable ``name type -> rule type -> language -> rules`` table.

    Build one with ``build_rule_registry`` and pass it to whatever needs rules.
    """

    def __init__(self, table: RuleTable):
        self._table: RuleTable = MappingProxyType(
            {
                name_type: MappingProxyType(
                    {rule_type: MappingProxyType(dict(by_lang)) for rule_type, by_lang in by_rule.items()}
                )
                for name_type, by_rule in table.items()
            }
        )

    def get_rules(self, name_type: NameType, rule_type: RuleType, languages: LanguageSet) -> Tuple[Rule, ...]:
        if languages.is_singleton():
            return self.get_rules_for_language(name_type, rule_type, languages.single_value())
        return self.get_rules_for_language(name_type, rule_type, ANY)

    def get_rules_for_language(self, name_type: NameType, rule_type: RuleType, language: str) -> Tuple[Rule, ...]:
        rules = self._table.get(name_type, {}).get(rule_type, {}).get(language)
        if rules is None:
            raise ConfigurationError(
                f"No rules found for {_key_name(name_type)}, {_key_name(rule_type)}, {language}."
            )
        return rules

    def keys(self) -> Iterator[Tuple[NameType, RuleType, str]]:
        for name_type, by_rule in self._table.items():
            for rule_type, by_lang in by_rule.items():
                for language in by_lang:
                    yield name_type, rule_type, language

    def name_types(self) -> Iterable[NameType]:
        return self._table.keys()


def build_rule_registry(
    loader: ResourceLoader,
    name_types: Optional[Iterable[NameType]] = None,
) -> RuleRegistry:
    parser = RuleFileParser(loader)
    table: Dict[NameType, Dict[RuleType, Dict[str, Tuple[Rule, ...]]]] = {}

    for name_type in name_types if name_types is not None else NameType:
        languages = Languages.for_name_type(loader, name_type)
        by_rule: Dict[RuleType, Dict[str, Tuple[Rule, ...]]] = {}
        for rule_type in RuleType:
            by_lang: Dict[str, Tuple[Rule, ...]] = {}
            for language in languages:
                by_lang[language] = _parse(parser, name_type, rule_type, language)
            if rule_type != RuleType.RULES:
                by_lang[COMMON] = _parse(parser, name_type, rule_type, COMMON)
            by_rule[rule_type] = by_lang
        table[name_type] = by_rule

    registry = RuleRegistry(table)
    logger.info(
        "Built rule registry: %d name types, %d rule sets",
        len(table),
        sum(1 for _ in registry.keys()),
    )
    return registry


def _key_name(key: object) -> str:
    return str(getattr(key, "value", key))


def _parse(parser: RuleFileParser, name_type: NameType, rule_type: RuleType, language: str) -> Tuple[Rule, ...]:
    resource = rules_resource_name(name_type, rule_type, language)
    rules = parser.parse_resource(resource)
    logger.debug("Parsed %d rules from %s", len(rules), resource)
    return rules


_default_registry: Optional[RuleRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> RuleRegistry:
    """Process-wide registry built from ``PHONETIC_RULES_DIR`` on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                settings = get_settings()
                _default_registry = build_rule_registry(
                    DirectoryResourceLoader(settings.rules_dir),
                    settings.name_types,
                )
    return _default_registry
