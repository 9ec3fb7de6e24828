from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel

from .config import get_log_level, get_settings
from .models import NameType, RuleType
from .registry import RuleRegistry, build_rule_registry
from .resources import DirectoryResourceLoader, rules_resource_name


class RuleSetCatalogEntry(BaseModel):
    name_type: NameType
    rule_type: RuleType
    language: str
    resource: str
    rule_count: int


def build_catalog(registry: RuleRegistry) -> List[RuleSetCatalogEntry]:
    entries: List[RuleSetCatalogEntry] = []
    for name_type, rule_type, language in registry.keys():
        rules = registry.get_rules_for_language(name_type, rule_type, language)
        entries.append(
            RuleSetCatalogEntry(
                name_type=name_type,
                rule_type=rule_type,
                language=language,
                resource=rules_resource_name(name_type, rule_type, language),
                rule_count=len(rules),
            )
        )

    entries.sort(key=lambda e: (e.name_type.value, e.rule_type.value, e.language))
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=True)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Parse phonetic rule files and list the rule sets found.")
    parser.add_argument(
        "--rules-dir",
        type=Path,
        default=None,
        help="Directory holding the rule resources (default: $PHONETIC_RULES_DIR).",
    )
    parser.add_argument(
        "--name-type",
        action="append",
        choices=[n.value for n in NameType],
        help="Naming system to load; repeat for several (default: all).",
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    if args.rules_dir is None:
        settings = get_settings()
        rules_dir, name_types, log_level = settings.rules_dir, settings.name_types, settings.log_level
    else:
        rules_dir, name_types, log_level = args.rules_dir, list(NameType), get_log_level()
    if args.name_type:
        name_types = [NameType(n) for n in args.name_type]

    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    registry = build_rule_registry(DirectoryResourceLoader(rules_dir), name_types)
    catalog = [e.model_dump(mode="json") for e in build_catalog(registry)]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
