import os
import sys


# Ensure `src/backend` is on sys.path so `import common...` works.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.phonetic_rules.models import NameType, RuleType
from common.phonetic_rules.resources import MappingResourceLoader, rules_resource_name


GEN_LANGUAGES = ("any", "english", "german")


@pytest.fixture
def make_loader():
    def _make(resources: dict) -> MappingResourceLoader:
        return MappingResourceLoader(resources)

    return _make


@pytest.fixture
def gen_resources() -> dict:
    """A complete, tiny rule set for the generic naming system."""
    resources = {
        "gen_languages.txt": "/* languages\n   for gen */\nany\nenglish\ngerman\n",
    }
    for rule_type in RuleType:
        for language in GEN_LANGUAGES:
            resources[rules_resource_name(NameType.GENERIC, rule_type, language)] = (
                f'// {rule_type.value} rules for {language}\n'
                f'"{language[0]}" "" "" "{language[0]}"\n'
                f'"sch" "" "" "S[german]"\n'
            )
        if rule_type != RuleType.RULES:
            resources[rules_resource_name(NameType.GENERIC, rule_type, "common")] = (
                '#include gen_shared\n"h" "" "$" ""\n'
            )
    resources["gen_shared.txt"] = '"e" "" "$" "(|e)"\n'
    return resources


@pytest.fixture
def write_rules_dir(tmp_path):
    def _write(resources: dict):
        for name, text in resources.items():
            (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path

    return _write
