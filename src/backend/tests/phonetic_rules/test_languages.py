import pytest

from common.phonetic_rules.errors import ConfigurationError
from common.phonetic_rules.languages import (
    ANY_LANGUAGE,
    NO_LANGUAGES,
    LanguageSet,
    Languages,
    parse_language_names,
)
from common.phonetic_rules.models import NameType


def test_from_identifiers_builds_restricted_set():
    langs = LanguageSet.from_identifiers(["en", "de"])
    assert not langs.is_singleton()
    assert langs.contains("en")
    assert not langs.contains("fr")
    assert LanguageSet.from_identifiers([]) is NO_LANGUAGES


def test_singleton_value():
    langs = LanguageSet.from_identifiers({"german"})
    assert langs.is_singleton()
    assert langs.single_value() == "german"
    with pytest.raises(ValueError):
        LanguageSet.from_identifiers({"a", "b"}).single_value()


def test_any_language_is_not_a_singleton():
    assert not ANY_LANGUAGE.is_singleton()
    assert not NO_LANGUAGES.is_singleton()
    assert ANY_LANGUAGE.contains("anything")
    assert NO_LANGUAGES.is_empty()


def test_restrict_to():
    en_de = LanguageSet.from_identifiers({"en", "de"})
    assert ANY_LANGUAGE.restrict_to(en_de) == en_de
    assert en_de.restrict_to(ANY_LANGUAGE) == en_de
    assert NO_LANGUAGES.restrict_to(en_de) is NO_LANGUAGES
    assert en_de.restrict_to(NO_LANGUAGES) is NO_LANGUAGES
    assert ANY_LANGUAGE.restrict_to(ANY_LANGUAGE) is ANY_LANGUAGE
    assert en_de.restrict_to(LanguageSet.from_identifiers({"de", "fr"})) == LanguageSet.from_identifiers({"de"})


def test_str_is_stable():
    assert str(LanguageSet.from_identifiers({"b", "a"})) == "{a, b}"
    assert str(ANY_LANGUAGE) == "ANY_LANGUAGE"


def test_parse_language_names_skips_comments_and_blanks():
    lines = ["/* header", "still comment */", "", "  any ", "english", "german"]
    assert parse_language_names(lines) == ("any", "english", "german")


def test_languages_for_name_type(make_loader, gen_resources):
    languages = Languages.for_name_type(make_loader(gen_resources), NameType.GENERIC)
    assert languages.languages == ("any", "english", "german")
    assert "english" in languages
    assert list(languages) == ["any", "english", "german"]


def test_languages_for_missing_name_type(make_loader):
    with pytest.raises(ConfigurationError):
        Languages.for_name_type(make_loader({}), NameType.SEPHARDIC)
