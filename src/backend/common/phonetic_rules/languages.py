from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Tuple

from .models import NameType
from .resources import BLOCK_COMMENT_END, BLOCK_COMMENT_START, ResourceLoader, languages_resource_name


class LanguageSetKind(str, Enum):
    ANY_LANGUAGE = "ANY_LANGUAGE"
    NO_LANGUAGES = "NO_LANGUAGES"
    SOME = "SOME"


@dataclass(frozen=True)
class LanguageSet:
    """Set of language ids a phoneme is valid for.

    ``ANY_LANGUAGE`` is the unrestricted marker and the identity of
    ``restrict_to``; ``NO_LANGUAGES`` absorbs everything it meets.
    """

    kind: LanguageSetKind
    languages: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_identifiers(cls, identifiers: Iterable[str]) -> "LanguageSet":
        langs = frozenset(identifiers)
        if not langs:
            return NO_LANGUAGES
        return cls(kind=LanguageSetKind.SOME, languages=langs)

    def is_empty(self) -> bool:
        return self.kind == LanguageSetKind.NO_LANGUAGES

    def is_singleton(self) -> bool:
        return self.kind == LanguageSetKind.SOME and len(self.languages) == 1

    def single_value(self) -> str:
        if not self.is_singleton():
            raise ValueError(f"Language set is not a singleton: {self}")
        return next(iter(self.languages))

    def contains(self, language: str) -> bool:
        if self.kind == LanguageSetKind.ANY_LANGUAGE:
            return True
        return language in self.languages

    def restrict_to(self, other: "LanguageSet") -> "LanguageSet":
        if self.kind == LanguageSetKind.ANY_LANGUAGE:
            return other
        if self.kind == LanguageSetKind.NO_LANGUAGES:
            return self
        if other.kind == LanguageSetKind.ANY_LANGUAGE:
            return self
        if other.kind == LanguageSetKind.NO_LANGUAGES:
            return other
        return LanguageSet.from_identifiers(self.languages & other.languages)

    def __str__(self) -> str:
        if self.kind == LanguageSetKind.SOME:
            return "{" + ", ".join(sorted(self.languages)) + "}"
        return self.kind.value


ANY_LANGUAGE = LanguageSet(kind=LanguageSetKind.ANY_LANGUAGE)
NO_LANGUAGES = LanguageSet(kind=LanguageSetKind.NO_LANGUAGES)


def parse_language_names(lines: Iterable[str]) -> Tuple[str, ...]:
    names = []
    in_comment = False
    for raw in lines:
        line = raw.strip()
        if in_comment:
            if line.endswith(BLOCK_COMMENT_END):
                in_comment = False
        elif line.startswith(BLOCK_COMMENT_START):
            in_comment = True
        elif line:
            names.append(line)
    return tuple(names)


@dataclass(frozen=True)
class Languages:
    name_type: NameType
    languages: Tuple[str, ...]

    @classmethod
    def for_name_type(cls, loader: ResourceLoader, name_type: NameType) -> "Languages":
        resource = languages_resource_name(name_type)
        return cls(name_type=name_type, languages=parse_language_names(loader.load(resource)))

    def __iter__(self):
        return iter(self.languages)

    def __contains__(self, language: object) -> bool:
        return language in self.languages
