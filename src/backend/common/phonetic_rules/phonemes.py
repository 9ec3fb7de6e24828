from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .languages import ANY_LANGUAGE, LanguageSet


@dataclass(frozen=True)
class Phoneme:
    text: str
    languages: LanguageSet = ANY_LANGUAGE

    def append(self, suffix: str) -> "Phoneme":
        return Phoneme(self.text + suffix, self.languages)

    def join(self, other: "Phoneme") -> "Phoneme":
        # Only valid for the languages both sides apply to.
        return Phoneme(self.text + other.text, self.languages.restrict_to(other.languages))

    def phonemes(self) -> Tuple["Phoneme", ...]:
        return (self,)

    def __lt__(self, other: "Phoneme") -> bool:
        if not isinstance(other, Phoneme):
            return NotImplemented
        return self.text < other.text


@dataclass(frozen=True)
class PhonemeList:
    alternatives: Tuple[Phoneme, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "alternatives", tuple(self.alternatives))
        if not self.alternatives:
            raise ValueError("PhonemeList requires at least one alternative")

    def phonemes(self) -> Tuple[Phoneme, ...]:
        return self.alternatives


PhonemeExpr = Union[Phoneme, PhonemeList]
