"""A phoneme rule.

A rule matches at a position when:

- ``pattern`` occurs literally at that position;
- the text before the position matches the left context;
- the text after the pattern matches the right context.

Rules are immutable and safe to share between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .patterns import END_ANCHOR, START_ANCHOR, ContextMatcher, compile_context
from .phonemes import PhonemeExpr


@dataclass(frozen=True)
class Rule:
    pattern: str
    left_context: str
    right_context: str
    phoneme: PhonemeExpr
    line: Optional[int] = field(default=None, compare=False)
    location: Optional[str] = field(default=None, compare=False)
    left_matcher: ContextMatcher = field(init=False, repr=False, compare=False)
    right_matcher: ContextMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_matcher", compile_context(self.left_context + END_ANCHOR))
        object.__setattr__(self, "right_matcher", compile_context(START_ANCHOR + self.right_context))

    def matches(self, text: str, position: int) -> bool:
        if position < 0:
            raise IndexError(f"Cannot match pattern at negative position {position}")

        end = position + len(self.pattern)
        if end > len(text):
            return False

        # Cheapest checks first.
        if text[position:end] != self.pattern:
            return False
        if not self.right_matcher.is_match(text[end:]):
            return False
        return self.left_matcher.is_match(text[:position])

    def describe(self) -> str:
        if self.line is None:
            return f"Rule(pattern={self.pattern!r})"
        return f"Rule(line={self.line}, location={self.location!r})"
