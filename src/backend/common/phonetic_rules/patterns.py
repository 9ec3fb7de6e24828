"""Context matchers.

Rule contexts are written as small regular expressions, but almost all of the
ones found in real rule files are plain prefixes, suffixes or a single
character class. ``compile_context`` recognizes those shapes and turns them into
direct string operations, falling back to ``re`` for everything else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

START_ANCHOR = "^"
END_ANCHOR = "$"

# Characters that make a bracket-free fragment something other than a literal.
_REGEX_META = frozenset(".^$*+?{}[]\\|()")
# Characters that make a bracket body something other than a plain list of chars.
_CLASS_META = frozenset("[]\\-")


class MatcherKind(str, Enum):
    ALL = "ALL"
    EMPTY = "EMPTY"
    EXACT = "EXACT"
    PREFIX = "PREFIX"
    SUFFIX = "SUFFIX"
    CHAR_FIRST = "CHAR_FIRST"
    CHAR_LAST = "CHAR_LAST"
    CHAR_ONLY = "CHAR_ONLY"
    REGEX = "REGEX"


@dataclass(frozen=True)
class ContextMatcher:
    kind: MatcherKind
    # Literal text for EXACT/PREFIX/SUFFIX, class members for CHAR_*, source for REGEX.
    text: str = ""
    negate: bool = False
    regex: Optional[re.Pattern] = None

    def is_match(self, span: str) -> bool:
        kind = self.kind
        if kind == MatcherKind.ALL:
            return True
        if kind == MatcherKind.EMPTY:
            return len(span) == 0
        if kind == MatcherKind.EXACT:
            return span == self.text
        if kind == MatcherKind.PREFIX:
            return span.startswith(self.text)
        if kind == MatcherKind.SUFFIX:
            return span.endswith(self.text)
        if kind == MatcherKind.CHAR_FIRST:
            return len(span) > 0 and (span[0] in self.text) != self.negate
        if kind == MatcherKind.CHAR_LAST:
            return len(span) > 0 and (span[-1] in self.text) != self.negate
        if kind == MatcherKind.CHAR_ONLY:
            return len(span) == 1 and (span in self.text) != self.negate
        if kind == MatcherKind.REGEX:
            return self.regex.search(span) is not None
        raise AssertionError(f"Unhandled matcher kind: {kind}")

    __call__ = is_match


ALL_STRINGS = ContextMatcher(kind=MatcherKind.ALL)


def compile_context(fragment: str) -> ContextMatcher:
    """Compile an anchored context fragment into the cheapest equivalent matcher."""
    starts = fragment.startswith(START_ANCHOR)
    ends = fragment.endswith(END_ANCHOR)
    content = fragment[1 if starts else 0 : len(fragment) - 1 if ends else len(fragment)]

    if starts or ends:
        if "[" not in content:
            matcher = _literal_matcher(content, starts, ends)
        else:
            matcher = _char_class_matcher(content, starts, ends)
        if matcher is not None:
            return matcher

    return ContextMatcher(kind=MatcherKind.REGEX, text=fragment, regex=re.compile(fragment))


def _literal_matcher(content: str, starts: bool, ends: bool) -> Optional[ContextMatcher]:
    if _REGEX_META.intersection(content):
        return None
    if starts and ends:
        if not content:
            return ContextMatcher(kind=MatcherKind.EMPTY)
        return ContextMatcher(kind=MatcherKind.EXACT, text=content)
    if not content:
        return ALL_STRINGS
    if starts:
        return ContextMatcher(kind=MatcherKind.PREFIX, text=content)
    return ContextMatcher(kind=MatcherKind.SUFFIX, text=content)


def _char_class_matcher(content: str, starts: bool, ends: bool) -> Optional[ContextMatcher]:
    if not (content.startswith("[") and content.endswith("]")):
        return None
    body = content[1:-1]
    negate = body.startswith("^")
    if negate:
        body = body[1:]
    if not body or _CLASS_META.intersection(body):
        return None

    if starts and ends:
        kind = MatcherKind.CHAR_ONLY
    elif starts:
        kind = MatcherKind.CHAR_FIRST
    else:
        kind = MatcherKind.CHAR_LAST
    return ContextMatcher(kind=kind, text=body, negate=negate)
