"""Parser for the textual rule format.

Each rule is one line of four whitespace separated, optionally double-quoted
columns::

    "pattern" "left context" "right context" "phoneme expression"

Everything after ``//`` is a comment. A line starting with ``/*`` opens a block
comment that runs until a line ending in ``*/``. ``#include name`` splices the
rules of ``name.txt`` in place.

Phoneme expressions are either a single phoneme (``ts``, ``ts[german+polish]``)
or a bracketed list of alternatives (``(ts|tS[polish]|)``).
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from .errors import MalformedExpressionError
from .languages import ANY_LANGUAGE, LanguageSet
from .phonemes import Phoneme, PhonemeExpr, PhonemeList
from .resources import (
    BLOCK_COMMENT_END,
    BLOCK_COMMENT_START,
    INCLUDE,
    LINE_COMMENT,
    ResourceLoader,
    include_resource_name,
)
from .rule import Rule

logger = logging.getLogger(__name__)

DOUBLE_QUOTE = '"'
RULE_COLUMNS = 4

_COLUMN_SEPARATOR = re.compile(r"[ \t\n\x0b\f\r]+")
# Everything up to and including the space character counts as padding.
_PADDING = "".join(chr(c) for c in range(0x21))


class ParserState(str, Enum):
    NORMAL = "NORMAL"
    IN_BLOCK_COMMENT = "IN_BLOCK_COMMENT"


class RuleFileParser:
    def __init__(self, loader: ResourceLoader):
        self._loader = loader

    def parse_resource(self, identifier: str, location: str | None = None) -> Tuple[Rule, ...]:
        return self.parse(self._loader.load(identifier), location or identifier)

    def parse(self, lines: Iterable[str], location: str) -> Tuple[Rule, ...]:
        return tuple(self._iter_rules(lines, location))

    def _iter_rules(self, lines: Iterable[str], location: str) -> Iterator[Rule]:
        state = ParserState.NORMAL
        for line_number, raw_line in enumerate(lines, start=1):
            if state == ParserState.IN_BLOCK_COMMENT:
                if raw_line.endswith(BLOCK_COMMENT_END):
                    state = ParserState.NORMAL
                continue

            if raw_line.startswith(BLOCK_COMMENT_START):
                state = ParserState.IN_BLOCK_COMMENT
                continue

            line = _strip_comment(raw_line).strip(_PADDING)
            if not line:
                continue

            if line.startswith(INCLUDE):
                yield from self._include(line, raw_line, line_number, location)
                continue

            rule = _parse_rule_line(line, line_number, location)
            if rule is not None:
                yield rule

    def _include(self, line: str, raw_line: str, line_number: int, location: str) -> Iterator[Rule]:
        name = line[len(INCLUDE):].strip(_PADDING)
        if " " in name:
            logger.debug("Ignoring malformed include at %s:%d: %r", location, line_number, raw_line)
            return
        nested = f"{location}->{name}"
        yield from self._iter_rules(self._loader.load(include_resource_name(name)), nested)


def _strip_comment(line: str) -> str:
    idx = line.find(LINE_COMMENT)
    if idx >= 0:
        return line[:idx]
    return line


def _parse_rule_line(line: str, line_number: int, location: str) -> Rule | None:
    parts = _COLUMN_SEPARATOR.split(line)
    if len(parts) != RULE_COLUMNS:
        logger.debug(
            "Ignoring rule at %s:%d split into %d parts: %r", location, line_number, len(parts), line
        )
        return None

    pattern, left_context, right_context, phoneme_text = (strip_quotes(p) for p in parts)
    try:
        phoneme = parse_phoneme_expr(phoneme_text)
    except MalformedExpressionError as exc:
        raise MalformedExpressionError(str(exc), line=line_number, location=location) from exc

    return Rule(
        pattern=pattern,
        left_context=left_context,
        right_context=right_context,
        phoneme=phoneme,
        line=line_number,
        location=location,
    )


def strip_quotes(text: str) -> str:
    if text.startswith(DOUBLE_QUOTE):
        text = text[1:]
    if text.endswith(DOUBLE_QUOTE):
        text = text[:-1]
    return text


def parse_phoneme_expr(text: str) -> PhonemeExpr:
    if not text.startswith("("):
        return parse_phoneme(text)

    if not text.endswith(")"):
        raise MalformedExpressionError(f"Phoneme expression starts with '(' so must end with ')': {text!r}")

    body = text[1:-1]
    alternatives = [parse_phoneme(part) for part in _split_pieces(body, "|")]
    if body.startswith("|") or body.endswith("|"):
        alternatives.append(Phoneme("", ANY_LANGUAGE))
    return PhonemeList(tuple(alternatives))


def parse_phoneme(text: str) -> Phoneme:
    open_idx = text.find("[")
    if open_idx < 0:
        return Phoneme(text, ANY_LANGUAGE)

    if not text.endswith("]"):
        raise MalformedExpressionError(f"Phoneme expression contains a '[' but does not end in ']': {text!r}")

    before = text[:open_idx]
    inside = text[open_idx + 1 : -1]
    return Phoneme(before, LanguageSet.from_identifiers(_split_pieces(inside, "+")))


def _split_pieces(text: str, separator: str) -> List[str]:
    """Split on ``separator``, dropping trailing empty pieces.

    An empty input yields a single empty piece; an input made only of
    separators yields nothing.
    """
    if not text:
        return [text]
    parts = text.split(separator)
    while parts and parts[-1] == "":
        parts.pop()
    return parts
