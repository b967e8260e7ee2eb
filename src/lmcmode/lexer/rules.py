"""Ordered classification rules for the LMC lexer.

Each Rule pairs a predicate with the TokenType it emits and, optionally,
the state flag it raises for the next call. The lexer tries RULES in order
and the first predicate that matches wins. Predicates consume input only
when they succeed.

Patterns are anchored at the cursor by ``re.Pattern.match`` but are not
word-bounded, so ``OUTER`` lexes as ``OUT`` followed by whatever the rest
classifies as. Word characters are ASCII only.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lmcmode.lexer.keywords import (
    ARITHMETIC_KEYWORDS,
    BRANCH_KEYWORDS,
    DATA_DIRECTIVE,
    IO_KEYWORDS,
    LABELABLE_KEYWORDS,
    OTHER_KEYWORDS,
    VARIABLED_KEYWORDS,
)
from lmcmode.tokens import TokenType

if TYPE_CHECKING:
    from lmcmode.lexer.state import LexerState
    from lmcmode.protocol import CharStream


def _alternation(words: frozenset[str]) -> str:
    return "(?:" + "|".join(sorted(words)) + ")"


_KEYWORD_FLAGS = re.IGNORECASE | re.ASCII

NEWLINE_PATTERN = re.compile(r"\n")
DIGITS_PATTERN = re.compile(r"\d+", re.ASCII)
IO_PATTERN = re.compile(_alternation(IO_KEYWORDS), _KEYWORD_FLAGS)
ARITHMETIC_PATTERN = re.compile(_alternation(ARITHMETIC_KEYWORDS), _KEYWORD_FLAGS)
BRANCH_PATTERN = re.compile(_alternation(BRANCH_KEYWORDS), _KEYWORD_FLAGS)
VARIABLED_PATTERN = re.compile(_alternation(VARIABLED_KEYWORDS), _KEYWORD_FLAGS)
OTHER_PATTERN = re.compile(_alternation(OTHER_KEYWORDS), _KEYWORD_FLAGS)
DAT_PATTERN = re.compile(DATA_DIRECTIVE, _KEYWORD_FLAGS)

# Leading word whose statement is a DAT: "COUNTER DAT 5"
VARIABLE_LABEL_PATTERN = re.compile(rf"\w+(?=\s*{DATA_DIRECTIVE})", _KEYWORD_FLAGS)
# Leading word whose statement is an instruction: "LOOP LDA X"
LINK_LABEL_PATTERN = re.compile(
    rf"\w+(?=\s*{_alternation(LABELABLE_KEYWORDS)})", _KEYWORD_FLAGS
)

WORD_PATTERN = re.compile(r"\w+", re.ASCII)
COMMENT_PATTERN = re.compile(r"\S+")


Predicate = Callable[["CharStream", "LexerState"], bool]


@dataclass(frozen=True, slots=True)
class Rule:
    """One entry of the classification table.

    Attributes:
        name: Short identifier, used in tests and debugging
        token_type: Tag emitted when the predicate matches
        matches: ``(stream, previous) -> bool`` where ``previous`` holds the
            flags as they were before this call
        sets: Name of the LexerState flag to raise on success, if any

    """

    name: str
    token_type: TokenType
    matches: Predicate
    sets: str | None = None


def _consumes(pattern: re.Pattern[str]) -> Predicate:
    def predicate(stream: CharStream, previous: LexerState) -> bool:
        return bool(stream.match(pattern))

    return predicate


def _at_statement_start(stream: CharStream) -> bool:
    return stream.indentation() == stream.column()


def _data_number(stream: CharStream, previous: LexerState) -> bool:
    return previous.previous_dat and bool(stream.match(DIGITS_PATTERN))


def _variable(stream: CharStream, previous: LexerState) -> bool:
    if _at_statement_start(stream) and stream.match(VARIABLE_LABEL_PATTERN):
        return True
    return previous.previous_variable and bool(stream.match(WORD_PATTERN))


def _link(stream: CharStream, previous: LexerState) -> bool:
    if _at_statement_start(stream) and stream.match(LINK_LABEL_PATTERN):
        return True
    return previous.previous_linkable and bool(stream.match(WORD_PATTERN))


RULES: tuple[Rule, ...] = (
    Rule("number", TokenType.NUMBER, _data_number),
    Rule("io", TokenType.IO_KEYWORD, _consumes(IO_PATTERN)),
    Rule("arithmetic", TokenType.KEYWORD, _consumes(ARITHMETIC_PATTERN), "previous_variable"),
    Rule("branch", TokenType.KEYWORD, _consumes(BRANCH_PATTERN), "previous_linkable"),
    Rule("variabled", TokenType.KEYWORD, _consumes(VARIABLED_PATTERN), "previous_variable"),
    Rule("other", TokenType.KEYWORD, _consumes(OTHER_PATTERN)),
    Rule("dat", TokenType.DIRECTIVE, _consumes(DAT_PATTERN), "previous_dat"),
    Rule("variable", TokenType.VARIABLE, _variable),
    Rule("link", TokenType.LINK, _link),
)

# Rules driven purely by the fixed mnemonic tables and the DAT literal
KEYWORD_RULES: tuple[Rule, ...] = RULES[:7]
