"""Single-pass, context-sensitive lexer for LMC assembly.

The lexer classifies one lexical unit per call. Classification of a word
depends on the token before it (carried in a LexerState) and on whether the
word sits at the start of its statement (cursor column equal to the line's
indentation).

Guarantees:
    - Never raises: unrecognized text becomes a COMMENT through end of
      line, or a single skipped character
    - Always advances: every call on a stream not at eol() consumes at
      least one character

Thread Safety:
LmcLexer holds no mutable state and may be shared freely. LexerState
instances must not be shared between documents.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from lmcmode.lexer.rules import COMMENT_PATTERN, NEWLINE_PATTERN, RULES
from lmcmode.lexer.state import LexerState
from lmcmode.stream import StringStream, split_lines
from lmcmode.tokens import Token, TokenType

if TYPE_CHECKING:
    from lmcmode.protocol import CharStream


class LmcLexer:
    """Tokenizer for Little Man Computer assembly.

    Usage:
            >>> lexer = LmcLexer()
            >>> for token in lexer.tokenize("LOOP STA COUNTER"):
            ...     print(token)
        Token(LINK, 'LOOP', 1:1)
        Token(KEYWORD, 'STA', 1:6)
        Token(VARIABLE, 'COUNTER', 1:10)

    The same object implements the Mode protocol (``token``,
    ``start_state``, ``copy_state``, ``blank_line``) and is what a plugin
    registers.

    """

    __slots__ = ()

    def next_token(self, stream: CharStream, state: LexerState) -> TokenType | None:
        """Advance past the next lexical unit and classify it.

        Args:
            stream: Cursor positioned at the unit to scan
            state: Flags left by the previous call; updated in place

        Returns:
            The unit's TokenType, or None for newlines and skipped characters
        """
        stream.start = stream.pos

        previous = state.copy()
        state.reset()

        if stream.match(NEWLINE_PATTERN):
            return None

        for rule in RULES:
            if rule.matches(stream, previous):
                if rule.sets is not None:
                    setattr(state, rule.sets, True)
                stream.eat_space()
                return rule.token_type

        if stream.match(COMMENT_PATTERN):
            stream.skip_to_end()
            return TokenType.COMMENT

        stream.next()
        return None

    # =========================================================================
    # Mode protocol
    # =========================================================================

    def token(self, stream: CharStream, state: LexerState) -> TokenType | None:
        """Mode protocol entry point; see next_token."""
        return self.next_token(stream, state)

    def start_state(self) -> LexerState:
        """Fresh state with every flag cleared."""
        return LexerState()

    def copy_state(self, state: LexerState) -> LexerState:
        return state.copy()

    def blank_line(self, state: LexerState) -> None:
        """Called for empty lines. Flags carry over an empty line unchanged."""

    # =========================================================================
    # Drivers
    # =========================================================================

    def tokenize_line(
        self,
        line: str,
        state: LexerState,
        *,
        line_number: int = 1,
        tab_size: int | None = None,
    ) -> Iterator[Token]:
        """Tokenize one line, carrying ``state`` in and out.

        Yields:
            A Token for every classified unit, in source order
        """
        stream = StringStream(line, tab_size=tab_size)
        while not stream.eol():
            token_type = self.next_token(stream, state)
            if token_type is None:
                continue
            # Trailing whitespace was eaten after the token; trim it back off
            value = stream.current().rstrip()
            yield Token(token_type, value, line_number, stream.start + 1)

    def tokenize(
        self,
        source: str,
        state: LexerState | None = None,
        *,
        tab_size: int | None = None,
    ) -> Iterator[Token]:
        """Tokenize a whole document line by line.

        State carries over from one line to the next. Empty lines go
        through blank_line() instead of the token loop.

        Args:
            source: LMC source text
            state: Starting state (a fresh one if None); mutated in place
            tab_size: Tab width for indentation checks (config default if None)

        Yields:
            Token objects in source order
        """
        if state is None:
            state = self.start_state()
        for index, line in enumerate(split_lines(source), start=1):
            if not line:
                self.blank_line(state)
                continue
            yield from self.tokenize_line(line, state, line_number=index, tab_size=tab_size)
