"""Forward-only character cursor over one line of source.

StringStream is the concrete cursor the lexer reads from. It mirrors the
line stream that CodeMirror-family editors hand to a mode's token function,
so hosts can adapt their own stream objects to the same surface
(see lmcmode.protocol.CharStream).

The token currently being scanned runs from ``start`` to ``pos``. Failed
matches never move ``pos``; only successful matches, ``next()``,
``eat_space()`` and ``skip_to_end()`` consume input.

Example:
    >>> stream = StringStream("  LDA ONE")
    >>> stream.indentation()
    2
    >>> stream.eat_space()
    True
    >>> stream.start = stream.pos
    >>> stream.column()
    2
    >>> bool(stream.match("lda", case_insensitive=True))
    True
    >>> stream.current()
    'LDA'

"""

from __future__ import annotations

import re

from lmcmode.config import get_highlight_config


_LINE_BREAK = re.compile(r"\r\n?|\n")


def split_lines(text: str) -> list[str]:
    """Split a document into lines the way an editor does.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line; form feeds and Unicode
    separators stay inside it. A trailing line break does not start an
    extra line.
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def count_column(text: str, end: int, tab_size: int) -> int:
    """Visual column of offset ``end`` in ``text``.

    Tabs advance to the next multiple of ``tab_size``; every other
    character counts as one column.
    """
    column = 0
    for char in text[:end]:
        if char == "\t":
            column += tab_size - (column % tab_size)
        else:
            column += 1
    return column


class StringStream:
    """Cursor over a single line of text.

    Attributes:
        string: The line being scanned
        pos: Current offset (next character to consume)
        start: Offset where the current token began
        tab_size: Tab width for column() and indentation()

    """

    __slots__ = ("string", "pos", "start", "tab_size")

    def __init__(self, string: str, tab_size: int | None = None) -> None:
        self.string = string
        self.pos = 0
        self.start = 0
        if tab_size is None:
            tab_size = get_highlight_config().tab_size
        elif tab_size < 1:
            msg = f"tab_size must be a positive integer, got {tab_size!r}"
            raise ValueError(msg)
        self.tab_size = tab_size

    def __repr__(self) -> str:
        return f"StringStream({self.string!r}, pos={self.pos})"

    # =========================================================================
    # Position queries
    # =========================================================================

    def eol(self) -> bool:
        """True when the cursor is at the end of the line."""
        return self.pos >= len(self.string)

    def sol(self) -> bool:
        """True when the cursor is at the start of the line."""
        return self.pos == 0

    def column(self) -> int:
        """Visual column (0-indexed) of the current token start."""
        return count_column(self.string, self.start, self.tab_size)

    def indentation(self) -> int:
        """Visual width of the line's leading whitespace."""
        end = 0
        length = len(self.string)
        while end < length and self.string[end].isspace():
            end += 1
        return count_column(self.string, end, self.tab_size)

    def current(self) -> str:
        """Text of the current token (``start`` up to ``pos``)."""
        return self.string[self.start : self.pos]

    # =========================================================================
    # Consumption
    # =========================================================================

    def peek(self) -> str | None:
        """Character at the cursor without consuming it, or None at end."""
        if self.pos >= len(self.string):
            return None
        return self.string[self.pos]

    def next(self) -> str | None:
        """Consume and return one character, or None at end of line."""
        if self.pos >= len(self.string):
            return None
        char = self.string[self.pos]
        self.pos += 1
        return char

    def eat_space(self) -> bool:
        """Consume whitespace at the cursor.

        Returns:
            True if anything was consumed
        """
        begin = self.pos
        length = len(self.string)
        while self.pos < length and self.string[self.pos].isspace():
            self.pos += 1
        return self.pos > begin

    def skip_to_end(self) -> None:
        """Move the cursor to the end of the line."""
        self.pos = len(self.string)

    def match(
        self,
        pattern: str | re.Pattern[str],
        consume: bool = True,
        case_insensitive: bool = False,
    ) -> re.Match[str] | bool | None:
        """Try to match ``pattern`` exactly at the cursor.

        Args:
            pattern: Compiled regex (matched at ``pos``, never searched
                forward) or a literal string
            consume: Advance past the match on success; False makes this a
                pure lookahead
            case_insensitive: Compare literal strings case-insensitively.
                Compiled patterns carry their own flags.

        Returns:
            For a regex, the match object or None. For a literal string,
            True or False.
        """
        if isinstance(pattern, str):
            candidate = self.string[self.pos : self.pos + len(pattern)]
            if case_insensitive:
                matched = candidate.lower() == pattern.lower()
            else:
                matched = candidate == pattern
            if matched and consume:
                self.pos += len(pattern)
            return matched

        match = pattern.match(self.string, self.pos)
        if match is not None and consume:
            self.pos = match.end()
        return match
