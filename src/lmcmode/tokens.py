"""Token and TokenType definitions for the LMC lexer.

The lexer classifies each lexical unit with a TokenType tag. Only the
document-level drivers wrap tags into Token records; the per-call
``next_token`` contract returns the bare tag (or None).

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Lexical categories of LMC source.

    Closed set. "No token" (whitespace, newlines, skipped characters)
    is represented by None rather than a member.

    """

    KEYWORD = auto()  # STA, LDA, ADD, BRA, HLT, ...
    LINK = auto()  # Label at statement start, or branch target
    VARIABLE = auto()  # DAT label, or operand of a variabled/arithmetic mnemonic
    NUMBER = auto()  # Digits following DAT
    COMMENT = auto()  # Anything unrecognized, through end of line
    IO_KEYWORD = auto()  # INP, OUT, OTC
    DIRECTIVE = auto()  # DAT

    @property
    def style(self) -> str:
        """Host style name used by editor themes for this category."""
        return _STYLE_NAMES[self]


# Style names understood by CodeMirror-family themes
_STYLE_NAMES: dict[TokenType, str] = {
    TokenType.KEYWORD: "keyword",
    TokenType.LINK: "link",
    TokenType.VARIABLE: "variable",
    TokenType.NUMBER: "number",
    TokenType.COMMENT: "comment",
    TokenType.IO_KEYWORD: "string",
    TokenType.DIRECTIVE: "def",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of LMC source.

    Attributes:
        type: The token category
        value: The exact source text covered (without trailing whitespace)
        line: Line number (1-indexed)
        column: Character offset of the first character (1-indexed)

    """

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
