"""Context-sensitive lexer for Little Man Computer assembly.

Architecture:
lexer/
├── __init__.py          # Re-exports LmcLexer, LexerState
├── core.py              # LmcLexer (next_token + line/document drivers)
├── state.py             # LexerState flags
├── rules.py             # Ordered classification table and patterns
└── keywords.py          # Mnemonic tables

Usage:
    >>> from lmcmode.lexer import LmcLexer
    >>> lexer = LmcLexer()
    >>> [t.type.name for t in lexer.tokenize("COUNTER DAT 5")]
    ['VARIABLE', 'DIRECTIVE', 'NUMBER']

"""

from lmcmode.lexer.core import LmcLexer
from lmcmode.lexer.state import LexerState

__all__ = ["LexerState", "LmcLexer"]
