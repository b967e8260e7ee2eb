"""
lmcmode: syntax highlighting mode for Little Man Computer assembly

A single-pass, context-sensitive tokenizer for LMC source, plus the glue an
editor needs to install it: a mode registry, a plugin lifecycle, and an HTML
highlighter. The lexer never raises and always makes progress.

Quick Start:
    >>> from lmcmode import tokenize
    >>> [(t.type.name, t.value) for t in tokenize("LOOP STA COUNTER")]
    [('LINK', 'LOOP'), ('KEYWORD', 'STA'), ('VARIABLE', 'COUNTER')]

    >>> from lmcmode import highlight
    >>> html = highlight("COUNTER DAT 5", "lmc")

Editor integration:
    >>> from lmcmode import LmcPlugin, ModeRegistry, Workspace
    >>> workspace = Workspace(ModeRegistry())
    >>> plugin = LmcPlugin(workspace)
    >>> plugin.load()
    >>> workspace.mark_layout_ready()

Installation:
    pip install lmc-mode              # Core (zero deps)
    pip install lmc-mode[test]        # + pytest, hypothesis
"""

from collections.abc import Iterator

from lmcmode.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from lmcmode.errors import LmcModeError, RegistrationError, WorkspaceError
from lmcmode.highlighting import LmcHighlighter, highlight
from lmcmode.lexer import LexerState, LmcLexer
from lmcmode.plugin import IMPLEMENTED_MODES, LMC_MIME, LmcPlugin
from lmcmode.protocol import CharStream, Mode
from lmcmode.registry import ModeRegistry
from lmcmode.stream import StringStream
from lmcmode.tokens import Token, TokenType
from lmcmode.workspace import EditorView, Workspace

__version__ = "0.1.0"

_LEXER = LmcLexer()


def tokenize(source: str, state: LexerState | None = None) -> Iterator[Token]:
    """Tokenize LMC source with a shared, stateless lexer.

    Args:
        source: LMC source text
        state: Optional starting state, mutated in place

    Returns:
        Iterator of Token objects in source order
    """
    return _LEXER.tokenize(source, state)


__all__ = [
    "IMPLEMENTED_MODES",
    "LMC_MIME",
    "CharStream",
    "EditorView",
    "HighlightConfig",
    "LexerState",
    "LmcHighlighter",
    "LmcLexer",
    "LmcModeError",
    "LmcPlugin",
    "Mode",
    "ModeRegistry",
    "RegistrationError",
    "StringStream",
    "Token",
    "TokenType",
    "Workspace",
    "WorkspaceError",
    "__version__",
    "get_highlight_config",
    "highlight",
    "highlight_config_context",
    "reset_highlight_config",
    "set_highlight_config",
    "tokenize",
]
