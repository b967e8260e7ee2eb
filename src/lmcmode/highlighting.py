"""HTML syntax highlighting for LMC source.

LmcHighlighter renders LMC code as HTML with one CSS-classed span per
token. Class names are the host style names (``TokenType.style``) behind a
configurable prefix, so CodeMirror themes apply unchanged:

    <pre class="lmc"><code><span class="cm-link">LOOP</span> ...

Only LMC aliases and the LMC MIME type are highlighted; any other language
comes back as an escaped plain block.

Usage:
    from lmcmode.highlighting import highlight

    html = highlight("LOOP LDA X\\n     BRA LOOP", "lmc")
"""

from __future__ import annotations

from collections.abc import Iterable
from html import escape
from typing import Protocol

from lmcmode.config import get_highlight_config
from lmcmode.lexer import LmcLexer
from lmcmode.plugin import IMPLEMENTED_MODES, LMC_MIME
from lmcmode.stream import split_lines
from lmcmode.tokens import Token


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and language and return HTML markup
    with syntax highlighting applied.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier (e.g., "lmc", "python")
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output

        Returns:
            HTML markup with highlighting

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
        """
        ...


LMC_LANGUAGES: frozenset[str] = frozenset(IMPLEMENTED_MODES) | {LMC_MIME}


class LmcHighlighter:
    """Renders LMC source to HTML using LmcLexer."""

    __slots__ = ("_lexer",)

    def __init__(self, lexer: LmcLexer | None = None) -> None:
        self._lexer = lexer if lexer is not None else LmcLexer()

    def supports_language(self, language: str) -> bool:
        return language in LMC_LANGUAGES

    def highlight(
        self,
        code: str,
        language: str = "lmc",
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight LMC code.

        ``language`` is accepted for protocol compatibility; the code is
        always lexed as LMC.
        """
        config = get_highlight_config()
        emphasized = set(hl_lines) if hl_lines else set()
        state = self._lexer.start_state()

        rendered: list[str] = []
        for number, line in enumerate(split_lines(code), start=1):
            tokens = self._lexer.tokenize_line(
                line, state, line_number=number, tab_size=config.tab_size
            )
            body = _render_line(line, tokens, config.class_prefix)
            if show_linenos:
                body = f'<span class="lineno">{number}</span>{body}'
            if number in emphasized:
                body = f'<span class="hll">{body}</span>'
            rendered.append(body)

        return f'<pre class="{config.wrap_class}"><code>' + "\n".join(rendered) + "</code></pre>"


def _render_line(line: str, tokens: Iterable[Token], class_prefix: str) -> str:
    parts: list[str] = []
    pos = 0
    for token in tokens:
        begin = token.column - 1
        parts.append(escape(line[pos:begin]))
        parts.append(
            f'<span class="{class_prefix}{token.type.style}">{escape(token.value)}</span>'
        )
        pos = begin + len(token.value)
    parts.append(escape(line[pos:]))
    return "".join(parts)


_LMC_HIGHLIGHTER = LmcHighlighter()


def highlight(
    code: str,
    language: str = "lmc",
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight code, routing LMC aliases to LmcHighlighter.

    Args:
        code: Source code to highlight
        language: Mode name or MIME type
        hl_lines: 1-indexed line numbers to emphasize (optional)
        show_linenos: Include line numbers in output

    Returns:
        HTML markup; an escaped plain block for languages other than LMC
    """
    if _LMC_HIGHLIGHTER.supports_language(language):
        return _LMC_HIGHLIGHTER.highlight(
            code, language, hl_lines=hl_lines, show_linenos=show_linenos
        )

    escaped_code = escape(code)
    lang_class = f' class="language-{escape(language)}"' if language else ""
    return f"<pre><code{lang_class}>{escaped_code}</code></pre>"
