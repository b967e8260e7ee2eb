"""Host-facing protocols.

CharStream is what the lexer reads from; Mode is what gets installed in a
ModeRegistry. Both follow the shape of the line-stream mode API used by
CodeMirror-family editors, so a host can adapt its own objects without
subclassing anything here.

Example:
    >>> from lmcmode.lexer import LmcLexer
    >>> isinstance(LmcLexer(), Mode)
    True

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lmcmode.tokens import TokenType


@runtime_checkable
class CharStream(Protocol):
    """Forward-only cursor over one line of text.

    ``start`` marks where the token being scanned began; ``column()`` is
    measured from it.
    """

    start: int
    pos: int

    def match(
        self,
        pattern: str | re.Pattern[str],
        consume: bool = True,
        case_insensitive: bool = False,
    ) -> Any:
        """Match at the cursor, consuming only on success."""
        ...

    def skip_to_end(self) -> None: ...

    def eat_space(self) -> bool: ...

    def column(self) -> int: ...

    def indentation(self) -> int: ...

    def next(self) -> str | None: ...

    def eol(self) -> bool: ...

    def current(self) -> str: ...


@runtime_checkable
class Mode(Protocol):
    """A tokenizer the host can drive line by line.

    Contract:
        - token() MUST advance the stream unless it is already at eol()
        - token() MUST NOT raise for any input
        - start_state() returns a fresh state; copy_state() an independent
          copy of one
        - blank_line() is called instead of token() for an empty line; hosts
          skip it on modes that do not define it
    """

    def token(self, stream: CharStream, state: Any) -> TokenType | None:
        """Consume one lexical unit and return its tag (or None)."""
        ...

    def start_state(self) -> Any: ...

    def copy_state(self, state: Any) -> Any: ...

    def blank_line(self, state: Any) -> None: ...
