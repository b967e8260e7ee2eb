"""Minimal editor host: open views, a mode registry, and layout readiness.

This is the collaborator a plugin talks to. Real editors provide the same
three things (a way to enumerate open views, a way to re-apply a view's
mode, and a "layout ready" signal); Workspace provides them in plain Python
so plugin lifecycles can run and be tested without an editor.

Re-applying a view's mode re-tokenizes it from a fresh start state using
whatever the registry currently resolves the mode to. A mode that is no
longer registered leaves the view unhighlighted.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from lmcmode.errors import WorkspaceError
from lmcmode.stream import StringStream, split_lines
from lmcmode.tokens import Token
from lmcmode.utils.logger import get_logger

if TYPE_CHECKING:
    from lmcmode.protocol import Mode
    from lmcmode.registry import ModeRegistry

logger = get_logger(__name__)


def run_mode(mode: Mode, text: str) -> list[Token]:
    """Drive ``mode`` over every line of ``text`` the way an editor does.

    State is created once and carried across lines. Empty lines are
    handed to the mode's blank_line hook when it has one.

    Raises:
        WorkspaceError: If the mode returns without consuming input
    """
    state = mode.start_state()
    tokens: list[Token] = []
    blank_line = getattr(mode, "blank_line", None)
    for line_number, line in enumerate(split_lines(text), start=1):
        if not line:
            if blank_line is not None:
                blank_line(state)
            continue
        stream = StringStream(line)
        while not stream.eol():
            stream.start = stream.pos
            tag = mode.token(stream, state)
            if stream.pos <= stream.start:
                raise WorkspaceError(f"Mode {type(mode).__name__} failed to advance stream")
            if tag is not None:
                tokens.append(Token(tag, stream.current().rstrip(), line_number, stream.start + 1))
    return tokens


class EditorView:
    """One open document and its current highlighting.

    Attributes:
        text: Document contents
        mode: Mode name or MIME type the view is set to
        tokens: Result of the last highlighting pass

    """

    __slots__ = ("text", "mode", "tokens", "_registry", "highlight_count")

    def __init__(self, registry: ModeRegistry, text: str, mode: str | None = None) -> None:
        self._registry = registry
        self.text = text
        self.mode = mode
        self.tokens: list[Token] = []
        self.highlight_count = 0
        self.rehighlight()

    def __repr__(self) -> str:
        return f"EditorView(mode={self.mode!r}, tokens={len(self.tokens)})"

    def set_mode(self, mode: str | None) -> None:
        """Set the mode option; always re-applies highlighting."""
        self.mode = mode
        self.rehighlight()

    def rehighlight(self) -> None:
        """Re-tokenize with whatever the registry resolves ``mode`` to."""
        resolved = self._registry.resolve(self.mode)
        self.tokens = run_mode(resolved, self.text) if resolved is not None else []
        self.highlight_count += 1


class Workspace:
    """Collection of open views sharing one mode registry."""

    __slots__ = ("registry", "_views", "_layout_ready", "_layout_callbacks")

    def __init__(self, registry: ModeRegistry | None) -> None:
        self.registry = registry
        self._views: list[EditorView] = []
        self._layout_ready = False
        self._layout_callbacks: list[Callable[[], None]] = []

    @property
    def layout_ready(self) -> bool:
        return self._layout_ready

    # =========================================================================
    # Views
    # =========================================================================

    def open_view(self, text: str, mode: str | None = None) -> EditorView:
        """Open a document; it is highlighted immediately."""
        if self.registry is None:
            raise WorkspaceError("Workspace has no mode registry")
        view = EditorView(self.registry, text, mode)
        self._views.append(view)
        return view

    def close_view(self, view: EditorView) -> None:
        if view in self._views:
            self._views.remove(view)

    def iterate_views(self) -> Iterator[EditorView]:
        """Iterate open views (safe against opens/closes during iteration)."""
        return iter(list(self._views))

    # =========================================================================
    # Layout readiness
    # =========================================================================

    def on_layout_ready(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the layout is ready (now, if it already is)."""
        if self._layout_ready:
            callback()
            return
        if callback not in self._layout_callbacks:
            self._layout_callbacks.append(callback)

    def off_layout_ready(self, callback: Callable[[], None]) -> None:
        """Drop a pending layout-ready callback."""
        if callback in self._layout_callbacks:
            self._layout_callbacks.remove(callback)

    def mark_layout_ready(self) -> None:
        """Signal readiness and run pending callbacks exactly once."""
        if self._layout_ready:
            return
        self._layout_ready = True
        pending = list(self._layout_callbacks)
        self._layout_callbacks.clear()
        logger.debug("Layout ready, running %d callback(s)", len(pending))
        for callback in pending:
            callback()
