"""Tests for the plugin lifecycle and the workspace it drives.

Covers the two-phase startup (register, then refresh once the layout is
ready), scoped teardown, and idempotency of both.
"""

from __future__ import annotations

import pytest

from lmcmode.errors import WorkspaceError
from lmcmode.lexer import LmcLexer
from lmcmode.plugin import IMPLEMENTED_MODES, LMC_MIME, LmcPlugin
from lmcmode.registry import ModeRegistry
from lmcmode.tokens import TokenType
from lmcmode.workspace import EditorView, Workspace, run_mode

PROGRAM = "LOOP LDA X\n     BRA LOOP\nX DAT 3"


class HostMode:
    """Pre-existing mode installed by the host under a shared name."""

    def token(self, stream, state):
        stream.skip_to_end()
        return TokenType.COMMENT

    def start_state(self):
        return None


@pytest.fixture
def registry() -> ModeRegistry:
    return ModeRegistry()


@pytest.fixture
def workspace(registry: ModeRegistry) -> Workspace:
    return Workspace(registry)


# =============================================================================
# Workspace
# =============================================================================


class TestWorkspace:
    """Views, layout readiness and re-highlighting."""

    def test_view_without_mode_is_plain(self, workspace: Workspace) -> None:
        view = workspace.open_view(PROGRAM, "lmc")
        assert view.tokens == []

    def test_layout_callbacks_run_once(self, workspace: Workspace) -> None:
        calls: list[str] = []
        workspace.on_layout_ready(lambda: calls.append("a"))
        assert calls == []
        workspace.mark_layout_ready()
        workspace.mark_layout_ready()
        assert calls == ["a"]
        assert workspace.layout_ready

    def test_callback_after_ready_runs_immediately(self, workspace: Workspace) -> None:
        workspace.mark_layout_ready()
        calls: list[int] = []
        workspace.on_layout_ready(lambda: calls.append(1))
        assert calls == [1]

    def test_off_layout_ready(self, workspace: Workspace) -> None:
        calls: list[int] = []

        def callback() -> None:
            calls.append(1)

        workspace.on_layout_ready(callback)
        workspace.off_layout_ready(callback)
        workspace.mark_layout_ready()
        assert calls == []

    def test_close_view(self, workspace: Workspace) -> None:
        view = workspace.open_view("HLT")
        workspace.close_view(view)
        assert list(workspace.iterate_views()) == []

    def test_open_view_requires_registry(self) -> None:
        with pytest.raises(WorkspaceError):
            Workspace(None).open_view("HLT")

    def test_run_mode_rejects_stalled_mode(self) -> None:
        class Stalled:
            def token(self, stream, state):
                return None

            def start_state(self):
                return None

        with pytest.raises(WorkspaceError, match="failed to advance"):
            run_mode(Stalled(), "HLT")

    def test_run_mode_matches_lexer(self) -> None:
        lexer = LmcLexer()
        assert run_mode(lexer, PROGRAM) == list(lexer.tokenize(PROGRAM))

    def test_run_mode_calls_blank_line_hook(self) -> None:
        class Counting(HostMode):
            def __init__(self) -> None:
                self.blank_lines = 0

            def blank_line(self, state):
                self.blank_lines += 1

        mode = Counting()
        tokens = run_mode(mode, "INP\n\nOUT\n\n")
        assert mode.blank_lines == 2
        assert [t.line for t in tokens] == [1, 3]

    def test_run_mode_without_blank_line_hook(self) -> None:
        tokens = run_mode(HostMode(), "INP\n\nOUT")
        assert [t.line for t in tokens] == [1, 3]

    def test_run_mode_line_numbers_follow_editor_breaks(self) -> None:
        lexer = LmcLexer()
        assert [t.line for t in run_mode(lexer, "INP\x0cOUT\rHLT")] == [1, 1, 2]


# =============================================================================
# Plugin lifecycle
# =============================================================================


class TestLoad:
    """Phase 1 registration and phase 2 refresh."""

    def test_registers_all_aliases_and_mime(
        self, workspace: Workspace, registry: ModeRegistry
    ) -> None:
        plugin = LmcPlugin(workspace)
        plugin.load()
        assert registry.names == frozenset(IMPLEMENTED_MODES)
        assert registry.resolve(LMC_MIME) is plugin.lexer
        assert plugin.installed_modes == IMPLEMENTED_MODES
        assert plugin.loaded

    def test_refresh_waits_for_layout(self, workspace: Workspace) -> None:
        view = workspace.open_view(PROGRAM, "lmc")
        plugin = LmcPlugin(workspace)
        plugin.load()
        assert view.tokens == []

        workspace.mark_layout_ready()
        assert [t.type for t in view.tokens][:3] == [
            TokenType.LINK,
            TokenType.KEYWORD,
            TokenType.VARIABLE,
        ]

    def test_refresh_runs_once(self, workspace: Workspace) -> None:
        view = workspace.open_view(PROGRAM, "lmc-asm")
        LmcPlugin(workspace).load()
        before = view.highlight_count
        workspace.mark_layout_ready()
        assert view.highlight_count == before + 1

    def test_only_lmc_views_refreshed(self, workspace: Workspace) -> None:
        lmc_view = workspace.open_view(PROGRAM, "littlemancomputer")
        mime_view = workspace.open_view(PROGRAM, LMC_MIME)
        other_view = workspace.open_view("print(1)", "python")
        plugin = LmcPlugin(workspace)
        plugin.load()
        before = other_view.highlight_count

        assert plugin.refresh_views() == 2
        assert other_view.highlight_count == before
        assert lmc_view.tokens
        assert mime_view.tokens == lmc_view.tokens

    def test_load_is_idempotent(self, workspace: Workspace, registry: ModeRegistry) -> None:
        plugin = LmcPlugin(workspace)
        plugin.load()
        plugin.load()
        assert len(registry) == len(IMPLEMENTED_MODES)
        assert plugin.installed_modes == IMPLEMENTED_MODES

    def test_load_after_layout_ready_refreshes_immediately(self, workspace: Workspace) -> None:
        workspace.mark_layout_ready()
        view = workspace.open_view(PROGRAM, "lmc")
        LmcPlugin(workspace).load()
        assert view.tokens

    def test_requires_registry(self) -> None:
        with pytest.raises(WorkspaceError):
            LmcPlugin(Workspace(None))


class TestUnload:
    """Scoped teardown."""

    def test_unload_removes_entries_and_highlighting(
        self, workspace: Workspace, registry: ModeRegistry
    ) -> None:
        view = workspace.open_view(PROGRAM, "lmc")
        plugin = LmcPlugin(workspace)
        plugin.load()
        workspace.mark_layout_ready()
        assert view.tokens

        plugin.unload()
        assert len(registry) == 0
        assert registry.mimes == frozenset()
        assert view.tokens == []
        assert not plugin.loaded

    def test_unload_is_idempotent(self, workspace: Workspace, registry: ModeRegistry) -> None:
        plugin = LmcPlugin(workspace)
        plugin.load()
        plugin.unload()
        plugin.unload()
        assert len(registry) == 0

    def test_unload_before_layout_ready_cancels_refresh(self, workspace: Workspace) -> None:
        view = workspace.open_view(PROGRAM, "lmc")
        plugin = LmcPlugin(workspace)
        plugin.load()
        plugin.unload()
        count = view.highlight_count
        workspace.mark_layout_ready()
        assert view.highlight_count == count

    def test_preexisting_entry_survives(
        self, workspace: Workspace, registry: ModeRegistry
    ) -> None:
        host_mode = HostMode()
        registry.define_mode("lmc", host_mode)
        plugin = LmcPlugin(workspace)
        plugin.load()

        assert registry.get_mode("lmc") is host_mode
        assert plugin.installed_modes == ("lmc-asm", "littlemancomputer")
        assert registry.mime_target(LMC_MIME) == "lmc-asm"

        plugin.unload()
        assert registry.names == frozenset({"lmc"})
        assert registry.get_mode("lmc") is host_mode

    def test_reload_cycle(self, workspace: Workspace, registry: ModeRegistry) -> None:
        plugin = LmcPlugin(workspace)
        for _ in range(3):
            plugin.load()
            plugin.unload()
        plugin.load()
        assert registry.names == frozenset(IMPLEMENTED_MODES)


class TestEditorView:
    """Direct view behavior."""

    def test_set_mode_switches_highlighting(self, registry: ModeRegistry) -> None:
        registry.define_mode("lmc", LmcLexer())
        view = EditorView(registry, "OUT")
        assert view.tokens == []
        view.set_mode("lmc")
        assert [t.type for t in view.tokens] == [TokenType.IO_KEYWORD]
        view.set_mode(None)
        assert view.tokens == []
