"""Editor plugin that installs the LMC lexer as a highlighting mode.

Lifecycle:
    load():   phase 1 registers the lexer under every alias plus the MIME
              type; phase 2 (refresh_views) is scheduled for when the host
              layout is ready and re-applies the mode of every LMC view once.
    unload(): removes exactly the entries this plugin installed, then
              refreshes LMC views so they drop the highlighting.

Both operations are idempotent. Names already held by someone else are
neither overwritten on load nor removed on unload.

Example:
    >>> registry = ModeRegistry()
    >>> workspace = Workspace(registry)
    >>> plugin = LmcPlugin(workspace)
    >>> plugin.load()
    >>> workspace.mark_layout_ready()   # host finished starting up
    >>> sorted(registry.names)
    ['littlemancomputer', 'lmc', 'lmc-asm']

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lmcmode.errors import WorkspaceError
from lmcmode.lexer import LmcLexer
from lmcmode.utils.logger import get_logger

if TYPE_CHECKING:
    from lmcmode.workspace import Workspace

logger = get_logger(__name__)

# Mode names editors use for LMC code blocks
IMPLEMENTED_MODES: tuple[str, ...] = ("lmc", "lmc-asm", "littlemancomputer")

LMC_MIME = "text/x-lmc"


class LmcPlugin:
    """Registers LmcLexer with a workspace's mode registry.

    Attributes:
        workspace: Host the plugin is installed into
        lexer: The tokenizer registered under every alias
        implemented_modes: Aliases to register
        mime: Content type aliased to the first installed mode

    """

    implemented_modes: tuple[str, ...] = IMPLEMENTED_MODES
    mime: str = LMC_MIME

    def __init__(self, workspace: Workspace, lexer: LmcLexer | None = None) -> None:
        if workspace.registry is None:
            raise WorkspaceError("Cannot install LMC mode: workspace has no mode registry")
        self.workspace = workspace
        self.lexer = lexer if lexer is not None else LmcLexer()
        self._installed_modes: list[str] = []
        self._installed_mimes: list[str] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def installed_modes(self) -> tuple[str, ...]:
        """Aliases this plugin actually holds in the registry."""
        return tuple(self._installed_modes)

    def load(self) -> None:
        """Register the mode, then refresh views once the layout is ready."""
        if self._loaded:
            return
        self._register()
        self._loaded = True
        self.workspace.on_layout_ready(self._on_layout_ready)

    def unload(self) -> None:
        """Remove this plugin's registrations and refresh affected views."""
        if not self._loaded:
            return
        self.workspace.off_layout_ready(self._on_layout_ready)

        registry = self.workspace.registry
        for mime in self._installed_mimes:
            registry.remove_mime(mime, owner=self)
        for name in self._installed_modes:
            registry.remove_mode(name, owner=self)
        logger.debug("Unregistered LMC modes %s", self._installed_modes)
        self._installed_modes.clear()
        self._installed_mimes.clear()

        self._loaded = False
        self.refresh_views()

    def refresh_views(self) -> int:
        """Re-apply the mode of every open LMC view.

        Returns:
            Number of views refreshed
        """
        matching = set(self.implemented_modes)
        matching.add(self.mime)
        refreshed = 0
        for view in self.workspace.iterate_views():
            if view.mode in matching:
                view.set_mode(view.mode)
                refreshed += 1
        logger.debug("Refreshed %d LMC view(s)", refreshed)
        return refreshed

    def _register(self) -> None:
        registry = self.workspace.registry
        for name in self.implemented_modes:
            if registry.define_mode(name, self.lexer, owner=self):
                self._installed_modes.append(name)

        if self._installed_modes and registry.define_mime(
            self.mime, self._installed_modes[0], owner=self
        ):
            self._installed_mimes.append(self.mime)

        skipped = [name for name in self.implemented_modes if name not in self._installed_modes]
        if skipped:
            logger.warning("LMC mode not installed for %s; names held by another owner", skipped)
        logger.debug("Registered LMC modes %s", self._installed_modes)

    def _on_layout_ready(self) -> None:
        self.workspace.off_layout_ready(self._on_layout_ready)
        self.refresh_views()
