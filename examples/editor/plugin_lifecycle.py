"""Install, refresh and remove the LMC mode in a workspace."""

import logging

from lmcmode import LmcPlugin, ModeRegistry, Workspace

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

registry = ModeRegistry()
workspace = Workspace(registry)

# Views opened before the plugin loads start out unhighlighted
view = workspace.open_view("LOOP LDA X\n     BRA LOOP\nX DAT 3", "lmc")
print("Before load:", len(view.tokens), "tokens")

plugin = LmcPlugin(workspace)
plugin.load()
print("Registered:", sorted(registry.names), sorted(registry.mimes))

workspace.mark_layout_ready()
print("After layout ready:", [(t.type.style, t.value) for t in view.tokens])

plugin.unload()
print("After unload:", len(view.tokens), "tokens, modes left:", sorted(registry.names))
