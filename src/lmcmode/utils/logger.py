"""Logger names for lmcmode.

Every module logs under the ``lmcmode`` namespace, so a host editor can
silence or raise the plugin's registration chatter with one setting:

    >>> import logging
    >>> logging.getLogger("lmcmode").setLevel(logging.WARNING)

The lexer never logs; only the registry, plugin and workspace do.
"""

from __future__ import annotations

import logging

PACKAGE = "lmcmode"


def get_logger(name: str) -> logging.Logger:
    """Return the ``lmcmode`` logger for ``name``.

    Module names already inside the package are used as-is; anything else
    is nested under it.

    Example:
        >>> get_logger("plugin").name
        'lmcmode.plugin'
        >>> get_logger("lmcmode.registry").name
        'lmcmode.registry'
    """
    if name != PACKAGE and not name.startswith(PACKAGE + "."):
        name = f"{PACKAGE}.{name}"
    return logging.getLogger(name)
