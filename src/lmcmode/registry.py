"""Mode registry for installing tokenizers under names and MIME types.

Editors look tokenizers up by mode name ("lmc") or by content type
("text/x-lmc"). The registry is an explicit object handed to whoever
installs modes, rather than ambient global state.

Every entry remembers its owner. Installing is idempotent per owner, an
owner never overwrites another owner's entry, and removal only touches
entries the caller owns. Entries with owner None belong to the host.

Thread Safety:
Not synchronized. Hosts mutate the registry from their UI thread only.

Example:
    >>> registry = ModeRegistry()
    >>> registry.define_mode("lmc", LmcLexer(), owner=plugin)
    True
    >>> registry.define_mime("text/x-lmc", "lmc", owner=plugin)
    True
    >>> registry.resolve("text/x-lmc") is registry.get_mode("lmc")
    True
    >>> registry.remove_mode("lmc", owner=plugin)
    True

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lmcmode.errors import RegistrationError
from lmcmode.utils.logger import get_logger

if TYPE_CHECKING:
    from lmcmode.protocol import Mode

logger = get_logger(__name__)


def _validate_name(name: object) -> None:
    if not isinstance(name, str) or not name:
        raise RegistrationError(name, "name must be a non-empty string")


class ModeRegistry:
    """Mutable map of mode names and MIME types to tokenizers.

    Mode names and MIME types are case-sensitive.

    """

    __slots__ = ("_modes", "_mimes")

    def __init__(self) -> None:
        """Initialize empty registry."""
        # name -> (mode, owner)
        self._modes: dict[str, tuple[Mode, object]] = {}
        # mime -> (mode name, owner)
        self._mimes: dict[str, tuple[str, object]] = {}

    # =========================================================================
    # Modes
    # =========================================================================

    def define_mode(self, name: str, mode: Mode, *, owner: object = None) -> bool:
        """Install ``mode`` under ``name``.

        Args:
            name: Mode name (e.g., "lmc")
            mode: Object implementing the Mode protocol
            owner: Identity of the installer; compared with ``is``

        Returns:
            True if ``owner`` holds the name afterwards, False if another
            owner already held it (the existing entry is left untouched)

        Raises:
            RegistrationError: If the name is invalid or ``mode`` lacks
                ``token``/``start_state``
        """
        _validate_name(name)
        for attr in ("token", "start_state"):
            if not callable(getattr(mode, attr, None)):
                raise RegistrationError(name, f"{type(mode).__name__} missing '{attr}'")

        existing = self._modes.get(name)
        if existing is not None and existing[1] is not owner:
            logger.warning(
                "Mode %r already registered by another owner; leaving it in place", name
            )
            return False

        if existing is None or existing[0] is not mode:
            self._modes[name] = (mode, owner)
            logger.debug("Registered mode %r (%s)", name, type(mode).__name__)
        return True

    def remove_mode(self, name: str, *, owner: object = None) -> bool:
        """Remove ``name`` if ``owner`` installed it.

        Returns:
            True if an entry was removed
        """
        existing = self._modes.get(name)
        if existing is None or existing[1] is not owner:
            return False
        del self._modes[name]
        logger.debug("Removed mode %r", name)
        return True

    def get_mode(self, name: str) -> Mode | None:
        """Get the mode registered under ``name``, or None."""
        entry = self._modes.get(name)
        return entry[0] if entry is not None else None

    def owner_of(self, name: str) -> object:
        """Owner of the mode entry ``name`` (None if absent or host-owned)."""
        entry = self._modes.get(name)
        return entry[1] if entry is not None else None

    # =========================================================================
    # MIME types
    # =========================================================================

    def define_mime(self, mime: str, name: str, *, owner: object = None) -> bool:
        """Alias content type ``mime`` to the mode ``name``.

        Returns:
            True if ``owner`` holds the MIME entry afterwards

        Raises:
            RegistrationError: If ``mime`` is invalid or ``name`` is not a
                registered mode
        """
        _validate_name(mime)
        if name not in self._modes:
            raise RegistrationError(mime, f"unknown mode {name!r}")

        existing = self._mimes.get(mime)
        if existing is not None and existing[1] is not owner:
            logger.warning(
                "MIME %r already registered by another owner; leaving it in place", mime
            )
            return False

        self._mimes[mime] = (name, owner)
        return True

    def remove_mime(self, mime: str, *, owner: object = None) -> bool:
        """Remove ``mime`` if ``owner`` installed it."""
        existing = self._mimes.get(mime)
        if existing is None or existing[1] is not owner:
            return False
        del self._mimes[mime]
        return True

    def mime_target(self, mime: str) -> str | None:
        """Mode name a MIME type points at, or None."""
        entry = self._mimes.get(mime)
        return entry[0] if entry is not None else None

    # =========================================================================
    # Lookup
    # =========================================================================

    def resolve(self, spec: str | None) -> Mode | None:
        """Find the mode for a mode name or MIME type.

        Mode names take precedence over MIME types. A MIME entry whose
        target mode has since been removed resolves to None.
        """
        if not spec:
            return None
        mode = self.get_mode(spec)
        if mode is not None:
            return mode
        target = self.mime_target(spec)
        return self.get_mode(target) if target is not None else None

    @property
    def names(self) -> frozenset[str]:
        """All registered mode names."""
        return frozenset(self._modes)

    @property
    def mimes(self) -> frozenset[str]:
        """All registered MIME types."""
        return frozenset(self._mimes)

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax (mode names only)."""
        return name in self._modes

    def __len__(self) -> int:
        """Number of registered mode names."""
        return len(self._modes)
