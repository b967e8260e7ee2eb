"""ContextVar-based highlighting configuration for lmcmode.

Provides thread-local presentation settings using Python's ContextVars
(PEP 567). Nothing here affects token classification; the keyword tables
are fixed. Settings only control column arithmetic and rendered markup.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from lmcmode.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(tab_size=8)):
        html = highlight(source, "lmc")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlighting configuration.

    Attributes:
        tab_size: Columns a tab advances to when computing column() and
            indentation() on a StringStream
        class_prefix: Prefix for the CSS class of each token span
        wrap_class: CSS class on the outer <pre> element

    Raises:
        ValueError: If tab_size is not a positive integer

    """

    tab_size: int = 4
    class_prefix: str = "cm-"
    wrap_class: str = "lmc"

    def __post_init__(self) -> None:
        if not isinstance(self.tab_size, int) or self.tab_size < 1:
            msg = f"tab_size must be a positive integer, got {self.tab_size!r}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> HighlightConfig.from_dict({"tab_size": 8, "theme": "dark"}).tab_size
            8

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlighting configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlighting configuration for the current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to the module-level default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with highlight_config_context(HighlightConfig(class_prefix="lmc-")):
        ...     get_highlight_config().class_prefix
        'lmc-'

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
]
