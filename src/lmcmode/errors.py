"""Exception classes for lmcmode.

The lexer itself never raises: unrecognized input degrades to a comment
or a skipped character. These exceptions cover the registration glue only.
"""

from __future__ import annotations


class LmcModeError(Exception):
    """Base exception for all lmcmode errors.

    Subclass this for specific error categories.
    """

    pass


class RegistrationError(LmcModeError):
    """Error when a mode or MIME registration is malformed.

    Raised for empty or non-string names, mode objects that do not
    implement the Mode protocol, and MIME types aliased to unknown modes.
    """

    def __init__(self, name: object, message: str) -> None:
        """Initialize registration error.

        Args:
            name: The offending mode name or MIME type
            message: Description of the problem
        """
        self.name = name
        super().__init__(f"Mode {name!r}: {message}")


class WorkspaceError(LmcModeError):
    """Error when the host workspace cannot service a plugin.

    Raised when a plugin is loaded against a workspace that has no
    mode registry attached.
    """

    pass
