"""Scan state carried between lexer calls.

Three flags record what the previous token was, so the next bare word or
digit run can be classified in context. Every call to ``next_token``
clears all three before (possibly) setting one, which keeps them mutually
exclusive.

Thread Safety:
One state per independently tokenized document. Never share an instance
between documents.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class LexerState:
    """Context flags for the LMC lexer.

    Attributes:
        previous_linkable: Previous token was a branch mnemonic; the next
            bare word is a jump target
        previous_variable: Previous token was a variabled or arithmetic
            mnemonic; the next bare word is a variable reference
        previous_dat: Previous token was DAT; the next digit run is data

    """

    previous_linkable: bool = False
    previous_variable: bool = False
    previous_dat: bool = False

    def copy(self) -> LexerState:
        """Independent copy, for hosts that snapshot state per line."""
        return LexerState(self.previous_linkable, self.previous_variable, self.previous_dat)

    def reset(self) -> None:
        """Clear all flags."""
        self.previous_linkable = False
        self.previous_variable = False
        self.previous_dat = False

    def snapshot(self) -> tuple[bool, bool, bool]:
        """Flags as ``(linkable, variable, dat)``."""
        return (self.previous_linkable, self.previous_variable, self.previous_dat)
