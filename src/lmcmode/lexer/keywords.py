"""LMC mnemonic tables.

Five disjoint sets of three-letter mnemonics, grouped by how they affect
classification of the token that follows them.
"""

from __future__ import annotations

# Take a memory operand: the next bare word is a variable
VARIABLED_KEYWORDS = frozenset({"STA", "STO", "LDA"})

# No operand
OTHER_KEYWORDS = frozenset({"HLT"})

# Take a jump target: the next bare word is a link
BRANCH_KEYWORDS = frozenset({"BRA", "BRZ", "BRP"})

# Take a memory operand, styled like any other keyword
ARITHMETIC_KEYWORDS = frozenset({"ADD", "SUB"})

IO_KEYWORDS = frozenset({"INP", "OUT", "OTC"})

# Any mnemonic may be preceded by a label at statement start
LABELABLE_KEYWORDS = (
    VARIABLED_KEYWORDS
    | OTHER_KEYWORDS
    | BRANCH_KEYWORDS
    | ARITHMETIC_KEYWORDS
    | IO_KEYWORDS
)

DATA_DIRECTIVE = "DAT"
