"""Tokenize and highlight an LMC countdown program."""

from lmcmode import highlight, tokenize

program = """\
BEGIN INP
      STA COUNT
LOOP  LDA COUNT
      OUT
      SUB ONE
      STA COUNT
      BRP LOOP
      HLT
COUNT DAT
ONE   DAT 1"""

for token in tokenize(program):
    print(f"{token.line:>2}:{token.column:<3} {token.type.name:<11} {token.value}")

print()
print(highlight(program, "lmc", show_linenos=True))
