from dataclasses import replace

from .Char import char
from .Prim import satisfy
from .Token import LanguageDef

# -----------------------------------------------------------
# Minimal language definition
# -----------------------------------------------------------

# Space, tab and newline separate lexemes; identifiers are letters,
# digits and underscores; nothing is reserved. Use it as the basis for
# other definitions.
empty_def = LanguageDef(
    whitespace=" \t\n",
    ident_start=satisfy(str.isalpha, "letter") | char("_"),
    ident_letter=satisfy(str.isalnum, "letter or digit") | char("_"),
    reserved_names=[],
    case_sensitive=True,
)

# -----------------------------------------------------------
# Styles
# -----------------------------------------------------------

# Definition for `let <name> = <number>` statements.
let_style = replace(
    empty_def,
    reserved_names=["let"],
)
