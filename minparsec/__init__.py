# Core
from .Parsec import Parsec, ParseResult, Success, Failure, ParseError
from .Prim import (
    run, run_parser, succeed, pure, fail, any_char, literal, satisfy,
    lazy, many, skip_many,
)

# Characters
from .Char import char, one_of, none_of, space, spaces, until_whitespace, literal_trim

# Combinators
from .Combinators import (
    fmap, seq, alt, choice, many1, token,
    option, optional, between, sep_by, sep_by1,
    not_followed_by, eof, parser_trace, parser_traced,
)

# Lexer Generation (Token)
from .Token import TokenParser, LanguageDef, digit, digits, integer, float_number

# Standard Language Definitions
from .Language import empty_def, let_style
