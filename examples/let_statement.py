import logging

from minparsec.Combinators import seq, token, parser_traced
from minparsec.Language import let_style
from minparsec.Prim import literal, run_parser
from minparsec.Token import TokenParser, float_number

# 1. Lexer Setup
lexer = TokenParser(let_style)

# 2. Statement Parsers
# Built straight from the combinators: let x = <number>
let_x = seq(
    token(literal("let")),
    token(literal("x")),
    token(literal("=")),
    token(float_number()),
)

# Built from the lexer: let <identifier> = <number>
let_statement = seq(
    lexer.keyword("let"),
    lexer.identifier,
    lexer.symbol("="),
    parser_traced("number", lexer.float),
)

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    for text in ["let x = 1", "let x = 1.1", "let x = 23.34"]:
        print(run_parser(let_x, text))

    for text in ["let total = 42", "let let = 1", "let y = ?"]:
        result, err = run_parser(let_statement, text)
        if err:
            print("Parsing Failed:", err)
        else:
            print("Successfully Parsed:", result)
