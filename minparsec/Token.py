from dataclasses import dataclass, field
from typing import List, Union

from .Parsec import Parsec, ParseResult, Success, Failure
from .Prim import literal, satisfy, many
from .Char import WHITESPACE, spaces
from .Combinators import alt, seq, many1, token

# -----------------------------------------------------------
# Numeric building blocks
# -----------------------------------------------------------

def digit() -> Parsec[str]:
    """One of the ten ASCII digit characters."""
    return alt(*[literal(d) for d in "0123456789"])

def digits() -> Parsec[str]:
    """One or more digits, joined into a string."""
    return many1(digit()).map("".join)

def integer() -> Parsec[int]:
    return digits().map(int)

def float_number() -> Parsec[Union[float, int]]:
    """
    `digits "." digits` as a float, or a plain integer.

    The decimal form is tried first. The fraction keeps its leading zeros,
    so "1.05" is 1.05 and not 1.5.
    """
    decimal = seq(digits(), literal("."), digits()).map(lambda t: float("".join(t)))
    return alt(decimal, integer())


@dataclass
class LanguageDef:
    """
    Defines the lexical rules a TokenParser is built from.
    """
    whitespace: str = WHITESPACE     # characters skipped after every lexeme
    ident_start: Parsec[str] = satisfy(lambda c: c.isalpha() or c == '_', "identifier")
    ident_letter: Parsec[str] = satisfy(lambda c: c.isalnum() or c == '_', "identifier letter")
    reserved_names: List[str] = field(default_factory=list)
    case_sensitive: bool = True

class TokenParser:
    """
    A helper that generates lexeme parsers for a specific LanguageDef.
    Every lexeme skips the whitespace that follows it.
    """
    def __init__(self, lang: LanguageDef):
        self.lang = lang

        # --- Whitespace ---
        self.white_space = spaces(lang.whitespace)

        # --- Lexeme Helper (skips trailing whitespace) ---
        self.lexeme = lambda p: token(p, self.white_space)
        self.symbol = lambda name: self.lexeme(literal(name))

        # --- Numbers ---
        self.digit = digit()
        self.integer = self.lexeme(integer().label("integer"))
        self.float = self.lexeme(float_number().label("number"))

        # --- Identifiers & Keywords ---
        self.identifier = self.lexeme(self._make_identifier())
        self.keyword = lambda name: self.lexeme(self._make_keyword(name))

    def _fold(self, name: str) -> str:
        return name if self.lang.case_sensitive else name.lower()

    def _is_reserved(self, name: str) -> bool:
        return self._fold(name) in [self._fold(r) for r in self.lang.reserved_names]

    def _make_identifier(self) -> Parsec[str]:
        ident = (self.lang.ident_start & many(self.lang.ident_letter)).map(
            lambda first_rest: first_rest[0] + "".join(first_rest[1]))

        def parse(input: str, pos: int) -> ParseResult[str]:
            res = ident(input, pos)
            if not res.ok:
                return Failure("identifier", pos)
            if self._is_reserved(res.value):
                return Failure("identifier", pos)
            return res
        return Parsec(parse)

    def _make_keyword(self, name: str) -> Parsec[str]:
        """A reserved word that is not the prefix of a longer identifier."""
        size = len(name)

        def parse(input: str, pos: int) -> ParseResult[str]:
            if self._fold(input[pos:pos + size]) != self._fold(name):
                return Failure(name, pos)
            if self.lang.ident_letter(input, pos + size).ok:
                return Failure(name, pos)
            return Success(name, pos + size)
        return Parsec(parse)
