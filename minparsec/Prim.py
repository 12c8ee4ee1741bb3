from typing import Any, Callable, List, Optional, Tuple

from .Parsec import Parsec, ParseResult, Success, Failure, ParseError, T


def succeed(value: T) -> Parsec[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(input: str, pos: int) -> ParseResult[T]:
        return Success(value, pos)
    return Parsec(parse)

# Parsec spelling of succeed
pure = succeed

def fail(expected: str = "") -> Parsec[Any]:
    """A parser that always fails at the current position."""
    def parse(input: str, pos: int) -> ParseResult[Any]:
        return Failure(expected, pos)
    return Parsec(parse)

def any_char() -> Parsec[str]:
    """Consume exactly one character, failing only at end of input."""
    def parse(input: str, pos: int) -> ParseResult[str]:
        if pos >= len(input):
            return Failure("anything", pos)
        return Success(input[pos], pos + 1)
    return Parsec(parse)

def literal(s: str) -> Parsec[str]:
    """Match the exact string s. Nothing is consumed on a mismatch."""
    def parse(input: str, pos: int) -> ParseResult[str]:
        if input.startswith(s, pos):
            return Success(s, pos + len(s))
        return Failure(s, pos)
    return Parsec(parse)

def satisfy(f: Callable[[str], bool], expected: str = "") -> Parsec[str]:
    """Consume one character for which f returns True."""
    def parse(input: str, pos: int) -> ParseResult[str]:
        if pos < len(input) and f(input[pos]):
            return Success(input[pos], pos + 1)
        return Failure(expected, pos)
    return Parsec(parse)

def lazy(thunk: Callable[[], Parsec[T]]) -> Parsec[T]:
    """
    Defer building a parser until it is run.

    Recursive grammars refer to themselves through lazy(lambda: rule).
    The thunk is called again on every run.
    """
    def parse(input: str, pos: int) -> ParseResult[T]:
        return thunk()(input, pos)
    return Parsec(parse)

def alt(*parsers: Parsec[Any]) -> Parsec[Any]:
    """
    Tries each parser at the original position and returns the first
    success. When all fail, the last failure is returned unchanged. With
    no parsers at all the result is a failure expecting "".
    """
    def parse(input: str, pos: int) -> ParseResult[Any]:
        res: ParseResult[Any] = Failure("", pos)
        for p in parsers:
            res = p(input, pos)
            if res.ok:
                return res
        return res
    return Parsec(parse)

def many(p: Parsec[T]) -> Parsec[List[T]]:
    """
    Parse zero or more occurrences of `p`. Never fails.

    The failure that ends the repetition is discarded and the position
    is left where the last successful `p` stopped. A success that does not
    advance also ends the loop, and its value is not collected, so
    many(succeed(x)) yields [] instead of spinning forever.
    """
    def parse(input: str, pos: int) -> ParseResult[List[T]]:
        values: List[T] = []
        while True:
            res = p(input, pos)
            if not res.ok or res.pos <= pos:
                return Success(values, pos)
            values.append(res.value)
            pos = res.pos
    return Parsec(parse)

def skip_many(p: Parsec[Any]) -> Parsec[None]:
    """Skip zero or more occurrences of `p`."""
    return many(p).map(lambda _: None)


def run(parser: Parsec[T], input: str) -> ParseResult[T]:
    """Run a parser from the start of input and return the raw result."""
    if not isinstance(input, str):
        raise TypeError(f"input must be str, not {type(input).__name__}")
    return parser(input, 0)

def run_parser(parser: Parsec[T], input: str) -> Tuple[Optional[T], Optional[ParseError]]:
    """Run a parser from the start of input, returning (value, None) or (None, error)."""
    res = run(parser, input)
    if res.ok:
        return res.value, None
    return None, ParseError.from_failure(res)
