import logging
from typing import Any, Callable, List, Optional, Tuple, TypeVar, overload

from .Parsec import Parsec, ParseResult, Success, Failure, T, U
from .Prim import succeed, many, alt
from .Char import spaces

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


# 1. map: Applies a function to a parser's value
def fmap(p: Parsec[T], fn: Callable[[T], U]) -> Parsec[U]:
    """
    Applies fn to the value of a successful p, keeping its position.
    Failures pass through untouched and fn is never called for them.
    """
    return p.map(fn)

# 2. seq: Runs parsers one after another
@overload
def seq(p1: Parsec[A]) -> Parsec[Tuple[A]]: ...
@overload
def seq(p1: Parsec[A], p2: Parsec[B]) -> Parsec[Tuple[A, B]]: ...
@overload
def seq(p1: Parsec[A], p2: Parsec[B], p3: Parsec[C]) -> Parsec[Tuple[A, B, C]]: ...
@overload
def seq(p1: Parsec[A], p2: Parsec[B], p3: Parsec[C], p4: Parsec[D]) -> Parsec[Tuple[A, B, C, D]]: ...
@overload
def seq(*parsers: Parsec[Any]) -> Parsec[Tuple[Any, ...]]: ...
def seq(*parsers: Parsec[Any]) -> Parsec[Tuple[Any, ...]]:
    """
    Runs each parser starting where the previous one stopped and returns
    the tuple of their values. The first failure is returned as is, with
    the failing parser's own position.
    """
    if not parsers:
        raise ValueError("seq() needs at least one parser")

    def parse(input: str, pos: int) -> ParseResult[Tuple[Any, ...]]:
        values = []
        for p in parsers:
            res = p(input, pos)
            if not res.ok:
                return res
            values.append(res.value)
            pos = res.pos
        return Success(tuple(values), pos)
    return Parsec(parse)

# 3. choice: alt over a list
def choice(parsers: List[Parsec[T]]) -> Parsec[T]:
    """Applies a list of parsers in order until one succeeds."""
    return alt(*parsers)

# 4. many1: Applies a parser one or more times
def many1(p: Parsec[T]) -> Parsec[List[T]]:
    """
    Applies parser p one or more times, returning a list of results.
    """
    return (p & many(p)).map(lambda first_rest: [first_rest[0]] + first_rest[1])

# 5. token: A parser followed by trailing whitespace
def token(p: Parsec[T], ws: Optional[Parsec[Any]] = None) -> Parsec[T]:
    """
    Runs p, then skips the whitespace after it. Only p's value is kept.
    """
    if ws is None:
        ws = spaces()
    return fmap(seq(p, ws), lambda pair: pair[0])

# 6. option: Falls back to a default value
def option(x: T, p: Parsec[T]) -> Parsec[T]:
    """
    Tries parser p; returns its result if successful, else x.
    """
    return p | succeed(x)

# 7. optional: Tries a parser, discarding the result
def optional(p: Parsec[Any]) -> Parsec[None]:
    """
    Tries parser p; returns None whether it succeeds or fails.
    """
    return p.map(lambda _: None) | succeed(None)

# 8. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parsec[Any], close: Parsec[Any], p: Parsec[T]) -> Parsec[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return seq(open, p, close).map(lambda t: t[1])

# 9. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parsec[T], sep: Parsec[Any]) -> Parsec[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    """
    return (p & many(sep > p)).map(lambda first_rest: [first_rest[0]] + first_rest[1])

# 10. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parsec[T], sep: Parsec[Any]) -> Parsec[List[T]]:
    """
    Parses zero or more occurrences of p separated by sep, returning a list of p's results.
    """
    return sep_by1(p, sep) | succeed([])

# 11. notFollowedBy: Succeeds if a parser fails, consuming nothing
def not_followed_by(p: Parsec[Any], expected: str = "") -> Parsec[None]:
    """Succeeds without consuming input exactly when p fails."""
    def parse(input: str, pos: int) -> ParseResult[None]:
        res = p(input, pos)
        if res.ok:
            return Failure(expected or f"not {res.value!r}", pos)
        return Success(None, pos)
    return Parsec(parse)

# 12. eof: Succeeds only at the end of input
def eof() -> Parsec[None]:
    """
    Succeeds only if no input remains.
    """
    def parse(input: str, pos: int) -> ParseResult[None]:
        if pos >= len(input):
            return Success(None, pos)
        return Failure("end of input", pos)
    return Parsec(parse)

# 13. parserTrace: Debugging parser that logs the remaining input
def parser_trace(label_str: str) -> Parsec[None]:
    """Logs the label and the upcoming input at DEBUG, then succeeds in place."""
    def parse(input: str, pos: int) -> ParseResult[None]:
        rest = input[pos:]
        logger.debug("%s: %r at %d", label_str, rest[:30] + ("..." if len(rest) > 30 else ""), pos)
        return Success(None, pos)
    return Parsec(parse)

# 14. parserTraced: Debugging wrapper that logs entry and failure of p
def parser_traced(label_str: str, p: Parsec[T]) -> Parsec[T]:
    """Runs p unchanged, logging when it is entered and when it fails."""
    enter = parser_trace(label_str)

    def parse(input: str, pos: int) -> ParseResult[T]:
        enter(input, pos)
        res = p(input, pos)
        if not res.ok:
            logger.debug("%s backtracked: expecting %r at %d", label_str, res.expected, res.pos)
        return res
    return Parsec(parse)
