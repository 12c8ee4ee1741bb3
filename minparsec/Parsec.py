from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful parse: the semantic value and the offset just past the consumed input."""
    value: T
    pos: int

    ok: ClassVar[bool] = True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A grammar mismatch: what the parser wanted and where it gave up."""
    expected: str
    pos: int

    ok: ClassVar[bool] = False

    def __bool__(self) -> bool:
        return False


ParseResult = Union[Success[T], Failure]


@dataclass
class ParseError:
    """Caller-facing report built from a Failure by run_parser."""
    pos: int
    expected: str

    @classmethod
    def from_failure(cls, failure: Failure) -> 'ParseError':
        return cls(failure.pos, failure.expected)

    def __str__(self) -> str:
        if not self.expected:
            return f"Parse error at position {self.pos}"
        return f"Parse error at position {self.pos}: expecting {self.expected!r}"


class Parsec(Generic[T]):
    """A parser: a function from (input, pos) to a ParseResult."""
    def __init__(self, parse_fn: Callable[[str, int], ParseResult[T]]):
        self.parse_fn = parse_fn

    def __call__(self, input: str, pos: int = 0) -> ParseResult[T]:
        return self.parse_fn(input, pos)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parsec[U]':
        def parse(input: str, pos: int) -> ParseResult[U]:
            res = self(input, pos)
            if not res.ok:
                return res
            return Success(f(res.value), res.pos)
        return Parsec(parse)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        def parse(input: str, pos: int) -> ParseResult[U]:
            res = self(input, pos)
            if not res.ok:
                return res
            return f(res.value)(input, res.pos)
        return Parsec(parse)

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        return self.bind(f)

    # Alternative (<|>), always retried from the original position
    def __or__(self, other: 'Parsec[U]') -> 'Parsec[Union[T, U]]':
        def parse(input: str, pos: int) -> ParseResult[Union[T, U]]:
            res = self(input, pos)
            if res.ok:
                return res
            return other(input, pos)
        return Parsec(parse)

    # Sequence (&)
    def __and__(self, other: 'Parsec[U]') -> 'Parsec[Tuple[T, U]]':
        def parse(input: str, pos: int) -> ParseResult[Tuple[T, U]]:
            res1 = self(input, pos)
            if not res1.ok:
                return res1
            res2 = other(input, res1.pos)
            if not res2.ok:
                return res2
            return Success((res1.value, res2.value), res2.pos)
        return Parsec(parse)

    # Sequence (*>)
    def __gt__(self, other: 'Parsec[U]') -> 'Parsec[U]':
        return (self & other).map(lambda pair: pair[1])

    # Sequence (<*)
    def __lt__(self, other: 'Parsec[Any]') -> 'Parsec[T]':
        return (self & other).map(lambda pair: pair[0])

    # Label (<?>)
    def label(self, msg: str) -> 'Parsec[T]':
        def parse(input: str, pos: int) -> ParseResult[T]:
            res = self(input, pos)
            if res.ok:
                return res
            return Failure(msg, res.pos)
        return Parsec(parse)
