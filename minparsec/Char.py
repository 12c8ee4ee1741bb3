from typing import List

from .Parsec import Parsec, ParseResult, Success, Failure
from .Prim import literal, satisfy, many, alt

WHITESPACE = " \t\n"


# Helper function: Parses a single character
def char(c: str) -> Parsec[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c, c)

# 1. oneOf: Parses any character in the provided list
def one_of(cs: List[str]) -> Parsec[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    return satisfy(lambda c: c in cs, f"one of {''.join(cs)}")

# 2. noneOf: Parses any character not in the provided list
def none_of(cs: List[str]) -> Parsec[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    return satisfy(lambda c: c not in cs, f"none of {''.join(cs)}")

# 3. space: Parses one whitespace character
def space(chars: str = WHITESPACE) -> Parsec[str]:
    """Parses a single character out of chars (space, tab or newline by default)."""
    return alt(*[literal(c) for c in chars])

# 4. spaces: The whitespace run
def spaces(chars: str = WHITESPACE) -> Parsec[List[str]]:
    """Zero or more whitespace characters. Never fails."""
    return many(space(chars))

# 5. untilWhitespace: Scans one whitespace-delimited word
def until_whitespace(allow_eof: bool = True, chars: str = WHITESPACE) -> Parsec[str]:
    """
    Read the run of non-whitespace characters at the cursor and skip the
    whitespace that follows it.

    The word itself is the value; the new position is after the
    whitespace run, except that a run reaching the end of input stops on
    its last character. An empty word fails with expected "word".
    Reaching the end of input ends the word successfully unless allow_eof
    is False, in which case the scan fails with expected " " at the end
    of input.
    """
    def parse(input: str, pos: int) -> ParseResult[str]:
        end = pos
        while end < len(input) and input[end] not in chars:
            end += 1
        if end == pos:
            return Failure("word", pos)
        if end == len(input) and not allow_eof:
            return Failure(" ", end)

        after = end
        while after < len(input) and input[after] in chars:
            after += 1
        # the input's final whitespace character is left unconsumed
        if after == len(input) and after > end:
            after -= 1
        return Success(input[pos:end], after)
    return Parsec(parse)

# 6. Literal-with-trim: A whole word equal to s
def literal_trim(s: str, allow_eof: bool = True, chars: str = WHITESPACE) -> Parsec[str]:
    """
    Succeeds when the word at the cursor is exactly s, skipping the
    whitespace after it. A mismatch fails at the original position.
    """
    word = until_whitespace(allow_eof, chars)

    def parse(input: str, pos: int) -> ParseResult[str]:
        res = word(input, pos)
        if res.ok and res.value == s:
            return Success(s, res.pos)
        return Failure(s, pos)
    return Parsec(parse)
