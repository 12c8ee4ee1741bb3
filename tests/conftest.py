# tests/conftest.py
import pytest

from minparsec.Language import let_style
from minparsec.Parsec import Failure, ParseResult, Success
from minparsec.Token import TokenParser


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    assert res1.ok == res2.ok, f"Reply mismatch: {res1} vs {res2}"
    assert res1.pos == res2.pos, f"Position mismatch: {res1.pos} != {res2.pos}"

    if isinstance(res1, Success):
        assert res1.value == res2.value
    else:
        assert isinstance(res2, Failure)
        assert res1.expected == res2.expected


@pytest.fixture
def lexer():
    return TokenParser(let_style)
