import logging

from minparsec.Combinators import parser_trace, parser_traced, seq
from minparsec.Parsec import Failure, Success
from minparsec.Prim import literal, run
from minparsec.Token import integer


def test_parser_trace_logs_remaining_input(caplog):
    caplog.set_level(logging.DEBUG, logger="minparsec.Combinators")

    p = seq(literal("let "), parser_trace("after let"))
    assert run(p, "let x") == Success(("let ", None), 4)

    assert "after let" in caplog.text
    assert "'x'" in caplog.text


def test_parser_trace_truncates_long_input(caplog):
    caplog.set_level(logging.DEBUG, logger="minparsec.Combinators")

    run(parser_trace("long"), "y" * 100)
    assert "y" * 30 + "..." in caplog.text


def test_parser_traced_logs_backtracking(caplog):
    caplog.set_level(logging.DEBUG, logger="minparsec.Combinators")

    p = parser_traced("number", integer())
    assert run(p, "x") == Failure("9", 0)

    assert "number" in caplog.text
    assert "backtracked" in caplog.text


def test_parser_traced_is_transparent_on_success(caplog):
    caplog.set_level(logging.DEBUG, logger="minparsec.Combinators")

    p = parser_traced("number", integer())
    assert run(p, "42") == Success(42, 2)
    assert "backtracked" not in caplog.text


def test_trace_is_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="minparsec.Combinators")

    run(parser_traced("number", integer()), "x")
    assert caplog.text == ""
