# tests/test_laws.py
from hypothesis import given, strategies as st

from minparsec.Combinators import alt, fmap, seq
from minparsec.Prim import any_char, fail, literal, many, pure
from minparsec.Token import digit, float_number

from conftest import assert_result_eq

# Strategy to generate arbitrary values
vals = st.integers() | st.text()

inputs = st.text(alphabet="ab1.2 ", max_size=8)

parsers = st.sampled_from([
    literal("a"),
    literal("ab"),
    any_char(),
    digit(),
    float_number(),
    many(literal("a")),
    seq(literal("a"), literal("b")),
    fail("x"),
])


def run_p(p, input_str="", pos=0):
    return p(input_str, pos)

# 1. Functor identity: map id === id
@given(parsers, inputs, st.integers(min_value=0, max_value=8))
def test_functor_identity(p, input_str, pos):
    assert_result_eq(run_p(fmap(p, lambda x: x), input_str, pos), run_p(p, input_str, pos))

# 2. Functor composition: map (g . f) === map g . map f
@given(parsers, inputs)
def test_functor_composition(p, input_str):
    f = lambda x: [x]
    g = lambda x: (x, len(x))

    lhs = fmap(p, lambda x: g(f(x)))
    rhs = fmap(fmap(p, f), g)

    assert_result_eq(run_p(lhs, input_str), run_p(rhs, input_str))

# 3. Left Identity: return a >>= f  === f a
@given(vals)
def test_monad_left_identity(v):
    f = lambda x: pure(x)

    assert_result_eq(run_p(pure(v).bind(f)), run_p(f(v)))

# 4. Right Identity: m >>= return === m
@given(parsers, inputs)
def test_monad_right_identity(m, input_str):
    assert_result_eq(run_p(m.bind(pure), input_str), run_p(m, input_str))

# 5. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@given(st.integers())
def test_monad_associativity(v):
    m = pure(v)
    f = lambda x: pure(x + 1)
    g = lambda y: pure(y * 2)

    lhs = m.bind(f).bind(g)
    rhs = m.bind(lambda x: f(x).bind(g))

    assert_result_eq(run_p(lhs), run_p(rhs))

# 6. alt picks p1 whenever it succeeds, otherwise p2 from the same position
@given(parsers, parsers, inputs, st.integers(min_value=0, max_value=8))
def test_alt_backtracks(p1, p2, input_str, pos):
    res = run_p(alt(p1, p2), input_str, pos)
    first = run_p(p1, input_str, pos)

    if first.ok:
        assert_result_eq(res, first)
    else:
        assert_result_eq(res, run_p(p2, input_str, pos))

# 7. Success never moves backwards
@given(parsers, inputs, st.integers(min_value=0, max_value=8))
def test_success_position_is_monotonic(p, input_str, pos):
    res = run_p(p, input_str, pos)
    if res.ok:
        assert res.pos >= pos
