"""Symbolic differentiation rules and the scenarios built on them."""

import numpy as np
import pytest
import sympy as sp

from symbolic_calculus import (
    Expression, NodeKind, UnsupportedDerivativeError, cos, exp, log, pow, sin,
)


def _polynomials(x, y):
    return [
        x * x + 3 * x - 1,
        x - 2 * y,
        (x + y) * (x - y),
        Expression(4.0),
        y * y * x,
    ]


def test_constant_and_variable_rules(x, y):
    assert str(Expression(5.0).derivative("x")) == "0"
    assert str(x.derivative("x")) == "1"
    assert str(y.derivative("x")) == "0"


def test_results_are_not_simplified(x, y):
    assert str((x * y).derivative("x")) == "((1 * y) + (x * 0))"
    assert str(sin(x).derivative("x")) == "(cos(x) * 1)"


def test_sum_and_difference_keep_their_kind(x, y):
    d_sum = (x + y).derivative("x")
    d_diff = (x - y).derivative("x")
    assert d_sum.root.kind == NodeKind.ADD
    assert d_diff.root.kind == NodeKind.SUBTRACT
    assert str(d_diff) == "(1 - 0)"


@pytest.mark.parametrize("point", [(-1.5, 0.25), (0.0, 2.0), (3.0, -4.0)])
def test_product_rule(x, y, point):
    bindings = {"x": point[0], "y": point[1]}
    polys = _polynomials(x, y)
    for u in polys:
        for v in polys:
            d = (u * v).derivative("x").evaluate(bindings)
            du = u.derivative("x").evaluate(bindings)
            dv = v.derivative("x").evaluate(bindings)
            expected = du * v.evaluate(bindings) + u.evaluate(bindings) * dv
            assert d == pytest.approx(expected)


def test_quotient_rule(x):
    d = (x / (x + 1)).derivative("x")
    assert str(d) == "(((1 * (x + 1)) - (x * (1 + 0))) / pow((x + 1), 2))"
    for a in [0.5, 2.0, -3.0]:
        assert d.evaluate({"x": a}) == pytest.approx(1 / (a + 1) ** 2)


@pytest.mark.parametrize("n", [2.0, 3.0, 0.5, -1.0, 0.0])
def test_power_rule(x, n):
    d = pow(x, n).derivative("x")
    a = 1.7
    assert d.evaluate({"x": a}) == pytest.approx(n * a ** (n - 1))


def test_power_rule_with_constant_exponent_subtree(x):
    exponent = Expression(1.0) + Expression(2.0)
    d = pow(x, exponent).derivative("x")
    assert str(d) == "((3 * pow(x, 2)) * 1)"
    assert d.evaluate({"x": 2.0}) == pytest.approx(12.0)


def test_power_with_variable_exponent_is_unsupported(x, y):
    with pytest.raises(UnsupportedDerivativeError) as excinfo:
        pow(x, y).derivative("x")
    assert excinfo.value.exponent == "y"
    assert "non-constant exponent" in str(excinfo.value)


def test_unsupported_derivative_is_not_implemented_error(x):
    with pytest.raises(NotImplementedError):
        pow(2.0, x).derivative("x")
    with pytest.raises(NotImplementedError):
        (Expression(1.0) + pow(x, x)).derivative("y")


def test_elementary_function_rules(x):
    a = 0.8
    bindings = {"x": a}
    cases = [
        (sin(x), np.cos(a)),
        (cos(x), -np.sin(a)),
        (exp(x), np.exp(a)),
        (log(x), 1 / a),
        (-x, -1.0),
    ]
    for expr, expected in cases:
        assert expr.derivative("x").evaluate(bindings) == pytest.approx(expected)


def test_rule_shapes(x):
    assert str(cos(x).derivative("x")) == "(-(sin(x)) * 1)"
    assert str(exp(x).derivative("x")) == "(exp(x) * 1)"
    assert str(log(x).derivative("x")) == "(1 / x)"
    assert str((-x).derivative("x")) == "-(1)"


def test_chain_rule_through_nested_functions(x):
    f = sin(x * x)
    d = f.derivative("x")
    a = 1.1
    assert d.evaluate({"x": a}) == pytest.approx(np.cos(a * a) * 2 * a)

    g = exp(cos(x))
    assert g.derivative("x").evaluate({"x": a}) == pytest.approx(np.exp(np.cos(a)) * -np.sin(a))


def test_real_scenario(x):
    f = pow(x, 2.0) + sin(x)
    df = f.derivative("x")
    assert str(f) == "(pow(x, 2) + sin(x))"
    assert str(df) == "(((2 * pow(x, 1)) * 1) + (cos(x) * 1))"
    assert df.evaluate({"x": 1.5}) == pytest.approx(2 * 1.5 + np.cos(1.5))


def test_complex_scenario(z):
    g = exp(z) + pow(z, 2.0)
    dg = g.derivative("z")
    point = 1 + 1j
    assert dg.dtype == np.complex128
    assert str(dg) == "((exp(z) * (1,0)) + (((2,0) * pow(z, (1,0))) * (1,0)))"
    np.testing.assert_allclose(dg.evaluate({"z": point}), np.exp(point) + 2 * point)


def test_derivatives_compose(x):
    d2 = pow(x, 3.0).derivative("x").derivative("x")
    assert d2.evaluate({"x": 2.0}) == pytest.approx(12.0)
    assert d2.derivative("x").evaluate({"x": 5.0}) == pytest.approx(6.0)


def test_derivative_shares_untouched_operands(x, y):
    u = x * y
    d = sin(u).derivative("x")
    cos_u = d.root.left
    assert cos_u.kind == NodeKind.COS
    assert cos_u.operand is u.root

    product = (x * y).derivative("x")
    assert product.root.left.right is y.root
    assert product.root.right.left is x.root


def test_derivative_leaves_input_untouched(x):
    f = pow(x, 2.0) + sin(x)
    before = str(f)
    f.derivative("x")
    assert str(f) == before


@pytest.mark.parametrize("build", [
    lambda x, y: x * sin(x) / (x + y * y),
    lambda x, y: log(x * x + 1) - exp(-x) * cos(y),
    lambda x, y: pow(sin(x) + 2, 3.0) * pow(x, -2.0),
    lambda x, y: -(x / exp(x)) + y,
])
def test_matches_sympy_diff(x, y, build):
    expr = build(x, y)
    symbol = sp.Symbol("x")
    ours = expr.derivative("x").to_sympy()
    reference = sp.diff(expr.to_sympy(), symbol)
    assert sp.simplify(ours - reference) == 0
