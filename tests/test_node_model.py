"""Node immutability, builder sharing and scalar type inference."""

import numpy as np
import pytest

from symbolic_calculus import (
    BinaryOpNode, ConstantNode, Expression, NodeKind, UnaryOpNode, VariableNode,
    cos, exp, log, pow, sin,
)


def test_default_expression_is_constant_zero():
    e = Expression()
    assert e.root.kind == NodeKind.CONSTANT
    assert e.root.value == 0
    assert e.dtype == np.float64


def test_scalar_and_name_constructors():
    c = Expression(2)
    assert c.root.kind == NodeKind.CONSTANT
    assert c.dtype == np.float64
    assert isinstance(c.root.value, np.float64)

    v = Expression("x")
    assert isinstance(v.root, VariableNode)
    assert v.root.name == "x"


def test_complex_dtype_inferred_and_declared():
    assert Expression(1 + 1j).dtype == np.complex128
    assert Expression("z", dtype=complex).dtype == np.complex128
    assert Expression(np.complex64(2)).dtype == np.complex128


def test_invalid_constructor_arguments():
    with pytest.raises(TypeError):
        Expression([1, 2])
    with pytest.raises(TypeError):
        Expression(1j, dtype=float)
    with pytest.raises(TypeError):
        Expression("x", dtype=str)


def test_nodes_are_immutable(x):
    node = (x + 1).root
    with pytest.raises(AttributeError):
        node.left = VariableNode("y")
    with pytest.raises(AttributeError):
        node.kind = NodeKind.SUBTRACT
    with pytest.raises(AttributeError):
        ConstantNode(np.float64(1.0)).value = 2.0
    with pytest.raises(AttributeError):
        del x.root.name


def test_node_kind_is_checked():
    leaf = VariableNode("x")
    with pytest.raises(ValueError):
        BinaryOpNode(NodeKind.SIN, leaf, leaf)
    with pytest.raises(ValueError):
        UnaryOpNode(NodeKind.ADD, leaf)


def test_binary_operators_share_operand_roots(x, y):
    for expr, kind in [
        (x + y, NodeKind.ADD),
        (x - y, NodeKind.SUBTRACT),
        (x * y, NodeKind.MULTIPLY),
        (x / y, NodeKind.DIVIDE),
        (x ** y, NodeKind.POWER),
    ]:
        assert expr.root.kind == kind
        assert expr.root.left is x.root
        assert expr.root.right is y.root
        assert expr.root.children == (x.root, y.root)


def test_unary_builders(x):
    for expr, kind in [
        (sin(x), NodeKind.SIN),
        (cos(x), NodeKind.COS),
        (exp(x), NodeKind.EXP),
        (log(x), NodeKind.LOG),
        (-x, NodeKind.NEGATE),
        (Expression.sin(x), NodeKind.SIN),
    ]:
        assert expr.root.kind == kind
        assert expr.root.operand is x.root
        assert expr.root.children == (x.root,)


def test_builders_never_mutate_operands(x):
    before = x.root
    _ = x + 1
    _ = sin(x)
    assert x.root is before
    assert x.root.children == ()


def test_pow_wraps_raw_scalar_exponent(x, z):
    p = pow(x, 3.0)
    assert p.root.kind == NodeKind.POWER
    assert p.root.left is x.root
    assert p.root.right.kind == NodeKind.CONSTANT
    assert p.root.right.value == 3.0

    q = pow(z, 2.0)
    assert isinstance(q.root.right.value, np.complex128)
    assert q.dtype == np.complex128


def test_pow_rejects_unusable_exponent(x):
    with pytest.raises(TypeError):
        pow(x, [2])


def test_reflected_operators_with_raw_scalars(x):
    assert str(2 * x) == "(2 * x)"
    assert str(1 - x) == "(1 - x)"
    assert str(1 / x) == "(1 / x)"
    assert str(2 ** x) == "pow(2, x)"
    assert str(x + 0.5) == "(x + 0.5)"


def test_numpy_scalars_defer_to_expression(x):
    product = np.float64(2.0) * x
    assert isinstance(product, Expression)
    assert str(product) == "(2 * x)"


def test_operating_with_unsupported_type_raises(x):
    with pytest.raises(TypeError):
        x + "y"


def test_mixed_scalar_types_promote_to_complex(x, z):
    assert (x + z).dtype == np.complex128
    assert (x * (1 + 2j)).dtype == np.complex128
    assert (x + 1).dtype == np.float64


def test_copy_shares_root(x):
    f = sin(x) + x
    g = Expression(f)
    assert g.root is f.root
    assert g.dtype == f.dtype


def test_wrapping_a_node_infers_dtype():
    node = BinaryOpNode(NodeKind.ADD, VariableNode("z"), ConstantNode(np.complex128(1j)))
    assert Expression(node).dtype == np.complex128
    assert Expression(VariableNode("x")).dtype == np.float64


def test_repr_names_dtype(z):
    assert repr(z) == "Expression('z', dtype=complex128)"
    assert "ConstantNode" in repr(Expression(1.0).root)
