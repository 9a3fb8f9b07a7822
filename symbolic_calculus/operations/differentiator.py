import numpy as np
from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import NodeKind, REAL_DTYPE
from ..errors import UnsupportedDerivativeError
from ..logging_system import log_debug
from ..utils.tree_utils import is_constant_node
from .evaluator import evaluate_node
from .renderer import render_node


def differentiate_node(node: Node, variable: str, dtype: np.dtype = REAL_DTYPE) -> Node:
  """Symbolic derivative of ``node`` with respect to ``variable``.

  The result is built from fresh nodes along every differentiated path and
  shares the untouched operand subtrees of the input. No simplification is
  applied, so terms such as ``(0 * x)`` or ``(cos(x) * 1)`` are expected.

  Raises:
      UnsupportedDerivativeError: a ``Power`` node has a non-constant exponent.
  """
  kind = node.kind

  if kind == NodeKind.CONSTANT:
    return ConstantNode(dtype.type(0))

  if kind == NodeKind.VARIABLE:
    return ConstantNode(dtype.type(1 if node.name == variable else 0))

  if kind in (NodeKind.ADD, NodeKind.SUBTRACT):
    return BinaryOpNode(
      kind,
      differentiate_node(node.left, variable, dtype),
      differentiate_node(node.right, variable, dtype)
    )

  if kind == NodeKind.MULTIPLY:
    # (uv)' = u'v + uv'
    u, v = node.left, node.right
    du = differentiate_node(u, variable, dtype)
    dv = differentiate_node(v, variable, dtype)
    return BinaryOpNode(
      NodeKind.ADD,
      BinaryOpNode(NodeKind.MULTIPLY, du, v),
      BinaryOpNode(NodeKind.MULTIPLY, u, dv)
    )

  if kind == NodeKind.DIVIDE:
    # (u/v)' = (u'v - uv') / v^2
    u, v = node.left, node.right
    du = differentiate_node(u, variable, dtype)
    dv = differentiate_node(v, variable, dtype)
    numerator = BinaryOpNode(
      NodeKind.SUBTRACT,
      BinaryOpNode(NodeKind.MULTIPLY, du, v),
      BinaryOpNode(NodeKind.MULTIPLY, u, dv)
    )
    denominator = BinaryOpNode(NodeKind.POWER, v, ConstantNode(dtype.type(2)))
    return BinaryOpNode(NodeKind.DIVIDE, numerator, denominator)

  if kind == NodeKind.POWER:
    return _differentiate_power(node, variable, dtype)

  if kind == NodeKind.SIN:
    u = node.operand
    return BinaryOpNode(
      NodeKind.MULTIPLY,
      UnaryOpNode(NodeKind.COS, u),
      differentiate_node(u, variable, dtype)
    )

  if kind == NodeKind.COS:
    u = node.operand
    return BinaryOpNode(
      NodeKind.MULTIPLY,
      UnaryOpNode(NodeKind.NEGATE, UnaryOpNode(NodeKind.SIN, u)),
      differentiate_node(u, variable, dtype)
    )

  if kind == NodeKind.EXP:
    u = node.operand
    return BinaryOpNode(
      NodeKind.MULTIPLY,
      UnaryOpNode(NodeKind.EXP, u),
      differentiate_node(u, variable, dtype)
    )

  if kind == NodeKind.LOG:
    u = node.operand
    return BinaryOpNode(NodeKind.DIVIDE, differentiate_node(u, variable, dtype), u)

  if kind == NodeKind.NEGATE:
    return UnaryOpNode(NodeKind.NEGATE, differentiate_node(node.operand, variable, dtype))

  raise TypeError(f"Unsupported node: {type(node)!r}")


def _differentiate_power(node: BinaryOpNode, variable: str, dtype: np.dtype) -> Node:
  # (u^n)' = n * u^(n-1) * u', only for an exponent free of variables
  u, exponent = node.left, node.right
  if not is_constant_node(exponent):
    log_debug("Refusing derivative of %s: exponent is not constant", node)
    raise UnsupportedDerivativeError(render_node(exponent))

  n = evaluate_node(exponent, {}, dtype)
  scaled_power = BinaryOpNode(
    NodeKind.MULTIPLY,
    ConstantNode(n),
    BinaryOpNode(NodeKind.POWER, u, ConstantNode(n - dtype.type(1)))
  )
  return BinaryOpNode(NodeKind.MULTIPLY, scaled_power, differentiate_node(u, variable, dtype))
