import numpy as np
from typing import Optional
from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import (
  NodeKind, BINARY_KINDS, UNARY_KINDS, REAL_DTYPE,
  evaluate_binary_op, evaluate_unary_op, coerce_value
)
from ..logging_system import debug_enabled, log_debug
from .tree_utils import count_nodes


class ExpressionSimplifier:
  """Optional algebraic clean-up of expression trees.

  Never run automatically. A rewrite is applied only when the new tree
  evaluates to the same value and shape as the original for every binding,
  including inf and nan, so ``x * 0`` and ``x ^ 0`` are left alone. Constant
  subtrees are folded in the expression's scalar type, and the original node
  is returned wherever nothing changed.
  """

  def __init__(self, dtype: np.dtype = REAL_DTYPE):
    self.dtype = dtype

  def simplify(self, node: Node) -> Node:
    simplified = self._apply_simplification_rules(node)
    if simplified is not node and debug_enabled():
      log_debug(f"Simplified tree of {count_nodes(node)} nodes to {count_nodes(simplified)} nodes")
    return simplified

  @staticmethod
  def _is_constant_equal(node: Node, target) -> bool:
    return node.kind == NodeKind.CONSTANT and node.value == target

  def _fold(self, result) -> Optional[Node]:
    if np.isfinite(result):
      return ConstantNode(result)
    return None

  def _apply_simplification_rules(self, node: Node) -> Node:
    if node.kind in BINARY_KINDS:
      left = self._apply_simplification_rules(node.left)
      right = self._apply_simplification_rules(node.right)

      if left.kind == NodeKind.CONSTANT and right.kind == NodeKind.CONSTANT:
        with np.errstate(all='ignore'):
          folded = self._fold(evaluate_binary_op(
            coerce_value(left.value, self.dtype), coerce_value(right.value, self.dtype), node.kind
          ))
        if folded is not None:
          return folded

      rewritten = self._rewrite_binary(node.kind, left, right)
      if rewritten is not None:
        return rewritten

      if left is node.left and right is node.right:
        return node
      return BinaryOpNode(node.kind, left, right)

    elif node.kind in UNARY_KINDS:
      operand = self._apply_simplification_rules(node.operand)

      if operand.kind == NodeKind.CONSTANT:
        with np.errstate(all='ignore'):
          folded = self._fold(evaluate_unary_op(coerce_value(operand.value, self.dtype), node.kind))
        if folded is not None:
          return folded

      if node.kind == NodeKind.NEGATE and operand.kind == NodeKind.NEGATE:
        return operand.operand  # -(-x) = x

      if operand is node.operand:
        return node
      return UnaryOpNode(node.kind, operand)

    return node

  def _rewrite_binary(self, kind: NodeKind, left: Node, right: Node) -> Optional[Node]:
    # Only rules that keep the other operand's value and shape intact
    if kind == NodeKind.ADD:
      if self._is_constant_equal(right, 0):
        return left  # x + 0 = x
      if self._is_constant_equal(left, 0):
        return right  # 0 + x = x

    elif kind == NodeKind.SUBTRACT:
      if self._is_constant_equal(right, 0):
        return left  # x - 0 = x
      if self._is_constant_equal(left, 0):
        return UnaryOpNode(NodeKind.NEGATE, right)  # 0 - x = -x

    elif kind == NodeKind.MULTIPLY:
      if self._is_constant_equal(left, 1):
        return right  # 1 * x = x
      if self._is_constant_equal(right, 1):
        return left  # x * 1 = x

    elif kind == NodeKind.DIVIDE:
      if self._is_constant_equal(right, 1):
        return left  # x / 1 = x

    elif kind == NodeKind.POWER:
      if self._is_constant_equal(right, 1):
        return left  # x ^ 1 = x

    return None


def simplify_node(node: Node, dtype: np.dtype = REAL_DTYPE) -> Node:
  return ExpressionSimplifier(dtype).simplify(node)
