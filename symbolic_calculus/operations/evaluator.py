from typing import Any, Mapping
import numpy as np
from ..core.node import Node
from ..core.operators import (
  NodeKind, BINARY_KINDS, UNARY_KINDS, REAL_DTYPE,
  evaluate_binary_op, evaluate_unary_op, coerce_value
)
from ..errors import UndefinedVariableError


def evaluate_node(node: Node, bindings: Mapping[str, Any], dtype: np.dtype = REAL_DTYPE):
  """Recursively compute the value of ``node`` under ``bindings``.

  Constants and bindings are brought to ``dtype`` before any kernel runs.
  Shared subtrees are evaluated once per occurrence; nothing is cached.
  """
  kind = node.kind
  if kind == NodeKind.CONSTANT:
    return coerce_value(node.value, dtype)

  if kind == NodeKind.VARIABLE:
    if node.name not in bindings:
      raise UndefinedVariableError(node.name)
    return coerce_value(bindings[node.name], dtype)

  if kind in BINARY_KINDS:
    left_val = evaluate_node(node.left, bindings, dtype)
    right_val = evaluate_node(node.right, bindings, dtype)
    return evaluate_binary_op(left_val, right_val, kind)

  if kind in UNARY_KINDS:
    return evaluate_unary_op(evaluate_node(node.operand, bindings, dtype), kind)

  raise TypeError(f"Unsupported node: {type(node)!r}")
