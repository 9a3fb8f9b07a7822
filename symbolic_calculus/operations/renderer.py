import numpy as np
from typing import Optional
from ..config import get_config
from ..core.node import Node
from ..core.operators import NodeKind, BINARY_SYMBOLS, UNARY_NAMES


def format_scalar(value, precision: Optional[int] = None) -> str:
  """Default textual form of a scalar: ``%g`` for reals, ``(re,im)`` for complex."""
  if precision is None:
    precision = get_config().display_precision
  if np.iscomplexobj(value):
    return f"({value.real:.{precision}g},{value.imag:.{precision}g})"
  return f"{value:.{precision}g}"


def render_node(node: Node, precision: Optional[int] = None) -> str:
  """Fully parenthesized rendering; no precedence-based elision."""
  if precision is None:
    precision = get_config().display_precision

  kind = node.kind
  if kind == NodeKind.CONSTANT:
    return format_scalar(node.value, precision)
  if kind == NodeKind.VARIABLE:
    return node.name
  if kind == NodeKind.POWER:
    return f"pow({render_node(node.left, precision)}, {render_node(node.right, precision)})"
  if kind in BINARY_SYMBOLS:
    left = render_node(node.left, precision)
    right = render_node(node.right, precision)
    return f"({left} {BINARY_SYMBOLS[kind]} {right})"
  if kind == NodeKind.NEGATE:
    return f"-({render_node(node.operand, precision)})"
  if kind in UNARY_NAMES:
    return f"{UNARY_NAMES[kind]}({render_node(node.operand, precision)})"

  raise TypeError(f"Unsupported node: {type(node)!r}")
