from ..core.node import Node, BinaryOpNode, UnaryOpNode
from ..core.operators import NodeKind, BINARY_KINDS, UNARY_KINDS


def substitute_node(node: Node, variable: str, replacement: Node) -> Node:
  """Replace every ``variable`` leaf with ``replacement``.

  The replacement subtree is shared into the result, and any subtree that
  contains no occurrence of ``variable`` is returned as the very same node.
  """
  kind = node.kind
  if kind == NodeKind.VARIABLE:
    return replacement if node.name == variable else node

  if kind == NodeKind.CONSTANT:
    return node

  if kind in BINARY_KINDS:
    left = substitute_node(node.left, variable, replacement)
    right = substitute_node(node.right, variable, replacement)
    if left is node.left and right is node.right:
      return node
    return BinaryOpNode(kind, left, right)

  if kind in UNARY_KINDS:
    operand = substitute_node(node.operand, variable, replacement)
    if operand is node.operand:
      return node
    return UnaryOpNode(kind, operand)

  raise TypeError(f"Unsupported node: {type(node)!r}")
