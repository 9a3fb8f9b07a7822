import numpy as np
from abc import ABC
from typing import Tuple
from .operators import NodeKind, BINARY_KINDS, UNARY_KINDS


class Node(ABC):
  """Base node class. Nodes never change after construction, so subtrees can be shared freely."""

  __slots__ = ()

  kind: NodeKind

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @property
  def children(self) -> Tuple['Node', ...]:
    return ()

  def __str__(self) -> str:
    from ..operations.renderer import render_node
    return render_node(self)

  def __repr__(self) -> str:
    return f"<{type(self).__name__} {self}>"


class VariableNode(Node):
  __slots__ = ('name',)

  kind = NodeKind.VARIABLE

  def __init__(self, name: str):
    object.__setattr__(self, 'name', name)


class ConstantNode(Node):
  __slots__ = ('value',)

  kind = NodeKind.CONSTANT

  def __init__(self, value: np.generic):
    object.__setattr__(self, 'value', value)


class BinaryOpNode(Node):
  __slots__ = ('kind', 'left', 'right')

  def __init__(self, kind: NodeKind, left: Node, right: Node):
    if kind not in BINARY_KINDS:
      raise ValueError(f"{kind!r} is not a binary node kind")
    object.__setattr__(self, 'kind', kind)
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)


class UnaryOpNode(Node):
  __slots__ = ('kind', 'operand')

  def __init__(self, kind: NodeKind, operand: Node):
    if kind not in UNARY_KINDS:
      raise ValueError(f"{kind!r} is not a unary node kind")
    object.__setattr__(self, 'kind', kind)
    object.__setattr__(self, 'operand', operand)

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)
