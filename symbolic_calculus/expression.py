import numbers
import numpy as np
import sympy as sp
from typing import Any, Mapping, Optional, Set, Union
from .config import get_config
from .core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .core.operators import NodeKind, as_scalar, promote_dtypes, resolve_dtype
from .logging_system import log_debug
from .operations.differentiator import differentiate_node
from .operations.evaluator import evaluate_node
from .operations.renderer import render_node
from .operations.substituter import substitute_node
from .utils.simplifier import simplify_node
from .utils.sympy_utils import node_to_sympy, sympy_dtype, sympy_to_node
from .utils.tree_utils import (
  calculate_tree_depth, count_nodes, get_variable_names, infer_tree_dtype,
  is_constant_node, is_variable_node
)

Scalar = Union[numbers.Number, np.number]


class Expression:
  """Handle on an immutable expression tree.

  ``Expression()`` is the constant 0, ``Expression(2.5)`` a constant,
  ``Expression("x")`` a variable. Copying or combining handles shares the
  underlying nodes; nothing ever mutates a tree in place.

  The scalar type is a numpy dtype, ``float64`` or ``complex128``. It is
  inferred from constants (``Expression(1+1j)`` is complex) or given
  explicitly (``Expression("z", dtype=complex)``), and combining two
  expressions promotes to the wider type.
  """

  __slots__ = ('root', 'dtype')

  # Let numpy scalars defer to our reflected operators
  __array_ufunc__ = None

  def __init__(self, value: Union[None, str, Scalar, Node, 'Expression'] = None, dtype=None):
    if isinstance(value, Expression):
      self.root = value.root
      self.dtype = resolve_dtype(dtype) if dtype is not None else value.dtype
    elif isinstance(value, Node):
      self.root = value
      if dtype is None:
        dtype = promote_dtypes(get_config().default_dtype, infer_tree_dtype(value))
      self.dtype = resolve_dtype(dtype)
    elif isinstance(value, str):
      self.root = VariableNode(value)
      self.dtype = resolve_dtype(dtype if dtype is not None else get_config().default_dtype)
    elif value is None or isinstance(value, (numbers.Number, np.number)):
      value = 0 if value is None else value
      if dtype is None:
        dtype = promote_dtypes(get_config().default_dtype, np.asarray(value).dtype)
      self.dtype = resolve_dtype(dtype)
      self.root = ConstantNode(as_scalar(value, self.dtype))
    else:
      raise TypeError(f"Cannot build an Expression from {type(value).__name__}")

  @classmethod
  def _from_node(cls, node: Node, dtype) -> 'Expression':
    return cls(node, dtype=dtype)

  def _coerce(self, other) -> Optional['Expression']:
    """Wrap a raw scalar as a constant of (at least) this expression's dtype."""
    if isinstance(other, Expression):
      return other
    if isinstance(other, (numbers.Number, np.number)):
      return Expression(other, dtype=promote_dtypes(self.dtype, np.asarray(other).dtype))
    return None

  def _binary(self, other, kind: NodeKind, reflected: bool = False) -> 'Expression':
    other = self._coerce(other)
    if other is None:
      return NotImplemented
    left, right = (other, self) if reflected else (self, other)
    return Expression._from_node(
      BinaryOpNode(kind, left.root, right.root), promote_dtypes(self.dtype, other.dtype)
    )

  # Arithmetic operators
  def __add__(self, other):
    return self._binary(other, NodeKind.ADD)

  def __radd__(self, other):
    return self._binary(other, NodeKind.ADD, reflected=True)

  def __sub__(self, other):
    return self._binary(other, NodeKind.SUBTRACT)

  def __rsub__(self, other):
    return self._binary(other, NodeKind.SUBTRACT, reflected=True)

  def __mul__(self, other):
    return self._binary(other, NodeKind.MULTIPLY)

  def __rmul__(self, other):
    return self._binary(other, NodeKind.MULTIPLY, reflected=True)

  def __truediv__(self, other):
    return self._binary(other, NodeKind.DIVIDE)

  def __rtruediv__(self, other):
    return self._binary(other, NodeKind.DIVIDE, reflected=True)

  def __pow__(self, other):
    return self._binary(other, NodeKind.POWER)

  def __rpow__(self, other):
    return self._binary(other, NodeKind.POWER, reflected=True)

  def __neg__(self) -> 'Expression':
    return Expression._from_node(UnaryOpNode(NodeKind.NEGATE, self.root), self.dtype)

  # Elementary functions
  @staticmethod
  def sin(expr) -> 'Expression':
    return _unary(NodeKind.SIN, expr)

  @staticmethod
  def cos(expr) -> 'Expression':
    return _unary(NodeKind.COS, expr)

  @staticmethod
  def exp(expr) -> 'Expression':
    return _unary(NodeKind.EXP, expr)

  @staticmethod
  def log(expr) -> 'Expression':
    return _unary(NodeKind.LOG, expr)

  @staticmethod
  def pow(base, exponent) -> 'Expression':
    """``base ^ exponent``; a raw scalar exponent becomes a constant of the base's dtype."""
    base = as_expression(base)
    result = base._binary(exponent, NodeKind.POWER)
    if result is NotImplemented:
      raise TypeError(f"Unsupported exponent type: {type(exponent).__name__}")
    return result

  # Algorithms
  def evaluate(self, bindings: Optional[Mapping[str, Any]] = None):
    """Numeric value under ``bindings`` (name -> scalar or numpy array).

    Raises:
        UndefinedVariableError: a variable in the tree has no binding.
    """
    return evaluate_node(self.root, bindings if bindings is not None else {}, self.dtype)

  def derivative(self, variable: str) -> 'Expression':
    """Exact symbolic derivative with respect to ``variable``, unsimplified.

    Raises:
        UnsupportedDerivativeError: a power has a non-constant exponent.
    """
    log_debug("d/d%s %s", variable, self)
    return Expression._from_node(differentiate_node(self.root, variable, self.dtype), self.dtype)

  def substitute(self, variable: str, replacement) -> 'Expression':
    """Replace ``variable`` by ``replacement``; untouched subtrees are shared, not copied."""
    replacement = as_expression(replacement, self.dtype)
    node = substitute_node(self.root, variable, replacement.root)
    return Expression._from_node(node, promote_dtypes(self.dtype, replacement.dtype))

  def simplify(self) -> 'Expression':
    """Value-preserving clean-up; only ever runs when called."""
    return Expression._from_node(simplify_node(self.root, self.dtype), self.dtype)

  def to_string(self, precision: Optional[int] = None) -> str:
    return render_node(self.root, precision)

  # Predicates and metrics
  def is_constant(self) -> bool:
    return is_constant_node(self.root)

  def is_variable(self, name: Optional[str] = None) -> bool:
    return is_variable_node(self.root, name)

  def size(self) -> int:
    return count_nodes(self.root)

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def free_variables(self) -> Set[str]:
    return get_variable_names(self.root)

  # SymPy bridge
  def to_sympy(self) -> sp.Expr:
    return node_to_sympy(self.root)

  @classmethod
  def from_sympy(cls, sympy_expr, dtype=None) -> 'Expression':
    sympy_expr = sp.sympify(sympy_expr)
    dtype = resolve_dtype(dtype) if dtype is not None else sympy_dtype(sympy_expr)
    return cls._from_node(sympy_to_node(sympy_expr, dtype), dtype)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r}, dtype={self.dtype.name})"


def as_expression(value, dtype=None) -> Expression:
  """Return ``value`` if it already is an Expression, otherwise build one."""
  if isinstance(value, Expression):
    return value
  if dtype is not None and isinstance(value, (numbers.Number, np.number)):
    dtype = promote_dtypes(dtype, np.asarray(value).dtype)
  return Expression(value, dtype=dtype)


def _unary(kind: NodeKind, expr) -> Expression:
  expr = as_expression(expr)
  return Expression._from_node(UnaryOpNode(kind, expr.root), expr.dtype)


def sin(expr) -> Expression:
  return Expression.sin(expr)


def cos(expr) -> Expression:
  return Expression.cos(expr)


def exp(expr) -> Expression:
  return Expression.exp(expr)


def log(expr) -> Expression:
  return Expression.log(expr)


def pow(base, exponent) -> Expression:
  return Expression.pow(base, exponent)
