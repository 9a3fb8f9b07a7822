import numpy as np
import sympy as sp
from functools import reduce
from typing import Optional
from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import NodeKind, COMPLEX_DTYPE, REAL_DTYPE, resolve_dtype
from ..errors import SymPyConversionError
from ..logging_system import log_debug

_SYMPY_FUNCTIONS = {
  sp.sin: NodeKind.SIN,
  sp.cos: NodeKind.COS,
  sp.exp: NodeKind.EXP,
  sp.log: NodeKind.LOG,
}


def _real_to_sympy(value: float) -> sp.Expr:
  if float(value).is_integer():
    return sp.Integer(int(value))
  return sp.Float(float(value))


def _constant_to_sympy(value) -> sp.Expr:
  if np.iscomplexobj(value):
    return _real_to_sympy(value.real) + sp.I * _real_to_sympy(value.imag)
  return _real_to_sympy(value)


def node_to_sympy(node: Node) -> sp.Expr:
  """Convert a node tree into the equivalent SymPy expression."""
  kind = node.kind
  if kind == NodeKind.CONSTANT:
    return _constant_to_sympy(node.value)
  if kind == NodeKind.VARIABLE:
    return sp.Symbol(node.name)

  if kind == NodeKind.NEGATE:
    return -node_to_sympy(node.operand)
  if kind == NodeKind.SIN:
    return sp.sin(node_to_sympy(node.operand))
  if kind == NodeKind.COS:
    return sp.cos(node_to_sympy(node.operand))
  if kind == NodeKind.EXP:
    return sp.exp(node_to_sympy(node.operand))
  if kind == NodeKind.LOG:
    return sp.log(node_to_sympy(node.operand))

  left = node_to_sympy(node.left)
  right = node_to_sympy(node.right)
  if kind == NodeKind.ADD:
    return sp.Add(left, right)
  elif kind == NodeKind.SUBTRACT:
    return sp.Add(left, sp.Mul(-1, right))
  elif kind == NodeKind.MULTIPLY:
    return sp.Mul(left, right)
  elif kind == NodeKind.DIVIDE:
    return sp.Mul(left, sp.Pow(right, -1))
  elif kind == NodeKind.POWER:
    return sp.Pow(left, right)

  raise TypeError(f"Unsupported node: {type(node)!r}")


def sympy_dtype(sympy_expr: sp.Expr) -> np.dtype:
  """Complex when the expression mentions the imaginary unit, real otherwise."""
  return COMPLEX_DTYPE if sympy_expr.has(sp.I) else REAL_DTYPE


def sympy_to_node(sympy_expr, dtype: Optional[np.dtype] = None) -> Node:
  """Convert a SymPy expression into the node model.

  n-ary sums and products are folded left-associatively. Subtraction and
  division stay in SymPy's canonical ``Add``/``Mul``/``Pow`` shape.

  Raises:
      SymPyConversionError: the expression uses a construct with no node kind.
  """
  sympy_expr = sp.sympify(sympy_expr)
  dtype = resolve_dtype(dtype) if dtype is not None else sympy_dtype(sympy_expr)
  log_debug("Converting SymPy expression %s (%s)", sympy_expr, dtype.name)
  return _convert(sympy_expr, dtype)


def _convert(sympy_expr: sp.Expr, dtype: np.dtype) -> Node:
  if sympy_expr.is_Symbol:
    return VariableNode(str(sympy_expr))

  if sympy_expr.is_number:
    try:
      value = complex(sympy_expr)
    except TypeError as exc:
      raise SymPyConversionError(f"Cannot evaluate SymPy number {sympy_expr}") from exc
    if dtype.kind != 'c':
      if value.imag != 0:
        raise SymPyConversionError(f"Complex number {sympy_expr} in a real expression")
      return ConstantNode(dtype.type(value.real))
    return ConstantNode(dtype.type(value))

  if isinstance(sympy_expr, (sp.Add, sp.Mul)):
    kind = NodeKind.ADD if isinstance(sympy_expr, sp.Add) else NodeKind.MULTIPLY
    operands = [_convert(arg, dtype) for arg in sympy_expr.args]
    return reduce(lambda left, right: BinaryOpNode(kind, left, right), operands)

  if isinstance(sympy_expr, sp.Pow):
    base, exponent = sympy_expr.args
    return BinaryOpNode(NodeKind.POWER, _convert(base, dtype), _convert(exponent, dtype))

  for function, kind in _SYMPY_FUNCTIONS.items():
    if isinstance(sympy_expr, function):
      if len(sympy_expr.args) != 1:
        raise SymPyConversionError(f"{sympy_expr.func} with {len(sympy_expr.args)} arguments is not supported")
      return UnaryOpNode(kind, _convert(sympy_expr.args[0], dtype))

  raise SymPyConversionError(f"Unsupported SymPy construct: {type(sympy_expr).__name__}")
