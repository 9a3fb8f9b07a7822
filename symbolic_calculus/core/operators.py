import numpy as np
from enum import IntEnum
from typing import Any, Callable, Dict

class NodeKind(IntEnum):
  # Leaves
  CONSTANT = 0
  VARIABLE = 1
  # Binary ops
  ADD = 2
  SUBTRACT = 3
  MULTIPLY = 4
  DIVIDE = 5
  POWER = 6
  # Unary ops
  SIN = 7
  COS = 8
  EXP = 9
  LOG = 10
  NEGATE = 11

LEAF_KINDS = frozenset({NodeKind.CONSTANT, NodeKind.VARIABLE})
BINARY_KINDS = frozenset({
  NodeKind.ADD, NodeKind.SUBTRACT, NodeKind.MULTIPLY, NodeKind.DIVIDE, NodeKind.POWER
})
UNARY_KINDS = frozenset({
  NodeKind.SIN, NodeKind.COS, NodeKind.EXP, NodeKind.LOG, NodeKind.NEGATE
})

# Mapping dictionaries
BINARY_OP_MAP = {'+': NodeKind.ADD, '-': NodeKind.SUBTRACT, '*': NodeKind.MULTIPLY, '/': NodeKind.DIVIDE}
BINARY_SYMBOLS = {kind: symbol for symbol, kind in BINARY_OP_MAP.items()}
UNARY_OP_MAP = {'sin': NodeKind.SIN, 'cos': NodeKind.COS, 'exp': NodeKind.EXP, 'log': NodeKind.LOG}
UNARY_NAMES = {kind: name for name, kind in UNARY_OP_MAP.items()}

# numpy ufuncs cover float64 and complex128 alike; IEEE results (inf, nan) pass through
BINARY_KERNELS: Dict[NodeKind, Callable[[Any, Any], Any]] = {
  NodeKind.ADD: np.add,
  NodeKind.SUBTRACT: np.subtract,
  NodeKind.MULTIPLY: np.multiply,
  NodeKind.DIVIDE: np.true_divide,
  NodeKind.POWER: np.power,
}
UNARY_KERNELS: Dict[NodeKind, Callable[[Any], Any]] = {
  NodeKind.SIN: np.sin,
  NodeKind.COS: np.cos,
  NodeKind.EXP: np.exp,
  NodeKind.LOG: np.log,
  NodeKind.NEGATE: np.negative,
}

REAL_DTYPE = np.dtype(np.float64)
COMPLEX_DTYPE = np.dtype(np.complex128)


def evaluate_binary_op(left_val, right_val, kind: NodeKind):
  return BINARY_KERNELS[kind](left_val, right_val)


def evaluate_unary_op(operand_val, kind: NodeKind):
  return UNARY_KERNELS[kind](operand_val)


def resolve_dtype(dtype) -> np.dtype:
  """Map any numeric dtype onto one of the two supported scalar types."""
  dtype = np.dtype(dtype)
  if dtype.kind == 'c':
    return COMPLEX_DTYPE
  if dtype.kind in 'biuf':
    return REAL_DTYPE
  raise TypeError(f"Unsupported scalar dtype: {dtype}")


def promote_dtypes(*dtypes) -> np.dtype:
  return resolve_dtype(np.result_type(*dtypes))


def as_scalar(value, dtype) -> np.generic:
  """Convert a raw number into a constant payload of the given scalar type."""
  dtype = resolve_dtype(dtype)
  if np.iscomplexobj(value) and dtype.kind != 'c':
    raise TypeError(f"Cannot store complex value {value!r} in a {dtype.name} expression")
  return dtype.type(value)


def coerce_value(value, dtype):
  """Bring a constant or bound value to the expression's scalar type, widening real to complex if needed.

  Arrays stay arrays so that one evaluation covers many sample points.
  """
  array = np.asarray(value)
  if array.dtype.kind not in 'biufc':
    raise TypeError(f"Binding must be numeric, got {type(value).__name__}")
  return array.astype(promote_dtypes(dtype, array.dtype), copy=False)[()]
