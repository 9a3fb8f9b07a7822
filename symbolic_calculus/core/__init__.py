"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .operators import (
    NodeKind, LEAF_KINDS, BINARY_KINDS, UNARY_KINDS,
    BINARY_OP_MAP, BINARY_SYMBOLS, UNARY_OP_MAP, UNARY_NAMES,
    REAL_DTYPE, COMPLEX_DTYPE,
    evaluate_binary_op, evaluate_unary_op,
    resolve_dtype, promote_dtypes, as_scalar, coerce_value
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'NodeKind', 'LEAF_KINDS', 'BINARY_KINDS', 'UNARY_KINDS',
    'BINARY_OP_MAP', 'BINARY_SYMBOLS', 'UNARY_OP_MAP', 'UNARY_NAMES',
    'REAL_DTYPE', 'COMPLEX_DTYPE',
    'evaluate_binary_op', 'evaluate_unary_op',
    'resolve_dtype', 'promote_dtypes', 'as_scalar', 'coerce_value'
]
