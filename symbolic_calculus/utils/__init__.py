"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, simplify_node
from .sympy_utils import node_to_sympy, sympy_to_node, sympy_dtype
from .tree_utils import (
    get_all_nodes, is_constant_node, is_variable_node,
    calculate_tree_depth, count_nodes,
    get_constants, get_variables, get_variable_names, infer_tree_dtype
)

__all__ = [
    'ExpressionSimplifier', 'simplify_node',
    'node_to_sympy', 'sympy_to_node', 'sympy_dtype',
    'get_all_nodes', 'is_constant_node', 'is_variable_node',
    'calculate_tree_depth', 'count_nodes',
    'get_constants', 'get_variables', 'get_variable_names', 'infer_tree_dtype'
]
