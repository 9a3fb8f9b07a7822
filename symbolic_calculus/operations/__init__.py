"""Recursive algorithms over the node model."""

from .evaluator import evaluate_node
from .differentiator import differentiate_node
from .substituter import substitute_node
from .renderer import render_node, format_scalar

__all__ = [
    'evaluate_node', 'differentiate_node', 'substitute_node',
    'render_node', 'format_scalar'
]
