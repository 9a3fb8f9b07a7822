"""
Tree Utility Functions

Predicates and structural metrics for expression trees. Every helper here is
read-only: trees are immutable, so nothing in this module rewrites nodes.
"""

import numpy as np
from typing import List, Optional, Set

from ..core.node import Node, ConstantNode, VariableNode
from ..core.operators import NodeKind, COMPLEX_DTYPE, REAL_DTYPE


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    A node shared by several parents is listed once per occurrence.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def is_constant_node(node: Node) -> bool:
    """
    Check whether a subtree contains no variables.

    Args:
        node: Root node of the subtree

    Returns:
        True for constant leaves and for interior nodes whose children are all constant
    """
    if node.kind == NodeKind.CONSTANT:
        return True
    if node.kind == NodeKind.VARIABLE:
        return False
    return all(is_constant_node(child) for child in node.children)


def is_variable_node(node: Node, name: Optional[str] = None) -> bool:
    """True iff the node is a variable leaf, optionally with the given name."""
    if node.kind != NodeKind.VARIABLE:
        return False
    return name is None or node.name == name


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def count_nodes(node: Node) -> int:
    """Node count of the tree, counting shared subtrees once per occurrence."""
    return 1 + sum(count_nodes(child) for child in node.children)


def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return [n for n in get_all_nodes(node) if n.kind == NodeKind.CONSTANT]


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return [n for n in get_all_nodes(node) if n.kind == NodeKind.VARIABLE]


def get_variable_names(node: Node) -> Set[str]:
    """Names of the free variables of the tree."""
    return {var_node.name for var_node in get_variables(node)}


def infer_tree_dtype(node: Node) -> np.dtype:
    """Complex if any constant in the tree is complex, real otherwise."""
    if any(np.iscomplexobj(c.value) for c in get_constants(node)):
        return COMPLEX_DTYPE
    return REAL_DTYPE
