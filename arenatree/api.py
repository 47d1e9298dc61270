"""High-level API for arenatree.

This module provides simple, functional interfaces for common read-only
operations on a tree. These functions wrap the object-oriented API for
ease of use in simple cases.
"""

from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, List, Optional, Tuple, Union

from .config import TraversalOrder
from .core.tree import Tree


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        order: Traversal order (pre, in, post, level) as enum or string

    Yields:
        Live values in the requested order

    Example:
        >>> tree = ListTree()
        >>> tree.add_all(['A', 'B', 'C'])
        True
        >>> list(traverse_tree(tree, 'level'))
        ['A', 'B', 'C']
    """
    yield from tree.traverse(order)


def find_nodes(
    tree: Tree,
    predicate: Callable[[Any], bool],
    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER,
) -> Iterator[Any]:
    """Find values that match a predicate.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching values
        order: Traversal order used for the search

    Yields:
        Matching values in traversal order
    """
    for value in traverse_tree(tree, order):
        if predicate(value):
            yield value


def count_nodes(tree: Tree, predicate: Optional[Callable[[Any], bool]] = None) -> int:
    """Count values in a tree, optionally only those matching ``predicate``.

    Args:
        tree: Tree to count
        predicate: Optional filter

    Returns:
        Number of matching values
    """
    if predicate is None:
        return tree.size()
    return sum(1 for _ in find_nodes(tree, predicate))


def get_leaf_nodes(tree: Tree) -> List[Any]:
    """Get all leaf values in a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Values without children, in the tree's leaf order
    """
    return tree.leaves()


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    ``max_depth`` is measured on the live structure (root at depth 0),
    while ``tracked_depth`` is the tree's level high-water mark, which
    removals never lower.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'tracked_depth': tree.depth(),
        'depths': {}
    }

    root = tree.root()
    queue: Deque[Tuple[Any, int]] = deque()
    if root is not None:
        queue.append((root, 0))
    while queue:
        value, depth = queue.popleft()
        children = tree.children(value)
        queue.extend((child, depth + 1) for child in children)

        stats['total_nodes'] += 1
        if not children:
            stats['leaf_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
