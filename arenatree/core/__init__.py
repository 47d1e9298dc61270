"""Core abstractions for arenatree.

This module contains the node arena, the traversal strategies and the
abstract tree capability sets that both tree variants build on.
"""

from .store import NodeStore, TOMBSTONE
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    InterleavedInOrderTraverser,
    SplitInOrderTraverser,
    create_traverser,
    parse_order,
)
from .cache import TraversalCache
from .tree import Tree, NumberedTree

__all__ = [
    "NodeStore",
    "TOMBSTONE",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "InterleavedInOrderTraverser",
    "SplitInOrderTraverser",
    "create_traverser",
    "parse_order",
    "TraversalCache",
    "Tree",
    "NumberedTree",
]
