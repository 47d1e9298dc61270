"""arenatree - In-memory value trees over an index arena.

arenatree stores a tree as flat parallel lists keyed by dense integer
ids instead of a graph of node objects. Two interchangeable shapes share
one interface:

    from arenatree import ListTree   # any number of children, insertion order
    from arenatree import SlotTree   # fixed, index-addressable child slots

Both offer the same mutation, traversal and query surface; SlotTree adds
child(parent, index) and ancestor/descendant/common-ancestor queries.
"""

__version__ = "0.1.0"

from .exceptions import TreeError, NodeNotFoundError, InvalidArgumentError
from .config import TraversalOrder, TreeConfig
from .core.tree import Tree, NumberedTree
from .unbounded import ListTree
from .bounded import SlotTree
from .api import (
    traverse_tree,
    find_nodes,
    count_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Trees
    "Tree",
    "NumberedTree",
    "ListTree",
    "SlotTree",
    # Config
    "TraversalOrder",
    "TreeConfig",
    # Errors
    "TreeError",
    "NodeNotFoundError",
    "InvalidArgumentError",
    # API
    "traverse_tree",
    "find_nodes",
    "count_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
