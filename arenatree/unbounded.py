"""List backed tree with unbounded arity.

Children are kept in insertion order under their parents and a node
may have any number of them.
"""

from typing import Any, List, Optional

from ._common.config import TreeConfig
from .core.store import NodeStore
from .core.traverser import ROOT_ID, InterleavedInOrderTraverser, LevelOrderTraverser
from .core.tree import Tree
from .exceptions import NodeNotFoundError


class ListTree(Tree):
    """Tree whose nodes keep an insertion-ordered list of children.

    Example:
        >>> tree = ListTree()
        >>> tree.add('A')
        True
        >>> tree.add_children('A', ['B', 'C', 'E'])
        True
        >>> tree.children('A')
        ['B', 'C', 'E']
        >>> tree.siblings('C')
        ['B', 'E']
    """

    in_order_traverser = InterleavedInOrderTraverser

    def __init__(self, config: Optional[TreeConfig] = None):
        """Initialize an empty tree.

        Args:
            config: Optional TreeConfig. max_children does not limit the
                fan-out of a ListTree, but the whole config is still
                validated.

        Raises:
            InvalidArgumentError: If the configuration is invalid
        """
        super().__init__(NodeStore(), config)

    def add_child(self, parent: Any, child: Any) -> bool:
        self._check_value(child)
        if parent is None:
            return self._add_root(child)

        parent_id = self._resolve(parent)
        if self.contains(child):
            return False

        self._add_node(child, parent_id)
        return True

    def siblings(self, value: Any) -> List[Any]:
        """Return the other children of ``value``'s parent.

        Raises:
            NodeNotFoundError: If value is not in the tree, or is the
                root (which has no parent)
        """
        node_id = self._resolve(value)
        if self._store.parents[node_id] is None:
            raise NodeNotFoundError(f"No parent was found for {value!r}")
        return self._siblings_of(node_id)

    def leaves(self) -> List[Any]:
        """Return childless values in level order."""
        return self._cached('leaves', self._iter_leaves)

    def _iter_leaves(self):
        store = self._store
        if len(store) == 0:
            return
        for node_id in LevelOrderTraverser(store).traverse_ids(ROOT_ID):
            if store.is_live(node_id) and not store.has_children(node_id):
                yield store.value_of(node_id)
