"""Slot backed tree with a fixed number of children per node.

Every node owns exactly ``max_children`` child slots, so children can be
addressed by index. This is the natural base for ordered trees such as
binary search trees, where the position of a child carries meaning.

``add_child(parent, child)`` without an index fills the first free slot
from the left; pass an explicit index when the position matters.
"""

import dataclasses
import logging
from typing import Any, List, Optional

from ._common.config import TreeConfig
from .core.store import NodeStore
from .core.traverser import SplitInOrderTraverser
from .core.tree import NumberedTree
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class SlotTree(NumberedTree):
    """Tree whose nodes have a fixed array of numbered child slots.

    Example:
        >>> tree = SlotTree(2)
        >>> tree.add('A')
        True
        >>> tree.add_child('A', 'B')
        True
        >>> tree.add_child('A', 'C')
        True
        >>> tree.add_child('B', 'D', 0)
        True
        >>> tree.pre_order_traversal()
        ['A', 'B', 'D', 'C']
        >>> tree.common_ancestor('D', 'C')
        'A'
    """

    in_order_traverser = SplitInOrderTraverser

    def __init__(self, max_children: Optional[int] = None, config: Optional[TreeConfig] = None):
        """Initialize an empty tree.

        Args:
            max_children: Number of child slots per node; falls back to
                config.max_children when omitted
            config: Optional TreeConfig

        Raises:
            InvalidArgumentError: If no slot count is given or the
                configuration is invalid
        """
        config = config or TreeConfig()
        if max_children is None:
            max_children = config.max_children
        if max_children is None:
            raise InvalidArgumentError("max_children is required for a SlotTree")
        if config.max_children != max_children:
            config = dataclasses.replace(config, max_children=max_children)
        super().__init__(NodeStore(slots=max_children), config)

    @property
    def max_children(self) -> int:
        return self._store.slots

    def add_child(self, parent: Any, child: Any, index: Optional[int] = None) -> bool:
        """Add ``child`` under ``parent``.

        Args:
            parent: Existing parent value, or None to create the root
            child: New value
            index: Slot to fill; None picks the first empty slot

        Returns:
            True if added. False if the value already exists, the parent
            has no free slot, or ``index`` is not an integer, out of
            range or occupied.

        Raises:
            InvalidArgumentError: If child is None, or parent is None
                while a root already exists
            NodeNotFoundError: If parent is not in the tree
        """
        self._check_value(child)
        if parent is None:
            return self._add_root(child)

        parent_id = self._resolve(parent)
        if self.contains(child):
            return False

        slots = self._store.children[parent_id]
        if index is None:
            index = self._store.first_empty_slot(parent_id)
            if index is None:
                logger.debug(f"No free slot under {parent!r}")
                return False
        elif not isinstance(index, int) or not 0 <= index < self.max_children:
            return False
        elif slots[index] is not None:
            return False

        self._add_node(child, parent_id, index)
        return True

    def child(self, parent: Any, index: int) -> Any:
        """Return the value in slot ``index`` of ``parent``.

        Returns:
            The child value, or None if the slot is empty

        Raises:
            InvalidArgumentError: If parent is None
            NodeNotFoundError: If parent is not in the tree
            IndexError: If index is outside the slot array
        """
        parent_id = self._resolve(parent)
        if not 0 <= index < self.max_children:
            raise IndexError(f"slot index {index} out of range for {self.max_children} slots")
        child_id = self._store.children[parent_id][index]
        if child_id is None:
            return None
        return self._store.value_of(child_id)

    def siblings(self, value: Any) -> List[Any]:
        """Return the other children of ``value``'s parent.

        The root has no parent and therefore no siblings: an empty list
        is returned for it.

        Raises:
            NodeNotFoundError: If value is not in the tree
        """
        node_id = self._resolve(value)
        if self._store.parents[node_id] is None:
            return []
        return self._siblings_of(node_id)

    def leaves(self) -> List[Any]:
        """Return values with all slots empty, in node-id order."""
        return self._cached('leaves', self._iter_leaves)

    def _iter_leaves(self):
        store = self._store
        for node_id in store.live_ids():
            if not store.has_children(node_id):
                yield store.value_of(node_id)

    # Lineage queries

    def is_ancestor(self, node: Any, descendant: Any) -> bool:
        """Check whether ``node`` is a proper ancestor of ``descendant``.

        Walks the parent chain upwards from ``descendant`` comparing by
        value equality.

        Raises:
            InvalidArgumentError: If either argument is None
            NodeNotFoundError: If descendant is not in the tree
        """
        self._check_value(node)
        descendant_id = self._resolve(descendant)
        store = self._store
        for ancestor_id in store.lineage(store.parents[descendant_id]):
            if store.value_of(ancestor_id) == node:
                return True
        return False

    def is_descendant(self, ancestor: Any, node: Any) -> bool:
        """Check whether ``node`` is a proper descendant of ``ancestor``.

        Raises:
            InvalidArgumentError: If either argument is None
            NodeNotFoundError: If node is not in the tree
        """
        return self.is_ancestor(ancestor, node)

    def common_ancestor(self, first: Any, second: Any) -> Any:
        """Return the deepest common ancestor of two values.

        Heights are equalised by walking up from the deeper value, then
        both chains are walked in lock-step until they meet. A value
        counts as its own ancestor, so ``common_ancestor(a, a) == a``.

        Returns:
            The common ancestor value, or None if the chains never meet

        Raises:
            InvalidArgumentError: If either argument is None
            NodeNotFoundError: If either value is not in the tree
        """
        store = self._store
        first_chain = list(store.lineage(self._resolve(first)))
        second_chain = list(store.lineage(self._resolve(second)))

        offset = len(first_chain) - len(second_chain)
        if offset > 0:
            first_chain = first_chain[offset:]
        elif offset < 0:
            second_chain = second_chain[-offset:]

        for first_id, second_id in zip(first_chain, second_chain):
            if store.value_of(first_id) == store.value_of(second_id):
                return store.value_of(first_id)
        return None
