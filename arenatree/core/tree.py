"""Tree capability sets for arenatree.

``Tree`` is the contract both backing shapes implement: mutation,
traversal and relational queries over values. ``NumberedTree`` widens it
with slot-indexed child access and lineage queries, which only the
fixed-arity variant supports.

The shared behaviour lives here as default implementations working on
the NodeStore, much like an adapter base class provides default
depth and sibling lookups; each variant supplies what depends on its
child storage.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Optional, Type, Union

from .._common.config import TraversalOrder, TreeConfig
from ..exceptions import InvalidArgumentError, NodeNotFoundError
from .cache import TraversalCache
from .store import NodeStore
from .traverser import (
    ROOT_ID,
    InterleavedInOrderTraverser,
    TreeTraverser,
    create_traverser,
    parse_order,
)

logger = logging.getLogger(__name__)


class Tree(ABC):
    """Abstract base class for value trees backed by a NodeStore.

    Nodes are identified by value equality: a value can appear at most
    once in a tree, and every operation takes and returns values rather
    than node handles. ``None`` is never a valid node value.
    """

    # Traverser used by in_order_traversal(); variants split children differently
    in_order_traverser: Type[TreeTraverser] = InterleavedInOrderTraverser

    def __init__(self, store: NodeStore, config: Optional[TreeConfig] = None):
        """Initialize tree over an empty store.

        Args:
            store: Empty NodeStore shaped for this variant
            config: Optional TreeConfig

        Raises:
            InvalidArgumentError: If the configuration is invalid
        """
        self._config = config or TreeConfig()
        config_errors = self._config.validate()
        if config_errors:
            raise InvalidArgumentError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        self._store = store
        self._depth = 0
        self._revision = 0
        self._cache = self._new_cache()

    @property
    def config(self) -> TreeConfig:
        return self._config

    def _new_cache(self) -> TraversalCache:
        return TraversalCache(
            max_size=self._config.traversal_cache_size,
            enabled=self._config.cache_traversals,
        )

    # Capability flags - trees declare what they support

    def supports_indexed_children(self) -> bool:
        """Check if children can be addressed by slot index.

        Returns:
            True if child(parent, index) and the lineage queries exist
        """
        return False

    # Mutation

    @abstractmethod
    def add_child(self, parent: Any, child: Any) -> bool:
        """Add ``child`` under ``parent``.

        Args:
            parent: Existing parent value, or None to create the root
            child: New value

        Returns:
            True if added, False if the value already exists or there
            is no room for it

        Raises:
            InvalidArgumentError: If child is None, or parent is None
                while a root already exists
            NodeNotFoundError: If parent is not in the tree
        """
        pass

    def add(self, value: Any) -> bool:
        """Add ``value`` as the root of an empty tree, else under the root.

        Args:
            value: New value

        Returns:
            True if added
        """
        try:
            if self.is_empty():
                return self.add_child(None, value)
            return self.add_child(self.root(), value)
        except NodeNotFoundError:
            return False

    def add_all(self, values: Iterable[Any]) -> bool:
        """Apply add() to each value in order.

        Returns:
            True if at least one value was added
        """
        added = False
        for value in values:
            added |= self.add(value)
        return added

    def add_children(self, parent: Any, values: Iterable[Any]) -> bool:
        """Apply add_child(parent, value) to each value in order.

        Rejected duplicates do not affect the result, but a missing
        parent aborts the remaining insertions.

        Returns:
            False if the parent could not be found, True otherwise
        """
        try:
            for value in values:
                self.add_child(parent, value)
        except NodeNotFoundError:
            logger.debug(f"Parent {parent!r} not found, aborting bulk add")
            return False
        return True

    def remove(self, value: Any) -> bool:
        """Remove ``value`` and its entire subtree.

        Args:
            value: Value to remove

        Returns:
            True if the value was present, False otherwise
        """
        node_id = self._store.lookup(value)
        if node_id is None:
            return False

        store = self._store
        parent_id = store.parents[node_id]
        if parent_id is not None:
            store.detach(parent_id, node_id)

        # Top-down; each node's children are read before it is cleared
        removed = 0
        stack = [node_id]
        while stack:
            current = stack.pop()
            children = store.child_ids(current)
            store.tombstone(current)
            removed += 1
            stack.extend(reversed(children))

        self._touch()
        logger.debug(f"Removed {value!r} with {removed - 1} descendants")
        return True

    def remove_all(self, values: Iterable[Any]) -> bool:
        """Apply remove() to each value.

        Returns:
            True if anything was removed
        """
        removed = False
        for value in values:
            removed |= self.remove(value)
        return removed

    def retain_all(self, values: Iterable[Any]) -> bool:
        """Remove every value that is not in ``values``.

        Returns:
            True if anything was removed
        """
        values = list(values)
        try:
            keep = set(values)
        except TypeError:
            # Unhashable entries can only be matched by equality
            keep = values
        removed = False
        for value in self.to_list():
            if value not in keep:
                removed |= self.remove(value)
        return removed

    def clear(self) -> None:
        """Remove every node and reset size and depth."""
        logger.debug(f"Clearing {self.__class__.__name__} with {self.size()} nodes")
        self._store.clear()
        self._depth = 0
        self._touch()

    # Queries

    def root(self) -> Any:
        """Return the root value, or None if the tree is empty."""
        if len(self._store) == 0 or not self._store.is_live(ROOT_ID):
            return None
        return self._store.value_of(ROOT_ID)

    def parent(self, value: Any) -> Any:
        """Return the parent of ``value``, or None for the root.

        Raises:
            InvalidArgumentError: If value is None
            NodeNotFoundError: If value is not in the tree
        """
        node_id = self._resolve(value)
        parent_id = self._store.parents[node_id]
        if parent_id is None:
            return None
        return self._store.value_of(parent_id)

    def children(self, value: Any) -> List[Any]:
        """Return the children of ``value`` in storage order.

        Raises:
            InvalidArgumentError: If value is None
            NodeNotFoundError: If value is not in the tree
        """
        node_id = self._resolve(value)
        return [self._store.value_of(c) for c in self._store.child_ids(node_id)]

    @abstractmethod
    def siblings(self, value: Any) -> List[Any]:
        """Return the other children of ``value``'s parent."""
        pass

    @abstractmethod
    def leaves(self) -> List[Any]:
        """Return every live value without children."""
        pass

    def size(self) -> int:
        return self._store.live_count

    def __len__(self) -> int:
        return self._store.live_count

    def depth(self) -> int:
        """Return the deepest level count ever reached.

        The root alone is depth 1. Removing nodes never lowers the value;
        only clear() resets it.
        """
        return self._depth

    def is_empty(self) -> bool:
        return self._store.live_count == 0

    def contains(self, value: Any) -> bool:
        return self._store.lookup(value) is not None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def contains_all(self, values: Iterable[Any]) -> bool:
        return all(self.contains(value) for value in values)

    def to_list(self) -> List[Any]:
        """Return all live values in node-id (insertion) order."""
        store = self._store
        return [store.value_of(node_id) for node_id in store.live_ids()]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    # Traversals

    def traverse(self, order: Union[TraversalOrder, str]) -> List[Any]:
        """Return the live values in the requested order.

        Args:
            order: TraversalOrder or alias string ('pre', 'in', 'post', 'level')

        Returns:
            New list of values; empty for an empty tree
        """
        order = parse_order(order)
        return self._cached(
            order.value,
            lambda: create_traverser(order, self._store, self.in_order_traverser).traverse(),
        )

    def pre_order_traversal(self) -> List[Any]:
        return self.traverse(TraversalOrder.PRE_ORDER)

    def in_order_traversal(self) -> List[Any]:
        return self.traverse(TraversalOrder.IN_ORDER)

    def post_order_traversal(self) -> List[Any]:
        return self.traverse(TraversalOrder.POST_ORDER)

    def level_order_traversal(self) -> List[Any]:
        return self.traverse(TraversalOrder.LEVEL_ORDER)

    def cache_stats(self) -> dict:
        return self._cache.stats()

    # Cloning

    def clone(self) -> 'Tree':
        """Return an independent copy with the same values and structure.

        The three parallel stores are copied, deleted holes included;
        mutating either tree never affects the other.
        """
        other = object.__new__(type(self))
        other.__dict__.update(self.__dict__)
        other._config = dataclasses.replace(self._config)
        other._store = self._store.copy()
        other._cache = other._new_cache()
        return other

    def __copy__(self) -> 'Tree':
        return self.clone()

    def __deepcopy__(self, memo) -> 'Tree':
        return self.clone()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(size={self.size()}, depth={self._depth}, "
            f"root={self.root()!r})"
        )

    # Helpers for variants

    def _check_value(self, value: Any) -> None:
        if value is None:
            raise InvalidArgumentError("None is not a valid node value")
        try:
            hash(value)
        except TypeError:
            raise InvalidArgumentError(
                f"Node values must be hashable, got {type(value).__name__}"
            ) from None

    def _resolve(self, value: Any) -> int:
        """Return the node id of ``value``.

        Raises:
            InvalidArgumentError: If value is None
            NodeNotFoundError: If value is not in the tree
        """
        self._check_value(value)
        node_id = self._store.lookup(value)
        if node_id is None:
            raise NodeNotFoundError(f"No node was found for {value!r}")
        return node_id

    def _add_root(self, value: Any) -> bool:
        if not self.is_empty():
            raise InvalidArgumentError("root already exists")
        if len(self._store) > 0:
            # Only holes remain after the previous root was removed
            self._store.clear()
        self._store.allocate(value, None)
        self._depth = max(self._depth, 1)
        self._touch()
        logger.debug(f"Created root {value!r}")
        return True

    def _add_node(self, value: Any, parent_id: int, slot: Optional[int] = None) -> None:
        """Allocate ``value`` under ``parent_id`` and update depth."""
        node_id = self._store.allocate(value, parent_id)
        self._store.attach(parent_id, node_id, slot)
        levels = sum(1 for _ in self._store.lineage(node_id))
        self._depth = max(self._depth, levels)
        self._touch()

    def _siblings_of(self, node_id: int) -> List[Any]:
        store = self._store
        parent_id = store.parents[node_id]
        return [
            store.value_of(c) for c in store.child_ids(parent_id) if c != node_id
        ]

    def _cached(self, name: str, compute) -> List[Any]:
        return self._cache.get_or_compute(name, self._revision, compute)

    def _touch(self) -> None:
        self._revision += 1


class NumberedTree(Tree):
    """Tree whose children occupy numbered slots.

    Adds slot-indexed insertion and access, plus ancestor, descendant
    and common-ancestor queries along the parent chain.
    """

    def supports_indexed_children(self) -> bool:
        return True

    @abstractmethod
    def add_child(self, parent: Any, child: Any, index: Optional[int] = None) -> bool:
        """Add ``child`` under ``parent`` at slot ``index``.

        With index None the first empty slot is used.
        """
        pass

    @abstractmethod
    def child(self, parent: Any, index: int) -> Any:
        """Return the value in slot ``index`` of ``parent``, or None if empty."""
        pass

    @abstractmethod
    def is_ancestor(self, node: Any, descendant: Any) -> bool:
        """Check whether ``node`` lies on ``descendant``'s parent chain."""
        pass

    @abstractmethod
    def is_descendant(self, ancestor: Any, node: Any) -> bool:
        """Check whether ``node`` lies below ``ancestor``."""
        pass

    @abstractmethod
    def common_ancestor(self, first: Any, second: Any) -> Any:
        """Return the deepest value that is an ancestor-or-self of both."""
        pass
