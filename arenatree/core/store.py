"""NodeStore arena for arenatree.

The store never holds node objects with references to each other. A node
is a dense integer id indexing three parallel lists: its value, its parent
id and its child storage. Parents own their children's ids, never the
children themselves, so there are no reference cycles to manage.
"""

import logging
from typing import Any, Dict, Hashable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class _Tombstone:
    """Marker stored in place of the value of a deleted node.

    Distinct from None, which in a bounded store's child slots means
    "no child assigned" rather than "child removed".
    """

    def __repr__(self) -> str:
        return "TOMBSTONE"


TOMBSTONE = _Tombstone()


class NodeStore:
    """Parallel-list storage for tree nodes.

    Each node id indexes:
    - values: the user value, or TOMBSTONE once the node is deleted
    - parents: the parent id, or None for the root and deleted nodes
    - children: a growable list of child ids (unbounded stores) or a
      fixed list of ``slots`` entries holding a child id or None

    Ids are assigned in insertion order and are never reused; deleting a
    node leaves a permanent hole. A value -> id dictionary backs lookup
    by value equality, so values must be hashable.

    Example:
        >>> store = NodeStore()
        >>> root = store.allocate('A', None)
        >>> child = store.allocate('B', root)
        >>> store.attach(root, child)
        >>> store.child_ids(root)
        [1]
    """

    def __init__(self, slots: Optional[int] = None):
        """Initialize an empty store.

        Args:
            slots: Fixed number of child slots per node, or None for
                insertion-ordered child lists of any length
        """
        self.slots = slots
        self.values: List[Any] = []
        self.parents: List[Optional[int]] = []
        self.children: List[List[Optional[int]]] = []
        self.live_count = 0
        self._index: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        """Number of ids ever allocated, holes included."""
        return len(self.values)

    @property
    def bounded(self) -> bool:
        return self.slots is not None

    def new_child_storage(self) -> List[Optional[int]]:
        if self.slots is None:
            return []
        return [None] * self.slots

    # Lookup

    def lookup(self, value: Any) -> Optional[int]:
        """Return the id of a live node holding ``value``.

        Args:
            value: Value to resolve

        Returns:
            Node id, or None if no live node holds the value. Unhashable
            values can never be stored, so they resolve to None as well.
        """
        if value is None:
            return None
        try:
            return self._index.get(value)
        except TypeError:
            return None

    def is_live(self, node_id: int) -> bool:
        return self.values[node_id] is not TOMBSTONE

    def value_of(self, node_id: int) -> Any:
        return self.values[node_id]

    def child_ids(self, node_id: int) -> List[int]:
        """Child ids of a node in storage order, empty slots skipped."""
        return [c for c in self.children[node_id] if c is not None]

    def has_children(self, node_id: int) -> bool:
        return any(c is not None for c in self.children[node_id])

    def lineage(self, node_id: int) -> Iterator[int]:
        """Yield ids from ``node_id`` up to and including the root."""
        current = node_id
        while current is not None:
            yield current
            current = self.parents[current]

    def live_ids(self) -> Iterator[int]:
        for node_id, value in enumerate(self.values):
            if value is not TOMBSTONE:
                yield node_id

    def first_empty_slot(self, node_id: int) -> Optional[int]:
        """Index of the leftmost empty slot, or None when all are used."""
        for i, child in enumerate(self.children[node_id]):
            if child is None:
                return i
        return None

    # Mutation

    def allocate(self, value: Any, parent_id: Optional[int]) -> int:
        """Create a node and return its id.

        The node is recorded with its parent link but is not attached to
        the parent's child storage; call attach() for that.

        Args:
            value: Hashable value of the new node
            parent_id: Id of the parent, or None for the root

        Returns:
            The newly assigned node id
        """
        node_id = len(self.values)
        self.values.append(value)
        self.parents.append(parent_id)
        self.children.append(self.new_child_storage())
        self._index[value] = node_id
        self.live_count += 1
        return node_id

    def attach(self, parent_id: int, child_id: int, slot: Optional[int] = None) -> None:
        """Record ``child_id`` in the child storage of ``parent_id``.

        Args:
            parent_id: Parent node id
            child_id: Child node id
            slot: Slot index for bounded stores (ignored when unbounded)
        """
        if self.slots is None:
            self.children[parent_id].append(child_id)
        else:
            self.children[parent_id][slot] = child_id

    def detach(self, parent_id: int, child_id: int) -> None:
        storage = self.children[parent_id]
        if self.slots is None:
            storage.remove(child_id)
        else:
            for i, child in enumerate(storage):
                if child == child_id:
                    storage[i] = None

    def tombstone(self, node_id: int) -> None:
        """Turn a live node into a hole.

        Clears the value, the parent link and the node's own child
        storage. The parent's reference to this node is left alone;
        callers detach the top of a removed subtree themselves.
        """
        value = self.values[node_id]
        del self._index[value]
        self.values[node_id] = TOMBSTONE
        self.parents[node_id] = None
        self.children[node_id] = self.new_child_storage()
        self.live_count -= 1

    def clear(self) -> None:
        if self.values:
            logger.debug(f"Resetting node store with {len(self.values)} ids")
        self.values.clear()
        self.parents.clear()
        self.children.clear()
        self._index.clear()
        self.live_count = 0

    def copy(self) -> 'NodeStore':
        """Return an independent deep copy of the store, holes included."""
        other = NodeStore(self.slots)
        other.values = list(self.values)
        other.parents = list(self.parents)
        other.children = [list(storage) for storage in self.children]
        other.live_count = self.live_count
        other._index = dict(self._index)
        return other
