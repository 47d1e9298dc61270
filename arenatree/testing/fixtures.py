"""Test fixtures for arenatree consumers.

These fixtures provide controlled access to a tree's internal storage for
testing purposes without exposing implementation details as part of the
public API.
"""

from typing import Any, Dict, List, Optional

from ..core.store import TOMBSTONE
from ..core.tree import Tree


class StoreInspector:
    """Public test fixture for storage verification.

    Gives a stable view of the node arena behind a tree: which ids are
    holes, what each id's parent link is, and how many ids have been
    handed out. Useful for asserting that ids are never reused and that
    clones do not share storage.

    Example:
        tree = ListTree()
        tree.add_all(['A', 'B'])
        tree.remove('B')
        inspector = StoreInspector(tree)
        assert inspector.hole_ids() == [1]
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree to inspect.

        Args:
            tree: Any arenatree tree
        """
        self._store = tree._store

    @property
    def allocated(self) -> int:
        """Number of ids handed out so far, holes included."""
        return len(self._store)

    def id_of(self, value: Any) -> Optional[int]:
        return self._store.lookup(value)

    def hole_ids(self) -> List[int]:
        return [
            node_id for node_id, value in enumerate(self._store.values)
            if value is TOMBSTONE
        ]

    def parent_id(self, node_id: int) -> Optional[int]:
        return self._store.parents[node_id]

    def child_storage(self, node_id: int) -> List[Optional[int]]:
        """Copy of a node's raw child storage, empty slots included."""
        return list(self._store.children[node_id])

    def shares_storage_with(self, other: Tree) -> bool:
        """Check whether any of the parallel lists is shared with ``other``."""
        theirs = other._store
        mine = self._store
        if mine is theirs:
            return True
        if mine.values is theirs.values or mine.parents is theirs.parents:
            return True
        if mine.children is theirs.children:
            return True
        their_ids = {id(storage) for storage in theirs.children}
        return any(id(storage) in their_ids for storage in mine.children)

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level storage state for testing.

        Returns:
            Dictionary containing:
            - allocated: Ids handed out, holes included
            - live: Live node count
            - holes: Deleted ids
            - bounded: Whether children live in fixed slots
        """
        return {
            'allocated': self.allocated,
            'live': self._store.live_count,
            'holes': len(self.hole_ids()),
            'bounded': self._store.bounded,
        }
