"""Tree traversal strategies for arenatree.

Traversers walk a NodeStore starting from the root id (0) and yield the
values of live nodes. They only look at the store's child storage, so
the same traverser serves list backed and slot backed trees.

Every traverser uses an explicit stack or queue rather than recursion;
a tree deeper than the interpreter's recursion limit still traverses.
"""

import math
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Tuple, Type, Union

from .._common.config import TraversalOrder
from .store import NodeStore

ROOT_ID = 0

# Stack entries for the in-order traversers
_VISIT = 0
_EMIT = 1


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through a tree in a
    given order. They are independent of the tree variant, working only
    through the NodeStore.
    """

    def __init__(self, store: NodeStore):
        """Initialize traverser with a store.

        Args:
            store: NodeStore holding the tree to walk
        """
        self.store = store

    @abstractmethod
    def traverse_ids(self, root_id: int = ROOT_ID) -> Iterator[int]:
        """Yield node ids in traversal order.

        Args:
            root_id: Id to start from

        Yields:
            Node ids, tombstones included
        """
        pass

    def traverse(self, root_id: int = ROOT_ID) -> Iterator[Any]:
        """Traverse the tree and yield live values.

        An empty store yields nothing. Deleted entries are skipped.

        Args:
            root_id: Id to start from

        Yields:
            Node values in traversal order
        """
        if len(self.store) <= root_id:
            return
        store = self.store
        for node_id in self.traverse_ids(root_id):
            if store.is_live(node_id):
                yield store.value_of(node_id)


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node, then each of its children in storage order.
    """

    def traverse_ids(self, root_id: int = ROOT_ID) -> Iterator[int]:
        stack: List[int] = [root_id]
        while stack:
            node_id = stack.pop()
            yield node_id
            stack.extend(reversed(self.store.child_ids(node_id)))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits each child in storage order, then the node itself.
    """

    def traverse_ids(self, root_id: int = ROOT_ID) -> Iterator[int]:
        # (node_id, children_expanded)
        stack: List[Tuple[int, bool]] = [(root_id, False)]
        while stack:
            node_id, expanded = stack.pop()
            if expanded:
                yield node_id
                continue
            stack.append((node_id, True))
            for child_id in reversed(self.store.child_ids(node_id)):
                stack.append((child_id, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Each node's children are enqueued in storage order when the node is
    dequeued.
    """

    def traverse_ids(self, root_id: int = ROOT_ID) -> Iterator[int]:
        queue: Deque[int] = deque([root_id])
        while queue:
            node_id = queue.popleft()
            yield node_id
            queue.extend(self.store.child_ids(node_id))


class _PlannedInOrderTraverser(TreeTraverser):
    """Shared driver for in-order traversals.

    Subclasses describe, for one node, the sequence of child visits and
    node emissions; the driver expands those plans with a stack.
    """

    @abstractmethod
    def plan(self, node_id: int) -> List[Tuple[int, int]]:
        """Return the (action, node_id) sequence for one node."""
        pass

    def traverse_ids(self, root_id: int = ROOT_ID) -> Iterator[int]:
        stack: List[Tuple[int, int]] = [(_VISIT, root_id)]
        while stack:
            action, node_id = stack.pop()
            if action == _EMIT:
                yield node_id
            else:
                stack.extend(reversed(self.plan(node_id)))


class InterleavedInOrderTraverser(_PlannedInOrderTraverser):
    """In-order traversal for insertion-ordered child lists.

    For a node with ``n`` children, child ``i`` is preceded by the node
    itself whenever ``i >= n // 2``. With two children this is the usual
    left, node, right; with three or more the node is emitted once per
    child in the second half. A childless node emits just itself.
    """

    def plan(self, node_id: int) -> List[Tuple[int, int]]:
        children = self.store.child_ids(node_id)
        if not children:
            return [(_EMIT, node_id)]
        half = len(children) // 2
        steps = []
        for i, child_id in enumerate(children):
            if i >= half:
                steps.append((_EMIT, node_id))
            steps.append((_VISIT, child_id))
        return steps


class SplitInOrderTraverser(_PlannedInOrderTraverser):
    """In-order traversal for fixed slot arrays.

    The slot array of length ``L`` is split once at ``ceil(L / 2)``:
    occupied slots before the split, then the node, then occupied slots
    after it. The split depends on the slot count, not on how many slots
    are occupied.
    """

    def plan(self, node_id: int) -> List[Tuple[int, int]]:
        slots = self.store.children[node_id]
        if not slots:
            return [(_EMIT, node_id)]
        split = math.ceil(len(slots) / 2)
        steps = [(_VISIT, c) for c in slots[:split] if c is not None]
        steps.append((_EMIT, node_id))
        steps.extend((_VISIT, c) for c in slots[split:] if c is not None)
        return steps


_ORDER_ALIASES = {
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'dfs_pre': TraversalOrder.PRE_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'dfs_post': TraversalOrder.POST_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'levelorder': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or alias string.

    Args:
        order: Order as enum or string (e.g. 'pre', 'inorder', 'bfs')

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    key = order.lower() if isinstance(order, str) else str(order)
    if key in _ORDER_ALIASES:
        return _ORDER_ALIASES[key]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


def create_traverser(
    order: Union[TraversalOrder, str],
    store: NodeStore,
    in_order: Type[TreeTraverser] = InterleavedInOrderTraverser,
) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or alias string
        store: NodeStore to traverse
        in_order: Traverser class used for in-order walks; list backed
            and slot backed trees split their children differently

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If the order name is not recognized
    """
    strategies = {
        TraversalOrder.PRE_ORDER: PreOrderTraverser,
        TraversalOrder.IN_ORDER: in_order,
        TraversalOrder.POST_ORDER: PostOrderTraverser,
        TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
    }
    return strategies[parse_order(order)](store)
