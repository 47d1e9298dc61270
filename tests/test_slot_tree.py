"""Tests for the slot backed, fixed-arity tree.

Includes the binary-tree scenario and the lineage queries that only
slot-addressed trees provide.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from arenatree import (
    SlotTree,
    NumberedTree,
    TreeConfig,
    InvalidArgumentError,
    NodeNotFoundError,
)
from arenatree.testing import StoreInspector


@pytest.fixture
def binary():
    """Binary tree.

    Structure:
    A
    ├── [0] B
    │   └── [0] D
    └── [1] C
    """
    tree = SlotTree(2)
    tree.add('A')
    tree.add_child('A', 'B')
    tree.add_child('A', 'C')
    tree.add_child('B', 'D', 0)
    return tree


class TestBinaryScenario:
    """Traversals and queries on a small binary tree."""

    def test_traversals(self, binary):
        assert binary.pre_order_traversal() == ['A', 'B', 'D', 'C']
        assert binary.post_order_traversal() == ['D', 'B', 'C', 'A']
        assert binary.level_order_traversal() == ['A', 'B', 'C', 'D']
        assert binary.in_order_traversal() == ['D', 'B', 'A', 'C']

    def test_leaves(self, binary):
        assert set(binary.leaves()) == {'D', 'C'}
        # Node-id order
        assert binary.leaves() == ['C', 'D']

    def test_common_ancestor(self, binary):
        assert binary.common_ancestor('D', 'C') == 'A'
        assert binary.common_ancestor('C', 'D') == 'A'

    def test_depth(self, binary):
        assert binary.depth() == 3
        assert binary.size() == 4


class TestSlots:
    """Slot-indexed insertion and access."""

    def test_child_by_index(self, binary):
        assert binary.child('A', 0) == 'B'
        assert binary.child('A', 1) == 'C'
        assert binary.child('B', 1) is None

    def test_child_errors(self, binary):
        with pytest.raises(NodeNotFoundError):
            binary.child('nope', 0)
        with pytest.raises(IndexError):
            binary.child('A', 2)
        with pytest.raises(IndexError):
            binary.child('A', -1)

    def test_full_parent_rejects_child(self, binary):
        assert binary.add_child('A', 'X') is False
        assert 'X' not in binary

    def test_add_at_explicit_index(self, binary):
        assert binary.add_child('B', 'E', 1)
        assert binary.children('B') == ['D', 'E']
        assert binary.child('B', 1) == 'E'

    def test_explicit_index_must_be_free_and_in_range(self, binary):
        assert binary.add_child('B', 'X', 0) is False
        assert binary.add_child('B', 'X', 2) is False
        assert binary.add_child('B', 'X', -1) is False
        assert binary.child('B', 0) == 'D'
        assert binary.size() == 4

    def test_explicit_index_must_be_integer(self, binary):
        assert binary.add_child('B', 'X', 1.0) is False
        assert binary.add_child('B', 'X', '1') is False
        assert 'X' not in binary
        assert binary.add_child('B', 'X', 1)

    def test_gap_before_occupied_slot(self):
        tree = SlotTree(3)
        tree.add('A')
        tree.add_child('A', 'C', 2)
        assert tree.children('A') == ['C']
        assert tree.child('A', 0) is None
        # First free slot from the left
        tree.add_child('A', 'B')
        assert tree.child('A', 0) == 'B'
        assert tree.children('A') == ['B', 'C']

    def test_removal_frees_slot(self, binary):
        binary.remove('B')
        assert binary.child('A', 0) is None
        assert binary.children('A') == ['C']
        assert StoreInspector(binary).child_storage(0) == [None, 2]
        assert binary.add_child('A', 'X')
        assert binary.child('A', 0) == 'X'

    def test_root_index_is_ignored(self):
        tree = SlotTree(2)
        assert tree.add_child(None, 'A', 5)
        assert tree.root() == 'A'

    def test_root_siblings_empty(self, binary):
        assert binary.siblings('A') == []
        assert binary.siblings('C') == ['B']

    def test_zero_slots(self):
        tree = SlotTree(0)
        assert tree.add('A')
        assert tree.add('B') is False
        assert tree.in_order_traversal() == ['A']
        assert tree.leaves() == ['A']

    def test_in_order_three_slots(self):
        tree = SlotTree(3)
        tree.add('A')
        tree.add_children('A', ['B', 'C', 'D'])
        assert tree.in_order_traversal() == ['B', 'C', 'A', 'D']


class TestLineage:
    """Ancestor, descendant and common-ancestor queries."""

    def test_is_ancestor(self, binary):
        assert binary.is_ancestor('A', 'D')
        assert binary.is_ancestor('B', 'D')
        assert not binary.is_ancestor('C', 'D')
        assert not binary.is_ancestor('D', 'B')

    def test_is_ancestor_is_proper(self, binary):
        assert not binary.is_ancestor('D', 'D')
        assert not binary.is_ancestor('A', 'A')

    def test_is_ancestor_unknown_node_is_false(self, binary):
        assert not binary.is_ancestor('nope', 'D')

    def test_is_ancestor_errors(self, binary):
        with pytest.raises(NodeNotFoundError):
            binary.is_ancestor('A', 'nope')
        with pytest.raises(InvalidArgumentError):
            binary.is_ancestor(None, 'D')
        with pytest.raises(InvalidArgumentError):
            binary.is_ancestor('A', None)

    def test_is_descendant(self, binary):
        assert binary.is_descendant('A', 'D')
        assert binary.is_descendant('B', 'D')
        assert not binary.is_descendant('D', 'A')
        with pytest.raises(NodeNotFoundError):
            binary.is_descendant('A', 'nope')

    def test_common_ancestor_of_ancestor_and_descendant(self, binary):
        assert binary.common_ancestor('B', 'D') == 'B'
        assert binary.common_ancestor('D', 'B') == 'B'
        assert binary.common_ancestor('D', 'D') == 'D'
        assert binary.common_ancestor('A', 'C') == 'A'

    def test_common_ancestor_errors(self, binary):
        with pytest.raises(NodeNotFoundError):
            binary.common_ancestor('D', 'nope')
        with pytest.raises(InvalidArgumentError):
            binary.common_ancestor(None, 'D')

    def test_lineage_after_removal(self, binary):
        binary.add_child('C', 'F')
        binary.remove('B')
        assert binary.common_ancestor('F', 'C') == 'C'
        with pytest.raises(NodeNotFoundError):
            binary.is_ancestor('A', 'D')


class TestConstruction:
    """Arity configuration."""

    def test_requires_arity(self):
        with pytest.raises(InvalidArgumentError, match="max_children"):
            SlotTree()

    def test_arity_from_config(self):
        tree = SlotTree(config=TreeConfig.binary())
        assert tree.max_children == 2
        assert tree.config.max_children == 2

    def test_explicit_arity_wins(self):
        tree = SlotTree(3, config=TreeConfig.binary())
        assert tree.max_children == 3
        assert tree.config.max_children == 3

    def test_negative_arity(self):
        with pytest.raises(InvalidArgumentError, match="negative"):
            SlotTree(-1)

    def test_capabilities(self):
        tree = SlotTree(2)
        assert isinstance(tree, NumberedTree)
        assert tree.supports_indexed_children()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
