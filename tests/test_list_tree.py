"""Tests for the list backed, unbounded-arity tree."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from arenatree import ListTree, NodeNotFoundError, TreeConfig, InvalidArgumentError
from arenatree.testing import StoreInspector


def make_abce() -> ListTree:
    """Root A with children B, C, E added in that order."""
    tree = ListTree()
    tree.add('A')
    for value in ('B', 'C', 'E'):
        tree.add_child('A', value)
    return tree


class TestListTree:
    """Behaviour specific to insertion-ordered children."""

    def test_children_keep_insertion_order(self):
        tree = make_abce()
        assert tree.children('A') == ['B', 'C', 'E']
        assert tree.siblings('C') == ['B', 'E']

    def test_unlimited_fan_out(self):
        tree = ListTree()
        tree.add(0)
        assert tree.add_children(0, range(1, 101))
        assert len(tree.children(0)) == 100
        assert tree.depth() == 2

    def test_root_siblings_raise(self):
        tree = make_abce()
        with pytest.raises(NodeNotFoundError, match="No parent"):
            tree.siblings('A')

    def test_removal_closes_gap_in_child_list(self):
        tree = make_abce()
        tree.remove('C')
        assert tree.children('A') == ['B', 'E']
        assert StoreInspector(tree).child_storage(0) == [1, 3]

    def test_leaves_in_level_order(self):
        tree = make_abce()
        tree.add_child('B', 'D')
        assert tree.leaves() == ['C', 'E', 'D']

    def test_in_order_two_children(self):
        tree = ListTree()
        tree.add_all(['A', 'B', 'C'])
        assert tree.in_order_traversal() == ['B', 'A', 'C']

    def test_in_order_repeats_parent_for_wide_nodes(self):
        tree = make_abce()
        assert tree.in_order_traversal() == ['B', 'A', 'C', 'A', 'E']

    def test_not_indexed(self):
        assert not ListTree().supports_indexed_children()

    def test_values_can_be_any_hashable(self):
        tree = ListTree()
        tree.add(('root', 0))
        tree.add_child(('root', 0), 42)
        tree.add_child(42, frozenset({'x'}))
        assert tree.parent(frozenset({'x'})) == 42
        assert tree.pre_order_traversal() == [('root', 0), 42, frozenset({'x'})]

    def test_falsy_values_are_valid(self):
        tree = ListTree()
        assert tree.add(0)
        assert tree.add('')
        assert tree.add(False) is False  # False == 0, already present
        assert tree.children(0) == ['']

    def test_invalid_config(self):
        with pytest.raises(InvalidArgumentError, match="traversal_cache_size"):
            ListTree(TreeConfig(traversal_cache_size=0))

    def test_arity_does_not_limit_fan_out(self):
        tree = ListTree(TreeConfig.binary())
        tree.add('A')
        assert tree.add_children('A', ['B', 'C', 'D'])
        assert tree.children('A') == ['B', 'C', 'D']

    def test_arity_is_still_validated(self):
        with pytest.raises(InvalidArgumentError, match="negative"):
            ListTree(TreeConfig(max_children=-1))

    def test_uncached_config(self):
        tree = ListTree(TreeConfig.uncached())
        tree.add_all(['A', 'B'])
        tree.pre_order_traversal()
        tree.pre_order_traversal()
        assert tree.cache_stats()['hits'] == 0

    def test_repr(self):
        assert repr(make_abce()) == "ListTree(size=4, depth=2, root='A')"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
