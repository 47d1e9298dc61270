#!/usr/bin/env python3
"""Demo script comparing the two tree shapes in arenatree.

Builds the same values into a ListTree and a binary SlotTree and prints
their traversals, leaves and lineage queries side by side.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from arenatree import ListTree, SlotTree, get_tree_stats


def demo_list_tree():
    """Show insertion-ordered children."""
    print("\n=== ListTree ===")
    tree = ListTree()
    tree.add('A')
    tree.add_children('A', ['B', 'C', 'E'])
    tree.add_child('B', 'D')
    
    print(f"children(A):  {tree.children('A')}")
    print(f"siblings(C):  {tree.siblings('C')}")
    print(f"pre-order:    {tree.pre_order_traversal()}")
    print(f"level-order:  {tree.level_order_traversal()}")
    print(f"leaves:       {tree.leaves()}")


def demo_slot_tree():
    """Show slot-indexed children and lineage queries."""
    print("\n=== SlotTree(2) ===")
    tree = SlotTree(2)
    tree.add('A')
    tree.add_child('A', 'B')
    tree.add_child('A', 'C')
    tree.add_child('B', 'D', 0)
    
    print(f"child(A, 1):           {tree.child('A', 1)}")
    print(f"in-order:              {tree.in_order_traversal()}")
    print(f"post-order:            {tree.post_order_traversal()}")
    print(f"common_ancestor(D, C): {tree.common_ancestor('D', 'C')}")
    print(f"is_ancestor(B, D):     {tree.is_ancestor('B', 'D')}")
    
    tree.remove('B')
    stats = get_tree_stats(tree)
    print(f"after remove(B): size={tree.size()}, depth={tree.depth()}, "
          f"live max_depth={stats['max_depth']}")


def main():
    demo_list_tree()
    demo_slot_tree()
    return 0


if __name__ == "__main__":
    sys.exit(main())
