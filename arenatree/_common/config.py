"""Configuration system for arenatree.

This module defines the knobs a caller can set when building a tree:
the fixed arity of slot-addressed trees and how traversal results are
cached between mutations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of a tree."""
    PRE_ORDER = "pre"        # Node before its children
    IN_ORDER = "in"          # Node between the two halves of its children
    POST_ORDER = "post"      # Children before the node
    LEVEL_ORDER = "level"    # Breadth-first, level by level


@dataclass
class TreeConfig:
    """Complete configuration for a tree instance.
    
    ``max_children`` is only consulted by slot-addressed trees; list
    backed trees accept any number of children per node.
    """
    
    # Shape
    max_children: Optional[int] = None  # Slot count per node (bounded trees)
    
    # Caching of traversal results between mutations
    cache_traversals: bool = True
    traversal_cache_size: int = 32      # Distinct cached results kept
    
    @classmethod
    def binary(cls) -> 'TreeConfig':
        """Create config for a binary slot tree.
        
        Returns:
            TreeConfig with two slots per node
        """
        return cls(max_children=2)
    
    @classmethod
    def uncached(cls, max_children: Optional[int] = None) -> 'TreeConfig':
        """Create config that recomputes every traversal.
        
        Args:
            max_children: Optional slot count for bounded trees
            
        Returns:
            TreeConfig with traversal caching disabled
        """
        return cls(max_children=max_children, cache_traversals=False)
    
    def validate(self) -> List[str]:
        """Validate configuration for consistency.
        
        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        
        if self.max_children is not None:
            if not isinstance(self.max_children, int) or isinstance(self.max_children, bool):
                errors.append("max_children must be an integer")
            elif self.max_children < 0:
                errors.append("max_children cannot be negative")
        
        if self.cache_traversals and self.traversal_cache_size <= 0:
            errors.append("traversal_cache_size must be positive")
        
        return errors
