"""Common components shared by both tree variants.

This internal package contains configuration that does not depend on
any particular backing shape. It should NOT be imported directly by users.

Important: This package must NEVER import from the tree modules to avoid
circular dependencies.
"""

from .config import (
    TraversalOrder,
    TreeConfig,
)

__all__ = [
    'TraversalOrder',
    'TreeConfig',
]
