"""Configuration re-export.

Keeps ``arenatree.config`` as the public import path for the
configuration components living in the _common package.
"""

from ._common.config import (
    TraversalOrder,
    TreeConfig,
)

__all__ = [
    'TraversalOrder',
    'TreeConfig',
]
