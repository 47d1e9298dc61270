"""Testing utilities for arenatree consumers."""

from .fixtures import StoreInspector

__all__ = ['StoreInspector']
