"""Traversal result caching for arenatree.

Trees bump a revision counter on every successful mutation. Computed
traversals are stored under ``(name, revision)`` so a stale entry can
never be served; old revisions simply age out of the LRU.
"""

from typing import Any, Callable, Dict, Hashable, List, Tuple

from cachetools import LRUCache


class TraversalCache:
    """LRU cache of traversal results keyed by tree revision.

    Results are kept as tuples and handed out as new lists, so callers
    are free to mutate what they receive.

    Example:
        cache = TraversalCache(max_size=16)
        values = cache.get_or_compute('pre', revision, lambda: traverse())
    """

    def __init__(self, max_size: int = 32, enabled: bool = True):
        """
        Initialize traversal cache.

        Args:
            max_size: Maximum number of cached results
            enabled: When False every lookup recomputes
        """
        self.max_size = max_size
        self.enabled = enabled
        self._cache: LRUCache = LRUCache(maxsize=max_size)

        # Statistics
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self,
        name: str,
        revision: int,
        compute: Callable[[], Any],
    ) -> List[Any]:
        """Return a cached result or compute and store it.

        Args:
            name: Name of the traversal or query
            revision: Current revision of the tree
            compute: Zero-argument callable producing an iterable of values

        Returns:
            A new list with the result values
        """
        if not self.enabled:
            return list(compute())

        key: Tuple[Hashable, int] = (name, revision)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return list(cached)

        self.misses += 1
        result = tuple(compute())
        self._cache[key] = result
        return list(result)

    def clear(self) -> None:
        self._cache.clear()

    def stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with hits, misses, hit rate and current size
        """
        total = self.hits + self.misses
        return {
            'enabled': self.enabled,
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hits / total if total > 0 else 0.0,
            'size': len(self._cache),
            'max_size': self.max_size,
        }
