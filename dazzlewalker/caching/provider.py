"""
Cache collaborators for DazzleWalker.

The walker engine never stores resolved type chains itself. It talks to a
pluggable key-value collaborator with get-or-compute semantics, so host
applications can share an existing cache backend across trees.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, NamedTuple, Optional, TYPE_CHECKING

from cachetools import LRUCache, TTLCache

if TYPE_CHECKING:
    from .._common.config import WalkerConfig


class CacheLookup(NamedTuple):
    """Result of a cache read: whether it hit, and the stored payload."""
    hit: bool
    payload: Any = None


MISS = CacheLookup(False)


class CacheProvider(ABC):
    """Abstract key-value collaborator used by the type resolver.

    Implementations must return, on hit, exactly what was last ``set``
    for that key. Nothing else is assumed about staleness.
    """

    @abstractmethod
    def get(self, key: str) -> CacheLookup:
        """Look up a key.

        Args:
            key: Cache key

        Returns:
            CacheLookup with ``hit`` True and the payload, or ``MISS``
        """
        pass

    @abstractmethod
    def set(self, key: str, payload: Any) -> None:
        """Store a payload under a key.

        Args:
            key: Cache key
            payload: Value to store
        """
        pass

    def clear(self) -> None:
        """Drop every entry. Optional for implementations."""
        raise NotImplementedError(f"{self.__class__.__name__} does not support clear")


class MemoryCacheProvider(CacheProvider):
    """
    In-process cache backed by cachetools.

    Uses an ``LRUCache`` by default, or a ``TTLCache`` when a time-to-live
    is given. This is the collaborator ``build()`` creates when the caller
    supplies none.

    Example:
        cache = MemoryCacheProvider(max_size=256)
        walker = MyWalker.build(item, cache_provider=cache)
        print(cache.get_stats())
    """

    def __init__(self, max_size: int = 1024, ttl: Optional[float] = None):
        """
        Initialize the memory cache.

        Args:
            max_size: Maximum number of entries in cache
            ttl: Time-to-live for cache entries in seconds (None = no expiry)
        """
        self.max_size = max_size
        self.ttl = ttl
        if ttl is None:
            self._cache = LRUCache(maxsize=max_size)
        else:
            self._cache = TTLCache(maxsize=max_size, ttl=ttl)

        # Statistics
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_config(cls, config: 'WalkerConfig') -> 'MemoryCacheProvider':
        """Create a cache sized by a WalkerConfig."""
        return cls(max_size=config.cache_max_size, ttl=config.cache_ttl)

    def get(self, key: str) -> CacheLookup:
        if key in self._cache:
            self.hits += 1
            return CacheLookup(True, self._cache[key])
        self.misses += 1
        return MISS

    def set(self, key: str, payload: Any) -> None:
        self._cache[key] = payload

    def clear(self) -> None:
        self._cache.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with entry count, hits, misses and hit rate
        """
        lookups = self.hits + self.misses
        return {
            'entries': len(self._cache),
            'max_size': self.max_size,
            'ttl': self.ttl,
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hits / lookups if lookups else 0.0,
        }
