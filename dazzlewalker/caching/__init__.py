"""
Caching collaborators for DazzleWalker.
"""

from .provider import CacheLookup, CacheProvider, MemoryCacheProvider, MISS

__all__ = [
    'CacheLookup',
    'CacheProvider',
    'MemoryCacheProvider',
    'MISS',
]
