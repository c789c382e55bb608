"""
Tests for the cache collaborators.
"""

import pytest
from cachetools import LRUCache, TTLCache

from dazzlewalker import CacheLookup, CacheProvider, MemoryCacheProvider, WalkerConfig
from dazzlewalker.caching import MISS


class TestMemoryCacheProvider:

    def test_miss_then_hit(self):
        cache = MemoryCacheProvider()

        assert cache.get('key') == MISS
        assert not cache.get('key').hit

        cache.set('key', ['a', 'b'])

        lookup = cache.get('key')
        assert lookup.hit
        assert lookup.payload == ['a', 'b']

    def test_none_payload_is_a_hit(self):
        cache = MemoryCacheProvider()
        cache.set('key', None)

        assert cache.get('key') == CacheLookup(True, None)

    def test_lru_eviction(self):
        cache = MemoryCacheProvider(max_size=2)
        cache.set('a', 1)
        cache.set('b', 2)
        cache.get('a')
        cache.set('c', 3)

        assert 'a' in cache
        assert 'b' not in cache
        assert len(cache) == 2

    def test_backend_selection(self):
        assert isinstance(MemoryCacheProvider()._cache, LRUCache)
        assert isinstance(MemoryCacheProvider(ttl=60)._cache, TTLCache)

    def test_stats(self):
        cache = MemoryCacheProvider(max_size=8)
        cache.get('a')
        cache.set('a', 1)
        cache.get('a')
        cache.get('a')

        stats = cache.get_stats()

        assert stats['entries'] == 1
        assert stats['max_size'] == 8
        assert stats['ttl'] is None
        assert stats['hits'] == 2
        assert stats['misses'] == 1
        assert stats['hit_rate'] == pytest.approx(2 / 3)

    def test_stats_without_lookups(self):
        assert MemoryCacheProvider().get_stats()['hit_rate'] == 0.0

    def test_clear(self):
        cache = MemoryCacheProvider()
        cache.set('a', 1)
        cache.get('a')

        cache.clear()

        assert len(cache) == 0
        assert cache.hits == 0
        assert cache.misses == 0

    def test_from_config(self):
        cache = MemoryCacheProvider.from_config(WalkerConfig(cache_max_size=16, cache_ttl=30))

        assert cache.max_size == 16
        assert cache.ttl == 30


class TestCacheProviderContract:

    def test_minimal_provider(self, ancestor):
        """Any provider implementing get/set can back a walker tree."""
        from mocks import DummyWalker

        class DictProvider(CacheProvider):
            def __init__(self):
                self.data = {}

            def get(self, key):
                if key in self.data:
                    return CacheLookup(True, self.data[key])
                return MISS

            def set(self, key, payload):
                self.data[key] = payload

        provider = DictProvider()
        walker = DummyWalker.build(ancestor, max_level=1, cache_provider=provider)

        assert len(walker.get_children()) == 3
        assert list(provider.data) == ['mocks.DummyWalker_mocks.Dummy']

        with pytest.raises(NotImplementedError):
            provider.clear()

    def test_provider_is_abstract(self):
        with pytest.raises(TypeError):
            CacheProvider()
