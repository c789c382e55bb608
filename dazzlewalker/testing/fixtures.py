"""Test fixtures for DazzleWalker consumers.

These fixtures provide controlled access to walker internals for testing
purposes without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, List

from ..api import traverse_walker
from ..caching import CacheLookup, MemoryCacheProvider
from ..core.walker import AbstractWalker


class RecordingCacheProvider(MemoryCacheProvider):
    """Memory cache that records every key read and written.

    Example:
        cache = RecordingCacheProvider()
        walker = MyWalker.build(item, cache_provider=cache)
        walker.get_children()
        assert cache.sets  # type chain was resolved and stored
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.gets: List[str] = []
        self.sets: List[str] = []

    def get(self, key: str) -> CacheLookup:
        self.gets.append(key)
        return super().get(key)

    def set(self, key: str, payload: Any) -> None:
        self.sets.append(key)
        super().set(key, payload)


class WalkerTestHelper:
    """Public test fixture for walker tree verification.

    Inspects which walkers of a tree have already been expanded, without
    expanding anything itself.

    Example:
        helper = WalkerTestHelper(root)
        root.count()
        assert not helper.is_expanded(root)
    """

    def __init__(self, walker: AbstractWalker):
        """Initialize with any walker of the tree to inspect.

        Args:
            walker: A walker; its root is the inspected tree
        """
        self._root = walker.get_root()

    def is_expanded(self, walker: AbstractWalker) -> bool:
        """Check if a walker has materialized its children."""
        return walker.is_expanded()

    def expanded_walkers(self) -> List[AbstractWalker]:
        """Return every expanded walker, without triggering new expansion."""
        found = []
        pending = [self._root]
        while pending:
            current = pending.pop()
            if current.is_expanded():
                found.append(current)
                pending.extend(reversed(current.get_children()))
        return found

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level expansion state for testing.

        Returns:
            Dictionary containing:
            - expanded_walkers: Walkers whose children are materialized
            - realized_walkers: Walkers constructed so far (root included)
            - deepest_level: Highest level among constructed walkers
        """
        expanded = self.expanded_walkers()
        realized = 1 + sum(len(walker.get_children()) for walker in expanded)
        levels = [self._root.get_level()]
        for walker in expanded:
            levels.extend(child.get_level() for child in walker.get_children())
        return {
            'expanded_walkers': len(expanded),
            'realized_walkers': realized,
            'deepest_level': max(levels),
        }

    def realize_all(self) -> int:
        """Expand the whole tree and return its size."""
        return sum(1 for _ in traverse_walker(self._root))
