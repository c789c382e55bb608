"""Testing utilities for DazzleWalker consumers."""

from .fixtures import RecordingCacheProvider, WalkerTestHelper

__all__ = ['RecordingCacheProvider', 'WalkerTestHelper']
