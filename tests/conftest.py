"""Shared fixtures for the DazzleWalker test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from mocks import Dummy, DummyWalker, PageWalker, build_site  # noqa: E402


@pytest.fixture
def ancestor():
    return Dummy('ancestor')


@pytest.fixture
def dummy_walker(ancestor):
    """Root DummyWalker over 'ancestor', bounded to three levels."""
    return DummyWalker.build(ancestor, max_level=3)


@pytest.fixture
def site():
    return build_site()


@pytest.fixture
def page_walker(site):
    return PageWalker.build(site)
