"""
Tests for the testing fixtures and logging configuration.
"""

from loguru import logger

from dazzlewalker.logging_config import configure_logging, disable_logging
from dazzlewalker.testing import WalkerTestHelper
from mocks import GraphWalker, Node


class TestWalkerTestHelper:

    def test_fresh_tree(self, dummy_walker):
        helper = WalkerTestHelper(dummy_walker)

        assert helper.expanded_walkers() == []
        assert helper.get_summary() == {
            'expanded_walkers': 0,
            'realized_walkers': 1,
            'deepest_level': 0,
        }

    def test_partial_expansion(self, dummy_walker):
        dummy_walker[1].get_children()
        helper = WalkerTestHelper(dummy_walker[1][0])

        assert helper.expanded_walkers() == [dummy_walker, dummy_walker[1]]
        assert helper.is_expanded(dummy_walker[1])
        assert not helper.is_expanded(dummy_walker[0])
        assert helper.get_summary() == {
            'expanded_walkers': 2,
            'realized_walkers': 7,
            'deepest_level': 2,
        }

    def test_inspection_does_not_expand(self, dummy_walker):
        helper = WalkerTestHelper(dummy_walker)
        helper.get_summary()

        assert not dummy_walker.is_expanded()

    def test_realize_all(self, dummy_walker):
        helper = WalkerTestHelper(dummy_walker)

        assert helper.realize_all() == 40
        assert helper.get_summary()['deepest_level'] == 3


class TestLogging:

    def test_silent_by_default(self):
        messages = []
        handler_id = logger.add(messages.append, level="DEBUG")
        try:
            root = GraphWalker.build(Node('alone'))
            root.get_children()
        finally:
            logger.remove(handler_id)

        assert messages == []

    def test_verbose_logging(self):
        messages = []
        handler_id = configure_logging(verbose=True, sink=messages.append)
        try:
            node = Node('loop')
            node.links.append(node)
            root = GraphWalker.build(node)
            current = root
            while len(current.get_children()):
                current = current[0]
        finally:
            logger.remove(handler_id)
            disable_logging()

        assert messages
        assert any('loop' in str(message) for message in messages)
