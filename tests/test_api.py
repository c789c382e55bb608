"""
Tests for the functional API over walker trees.
"""

import pytest

from dazzlewalker import (
    TraversalStrategy,
    collect_items,
    count_walkers,
    find_walkers,
    get_leaf_walkers,
    get_tree_stats,
    traverse_walker,
)
from dazzlewalker.api import _parse_strategy
from mocks import DummyWalker


def titles(walkers):
    return [walker.get_item().title for walker in walkers]


class TestTraversal:
    """Test traversal orders over the sample site."""

    def test_depth_first_pre(self, page_walker):
        assert titles(traverse_walker(page_walker)) == [
            'home', 'about', 'team', 'history', 'blog', 'post'
        ]

    def test_depth_first_post(self, page_walker):
        assert titles(traverse_walker(page_walker, 'dfs_post')) == [
            'team', 'history', 'about', 'post', 'blog', 'home'
        ]

    def test_breadth_first(self, page_walker):
        assert titles(traverse_walker(page_walker, TraversalStrategy.BREADTH_FIRST)) == [
            'home', 'about', 'blog', 'team', 'history', 'post'
        ]

    def test_min_level(self, page_walker):
        assert titles(traverse_walker(page_walker, 'bfs', min_level=2)) == [
            'team', 'history', 'post'
        ]

    def test_subtree_traversal(self, page_walker):
        assert titles(traverse_walker(page_walker[0])) == ['about', 'team', 'history']

    def test_traversal_is_lazy(self, dummy_walker):
        iterator = traverse_walker(dummy_walker)

        assert next(iterator) is dummy_walker
        assert not dummy_walker.is_expanded()

    def test_collect_items(self, page_walker, site):
        items = collect_items(page_walker)

        assert items[0] is site
        assert len(items) == 6

    def test_count_walkers(self, dummy_walker):
        assert count_walkers(dummy_walker) == 1 + 3 + 9 + 27


class TestStrategyParsing:

    @pytest.mark.parametrize('name, expected', [
        ('bfs', TraversalStrategy.BREADTH_FIRST),
        ('BFS', TraversalStrategy.BREADTH_FIRST),
        ('dfs', TraversalStrategy.DEPTH_FIRST_PRE),
        ('depth_first_post', TraversalStrategy.DEPTH_FIRST_POST),
    ])
    def test_names(self, name, expected):
        assert _parse_strategy(name) is expected

    def test_enum_passthrough(self):
        assert _parse_strategy(TraversalStrategy.DEPTH_FIRST_POST) is TraversalStrategy.DEPTH_FIRST_POST

    def test_unknown_strategy(self, page_walker):
        with pytest.raises(ValueError, match='Unknown traversal strategy'):
            list(traverse_walker(page_walker, 'sideways'))


class TestQueries:

    def test_find_walkers(self, page_walker):
        found = find_walkers(page_walker, lambda walker: walker.get_item().title.startswith('h'))

        assert titles(found) == ['home', 'history']

    def test_leaf_walkers(self, page_walker):
        assert titles(get_leaf_walkers(page_walker)) == ['team', 'history', 'post']

    def test_leaves_at_depth_bound(self, ancestor):
        walker = DummyWalker.build(ancestor, max_level=1)

        leaves = list(get_leaf_walkers(walker))

        assert len(leaves) == 3
        assert all(leaf.get_level() == 1 for leaf in leaves)

    def test_tree_stats(self, page_walker):
        stats = get_tree_stats(page_walker)

        assert stats['total_nodes'] == 6
        assert stats['leaf_nodes'] == 3
        assert stats['internal_nodes'] == 3
        assert stats['max_depth'] == 2
        assert stats['depths'] == {0: 1, 1: 2, 2: 3}
        assert stats['average_branching'] == pytest.approx(5 / 3)

    def test_stats_single_walker(self, ancestor):
        stats = get_tree_stats(DummyWalker.build(ancestor, max_level=0))

        assert stats['total_nodes'] == 1
        assert stats['leaf_nodes'] == 1
        assert stats['average_branching'] == 0
