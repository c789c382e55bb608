"""High-level API for DazzleWalker.

This module provides simple, functional interfaces for common operations
on walker trees. Every function pulls children through the walkers' lazy
expansion, so walking a tree materializes it down to each walker's depth
bound.
"""

from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, List, Union

from ._common.config import TraversalStrategy
from .core.walker import AbstractWalker


def traverse_walker(
    walker: AbstractWalker,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    min_level: int = 0,
) -> Iterator[AbstractWalker]:
    """Iterate over a walker and all its descendants.

    Args:
        walker: Starting walker (usually a root)
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)
        min_level: Skip walkers whose level is below this value

    Yields:
        Walkers in the requested order

    Example:
        >>> root = ContentWalker.build(site, max_level=2)
        >>> for walker in traverse_walker(root, 'bfs'):
        ...     print(walker.get_level(), walker.get_item())
    """
    strategy = _parse_strategy(strategy)

    if strategy == TraversalStrategy.BREADTH_FIRST:
        walkers = _breadth_first(walker)
    elif strategy == TraversalStrategy.DEPTH_FIRST_POST:
        walkers = _depth_first_post(walker)
    else:
        walkers = _depth_first_pre(walker)

    for current in walkers:
        if current.get_level() >= min_level:
            yield current


def collect_items(
    walker: AbstractWalker,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> List[Any]:
    """Return the items wrapped by a walker and its descendants.

    Args:
        walker: Starting walker
        strategy: Traversal strategy

    Returns:
        Items in traversal order
    """
    return [current.get_item() for current in traverse_walker(walker, strategy)]


def count_walkers(walker: AbstractWalker) -> int:
    """Count a walker and all its descendants.

    Args:
        walker: Starting walker

    Returns:
        Total number of walkers in the subtree, including ``walker``
    """
    return sum(1 for _ in traverse_walker(walker))


def find_walkers(
    walker: AbstractWalker,
    predicate: Callable[[AbstractWalker], bool],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> Iterator[AbstractWalker]:
    """Find walkers that match a predicate.

    Args:
        walker: Starting walker
        predicate: Function that returns True for matching walkers
        strategy: Traversal strategy

    Yields:
        Walkers that match the predicate
    """
    for current in traverse_walker(walker, strategy):
        if predicate(current):
            yield current


def get_leaf_walkers(walker: AbstractWalker) -> Iterator[AbstractWalker]:
    """Yield walkers without children, in depth-first order."""
    return find_walkers(walker, lambda current: len(current.get_children()) == 0)


def get_tree_stats(walker: AbstractWalker) -> Dict[str, Any]:
    """Get statistics about a walker tree.

    Args:
        walker: Starting walker

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total walkers: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for current in traverse_walker(walker):
        stats['total_nodes'] += 1

        if len(current.get_children()) == 0:
            stats['leaf_nodes'] += 1

        depth = current.get_level()
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _depth_first_pre(walker: AbstractWalker) -> Iterator[AbstractWalker]:
    yield walker
    for child in walker.get_children():
        yield from _depth_first_pre(child)


def _depth_first_post(walker: AbstractWalker) -> Iterator[AbstractWalker]:
    for child in walker.get_children():
        yield from _depth_first_post(child)
    yield walker


def _breadth_first(walker: AbstractWalker) -> Iterator[AbstractWalker]:
    queue: Deque[AbstractWalker] = deque([walker])
    while queue:
        current = queue.popleft()
        yield current
        queue.extend(current.get_children())


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
