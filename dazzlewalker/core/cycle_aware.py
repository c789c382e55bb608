"""Cycle-aware walkers.

Host object graphs are often cyclic: a page links to its category, the
category lists the page. Expanding such graphs naively never ends. A
cycle-aware walker counts, on its root, how many times each item identity
has been expanded anywhere in the tree and refuses expansion once the
revisit budget is spent.
"""

from typing import Any, Dict, Hashable

from loguru import logger

from .walker import AbstractWalker


class AbstractCycleAwareWalker(AbstractWalker):
    """Walker that bounds repeated expansion of the same item.

    The first expansion of an item is always allowed. Each later
    expansion of the same identity, anywhere in the tree, consumes one
    unit of ``revisit_budget``; once it is spent the walker silently
    reports no children. A budget of 0 expands every item once only.

    ``revisit_budget`` is a property of the walker type. Raise it in a
    subclass when items are legitimately shared between several branches.
    """

    revisit_budget: int = 3

    def _can_expand(self) -> bool:
        root = self.get_root()
        if isinstance(root, AbstractCycleAwareWalker):
            return root._register_item(self.get_item())
        return True

    def get_item_identity(self, item: Any) -> Hashable:
        """Return the key identifying ``item`` for cycle detection.

        Defaults to object identity. Override to use a stable domain key,
        such as a primary key, when distinct instances stand for the
        same entity.
        """
        return id(item)

    def _register_item(self, item: Any) -> bool:
        """Record one expansion of ``item`` on the root.

        Returns:
            True if the item may expand, False once its budget is spent
        """
        if item is None:
            return True

        visits = self._get_visits()
        key = self.get_item_identity(item)
        if key not in visits:
            visits[key] = 0
            return True

        visits[key] += 1
        if visits[key] > self.revisit_budget:
            logger.debug("Cycle guard refused {!r} after {} revisits", item, visits[key] - 1)
            return False
        return True

    def _get_visits(self) -> Dict[Hashable, int]:
        visits = self.__dict__.get('_visits')
        if visits is None:
            visits = self._visits = {}
        return visits

    def get_visit_count(self, item: Any) -> int:
        """Return how many times ``item`` has been expanded in this tree."""
        root = self.get_root()
        visits = root._get_visits()
        key = root.get_item_identity(item)
        if key not in visits:
            return 0
        return visits[key] + 1
