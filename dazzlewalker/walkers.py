"""Ready-made walker types."""

from .core.cycle_aware import AbstractCycleAwareWalker
from .core.definition import ZeroChildrenDefinition


class ZeroChildrenWalker(AbstractCycleAwareWalker):
    """Walker whose items never have children.

    Useful as a placeholder tree, or as a base whose definitions are
    added after ``build()`` by calling ``add_definition()``.
    """

    def initialize_definitions(self) -> None:
        self.add_definition(object, ZeroChildrenDefinition(self.get_context()))
