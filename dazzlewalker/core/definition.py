"""Definition contracts.

A definition is any callable ``(item, walker) -> iterable of items``. It
returns the candidate children of ``item``; ``None`` entries are dropped
by the walker. The classes here cover the common shapes: definitions that
need the tree context, definitions that can stop expansion below the
children they produce, and the definition that produces nothing.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, TYPE_CHECKING

from .context import EmptyWalkerContext, WalkerContext

if TYPE_CHECKING:
    from .walker import AbstractWalker


class ContextualDefinition:
    """Base class for definitions that need the walker context.

    Example:
        class PageChildrenDefinition(ContextualDefinition):
            def __call__(self, page, walker):
                return self.get_context().repository.children_of(page)
    """

    def __init__(self, context: WalkerContext = None):
        self._context = context if context is not None else EmptyWalkerContext()

    def get_context(self) -> WalkerContext:
        return self._context

    def __call__(self, item: Any, walker: 'AbstractWalker') -> Iterable[Any]:
        raise NotImplementedError(f"{self.__class__.__name__} must implement __call__")


class StoppableDefinition(ABC):
    """Mixin for definitions able to stop expansion below their children.

    When ``should_stop_expansion()`` returns True right after the
    definition ran, the children it produced are bounded to the owning
    walker's level: they show up, but report no children of their own.
    Sibling subtrees and the owning walker are not affected.
    """

    @abstractmethod
    def should_stop_expansion(self) -> bool:
        """Return True if produced children must not expand further.

        Consulted once per invocation, after the call returns.
        """
        pass


class ZeroChildrenDefinition(ContextualDefinition):
    """Definition that never produces children."""

    def __call__(self, item: Any = None, walker: 'AbstractWalker' = None) -> List[Any]:
        return []
