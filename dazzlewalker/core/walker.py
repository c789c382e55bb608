"""AbstractWalker - the lazy tree engine of DazzleWalker.

A walker wraps one domain item and discovers its own children on demand.
Which definition runs is chosen from the item's runtime type through the
shared definition registry. Nothing is expanded until it is read: the
first call to ``get_children()`` or ``count()`` resolves the definition,
builds the child walkers and memoizes the result for good.

Every walker of a tree shares the same registry, context, type resolver
and cache collaborator, and points directly at the root walker.
"""

import math
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Union

from loguru import logger

from .._common.config import WalkerConfig
from ..caching import CacheProvider, MemoryCacheProvider
from .collection import WalkerCollection
from .context import EmptyWalkerContext, WalkerContext
from .definition import StoppableDefinition
from .exceptions import DefinitionNotFound, InvalidConfigurationError, ReadOnlyChildrenError
from .registry import CountDefinition, Definition, DefinitionRegistry
from .resolver import TypeChainResolver, TypeId, type_identifier

Level = Union[int, float]

# Memoized fields start in this state and leave it exactly once
_UNEXPANDED = object()


class AbstractWalker(ABC):
    """Abstract base class for lazily expanded walker trees.

    Subclasses declare how each item type expands by registering
    definitions in ``initialize_definitions()``:

    Example:
        class ContentWalker(AbstractWalker):
            def initialize_definitions(self):
                self.add_definition(Folder, lambda folder, walker: folder.entries)
                self.add_count_definition(Folder, lambda folder: folder.entry_count)

        walker = ContentWalker.build(root_folder, max_level=3)
        for child in walker.get_children():
            print(child.get_item(), child.count())

    Walkers are created by ``build()`` (the root) and by their parent's
    expansion (every other walker). They are never rebuilt.
    """

    def __init__(self,
                 root: Optional['AbstractWalker'],
                 parent: Optional['AbstractWalker'],
                 registry: DefinitionRegistry,
                 resolver: TypeChainResolver,
                 item: Any,
                 context: WalkerContext,
                 level: Level = 0,
                 max_level: Level = math.inf):
        """Initialize a walker. Use ``build()`` to create a tree.

        Args:
            root: Root walker of the tree, None when creating the root
            parent: Owning walker, None for the root
            registry: Definition registry shared by the whole tree
            resolver: Type chain resolver shared by the whole tree
            item: Wrapped domain item
            context: Context shared by the whole tree
            level: Depth from the root (root = 0)
            max_level: Depth bound in effect for this subtree
        """
        self._root = self if root is None else root
        self._parent = parent
        self._registry = registry
        self._resolver = resolver
        self._item = item
        self._context = context
        self._level = level
        self._max_level = max_level
        self._children = _UNEXPANDED
        self._count = _UNEXPANDED
        self._metadata: Optional[Dict[str, Any]] = None

        if root is None:
            self.initialize_definitions()

    @abstractmethod
    def initialize_definitions(self) -> None:
        """Register this tree type's definitions.

        Called once, on the root walker, right after construction.
        """
        pass

    @classmethod
    def build(cls,
              item: Any,
              context: Optional[WalkerContext] = None,
              max_level: Level = math.inf,
              cache_provider: Optional[CacheProvider] = None,
              config: Optional[WalkerConfig] = None) -> 'AbstractWalker':
        """Create the root walker of a new tree.

        Args:
            item: Root domain item
            context: Context shared with definitions (default EmptyWalkerContext)
            max_level: Depth bound, math.inf for none
            cache_provider: Type chain cache collaborator (default in-memory)
            config: Optional WalkerConfig supplying defaults for the above

        Returns:
            Root walker of the requested type

        Raises:
            InvalidConfigurationError: If config or max_level is invalid
        """
        if config is not None:
            errors = config.validate()
            if errors:
                raise InvalidConfigurationError(errors)
            if max_level is not None and math.isinf(max_level):
                max_level = config.max_level
            if cache_provider is None:
                cache_provider = MemoryCacheProvider.from_config(config)

        if max_level is None or max_level < 0:
            raise InvalidConfigurationError(["max_level cannot be negative"])

        if cache_provider is None:
            cache_provider = MemoryCacheProvider()

        return cls(
            None,
            None,
            DefinitionRegistry(),
            TypeChainResolver(cache_provider),
            item,
            context if context is not None else EmptyWalkerContext(),
            0,
            max_level,
        )

    # Children

    def get_children(self) -> WalkerCollection['AbstractWalker']:
        """Return the child walkers, expanding this walker on first call.

        The result is memoized: later calls return the same collection.
        Missing definitions and reached depth bounds yield an empty
        collection rather than an error.
        """
        if self._children is _UNEXPANDED:
            self._children = self._expand()
        return self._children

    def is_expanded(self) -> bool:
        """Check if children have been materialized."""
        return self._children is not _UNEXPANDED

    def _expand(self) -> WalkerCollection['AbstractWalker']:
        if self._level >= self._max_level:
            return WalkerCollection()

        if not self._can_expand():
            return WalkerCollection()

        try:
            definition = self.get_definition_for_item(self._item)
        except DefinitionNotFound as e:
            logger.debug("Walker at level {} has no children: {}", self._level, e)
            return WalkerCollection()

        produced = definition(self._item, self)
        items = [child for child in (produced or ()) if child is not None]

        max_level = self._max_level
        # Stopping definition: children show up but never expand themselves
        if isinstance(definition, StoppableDefinition) and definition.should_stop_expansion():
            logger.debug("{} stopped expansion at level {}",
                         definition.__class__.__name__, self._level)
            max_level = self._level

        return WalkerCollection(self._create_child(child, max_level) for child in items)

    def _can_expand(self) -> bool:
        """Hook consulted before looking up a definition."""
        return True

    def _create_child(self, item: Any, max_level: Level) -> 'AbstractWalker':
        return self.__class__(
            self._root,
            self,
            self._registry,
            self._resolver,
            item,
            self._context,
            self._level + 1,
            max_level,
        )

    def count(self) -> int:
        """Return the number of children, memoized.

        Uses the count definition for the item when one exists, which
        avoids materializing children. Otherwise counts the children.
        """
        if self._count is _UNEXPANDED:
            if self._level >= self._max_level:
                self._count = 0
            else:
                count_definition = self.get_count_definition_for_item(self._item)
                if count_definition is not None:
                    self._count = int(count_definition(self._item))
                else:
                    self._count = len(self.get_children())
        return self._count

    # Definitions

    def add_definition(self, type_id: TypeId, definition: Definition) -> 'AbstractWalker':
        """Register a children definition for the whole tree.

        Args:
            type_id: Class or type identifier the definition applies to
            definition: Callable(item, walker) -> iterable of child items

        Returns:
            This walker, for chaining
        """
        self._registry.add_definition(type_id, definition)
        return self

    def add_count_definition(self, type_id: TypeId, count_definition: CountDefinition) -> 'AbstractWalker':
        """Register a count definition for the whole tree.

        Args:
            type_id: Class or type identifier the definition applies to
            count_definition: Callable(item) -> int

        Returns:
            This walker, for chaining
        """
        self._registry.add_count_definition(type_id, count_definition)
        return self

    def get_definition_for_item(self, item: Any) -> Definition:
        """Return the definition dispatched for an item.

        Raises:
            DefinitionNotFound: If item is None or no definition matches
        """
        if item is None:
            raise DefinitionNotFound('Cannot walk a None item.')
        chain = self.get_item_type_chain(item)
        return self._registry.definition_for(chain, type_identifier(type(item)))

    def get_count_definition_for_item(self, item: Any) -> Optional[CountDefinition]:
        """Return the count definition dispatched for an item, or None."""
        return self._registry.count_definition_for(self.get_item_type_chain(item))

    def get_item_type_chain(self, item: Any) -> List[str]:
        """Return the ordered type identifiers tried when dispatching ``item``."""
        return self._resolver.resolve(item, self.__class__)

    def get_registry(self) -> DefinitionRegistry:
        return self._registry

    def get_cache_provider(self) -> CacheProvider:
        return self._resolver.cache_provider

    # Accessors

    def get_item(self) -> Any:
        return self._item

    def get_parent(self) -> Optional['AbstractWalker']:
        return self._parent

    def get_root(self) -> 'AbstractWalker':
        return self._root

    def is_root(self) -> bool:
        return self is self._root

    def get_context(self) -> WalkerContext:
        return self._context

    def get_level(self) -> Level:
        return self._level

    def get_current_level(self) -> Level:
        """DEPRECATED: use get_level()."""
        warnings.warn(
            "get_current_level() is deprecated, use get_level() instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.get_level()

    def get_max_level(self) -> Level:
        return self._max_level

    # Navigation

    def is_item_equals_to(self, item: Any) -> bool:
        """Check if ``item`` is the item wrapped by this walker.

        Default equality is same concrete type and same identity.
        Override to compare logical entities instead, for instance two
        ORM instances loaded separately but sharing a primary key.
        """
        return (item is not None
                and self._item is not None
                and type(self._item) is type(item)
                and self._item is item)

    def get_index(self) -> Optional[int]:
        """Return this walker's position among its siblings, None for the root."""
        if self._parent is None:
            return None
        for index, sibling in enumerate(self._parent.get_children()):
            if self.is_item_equals_to(sibling.get_item()):
                return index
        return None

    def get_next(self) -> Optional['AbstractWalker']:
        """Return the following sibling, or None at the end or for the root."""
        index = self.get_index()
        if index is None:
            return None
        return self._parent.get_children().get(index + 1)

    def get_previous(self) -> Optional['AbstractWalker']:
        """Return the preceding sibling, or None at the start or for the root."""
        index = self.get_index()
        if index is None:
            return None
        return self._parent.get_children().get(index - 1)

    def get_walker_at_item(self, item: Any) -> Optional['AbstractWalker']:
        """Find the walker wrapping ``item``, searching depth-first from the root.

        Forces expansion of every walker visited, down to each one's
        depth bound. Returns None when the item is not in the tree.
        """
        return self._find_walker_for_item(self._root, item)

    def _find_walker_for_item(self, current: 'AbstractWalker', item: Any) -> Optional['AbstractWalker']:
        if current.is_item_equals_to(item):
            return current
        for walker in current.get_children():
            found = self._find_walker_for_item(walker, item)
            if found is not None:
                return found
        return None

    def get_walkers_of_type(self, type_id: TypeId) -> List['AbstractWalker']:
        """Collect, depth-first from the root, every walker whose item matches a type.

        Args:
            type_id: A class (checked with isinstance) or a type identifier
                (checked against the item's type chain, so capability tags
                match too)

        Returns:
            Matching walkers in traversal order, possibly empty
        """
        found: List['AbstractWalker'] = []
        self._collect_walkers_of_type(self._root, type_id, found)
        return found

    def _collect_walkers_of_type(self, current: 'AbstractWalker', type_id: TypeId,
                                 found: List['AbstractWalker']) -> None:
        if current._item_is_of_type(type_id):
            found.append(current)
        for walker in current.get_children():
            self._collect_walkers_of_type(walker, type_id, found)

    def _item_is_of_type(self, type_id: TypeId) -> bool:
        if self._item is None:
            return False
        if isinstance(type_id, type):
            return isinstance(self._item, type_id)
        return type_identifier(type_id) in self.get_item_type_chain(self._item)

    # Metadata

    def add_metadata(self, key: str, value: Any) -> 'AbstractWalker':
        """Attach a value to this walker, overwriting any previous one."""
        if self._metadata is None:
            self._metadata = {}
        self._metadata[key] = value
        return self

    def get_metadata(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return one metadata value, or the whole map when no key is given."""
        if key is None:
            return self.get_all_metadata()
        if self._metadata is not None and key in self._metadata:
            return self._metadata[key]
        return default

    def get_all_metadata(self) -> Dict[str, Any]:
        return self._metadata if self._metadata is not None else {}

    # Sequence protocol over children

    def has_child_at(self, index: int) -> bool:
        return self.get_children().get(index) is not None

    def __getitem__(self, index):
        return self.get_children()[index]

    def __setitem__(self, index, value):
        raise ReadOnlyChildrenError()

    def __delitem__(self, index):
        raise ReadOnlyChildrenError()

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator['AbstractWalker']:
        if self.count() > 0:
            return iter(self.get_children())
        return iter(())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(item={self._item!r}, level={self._level})"
