"""DazzleWalker - Lazy Tree Walker Library.

DazzleWalker mirrors an arbitrary object graph as a tree of walkers that
expand on demand. Each walker wraps one item and finds its children with
the definition registered for the item's type:

    from dazzlewalker import AbstractCycleAwareWalker

    class SiteWalker(AbstractCycleAwareWalker):
        def initialize_definitions(self):
            self.add_definition(Page, lambda page, walker: page.subpages)

    root = SiteWalker.build(home_page, max_level=3)
    for child in root:
        print(child.get_level(), child.get_item())
"""

from loguru import logger

__version__ = "0.1.0"

from ._common.config import SerializationGroup, TraversalStrategy, WalkerConfig
from .caching import CacheLookup, CacheProvider, MemoryCacheProvider
from .core import (
    AbstractCycleAwareWalker,
    AbstractWalker,
    CacheCorruptionError,
    ConflictingGroupsError,
    ContextualDefinition,
    DefinitionNotFound,
    DefinitionRegistry,
    EmptyWalkerContext,
    InvalidConfigurationError,
    ReadOnlyChildrenError,
    StoppableDefinition,
    TypeChainResolver,
    WalkerCollection,
    WalkerContext,
    WalkerError,
    ZeroChildrenDefinition,
    type_identifier,
)
from .walkers import ZeroChildrenWalker
from .serializer import TreeWalkerNormalizer
from .api import (
    collect_items,
    count_walkers,
    find_walkers,
    get_leaf_walkers,
    get_tree_stats,
    traverse_walker,
)

# Silent unless the host application opts in (see logging_config)
logger.disable("dazzlewalker")

__all__ = [
    "__version__",
    # Walkers
    "AbstractWalker",
    "AbstractCycleAwareWalker",
    "ZeroChildrenWalker",
    "WalkerCollection",
    # Definitions
    "ContextualDefinition",
    "StoppableDefinition",
    "ZeroChildrenDefinition",
    "DefinitionRegistry",
    "TypeChainResolver",
    "type_identifier",
    # Context
    "WalkerContext",
    "EmptyWalkerContext",
    # Caching
    "CacheLookup",
    "CacheProvider",
    "MemoryCacheProvider",
    # Config
    "WalkerConfig",
    "SerializationGroup",
    "TraversalStrategy",
    # Serialization
    "TreeWalkerNormalizer",
    # API
    "traverse_walker",
    "collect_items",
    "count_walkers",
    "find_walkers",
    "get_leaf_walkers",
    "get_tree_stats",
    # Errors
    "WalkerError",
    "DefinitionNotFound",
    "ReadOnlyChildrenError",
    "CacheCorruptionError",
    "ConflictingGroupsError",
    "InvalidConfigurationError",
]
