"""Core abstractions for DazzleWalker.

This package contains the walker engine and the pieces it is built on:
type-chain resolution, the shared definition registry, definition
contracts and the read-only children collection.
"""

from .collection import WalkerCollection
from .context import EmptyWalkerContext, WalkerContext
from .cycle_aware import AbstractCycleAwareWalker
from .definition import ContextualDefinition, StoppableDefinition, ZeroChildrenDefinition
from .exceptions import (
    CacheCorruptionError,
    ConflictingGroupsError,
    DefinitionNotFound,
    InvalidConfigurationError,
    ReadOnlyChildrenError,
    WalkerError,
)
from .registry import DefinitionRegistry
from .resolver import TypeChainResolver, compute_type_chain, type_identifier
from .walker import AbstractWalker

__all__ = [
    "AbstractWalker",
    "AbstractCycleAwareWalker",
    "WalkerCollection",
    "WalkerContext",
    "EmptyWalkerContext",
    "ContextualDefinition",
    "StoppableDefinition",
    "ZeroChildrenDefinition",
    "DefinitionRegistry",
    "TypeChainResolver",
    "compute_type_chain",
    "type_identifier",
    "WalkerError",
    "DefinitionNotFound",
    "ReadOnlyChildrenError",
    "CacheCorruptionError",
    "ConflictingGroupsError",
    "InvalidConfigurationError",
]
