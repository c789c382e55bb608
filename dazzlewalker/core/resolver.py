"""Type-chain resolution for definition dispatch.

The resolver turns an item into the ordered list of type identifiers a
walker tries when looking for a definition: the item's concrete class,
that class's declared capability tags, then the same pair for every
ancestor class. Concrete-class definitions therefore win over capability
tags, and closer ancestors win over farther ones.
"""

from typing import Any, List, Optional, Sequence, Union

from loguru import logger

from ..caching import CacheProvider
from .exceptions import CacheCorruptionError

# Characters reserved by common cache backends
_RESERVED_KEY_CHARS = '{}()/\\@:"'
_KEY_TRANSLATION = str.maketrans({char: '-' for char in _RESERVED_KEY_CHARS})

TAGS_ATTRIBUTE = '__walker_tags__'

TypeId = Union[str, type]


def type_identifier(type_id: TypeId) -> str:
    """Return the string identifier of a class, or a string unchanged.

    Args:
        type_id: A class or an already-formed identifier

    Returns:
        ``"<module>.<qualname>"`` for classes, the string itself otherwise

    Examples:
        >>> type_identifier(object)
        'builtins.object'
        >>> type_identifier('content.page')
        'content.page'
    """
    if isinstance(type_id, str):
        return type_id
    if isinstance(type_id, type):
        return f"{type_id.__module__}.{type_id.__qualname__}"
    raise TypeError(f"Type identifier must be a str or a class, got {type(type_id).__name__}")


def declared_tags(cls: type) -> Sequence[str]:
    """Return the capability tags declared directly in a class body."""
    tags = cls.__dict__.get(TAGS_ATTRIBUTE, ())
    if isinstance(tags, str):
        return (tags,)
    return tuple(tags)


def compute_type_chain(item_type: type) -> List[str]:
    """Build the dispatch chain for a class without any caching.

    Walks the method resolution order innermost first; each class
    contributes its identifier followed by its own capability tags.
    Duplicates keep their first position.
    """
    chain: List[str] = []
    seen = set()
    for cls in item_type.__mro__:
        for type_id in (type_identifier(cls), *declared_tags(cls)):
            if type_id not in seen:
                seen.add(type_id)
                chain.append(type_id)
    return chain


def cache_key(walker_type: type, item_type: type) -> str:
    """Build the resolver cache key for a (walker type, item type) pair."""
    raw = f"{type_identifier(walker_type)}_{type_identifier(item_type)}"
    return raw.translate(_KEY_TRANSLATION)


class TypeChainResolver:
    """Resolves and caches type chains through a cache collaborator.

    The walker's own type is part of the cache key: two walker subclasses
    may dispatch the same item type differently.
    """

    def __init__(self, cache_provider: CacheProvider):
        self.cache_provider = cache_provider

    def resolve(self, item: Any, walker_type: type) -> List[str]:
        """Return the type chain of ``item`` as seen by ``walker_type``.

        Args:
            item: Domain item, may be None
            walker_type: Concrete walker class doing the lookup

        Returns:
            Ordered type identifiers, empty for a None item

        Raises:
            CacheCorruptionError: If a cache hit is not a sequence of strings
        """
        if item is None:
            return []

        item_type = type(item)
        key = cache_key(walker_type, item_type)
        lookup = self.cache_provider.get(key)
        if lookup.hit:
            return self._validate(key, lookup.payload)

        logger.debug("Resolving type chain for {} ({})", item_type.__qualname__, key)
        chain = compute_type_chain(item_type)
        self.cache_provider.set(key, chain)
        return chain

    @staticmethod
    def _validate(key: str, payload: Any) -> List[str]:
        if isinstance(payload, (str, bytes)) or not isinstance(payload, (list, tuple)):
            raise CacheCorruptionError(
                f"Item class list should be a sequence of strings, "
                f"cache entry {key!r} holds {type(payload).__name__}"
            )
        if not all(isinstance(type_id, str) for type_id in payload):
            raise CacheCorruptionError(
                f"Item class list should be a sequence of strings, "
                f"cache entry {key!r} holds non-string identifiers"
            )
        return list(payload)


def first_match(chain: Sequence[str], table: dict) -> Optional[Any]:
    """Return the first value in ``table`` keyed by an identifier of ``chain``."""
    for type_id in chain:
        if type_id in table:
            return table[type_id]
    return None
