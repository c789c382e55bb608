"""Serialization of walker trees.

The normalizer reads a walker's public surface and turns it into plain
dicts and lists, emitting only the slices selected by serialization
groups. It is a consumer of the engine: reading ``children`` here goes
through the same lazy expansion as any other caller.
"""

import dataclasses
import json
from typing import Any, Callable, Dict, Iterable, Optional, Set

from loguru import logger

from ._common.config import SerializationGroup, WalkerConfig
from .core.exceptions import ConflictingGroupsError
from .core.walker import AbstractWalker

ItemNormalizer = Callable[[Any, Set[str]], Any]

_SCALARS = (str, int, float, bool, type(None))


def default_item_normalizer(item: Any, groups: Set[str]) -> Any:
    """Turn a domain item into JSON-friendly data.

    Scalars pass through, dataclasses become dicts, other objects expose
    their public attributes. Falls back to ``str(item)``.
    """
    if isinstance(item, _SCALARS):
        return item
    if isinstance(item, (list, tuple)):
        return [default_item_normalizer(value, groups) for value in item]
    if isinstance(item, dict):
        return {str(key): default_item_normalizer(value, groups) for key, value in item.items()}
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return default_item_normalizer(dataclasses.asdict(item), groups)
    if hasattr(item, '__dict__'):
        return {
            key: default_item_normalizer(value, groups)
            for key, value in vars(item).items()
            if not key.startswith('_')
        }
    return str(item)


class TreeWalkerNormalizer:
    """
    Normalizes walker trees according to serialization groups.

    Groups:
        walker           -> item
        children         -> children (recursively normalized)
        children_count   -> childrenCount
        parent           -> parent (recursively normalized)
        walker_level     -> level, maxLevel, index
        walker_metadata  -> metadata

    Any other group name is passed through to the item normalizer.
    ``children`` and ``parent`` cannot be requested together: a tree
    holding both directions is cyclic and has no tree-shaped output.

    Example:
        normalizer = TreeWalkerNormalizer()
        data = normalizer.normalize(walker, groups={'walker', 'children'})
    """

    def __init__(self,
                 item_normalizer: Optional[ItemNormalizer] = None,
                 config: Optional[WalkerConfig] = None):
        """
        Initialize the normalizer.

        Args:
            item_normalizer: Callable(item, groups) -> data for wrapped items
            config: Supplies default groups when a call requests none
        """
        self.item_normalizer = item_normalizer or default_item_normalizer
        self.config = config or WalkerConfig()

    def normalize(self, walker: AbstractWalker, groups: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """Normalize a walker and, depending on groups, its relatives.

        Args:
            walker: Walker to normalize
            groups: Group names (str or SerializationGroup); defaults to
                the configured default groups

        Returns:
            Dictionary holding the requested slices

        Raises:
            ConflictingGroupsError: If both 'children' and 'parent' are requested
        """
        resolved = self._resolve_groups(groups)
        return self._normalize(walker, resolved)

    def to_json(self, walker: AbstractWalker, groups: Optional[Iterable[str]] = None, **dumps_kwargs) -> str:
        """Normalize a walker and encode the result as JSON."""
        return json.dumps(self.normalize(walker, groups), **dumps_kwargs)

    def supports(self, data: Any) -> bool:
        return isinstance(data, AbstractWalker)

    def _resolve_groups(self, groups: Optional[Iterable[str]]) -> Set[str]:
        if groups is None:
            groups = self.config.default_groups
        resolved = {
            group.value if isinstance(group, SerializationGroup) else str(group)
            for group in groups
        }
        if (SerializationGroup.CHILDREN.value in resolved
                and SerializationGroup.PARENT.value in resolved):
            raise ConflictingGroupsError(
                "Cannot serialize a walker with both 'children' and 'parent' groups: "
                "the output would be cyclic."
            )
        logger.debug("Normalizing walker with groups {}", sorted(resolved))
        return resolved

    def _normalize(self, walker: AbstractWalker, groups: Set[str]) -> Dict[str, Any]:
        data: Dict[str, Any] = {}

        if SerializationGroup.WALKER.value in groups:
            data['item'] = self.item_normalizer(walker.get_item(), groups)

        if SerializationGroup.CHILDREN.value in groups:
            data['children'] = [self._normalize(child, groups) for child in walker.get_children()]

        if SerializationGroup.CHILDREN_COUNT.value in groups:
            data['childrenCount'] = walker.count()

        if SerializationGroup.PARENT.value in groups:
            parent = walker.get_parent()
            data['parent'] = self._normalize(parent, groups) if parent is not None else None

        if SerializationGroup.WALKER_LEVEL.value in groups:
            data['level'] = _json_level(walker.get_level())
            data['maxLevel'] = _json_level(walker.get_max_level())
            data['index'] = walker.get_index()

        if SerializationGroup.WALKER_METADATA.value in groups:
            data['metadata'] = dict(walker.get_all_metadata())

        return data


def _json_level(level):
    # JSON has no infinity
    if level == float('inf'):
        return None
    return level
