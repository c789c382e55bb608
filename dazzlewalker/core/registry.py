"""Definition registry shared by every walker of a tree.

One registry instance is created per tree by ``build()`` and handed by
reference to each walker constructed beneath the root. Registering a
definition through any walker therefore makes it visible to the whole
tree, past and future walkers alike.
"""

from typing import Any, Callable, Dict, Optional, Sequence

from .exceptions import DefinitionNotFound
from .resolver import TypeId, first_match, type_identifier

Definition = Callable[..., Any]
CountDefinition = Callable[[Any], int]


class DefinitionRegistry:
    """Maps type identifiers to children and count definitions.

    Last write for a given identifier wins. There is no removal API.
    """

    def __init__(self):
        self._definitions: Dict[str, Definition] = {}
        self._count_definitions: Dict[str, CountDefinition] = {}

    def add_definition(self, type_id: TypeId, definition: Definition) -> None:
        """Register the children definition for a type identifier."""
        if not callable(definition):
            raise TypeError(f"Definition for {type_identifier(type_id)!r} must be callable")
        self._definitions[type_identifier(type_id)] = definition

    def add_count_definition(self, type_id: TypeId, count_definition: CountDefinition) -> None:
        """Register the count definition for a type identifier."""
        if not callable(count_definition):
            raise TypeError(f"Count definition for {type_identifier(type_id)!r} must be callable")
        self._count_definitions[type_identifier(type_id)] = count_definition

    def definition_for(self, chain: Sequence[str], item_label: str = 'item') -> Definition:
        """Return the first definition matching a type chain.

        Raises:
            DefinitionNotFound: If the chain is empty or nothing matches
        """
        if not chain:
            raise DefinitionNotFound('Cannot walk a None item.')
        definition = first_match(chain, self._definitions)
        if definition is None:
            raise DefinitionNotFound(f'No definition was found for {item_label}')
        return definition

    def count_definition_for(self, chain: Sequence[str]) -> Optional[CountDefinition]:
        """Return the first count definition matching a type chain, or None."""
        return first_match(chain, self._count_definitions)

    def has_definition(self, type_id: TypeId) -> bool:
        return type_identifier(type_id) in self._definitions

    def has_count_definition(self, type_id: TypeId) -> bool:
        return type_identifier(type_id) in self._count_definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(definitions={sorted(self._definitions)!r}, "
                f"count_definitions={sorted(self._count_definitions)!r})")
