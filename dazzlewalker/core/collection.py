"""Read-only children collection.

Children are memoized once computed, so the sequence handed out by a
walker must never change. Any mutation attempt raises
``ReadOnlyChildrenError``.
"""

from collections.abc import Sequence
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar, Union, overload

from .exceptions import ReadOnlyChildrenError

T = TypeVar('T')


class WalkerCollection(Sequence, Generic[T]):
    """Immutable ordered sequence of child walkers."""

    __slots__ = ('_elements',)

    def __init__(self, elements: Iterable[T] = ()):
        self._elements = tuple(elements)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> 'WalkerCollection[T]': ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return WalkerCollection(self._elements[index])
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __setitem__(self, index, value):
        raise ReadOnlyChildrenError()

    def __delitem__(self, index):
        raise ReadOnlyChildrenError()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WalkerCollection):
            return self._elements == other._elements
        if isinstance(other, (list, tuple)):
            return list(self._elements) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._elements)!r})"

    def get(self, index: int) -> Optional[T]:
        """Return the element at ``index``, or None when out of range.

        Negative indexes are out of range; they never wrap around.
        """
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return None

    def first(self) -> Optional[T]:
        return self.get(0)

    def last(self) -> Optional[T]:
        return self.get(len(self._elements) - 1)

    def to_list(self) -> List[T]:
        return list(self._elements)
