"""Mixins that expose the pair adaptors as methods of an iterable."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from ._typing import Duplicator, T

if TYPE_CHECKING:
    from .adjacent_pair import AdjacentPairs
    from .cyclic_adjacent_pair import CyclicAdjacentPairs


class AdjacentPairIterable:
    """Give any class implementing `__iter__` an `adjacent_pairs` method."""

    def adjacent_pairs(self, duplicate: Optional[Duplicator] = None) -> 'AdjacentPairs':
        from .adjacent_pair import AdjacentPairs

        return AdjacentPairs(self, duplicate)


class CyclicAdjacentPairIterable:
    """Give any class implementing `__iter__` a `cyclic_adjacent_pairs`
    method."""

    def cyclic_adjacent_pairs(self, duplicate: Optional[Duplicator] = None) -> 'CyclicAdjacentPairs':
        from .cyclic_adjacent_pair import CyclicAdjacentPairs

        return CyclicAdjacentPairs(self, duplicate)


class PairIterable(Iterable[T], AdjacentPairIterable, CyclicAdjacentPairIterable):
    """Wrap an arbitrary iterable for fluent use.

    >>> next(PairIterable(range(3)).cyclic_adjacent_pairs().adjacent_pairs())
    ((0, 1), (1, 2))
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self.iterable = iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self.iterable)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.iterable!r})'
