from __future__ import annotations

from typing import Iterable, Optional

from ._typing import Duplicator, Pair, T
from .adaptor import EMPTY, PairAdaptor


class AdjacentPairs(PairAdaptor[T]):
    """Yield overlapping pairs of subsequent elements: 'abc' -> (a, b), (b, c)

    Advances by one element per pair, so consecutive pairs share an element.
    A source of n >= 2 elements gives n - 1 pairs, shorter sources give none.

    >>> list(AdjacentPairs('abcd'))
    [('a', 'b'), ('b', 'c'), ('c', 'd')]
    """

    def __init__(self, iterable: Iterable[T], duplicate: Optional[Duplicator] = None) -> None:
        super().__init__(iterable, duplicate)
        self._pending = EMPTY  # left element of the next pair

    def __next__(self) -> Pair[T]:
        if self._pending is EMPTY:
            self._pending, self._pulled = self._pull(), EMPTY
            if self._pending is EMPTY:
                self._exhaust()

        right = self._pull()
        if right is EMPTY:
            self._exhaust()

        pending = self._duplicate(right)
        left, self._pending, self._pulled = self._pending, pending, EMPTY
        return self._emit(left, right)

    def __length_hint__(self) -> int:
        held = self._remaining() + self._held() + int(self._pending is not EMPTY)
        return max(held - 1, 0)

    def _clear(self) -> None:
        self._pending = EMPTY


def adjacent_pairs(iterable: Iterable[T], duplicate: Optional[Duplicator] = None) -> AdjacentPairs[T]:
    """Return a lazy iterator over the adjacent pairs of `iterable`.

    >>> list(adjacent_pairs([1, 2, 3]))
    [(1, 2), (2, 3)]
    """
    return AdjacentPairs(iterable, duplicate)
