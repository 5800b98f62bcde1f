from __future__ import annotations

import logging
from typing import Iterable, Optional

from ._typing import Duplicator, Pair, T
from .adaptor import EMPTY, PairAdaptor

logger = logging.getLogger(__name__)


class CyclicAdjacentPairs(PairAdaptor[T]):
    """Yield adjacent pairs, closing the ring with (last, first): 'abc' ->
    (a, b), (b, c), (c, a)

    The first element is retained until the source runs out, since it cannot
    be read from the source again. A source of n >= 2 elements gives n pairs,
    shorter sources give none.

    >>> list(CyclicAdjacentPairs('abcd'))
    [('a', 'b'), ('b', 'c'), ('c', 'd'), ('d', 'a')]
    """

    def __init__(self, iterable: Iterable[T], duplicate: Optional[Duplicator] = None) -> None:
        super().__init__(iterable, duplicate)
        self._previous = EMPTY
        self._first = EMPTY

    def __next__(self) -> Pair[T]:
        if self._previous is EMPTY:
            current = self._pull()
            if current is EMPTY:
                self._exhaust()
            self._first = self._duplicate(current)
            self._previous, self._pulled = current, EMPTY

        current = self._pull()
        if current is EMPTY:
            return self._close()

        following = self._duplicate(current)
        previous, self._previous, self._pulled = self._previous, following, EMPTY
        return self._emit(previous, current)

    def _close(self) -> Pair[T]:
        """Emit (last, first), unless the source held a single element."""
        if not self._produced:
            self._exhaust()
        # `first` is not re-armed, so the next call is exhausted
        previous, first = self._previous, self._first
        self._clear()
        self._release()
        logger.debug(f'Closing cycle after {self._produced + 1} pairs')
        return self._emit(previous, first)

    def __length_hint__(self) -> int:
        remaining = self._remaining() + self._held()
        if self._previous is EMPTY:
            return remaining if remaining >= 2 else 0
        if self._produced or remaining:
            return remaining + 1
        return 0

    def _clear(self) -> None:
        self._previous = EMPTY
        self._first = EMPTY


def cyclic_adjacent_pairs(
    iterable: Iterable[T], duplicate: Optional[Duplicator] = None
) -> CyclicAdjacentPairs[T]:
    """Return a lazy iterator over the cyclic adjacent pairs of `iterable`.

    >>> list(cyclic_adjacent_pairs([1, 2, 3]))
    [(1, 2), (2, 3), (3, 1)]
    """
    return CyclicAdjacentPairs(iterable, duplicate)
