"""Shared machinery of the pair adaptors."""

from __future__ import annotations

import logging
import operator
from abc import abstractmethod
from typing import Any, Iterable, Iterator, NoReturn, Optional

from typing_extensions import Self

from ._typing import Duplicator, Pair, T
from .extension import AdjacentPairIterable, CyclicAdjacentPairIterable

logger = logging.getLogger(__name__)


class _Empty:
    """Marks an unoccupied slot, so that `None` remains a valid element."""

    def __repr__(self) -> str:
        return '<empty>'


EMPTY: Any = _Empty()


def identity(item: T) -> T:
    return item


class PairAdaptor(Iterator[Pair[T]], AdjacentPairIterable, CyclicAdjacentPairIterable):
    """Base for lazy adaptors that own a source iterator and emit 2-tuples.

    Parameters
    ----------
    iterable : Iterable
        Source of elements. `iter()` is called on it immediately, so a
        container is left intact while an iterator is consumed.
    duplicate : callable, optional
        Applied to every element that is stored for use in a later pair.
        Defaults to sharing the element itself.
    """

    def __init__(self, iterable: Iterable[T], duplicate: Optional[Duplicator] = None) -> None:
        if duplicate is not None and not callable(duplicate):
            raise TypeError(f'duplicate must be callable, not {type(duplicate).__name__}')
        self._iterator: Iterator[T] = iter(iterable)
        self._duplicate: Duplicator = identity if duplicate is None else duplicate
        self._pulled = EMPTY  # element held back by a step that raised
        self._exhausted = False
        self._produced = 0

    def __iter__(self) -> Self:
        return self

    def __repr__(self) -> str:
        if self._exhausted:
            return f'{self.__class__.__name__}(exhausted)'
        return f'{self.__class__.__name__}({self._iterator!r})'

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _remaining(self) -> int:
        """Number of elements the source still reports via PEP 424."""
        return operator.length_hint(self._iterator)

    def _pull(self) -> T:
        """Next element of the source, or the one held back from a failed step.

        The element stays held until the step that pulled it completes, so a
        step that raises can be retried without losing it.
        """
        if self._pulled is EMPTY:
            self._pulled = next(self._iterator, EMPTY)
        return self._pulled

    def _held(self) -> int:
        return int(self._pulled is not EMPTY)

    def _emit(self, left: T, right: T) -> Pair[T]:
        self._produced += 1
        return left, right

    def _release(self) -> None:
        """Drop the source; later pulls see an exhausted iterator."""
        self._iterator = iter(())

    @abstractmethod
    def _clear(self) -> None:
        """Empty the slots of the subclass."""

    def _exhaust(self) -> NoReturn:
        if not self._exhausted:
            self._exhausted = True
            self._release()
            self._pulled = EMPTY
            self._clear()
            logger.debug(f'{self.__class__.__name__} exhausted after {self._produced} pairs')
        raise StopIteration
