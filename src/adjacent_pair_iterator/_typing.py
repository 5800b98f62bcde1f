from __future__ import annotations

from typing import Callable, Tuple, TypeVar

T = TypeVar('T')

Pair = Tuple[T, T]
Duplicator = Callable[[T], T]
