from __future__ import annotations

import logging

from .adjacent_pair import AdjacentPairs, adjacent_pairs
from .cyclic_adjacent_pair import CyclicAdjacentPairs, cyclic_adjacent_pairs
from .extension import AdjacentPairIterable, CyclicAdjacentPairIterable, PairIterable
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AdjacentPairs',
    'CyclicAdjacentPairs',
    'AdjacentPairIterable',
    'CyclicAdjacentPairIterable',
    'PairIterable',
    'adjacent_pairs',
    'cyclic_adjacent_pairs',
]
