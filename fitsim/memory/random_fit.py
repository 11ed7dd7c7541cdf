from __future__ import annotations

import numpy as np

from ..types.aliases import ByteSize
from ..types.enums import AllocationStrategy, ZeroSizePolicy
from .allocators import PlacementStrategy
from .free_list import FreeList


class RandomFitStrategy(PlacementStrategy):
    """Places each request in a uniformly chosen candidate block.

    The generator is owned by the caller and shared across runs, so it is
    seeded once rather than per call or per rebuild.
    """

    __slots__ = ('_rng',)

    kind = AllocationStrategy.RANDOM_FIT

    def __init__(self, free_list: FreeList, rng: np.random.Generator,
                 zero_size_policy: ZeroSizePolicy = ZeroSizePolicy.SCAN):
        super().__init__(free_list, zero_size_policy)
        self._rng = rng

    def _attempt_impl(self, size: ByteSize) -> bool:
        candidates = self._free_list.candidates(size)
        if not candidates:
            return False

        choice = int(self._rng.integers(len(candidates)))
        self._free_list.allocate_from(candidates[choice], size)
        return True
