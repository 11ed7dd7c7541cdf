from __future__ import annotations

from typing import Optional

from ..types.aliases import BlockIndex, ByteSize
from ..types.enums import AllocationStrategy
from .allocators import PlacementStrategy


class BestFitStrategy(PlacementStrategy):
    __slots__ = ()

    kind = AllocationStrategy.BEST_FIT

    def _attempt_impl(self, size: ByteSize) -> bool:
        best_index: Optional[int] = None
        best_size = 0

        for i, block_size in enumerate(self._free_list):
            if block_size >= size:
                # strict comparison keeps the earliest block on ties
                if best_index is None or block_size < best_size:
                    best_index = i
                    best_size = block_size

        if best_index is None:
            return False

        self._free_list.allocate_from(BlockIndex(best_index), size)
        return True
