from __future__ import annotations

from typing import Optional

from ..types.aliases import BlockIndex, ByteSize
from ..types.enums import AllocationStrategy
from .allocators import PlacementStrategy


class WorstFitStrategy(PlacementStrategy):
    __slots__ = ()

    kind = AllocationStrategy.WORST_FIT

    def _attempt_impl(self, size: ByteSize) -> bool:
        worst_index: Optional[int] = None
        worst_size = 0

        for i, block_size in enumerate(self._free_list):
            if block_size >= size:
                if worst_index is None or block_size > worst_size:
                    worst_index = i
                    worst_size = block_size

        if worst_index is None:
            return False

        self._free_list.allocate_from(BlockIndex(worst_index), size)
        return True
