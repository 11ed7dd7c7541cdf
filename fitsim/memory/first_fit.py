from __future__ import annotations

from ..types.aliases import BlockIndex, ByteSize
from ..types.enums import AllocationStrategy
from .allocators import PlacementStrategy


class FirstFitStrategy(PlacementStrategy):
    __slots__ = ()

    kind = AllocationStrategy.FIRST_FIT

    def _attempt_impl(self, size: ByteSize) -> bool:
        for i, block_size in enumerate(self._free_list):
            if block_size >= size:
                self._free_list.allocate_from(BlockIndex(i), size)
                return True

        return False
