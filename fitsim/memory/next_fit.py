from __future__ import annotations

from typing import Optional

from ..types.aliases import BlockIndex, ByteSize
from ..types.enums import AllocationStrategy, ZeroSizePolicy
from .allocators import PlacementStrategy
from .free_list import FreeList


class NextFitStrategy(PlacementStrategy):
    """First fit that resumes where the previous placement left off.

    The cursor is the index of the next block to inspect. It survives
    between calls and is cleared by ``reset`` or by a failed scan, in which
    case the next search starts from the head again.
    """

    __slots__ = ('_cursor',)

    kind = AllocationStrategy.NEXT_FIT

    def __init__(self, free_list: FreeList, zero_size_policy: ZeroSizePolicy = ZeroSizePolicy.SCAN):
        super().__init__(free_list, zero_size_policy)
        self._cursor: Optional[int] = None

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    def reset(self) -> None:
        self._cursor = None

    def _attempt_impl(self, size: ByteSize) -> bool:
        count = len(self._free_list)
        if count == 0:
            self._cursor = None
            return False

        start = self._cursor if self._cursor is not None and self._cursor < count else 0

        for step in range(count):
            index = (start + step) % count
            if self._free_list[index] >= size:
                removed = self._free_list.allocate_from(BlockIndex(index), size)
                # a removed block lets its successor slide into the same index
                self._cursor = index if removed else index + 1
                return True

        self._cursor = None
        return False
