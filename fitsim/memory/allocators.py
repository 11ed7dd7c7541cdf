from __future__ import annotations

from abc import ABC, abstractmethod

from ..types.aliases import ByteSize
from ..types.enums import AllocationStrategy, ZeroSizePolicy
from .free_list import FreeList


class PlacementStrategy(ABC):
    __slots__ = ('_free_list', '_zero_size_policy')

    kind: AllocationStrategy

    def __init__(self, free_list: FreeList, zero_size_policy: ZeroSizePolicy = ZeroSizePolicy.SCAN):
        self._free_list = free_list
        self._zero_size_policy = zero_size_policy

    @property
    def free_list(self) -> FreeList:
        return self._free_list

    @property
    def zero_size_policy(self) -> ZeroSizePolicy:
        return self._zero_size_policy

    def attempt(self, size: ByteSize) -> bool:
        """Try to place one request; the free list is untouched on failure."""
        if size == 0 and self._zero_size_policy is ZeroSizePolicy.TRIVIAL:
            return True
        return self._attempt_impl(size)

    def reset(self) -> None:
        pass

    @abstractmethod
    def _attempt_impl(self, size: ByteSize) -> bool: ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(blocks={len(self._free_list)})"
