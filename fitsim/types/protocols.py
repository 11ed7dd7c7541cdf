from __future__ import annotations
from typing import Protocol, runtime_checkable

from .aliases import ByteSize
from .enums import AllocationStrategy


@runtime_checkable
class IPlacementStrategy(Protocol):
    @property
    def kind(self) -> AllocationStrategy:
        ...

    def attempt(self, size: ByteSize) -> bool:
        ...

    def reset(self) -> None:
        ...
