"""
Free list for FitSim.

The pool of free memory is an ordered sequence of block sizes kept in the
order the blocks were described. Placement strategies only ever shrink a
block or remove it; nothing grows, coalesces or reappears until the list is
rebuilt.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from ..exceptions import AllocationError, InvalidBlockSize
from ..types.aliases import BlockIndex, ByteSize


class FreeList:
    """Ordered sequence of free block sizes."""

    __slots__ = ('_blocks',)

    def __init__(self, sizes: Iterable[int] = ()):
        self._blocks: List[int] = []
        self.rebuild(sizes)

    def rebuild(self, sizes: Iterable[int]) -> None:
        """Discard every block and create one block per size, in order."""
        blocks = []
        for index, size in enumerate(sizes):
            if size < 0:
                raise InvalidBlockSize(f"Block size must be non-negative: {size}", size=size, index=index)
            blocks.append(int(size))
        self._blocks = blocks

    def total(self) -> float:
        total = 0.0
        for size in self._blocks:
            total += size
        return total

    def largest(self) -> ByteSize:
        return ByteSize(max(self._blocks, default=0))

    def candidates(self, size: ByteSize) -> List[BlockIndex]:
        """Indices of every block able to hold ``size``."""
        return [BlockIndex(i) for i, block in enumerate(self._blocks) if block >= size]

    def allocate_from(self, index: BlockIndex, size: ByteSize) -> bool:
        """Carve ``size`` out of the block at ``index``.

        The block shrinks by ``size``, or is removed when nothing would be
        left of it. Returns True when the block was removed, so callers
        holding a position into the list can tell whether the following
        block slid into ``index``.
        """
        block = self._blocks[index]
        if block < size:
            raise AllocationError(
                f"Block {index} of size {block} cannot hold {size}",
                requested_size=size,
                block_size=block
            )

        if block == size:
            del self._blocks[index]
            return True

        self._blocks[index] = block - size
        return False

    def sizes(self) -> Tuple[int, ...]:
        return tuple(self._blocks)

    @property
    def is_empty(self) -> bool:
        return not self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[int]:
        return iter(self._blocks)

    def __getitem__(self, index: int) -> int:
        return self._blocks[index]

    def __repr__(self) -> str:
        return f"FreeList({self._blocks!r})"
