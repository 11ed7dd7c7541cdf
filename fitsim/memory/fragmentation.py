from __future__ import annotations

from .free_list import FreeList


def fragmentation(free_list: FreeList) -> float:
    """External fragmentation of the pool, ``1 - largest / total``.

    A pool with no free bytes reports 1.0. That is a reporting convention:
    "no free space left" is shown the same way as "maximally fragmented",
    not a claim that the pool is actually fragmented.
    """
    total = free_list.total()
    if total == 0:
        return 1.0

    return 1.0 - (free_list.largest() / total)
