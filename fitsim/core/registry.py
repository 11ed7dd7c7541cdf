"""
Strategy construction for FitSim.

Maps each member of the closed ``AllocationStrategy`` set onto its
placement strategy class. Anything outside that set is rejected rather
than silently ignored.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from ..exceptions import ConfigurationError
from ..memory import (
    BestFitStrategy,
    FirstFitStrategy,
    FreeList,
    NextFitStrategy,
    PlacementStrategy,
    RandomFitStrategy,
    WorstFitStrategy,
)
from ..types.enums import AllocationStrategy, ZeroSizePolicy


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator for random fit; ``None`` draws fresh OS entropy."""
    return np.random.default_rng(seed)


def create_strategy(
    kind: AllocationStrategy,
    free_list: FreeList,
    rng: Optional[np.random.Generator] = None,
    zero_size_policy: ZeroSizePolicy = ZeroSizePolicy.SCAN
) -> PlacementStrategy:
    if kind is AllocationStrategy.FIRST_FIT:
        return FirstFitStrategy(free_list, zero_size_policy)
    if kind is AllocationStrategy.NEXT_FIT:
        return NextFitStrategy(free_list, zero_size_policy)
    if kind is AllocationStrategy.BEST_FIT:
        return BestFitStrategy(free_list, zero_size_policy)
    if kind is AllocationStrategy.WORST_FIT:
        return WorstFitStrategy(free_list, zero_size_policy)
    if kind is AllocationStrategy.RANDOM_FIT:
        if rng is None:
            raise ConfigurationError("Random fit needs a random generator", strategy=kind)
        return RandomFitStrategy(free_list, rng, zero_size_policy)

    raise ConfigurationError(f"Unknown allocation strategy: {kind!r}", strategy=kind)


def parse_strategy(name: str) -> AllocationStrategy:
    """Resolve a user-facing name such as ``best-fit`` or ``Best Fit``."""
    try:
        return AllocationStrategy.from_name(name)
    except KeyError:
        choices = ', '.join(s.cli_name for s in AllocationStrategy)
        raise ConfigurationError(f"Unknown strategy '{name}', expected one of: {choices}") from None
