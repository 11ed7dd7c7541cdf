from __future__ import annotations
from typing import Iterable, Optional

from .core.harness import BenchmarkHarness
from .types.descriptors import SimulationConfig
from .types.enums import AllocationStrategy


def create_harness(block_sizes: Iterable[int], request_sizes: Iterable[int], **kwargs) -> BenchmarkHarness:
    return BenchmarkHarness(block_sizes, request_sizes, SimulationConfig(**kwargs))


def create_seeded_harness(block_sizes: Iterable[int], request_sizes: Iterable[int],
                          seed: int = 0, **kwargs) -> BenchmarkHarness:
    return BenchmarkHarness(block_sizes, request_sizes, SimulationConfig(seed=seed, **kwargs))


def create_deterministic_harness(block_sizes: Iterable[int], request_sizes: Iterable[int],
                                 seed: Optional[int] = None, **kwargs) -> BenchmarkHarness:
    """Harness limited to the strategies that never consult the generator."""
    strategies = tuple(s for s in AllocationStrategy if s is not AllocationStrategy.RANDOM_FIT)
    return BenchmarkHarness(
        block_sizes,
        request_sizes,
        SimulationConfig(strategies=strategies, seed=seed, **kwargs)
    )
