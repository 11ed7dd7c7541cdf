"""
Benchmark harness for FitSim.

Replays one immutable request sequence against a freshly rebuilt free list
for each selected placement strategy and collects timing, fragmentation
and failure statistics.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..exceptions import ConfigurationError
from ..memory import FreeList, PlacementStrategy, fragmentation
from ..profiling.profiler import PerformanceProfiler
from ..types.aliases import ByteSize
from ..types.descriptors import SimulationConfig, StrategyResult
from ..types.enums import AllocationStrategy
from .registry import create_rng, create_strategy

logger = logging.getLogger(__name__)


class BenchmarkHarness:
    """Owns the free list and runs every strategy against it in isolation."""

    __slots__ = (
        '_block_sizes', '_requests', '_config', '_free_list',
        '_rng', '_profiler', '_strategies'
    )

    def __init__(
        self,
        block_sizes: Iterable[int],
        request_sizes: Iterable[int],
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self._config = config or SimulationConfig()
        self._block_sizes: Tuple[int, ...] = tuple(block_sizes)
        self._requests: Tuple[int, ...] = tuple(request_sizes)

        for index, size in enumerate(self._requests):
            if size < 0:
                raise ConfigurationError(f"Request size must be non-negative: {size}", index=index)

        # validates block sizes up front
        self._free_list = FreeList(self._block_sizes)
        self._rng = rng if rng is not None else create_rng(self._config.seed)
        self._profiler = PerformanceProfiler(enable_memory_tracking=self._config.track_memory)
        self._strategies: Dict[AllocationStrategy, PlacementStrategy] = {}

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def block_sizes(self) -> Tuple[int, ...]:
        return self._block_sizes

    @property
    def request_sizes(self) -> Tuple[int, ...]:
        return self._requests

    @property
    def free_list(self) -> FreeList:
        return self._free_list

    def _get_strategy(self, kind: AllocationStrategy) -> PlacementStrategy:
        if kind not in self._strategies:
            self._strategies[kind] = create_strategy(
                kind, self._free_list, self._rng, self._config.zero_size_policy
            )
        return self._strategies[kind]

    def run_strategy(self, kind: AllocationStrategy) -> StrategyResult:
        """Replay every request against a freshly rebuilt pool using ``kind``."""
        strategy = self._get_strategy(kind)

        self._free_list.rebuild(self._block_sizes)
        strategy.reset()

        total_bytes = 0
        failed_bytes = 0
        failed_requests = 0
        attempt = strategy.attempt

        logger.debug("Running %s over %d blocks and %d requests",
                     kind.label, len(self._free_list), len(self._requests))

        # only the replay loop is timed, not the rebuild
        with self._profiler.profile_operation(kind.label) as profile:
            for size in self._requests:
                total_bytes += size
                if not attempt(ByteSize(size)):
                    failed_bytes += size
                    failed_requests += 1

        result = StrategyResult(
            strategy=kind,
            duration_seconds=profile.duration,
            fragmentation=fragmentation(self._free_list),
            failed_bytes=ByteSize(failed_bytes),
            total_bytes=ByteSize(total_bytes),
            failed_requests=failed_requests,
            request_count=len(self._requests),
            remaining_blocks=self._free_list.sizes(),
            memory_delta=profile.memory_delta
        )

        logger.info("%s: %.6fs, fragmentation %.2f%%, %d bytes failed (%.2f%%)",
                    result.name, result.duration_seconds, result.fragmentation_percent,
                    result.failed_bytes, result.failed_percent)
        return result

    def iter_results(self) -> Iterator[StrategyResult]:
        for kind in self._config.strategies:
            yield self.run_strategy(kind)

    def run_all(self) -> List[StrategyResult]:
        return list(self.iter_results())
