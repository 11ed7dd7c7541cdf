from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..exceptions import ConfigurationError
from .aliases import ByteSize
from .enums import AllocationStrategy, ZeroSizePolicy

DEFAULT_STRATEGY_ORDER: Tuple[AllocationStrategy, ...] = (
    AllocationStrategy.FIRST_FIT,
    AllocationStrategy.NEXT_FIT,
    AllocationStrategy.BEST_FIT,
    AllocationStrategy.WORST_FIT,
    AllocationStrategy.RANDOM_FIT,
)


@dataclass(frozen=True)
class SimulationConfig:
    strategies: Tuple[AllocationStrategy, ...] = DEFAULT_STRATEGY_ORDER
    seed: Optional[int] = None
    zero_size_policy: ZeroSizePolicy = ZeroSizePolicy.SCAN
    track_memory: bool = False

    def __post_init__(self):
        if not self.strategies:
            raise ConfigurationError("At least one strategy must be selected")

        if len(set(self.strategies)) != len(self.strategies):
            raise ConfigurationError(f"Duplicate strategies: {[s.name for s in self.strategies]}")

        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"Seed must be non-negative: {self.seed}")

    def with_strategies(self, *strategies: AllocationStrategy) -> SimulationConfig:
        return self.__class__(
            strategies=tuple(strategies),
            seed=self.seed,
            zero_size_policy=self.zero_size_policy,
            track_memory=self.track_memory
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'strategies': [s.cli_name for s in self.strategies],
            'seed': self.seed,
            'zero_size_policy': self.zero_size_policy.name.lower(),
            'track_memory': self.track_memory
        }


@dataclass(frozen=True)
class StrategyResult:
    """Outcome of one strategy run over the full request sequence."""
    strategy: AllocationStrategy
    duration_seconds: float
    fragmentation: float
    failed_bytes: ByteSize
    total_bytes: ByteSize
    failed_requests: int = 0
    request_count: int = 0
    remaining_blocks: Tuple[int, ...] = field(default=(), repr=False)
    memory_delta: int = 0

    @property
    def name(self) -> str:
        return self.strategy.label

    @property
    def failed_ratio(self) -> float:
        if self.total_bytes == 0:
            return 0.0
        return self.failed_bytes / self.total_bytes

    @property
    def allocated_bytes(self) -> ByteSize:
        return ByteSize(self.total_bytes - self.failed_bytes)

    @property
    def fragmentation_percent(self) -> float:
        return self.fragmentation * 100

    @property
    def failed_percent(self) -> float:
        return self.failed_ratio * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            'strategy': self.strategy.cli_name,
            'name': self.name,
            'duration_seconds': self.duration_seconds,
            'fragmentation': self.fragmentation,
            'fragmentation_percent': self.fragmentation_percent,
            'failed_bytes': self.failed_bytes,
            'failed_ratio': self.failed_ratio,
            'failed_percent': self.failed_percent,
            'allocated_bytes': self.allocated_bytes,
            'total_bytes': self.total_bytes,
            'failed_requests': self.failed_requests,
            'request_count': self.request_count,
            'remaining_blocks': list(self.remaining_blocks),
            'memory_delta': self.memory_delta
        }

    def __str__(self) -> str:
        return (
            f"StrategyResult(strategy={self.name}, duration={self.duration_seconds:.6f}s, "
            f"fragmentation={self.fragmentation_percent:.2f}%, "
            f"failed={self.failed_bytes}/{self.total_bytes} bytes)"
        )
