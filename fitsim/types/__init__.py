"""
Type definitions and protocols for FitSim.

This module provides the enums, descriptors and protocols shared by the
free list, the placement strategies and the benchmark harness.
"""

from .descriptors import DEFAULT_STRATEGY_ORDER, SimulationConfig, StrategyResult
from .enums import (
    AllocationStrategy,
    ZeroSizePolicy,
    OutputFormat
)
from .protocols import IPlacementStrategy
from .aliases import (
    ByteSize,
    BlockIndex
)

__all__ = [
    # Descriptors
    "DEFAULT_STRATEGY_ORDER",
    "SimulationConfig",
    "StrategyResult",

    # Enums
    "AllocationStrategy",
    "ZeroSizePolicy",
    "OutputFormat",

    # Protocols
    "IPlacementStrategy",

    # Type aliases
    "ByteSize",
    "BlockIndex",
]
