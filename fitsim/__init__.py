"""
FitSim - Free-List Placement Strategy Simulator

Models a pool of free memory as an ordered list of block sizes and replays
a sequence of allocation requests against it with first-fit, next-fit,
best-fit, worst-fit and random-fit placement.

Key Features:
- Shared free list with a single shrink-or-remove operation
- Five interchangeable placement strategies
- External fragmentation metric
- Isolated per-strategy benchmark runs with monotonic timing
- Text and JSON reports
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

# Core components
from .core.harness import BenchmarkHarness
from .core.registry import create_rng, create_strategy, parse_strategy
from .factory import (
    create_harness,
    create_seeded_harness,
    create_deterministic_harness
)

# Free list and strategies
from .memory import (
    FreeList,
    PlacementStrategy,
    FirstFitStrategy,
    NextFitStrategy,
    BestFitStrategy,
    WorstFitStrategy,
    RandomFitStrategy,
    fragmentation
)

# Codecs
from .codecs.sizes import decode_sizes, encode_sizes, load_sizes

# Profiling
from .profiling.profiler import PerformanceProfiler

# Types
from .types.descriptors import SimulationConfig, StrategyResult
from .types.enums import AllocationStrategy, ZeroSizePolicy, OutputFormat
from .types.protocols import IPlacementStrategy

# Exceptions
from .exceptions import (
    FitSimError,
    ConfigurationError,
    InvalidBlockSize,
    AllocationError,
    SizeFileError
)

# Public API
__all__ = [
    # Core components
    "BenchmarkHarness",
    "create_rng",
    "create_strategy",
    "parse_strategy",
    "create_harness",
    "create_seeded_harness",
    "create_deterministic_harness",

    # Free list and strategies
    "FreeList",
    "PlacementStrategy",
    "FirstFitStrategy",
    "NextFitStrategy",
    "BestFitStrategy",
    "WorstFitStrategy",
    "RandomFitStrategy",
    "fragmentation",

    # Codecs
    "decode_sizes",
    "encode_sizes",
    "load_sizes",

    # Profiling
    "PerformanceProfiler",

    # Types
    "SimulationConfig",
    "StrategyResult",
    "AllocationStrategy",
    "ZeroSizePolicy",
    "OutputFormat",
    "IPlacementStrategy",

    # Exceptions
    "FitSimError",
    "ConfigurationError",
    "InvalidBlockSize",
    "AllocationError",
    "SizeFileError",
]

# Version info
VERSION_INFO = tuple(map(int, __version__.split('.')))

def get_version() -> str:
    """Get the current version string."""
    return __version__

def get_version_info() -> tuple[int, ...]:
    """Get version as tuple of integers."""
    return VERSION_INFO
