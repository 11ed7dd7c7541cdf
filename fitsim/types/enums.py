"""
Enumeration types for FitSim.

This module defines the enumeration types used for strategy selection,
configuration and output formatting.
"""

from enum import IntEnum


class AllocationStrategy(IntEnum):
    """Placement strategies, in the order the benchmark runs them."""
    FIRST_FIT = 1
    NEXT_FIT = 2
    BEST_FIT = 3
    WORST_FIT = 4
    RANDOM_FIT = 5

    @property
    def label(self) -> str:
        return _STRATEGY_LABELS[self]

    @property
    def cli_name(self) -> str:
        return self.name.lower().replace('_', '-')

    @classmethod
    def from_name(cls, name: str) -> 'AllocationStrategy':
        key = name.strip().upper().replace('-', '_').replace(' ', '_')
        return cls[key]


_STRATEGY_LABELS = {
    AllocationStrategy.FIRST_FIT: "First Fit",
    AllocationStrategy.NEXT_FIT: "Next Fit",
    AllocationStrategy.BEST_FIT: "Best Fit",
    AllocationStrategy.WORST_FIT: "Worst Fit",
    AllocationStrategy.RANDOM_FIT: "Random Fit",
}


class ZeroSizePolicy(IntEnum):
    """How a request of size 0 is serviced."""
    SCAN = 0
    TRIVIAL = 1


class OutputFormat(IntEnum):
    """Report output formats."""
    TEXT = 0
    JSON = 1
