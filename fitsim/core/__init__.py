"""
Core components for FitSim.

This module provides the benchmark harness and strategy construction.
"""

from .harness import BenchmarkHarness
from .registry import create_rng, create_strategy, parse_strategy

__all__ = [
    "BenchmarkHarness",
    "create_rng",
    "create_strategy",
    "parse_strategy",
]
