"""
Profiling components for FitSim.

This module provides the replay timer used by the benchmark harness.
"""

from .profiler import OperationProfile, PerformanceProfiler

__all__ = [
    "PerformanceProfiler",
    "OperationProfile",
]
