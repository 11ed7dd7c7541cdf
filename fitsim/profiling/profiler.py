"""
Replay timing for FitSim.

Times one strategy run with a monotonic clock and, when enabled, samples
the resident set size before and after the run.
"""

from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import psutil


@dataclass
class OperationProfile:
    operation_name: str
    start_time: float
    duration: float = 0.0
    memory_before: int = 0
    memory_after: int = 0

    @property
    def memory_delta(self) -> int:
        return self.memory_after - self.memory_before


class PerformanceProfiler:
    """Monotonic timer for replay loops with optional RSS sampling."""

    __slots__ = ('_process',)

    def __init__(self, enable_memory_tracking: bool = False):
        self._process: Optional[psutil.Process] = psutil.Process() if enable_memory_tracking else None

    @contextmanager
    def profile_operation(self, operation_name: str) -> Iterator[OperationProfile]:
        """Time the enclosed block; ``duration`` is filled in on exit."""
        profile = OperationProfile(
            operation_name=operation_name,
            start_time=0.0,
            memory_before=self._get_memory_usage()
        )
        profile.start_time = time.perf_counter()

        try:
            yield profile
        finally:
            profile.duration = time.perf_counter() - profile.start_time
            profile.memory_after = self._get_memory_usage()

    def _get_memory_usage(self) -> int:
        if self._process is None:
            return 0
        return self._process.memory_info().rss

    @property
    def is_memory_tracking_enabled(self) -> bool:
        return self._process is not None
