"""
Memory profiling utilities for logging benchmarks.
"""

import gc
import time
import psutil
from typing import Dict, Any, Callable, Optional
from dataclasses import dataclass
from contextlib import contextmanager

from ..errors import MemoryUnavailable
from ..samplers import PsutilMemorySampler

MB = 1024 * 1024


@dataclass
class MemorySnapshot:
    """Snapshot of memory usage at a point in time."""
    rss_mb: float  # Resident Set Size in MB
    vms_mb: float  # Virtual Memory Size in MB
    cpu_percent: float

    def __str__(self):
        return f"Memory(RSS: {self.rss_mb:.1f}MB, CPU: {self.cpu_percent:.1f}%)"


@dataclass
class ProfileResults:
    """Results from profiling a block of code."""
    execution_time: float
    memory_before: MemorySnapshot
    memory_after: MemorySnapshot
    memory_delta: Dict[str, float]

    def __str__(self):
        return (f"ProfileResults(\n"
                f"  Time: {self.execution_time:.6f}s\n"
                f"  Memory Delta: RSS={self.memory_delta['rss_mb']:+.3f}MB, "
                f"VMS={self.memory_delta['vms_mb']:+.3f}MB\n"
                f")")


class MemoryProfiler:
    """Memory and timing profiler for logging operations."""

    def __init__(self, pid: Optional[int] = None):
        self.pid = pid
        self.last_results: Optional[ProfileResults] = None

    def get_memory_snapshot(self) -> MemorySnapshot:
        """Get current memory usage snapshot."""
        try:
            process = psutil.Process(self.pid)
            memory_info = process.memory_info()
            cpu_percent = process.cpu_percent()
        except (psutil.Error, NotImplementedError, OSError) as e:
            raise MemoryUnavailable(f"Memory snapshot failed: {e}") from e

        return MemorySnapshot(
            rss_mb=memory_info.rss / MB,
            vms_mb=memory_info.vms / MB,
            cpu_percent=cpu_percent
        )

    @contextmanager
    def profile_context(self):
        """Context manager for profiling code blocks."""
        gc.collect()

        start_time = time.perf_counter()
        memory_before = self.get_memory_snapshot()

        yield self

        end_time = time.perf_counter()
        memory_after = self.get_memory_snapshot()

        self.last_results = ProfileResults(
            execution_time=end_time - start_time,
            memory_before=memory_before,
            memory_after=memory_after,
            memory_delta={
                'rss_mb': memory_after.rss_mb - memory_before.rss_mb,
                'vms_mb': memory_after.vms_mb - memory_before.vms_mb,
            }
        )

    def profile_function(self, func: Callable, *args, **kwargs):
        """Profile a single function call."""
        with self.profile_context():
            result = func(*args, **kwargs)
        return self.last_results, result


def profile_memory_growth(func: Callable, iterations: int = 100,
                          sampler: Optional[PsutilMemorySampler] = None) -> Dict[str, Any]:
    """
    Track resident memory across repeated calls to spot leaks.

    Args:
        func: Zero-argument function to call repeatedly
        iterations: Number of calls
        sampler: Memory sampler, psutil-based by default

    Returns:
        Dictionary with RSS (bytes) after every call and the overall growth
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    sampler = sampler or PsutilMemorySampler()
    initial = sampler.sample()
    memory_usage = []

    for i in range(iterations):
        func()
        memory_usage.append({'iteration': i, 'rss_bytes': sampler.sample()})

        # Force garbage collection every 10 iterations
        if i % 10 == 0:
            gc.collect()

    return {
        'memory_usage': memory_usage,
        'initial_memory': initial,
        'final_memory': memory_usage[-1]['rss_bytes'],
        'memory_growth': memory_usage[-1]['rss_bytes'] - initial
    }
