"""
Precision timing utilities for benchmarking logging operations.
"""

import time
import numpy as np
from typing import Callable, Dict, Any, List, Optional, Tuple
from dataclasses import dataclass
from contextlib import contextmanager

from ..errors import InvalidTrial


@dataclass
class TimingResult:
    """Container for timing measurement results."""
    mean_time: float
    std_time: float
    min_time: float
    max_time: float
    num_runs: int
    total_time: float

    @classmethod
    def from_times(cls, times) -> "TimingResult":
        times = np.asarray(times, dtype=float)
        return cls(
            mean_time=float(np.mean(times)),
            std_time=float(np.std(times)),
            min_time=float(np.min(times)),
            max_time=float(np.max(times)),
            num_runs=int(times.size),
            total_time=float(np.sum(times))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mean_time': self.mean_time,
            'std_time': self.std_time,
            'min_time': self.min_time,
            'max_time': self.max_time,
            'num_runs': self.num_runs,
            'total_time': self.total_time,
        }

    def __str__(self):
        return (f"TimingResult(mean={self.mean_time:.6f}s, "
                f"std={self.std_time:.6f}s, runs={self.num_runs})")


class Timer:
    """High-precision timer for benchmarking operations."""

    def __init__(self):
        self.last_elapsed: Optional[float] = None

    @contextmanager
    def time_context(self):
        """Context manager for timing code blocks."""
        start_time = time.perf_counter()
        try:
            yield self
        finally:
            self.last_elapsed = time.perf_counter() - start_time

    def time_function(self, func: Callable, *args, **kwargs) -> Tuple[float, Any]:
        """Time a single function call."""
        with self.time_context():
            result = func(*args, **kwargs)
        return self.last_elapsed, result


def benchmark_function(
    func: Callable,
    args: tuple = (),
    kwargs: Optional[Dict[str, Any]] = None,
    num_runs: int = 100,
    warmup_runs: int = 10
) -> TimingResult:
    """
    Benchmark a function with multiple runs and statistical analysis.

    Args:
        func: Function to benchmark
        args: Arguments to pass to function
        kwargs: Keyword arguments to pass to function
        num_runs: Number of timing runs
        warmup_runs: Number of warmup runs (not timed)

    Returns:
        TimingResult with statistical timing information
    """
    if num_runs <= 0:
        raise ValueError(f"num_runs must be positive, got {num_runs}")
    if kwargs is None:
        kwargs = {}

    timer = Timer()

    # Warmup runs
    for _ in range(warmup_runs):
        func(*args, **kwargs)

    # Timed runs
    times = []
    for _ in range(num_runs):
        elapsed, _ = timer.time_function(func, *args, **kwargs)
        times.append(elapsed)

    return TimingResult.from_times(times)


def benchmark_trial(harness, trial, operation: Callable, num_runs: int = 10,
                    warmup_runs: int = 1):
    """
    Run a trial repeatedly through a harness.

    Each run is a full Trial execution, so a failure in any run aborts the
    whole benchmark.

    Args:
        harness: BenchmarkHarness executing the trial
        trial: Trial to run
        operation: Callable taking (iteration index, payload)
        num_runs: Number of measured runs
        warmup_runs: Number of unmeasured runs first

    Returns:
        (TimingResult over the measured runs, list of Measurements)
    """
    if isinstance(num_runs, bool) or not isinstance(num_runs, int) or num_runs <= 0:
        raise InvalidTrial(f"num_runs must be a positive int, got {num_runs!r}")
    if warmup_runs < 0:
        raise InvalidTrial(f"warmup_runs must be >= 0, got {warmup_runs}")
    trial.validate()

    for _ in range(warmup_runs):
        harness.run(trial, operation)

    measurements: List = [harness.run(trial, operation) for _ in range(num_runs)]
    timing = TimingResult.from_times([m.elapsed for m in measurements])
    return timing, measurements


def compare_functions(
    func1: Callable,
    func2: Callable,
    args: tuple = (),
    kwargs: Optional[Dict[str, Any]] = None,
    num_runs: int = 100,
    warmup_runs: int = 10
) -> Dict[str, Any]:
    """
    Compare timing of two functions.

    Returns:
        Dictionary with timing results for each function and the speedup
        of func2 over func1
    """
    result1 = benchmark_function(func1, args, kwargs, num_runs, warmup_runs)
    result2 = benchmark_function(func2, args, kwargs, num_runs, warmup_runs)

    return {
        'function1': result1,
        'function2': result2,
        'speedup': speedup(result1.mean_time, result2.mean_time)
    }


def speedup(baseline_time: float, candidate_time: float) -> float:
    """How many times faster the candidate is than the baseline."""
    if candidate_time <= 0:
        return float('inf')
    return baseline_time / candidate_time
