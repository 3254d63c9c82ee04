"""
privlog Benchmarking Suite

This module provides the benchmark harness used to compare bare print
output against privlog's structured, privacy-aware logging: repeatable
timed trials, parallel trials and resident memory sampling.
"""

__version__ = "0.1.0"

from .errors import HarnessError, InvalidTrial, OperationFailed, MemoryUnavailable
from .harness import BenchmarkHarness, ExecutionMode, Measurement, Trial, make_trial
from .samplers import PsutilMemorySampler, UnavailableMemorySampler
from .utils.timing import Timer, TimingResult, benchmark_function, benchmark_trial
from .utils.profiling import MemoryProfiler, ProfileResults
from .utils.comparison import BenchmarkComparator, ComparisonResult

__all__ = [
    # Harness
    "BenchmarkHarness",
    "ExecutionMode",
    "Measurement",
    "Trial",
    "make_trial",
    "PsutilMemorySampler",
    "UnavailableMemorySampler",

    # Errors
    "HarnessError",
    "InvalidTrial",
    "OperationFailed",
    "MemoryUnavailable",

    # Utilities
    "Timer",
    "TimingResult",
    "benchmark_function",
    "benchmark_trial",
    "MemoryProfiler",
    "ProfileResults",
    "BenchmarkComparator",
    "ComparisonResult",
]
