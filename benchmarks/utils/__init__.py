"""
Benchmarking utilities for performance measurement and profiling.
"""

from .profiling import MemoryProfiler, ProfileResults, profile_memory_growth
from .timing import Timer, TimingResult, benchmark_function, benchmark_trial, compare_functions
from .comparison import BenchmarkComparator, ComparisonResult, plot_comparison

__all__ = [
    "Timer",
    "TimingResult",
    "benchmark_function",
    "benchmark_trial",
    "compare_functions",
    "MemoryProfiler",
    "ProfileResults",
    "profile_memory_growth",
    "BenchmarkComparator",
    "ComparisonResult",
    "plot_comparison",
]
