"""
Logging workloads measured by the benchmark suite.
"""

from .logging_benchmarks import (
    LoggingBenchmarks,
    make_print_operation,
    make_logger_operation,
    output_sink,
)

__all__ = [
    "LoggingBenchmarks",
    "make_print_operation",
    "make_logger_operation",
    "output_sink",
]
