"""
Logging workloads for the benchmark harness.
"""

import os
import contextlib
from typing import Optional

from privlog import get_logger, setup_logging, teardown_logging
from ..harness import BenchmarkHarness
from ..utils.comparison import BenchmarkComparator, ComparisonResult

BENCHMARK_CATEGORY = "PerformanceTest"


def make_print_operation(label: str = "Print test"):
    """Operation writing each payload with a bare print."""
    def print_operation(i, payload):
        print(f"[{i}] {label}: {payload}")
    return print_operation


def make_logger_operation(logger=None, label: str = "Logger test"):
    """Operation writing each payload through a privlog logger."""
    logger = logger or get_logger(BENCHMARK_CATEGORY)
    message = f"[%d] {label}: %s"

    def logger_operation(i, payload):
        logger.info(message, i, payload)
    return logger_operation


@contextlib.contextmanager
def output_sink(sink: str = "null", subsystem: Optional[str] = None):
    """
    Route print and privlog output for the duration of a benchmark.

    ``"null"`` sends both to os.devnull so the terminal does not dominate
    the measurement, ``"console"`` leaves stdout alone and logs to stderr.
    """
    if sink == "console":
        setup_logging(subsystem=subsystem)
        try:
            yield
        finally:
            teardown_logging(subsystem)
        return

    with open(os.devnull, "w") as devnull, contextlib.redirect_stdout(devnull):
        setup_logging(stream=devnull, subsystem=subsystem)
        try:
            yield
        finally:
            teardown_logging(subsystem)


class LoggingBenchmarks:
    """Benchmarks comparing print against privlog."""

    def __init__(self, config, harness: Optional[BenchmarkHarness] = None):
        self.config = config
        self.harness = harness or BenchmarkHarness(max_workers=config.max_workers)
        self.comparator = BenchmarkComparator(self.harness)
        self.logger = get_logger(BENCHMARK_CATEGORY)

    def operations(self):
        """(name, operation) pairs: baseline first, candidate second."""
        return (
            ("print", make_print_operation()),
            ("logger", make_logger_operation(self.logger)),
        )

    def run_full_benchmark_suite(self) -> ComparisonResult:
        baseline, candidate = self.operations()
        with output_sink(self.config.sink, subsystem=self.logger.subsystem):
            return self.comparator.compare(self.config, baseline, candidate)
