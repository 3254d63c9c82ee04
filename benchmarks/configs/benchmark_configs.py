"""
Configuration settings for logging benchmarks.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..harness import ExecutionMode, Trial

# The same three messages for every run: short, medium and very long
DEFAULT_PAYLOADS = (
    "Short message",
    "This is a slightly longer message used to compare the performance difference.",
    "This is a very long message. " * 100,
)

SINKS = ("null", "console")


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Trial settings
    iteration_count: int
    payloads: Tuple[str, ...] = DEFAULT_PAYLOADS
    modes: Tuple[str, ...] = (ExecutionMode.SEQUENTIAL.value, ExecutionMode.PARALLEL.value)

    # Repetition settings
    num_runs: int = 10
    warmup_runs: int = 1
    max_workers: Optional[int] = None

    # Output settings
    save_results: bool = True
    output_dir: str = "benchmarks/results"
    plot_results: bool = False
    sink: str = "null"

    # Advanced settings
    profile_memory: bool = True

    def __post_init__(self):
        self.payloads = tuple(self.payloads)
        self.modes = tuple(ExecutionMode(mode).value for mode in self.modes)
        if self.sink not in SINKS:
            raise ValueError(f"sink must be one of {SINKS}, got {self.sink!r}")
        if self.num_runs <= 0:
            raise ValueError(f"num_runs must be positive, got {self.num_runs}")
        if self.warmup_runs < 0:
            raise ValueError(f"warmup_runs must be >= 0, got {self.warmup_runs}")

    def to_trial(self, label: str, mode=ExecutionMode.SEQUENTIAL) -> Trial:
        """Build a validated Trial from these settings."""
        return Trial(label, self.iteration_count, self.payloads, mode).validate()


def get_default_config() -> BenchmarkConfig:
    """Get default benchmark configuration."""
    return BenchmarkConfig(
        iteration_count=1000,
        num_runs=10,
        warmup_runs=1,
        save_results=True,
        plot_results=True,
        profile_memory=True
    )


def get_quick_test_config() -> BenchmarkConfig:
    """Get configuration for quick testing during development."""
    return BenchmarkConfig(
        iteration_count=100,
        num_runs=3,
        warmup_runs=0,
        save_results=False,
        plot_results=False,
        profile_memory=True
    )


def get_comprehensive_config() -> BenchmarkConfig:
    """Get configuration for comprehensive benchmarking."""
    return BenchmarkConfig(
        iteration_count=5000,
        num_runs=20,
        warmup_runs=2,
        save_results=True,
        plot_results=True,
        profile_memory=True
    )
