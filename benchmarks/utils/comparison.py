"""
Comparison utilities for print vs structured logging analysis.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, Any, Optional, Callable, Tuple
from dataclasses import dataclass, field

from .timing import TimingResult, benchmark_trial, speedup
from ..errors import MemoryUnavailable
from ..harness import BenchmarkHarness, ExecutionMode


@dataclass
class ComparisonResult:
    """Results from comparing two logging operations."""
    baseline: str
    candidate: str
    timing: Dict[str, Dict[str, TimingResult]]  # mode -> name -> timing
    speedup: Dict[str, float]                   # mode -> baseline / candidate
    memory_delta: Dict[str, Optional[int]] = field(default_factory=dict)  # bytes
    memory_error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'baseline': self.baseline,
            'candidate': self.candidate,
            'timing': {
                mode: {name: result.to_dict() for name, result in results.items()}
                for mode, results in self.timing.items()
            },
            'speedup': dict(self.speedup),
            'memory': {
                'delta_bytes': dict(self.memory_delta),
                'error': self.memory_error,
            },
        }

    def __str__(self):
        lines = [f"ComparisonResult({self.baseline} vs {self.candidate})"]
        for mode, factor in self.speedup.items():
            lines.append(f"  {mode}: {factor:.2f}x")
        if self.memory_error:
            lines.append(f"  memory: unavailable ({self.memory_error})")
        else:
            for name, delta in self.memory_delta.items():
                lines.append(f"  memory[{name}]: {delta / 1024:+.1f}KB")
        return "\n".join(lines)


class BenchmarkComparator:
    """Runs the same trials against a baseline and a candidate operation."""

    def __init__(self, harness: Optional[BenchmarkHarness] = None):
        self.harness = harness or BenchmarkHarness()

    def compare(
        self,
        config,
        baseline: Tuple[str, Callable],
        candidate: Tuple[str, Callable],
    ) -> ComparisonResult:
        """
        Compare two operations over every mode in ``config``.

        Args:
            config: BenchmarkConfig with iteration count, payloads, modes
                and repetition settings
            baseline: (name, operation) measured first
            candidate: (name, operation) compared against the baseline

        Returns:
            ComparisonResult; the first OperationFailed or InvalidTrial
            propagates instead.
        """
        (baseline_name, baseline_op), (candidate_name, candidate_op) = baseline, candidate
        if baseline_name == candidate_name:
            raise ValueError("baseline and candidate need distinct names")

        timing = {}
        speedups = {}
        for mode in config.modes:
            results = {}
            for name, operation in ((baseline_name, baseline_op), (candidate_name, candidate_op)):
                trial = config.to_trial(f"{name}_{mode}", ExecutionMode(mode))
                results[name], _ = benchmark_trial(
                    self.harness, trial, operation,
                    num_runs=config.num_runs, warmup_runs=config.warmup_runs
                )
            timing[mode] = results
            speedups[mode] = speedup(results[baseline_name].mean_time,
                                     results[candidate_name].mean_time)

        result = ComparisonResult(
            baseline=baseline_name,
            candidate=candidate_name,
            timing=timing,
            speedup=speedups,
        )

        if config.profile_memory:
            try:
                for name, operation in ((baseline_name, baseline_op), (candidate_name, candidate_op)):
                    trial = config.to_trial(f"{name}_memory")
                    result.memory_delta[name] = self.harness.profile_memory(trial, operation).memory_delta
            except MemoryUnavailable as e:
                # Reported as unavailable, never as a zero delta
                result.memory_delta = {}
                result.memory_error = str(e)

        return result


def plot_comparison(comparison_result: ComparisonResult, save_path: Optional[str] = None):
    """Plot comparison results."""
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))

    modes = list(comparison_result.timing.keys())
    names = [comparison_result.baseline, comparison_result.candidate]
    x = np.arange(len(modes))
    width = 0.35

    # Timing comparison
    for offset, name in zip((-width / 2, width / 2), names):
        means = [comparison_result.timing[mode][name].mean_time * 1e3 for mode in modes]
        stds = [comparison_result.timing[mode][name].std_time * 1e3 for mode in modes]
        axes[0].bar(x + offset, means, width, yerr=stds, label=name)
    axes[0].set_title('Execution Time Comparison')
    axes[0].set_ylabel('Time per run (ms)')
    axes[0].set_xticks(x)
    axes[0].set_xticklabels(modes)
    axes[0].legend()

    # Speedup plot
    axes[1].bar(modes, [comparison_result.speedup[mode] for mode in modes], color='green', alpha=0.8)
    axes[1].axhline(1.0, color='gray', linestyle='--', linewidth=1)
    axes[1].set_title(f'{comparison_result.candidate} speedup over {comparison_result.baseline}')
    axes[1].set_ylabel('Speedup (x)')

    # Memory usage comparison
    if comparison_result.memory_delta:
        deltas = [comparison_result.memory_delta[name] / 1024 for name in names]
        axes[2].bar(names, deltas, color=['tab:blue', 'tab:orange'])
        axes[2].axhline(0.0, color='gray', linewidth=1)
        axes[2].set_ylabel('RSS delta (KB)')
    else:
        message = comparison_result.memory_error or 'Memory not profiled'
        axes[2].text(0.5, 0.5, message, ha='center', va='center', wrap=True,
                     transform=axes[2].transAxes)
        axes[2].axis('off')
    axes[2].set_title('Memory Usage Comparison')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    return fig
