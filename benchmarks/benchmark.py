#!/usr/bin/env python3
"""
privlog Main Benchmark Script

Compares bare print output against privlog's structured logging under
sequential and parallel trials, and samples the resident memory cost of
each. Results are saved as JSON for benchmarks/analyze.py.

Usage:
    python benchmarks/benchmark.py                      # Run full benchmark
    python benchmarks/benchmark.py --quick              # Quick test (fewer runs)
    python benchmarks/benchmark.py --mode sequential    # One execution mode only
    python benchmarks/benchmark.py --sink console       # Let output reach the terminal
"""

import os
import sys
import json
import time
import platform
import argparse
from pathlib import Path
from dataclasses import replace

# Add the repository root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from benchmarks.configs.benchmark_configs import get_default_config, get_quick_test_config, SINKS
from benchmarks.core.logging_benchmarks import LoggingBenchmarks
from benchmarks.errors import HarnessError
from benchmarks.harness import ExecutionMode


def run_logging_benchmark(config, quick_mode=False):
    """Run the print vs logger benchmark suite."""

    print("privlog Performance Benchmark")
    print("=" * 50)

    if quick_mode:
        print("🚀 Quick mode: Fewer runs for fast testing")
    else:
        print("🔬 Full mode: Comprehensive performance analysis")

    payload_lengths = [len(p) for p in config.payloads]
    print(f"Iterations: {config.iteration_count} x {len(config.payloads)} payloads "
          f"(lengths {payload_lengths})")
    print(f"Runs per trial: {config.num_runs} (warmup: {config.warmup_runs})")
    print(f"Modes: {', '.join(config.modes)}, sink: {config.sink}")
    print()

    results = {
        'metadata': {
            'timestamp': time.strftime("%Y-%m-%d %H:%M:%S"),
            'python_version': platform.python_version(),
            'platform': platform.platform(),
            'mode': 'quick' if quick_mode else 'full',
            'iteration_count': config.iteration_count,
            'payload_lengths': payload_lengths,
            'num_runs': config.num_runs,
            'warmup_runs': config.warmup_runs,
            'sink': config.sink,
        },
    }

    benchmarks = LoggingBenchmarks(config)
    comparison = benchmarks.run_full_benchmark_suite()
    results.update(comparison.to_dict())

    # === TIMING REPORT ===
    print("1️⃣  Timing")
    print("-" * 30)
    for mode, timings in comparison.timing.items():
        for name, timing in timings.items():
            per_call_us = timing.mean_time / (config.iteration_count * len(config.payloads)) * 1e6
            print(f"  {mode:10s} {name:7s}: {timing.mean_time * 1e3:9.3f}ms "
                  f"± {timing.std_time * 1e3:.3f}ms ({per_call_us:.2f}μs per call)")
        print(f"  {mode:10s} speedup: {comparison.speedup[mode]:.2f}x")

    # === MEMORY REPORT ===
    print(f"\n2️⃣  Memory")
    print("-" * 30)
    if not config.profile_memory:
        print("  Skipped")
    elif comparison.memory_error:
        print(f"  ⚠️  Memory unavailable: {comparison.memory_error}")
    else:
        for name, delta in comparison.memory_delta.items():
            print(f"  {name:7s}: {delta / 1024:+.1f} KB")

    # === SUMMARY ===
    summary = {}
    for mode, timings in comparison.timing.items():
        summary[mode] = {
            f'{name}_mean_ms': timing.mean_time * 1e3 for name, timing in timings.items()
        }
        summary[mode]['speedup'] = comparison.speedup[mode]
    results['summary'] = summary

    # === SAVE RESULTS ===
    if config.save_results:
        os.makedirs(config.output_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        mode_suffix = "_quick" if quick_mode else "_full"
        filename = f"privlog_benchmark{mode_suffix}_{timestamp}.json"
        filepath = os.path.join(config.output_dir, filename)

        with open(filepath, 'w') as f:
            json.dump(results, f, indent=2)

        results['metadata']['results_file'] = filepath
        print(f"\n💾 Results saved to: {filepath}")

        if config.plot_results:
            from benchmarks.utils.comparison import plot_comparison
            plot_path = os.path.join(config.output_dir, f"privlog_benchmark{mode_suffix}_{timestamp}.png")
            plot_comparison(comparison, plot_path)
            print(f"📊 Plots saved to: {plot_path}")

    return results


def build_config(args):
    """Build the benchmark configuration from parsed arguments."""
    config = get_quick_test_config() if args.quick else get_default_config()

    changes = {
        'output_dir': args.output_dir,
        'save_results': not args.no_save,
        'sink': args.sink,
    }
    if args.iterations is not None:
        changes['iteration_count'] = args.iterations
    if args.runs is not None:
        changes['num_runs'] = args.runs
    if args.mode != 'all':
        changes['modes'] = (args.mode,)
    if args.workers is not None:
        changes['max_workers'] = args.workers
    if args.no_memory:
        changes['profile_memory'] = False
    if args.no_plot:
        changes['plot_results'] = False

    return replace(config, **changes)


def build_parser():
    parser = argparse.ArgumentParser(description="privlog Performance Benchmark")
    parser.add_argument('--quick', action='store_true',
                       help='Quick mode: fewer runs for fast testing')
    parser.add_argument('--mode', default='all',
                       choices=['all'] + [mode.value for mode in ExecutionMode],
                       help='Execution mode to benchmark')
    parser.add_argument('--iterations', type=int, help='Iterations per trial')
    parser.add_argument('--runs', type=int, help='Measured runs per trial')
    parser.add_argument('--workers', type=int, help='Thread pool size for parallel trials')
    parser.add_argument('--sink', default='null', choices=SINKS,
                       help='Where print and logger output goes while measuring')
    parser.add_argument('--no-memory', action='store_true', help='Skip memory profiling')
    parser.add_argument('--no-plot', action='store_true', help='Skip plots')
    parser.add_argument('--no-save', action='store_true', help='Do not write a results file')
    parser.add_argument('--output-dir', default='benchmarks/results',
                       help='Directory for results and plots')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = build_config(args)
        run_logging_benchmark(config, quick_mode=args.quick)
        print("\n✅ Benchmark completed successfully!")

    except KeyboardInterrupt:
        print("\n❌ Benchmark interrupted by user")
        return 1
    except (HarnessError, ValueError) as e:
        print(f"\n❌ Benchmark failed: {type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
