#!/usr/bin/env python3
"""
privlog Benchmark Analysis Tool

Analyze benchmark results and generate reports.

Usage:
    python benchmarks/analyze.py                    # Analyze latest results
    python benchmarks/analyze.py --summary          # Print text summary only
    python benchmarks/analyze.py --plot             # Generate plots
    python benchmarks/analyze.py --compare file1 file2  # Compare two result files
"""

import os
import sys
import json
import glob
import argparse
import matplotlib.pyplot as plt
import numpy as np


def find_latest_results(results_dir="benchmarks/results"):
    """Find the most recent benchmark results."""
    result_files = glob.glob(os.path.join(results_dir, "privlog_benchmark_*.json"))
    if not result_files:
        print("❌ No benchmark results found!")
        print("   Run: python benchmarks/benchmark.py")
        return None

    return max(result_files, key=os.path.getmtime)


def load_results(filepath):
    """Load benchmark results from JSON file."""
    with open(filepath, 'r') as f:
        return json.load(f)


def print_summary(results):
    """Print a text summary of benchmark results."""
    metadata = results['metadata']
    baseline, candidate = results['baseline'], results['candidate']

    print("\n" + "="*50)
    print("PRIVLOG BENCHMARK SUMMARY")
    print("="*50)

    print(f"Timestamp: {metadata['timestamp']}")
    print(f"Python: {metadata['python_version']}")
    print(f"Mode: {metadata['mode']}")
    print(f"Iterations: {metadata['iteration_count']} x {len(metadata['payload_lengths'])} payloads")
    print()

    print("PERFORMANCE METRICS:")
    print("-" * 30)
    for mode, timings in results['timing'].items():
        base = timings[baseline]['mean_time'] * 1e3
        cand = timings[candidate]['mean_time'] * 1e3
        print(f"{mode}: {baseline}={base:.3f}ms, {candidate}={cand:.3f}ms "
              f"({results['speedup'][mode]:.2f}x)")
    print()

    print("MEMORY:")
    print("-" * 30)
    memory = results['memory']
    if memory['error']:
        print(f"Unavailable: {memory['error']}")
    elif not memory['delta_bytes']:
        print("Not profiled")
    else:
        for name, delta in memory['delta_bytes'].items():
            print(f"{name}: {delta / 1024:+.1f} KB")

    print("="*50)


def create_plots(results, save_path=None):
    """Create performance visualization plots."""
    if not results.get('timing'):
        print("❌ No timing data found for plotting")
        return None

    baseline, candidate = results['baseline'], results['candidate']
    modes = list(results['timing'].keys())

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle('privlog Performance Analysis', fontsize=14)

    # Plot 1: mean time per mode with min/max range
    x = np.arange(len(modes))
    width = 0.35
    for offset, name in zip((-width/2, width/2), (baseline, candidate)):
        means = np.array([results['timing'][m][name]['mean_time'] for m in modes]) * 1e3
        mins = np.array([results['timing'][m][name]['min_time'] for m in modes]) * 1e3
        maxs = np.array([results['timing'][m][name]['max_time'] for m in modes]) * 1e3
        axes[0].bar(x + offset, means, width, yerr=[means - mins, maxs - means],
                    label=name, alpha=0.8)
    axes[0].set_xticks(x)
    axes[0].set_xticklabels(modes)
    axes[0].set_ylabel('Time per run (ms)')
    axes[0].set_title('Run Time by Mode')
    axes[0].legend()

    # Plot 2: speedup
    axes[1].bar(modes, [results['speedup'][m] for m in modes], alpha=0.8, color='green')
    axes[1].axhline(1.0, color='gray', linestyle='--', linewidth=1)
    axes[1].set_ylabel('Speedup (x)')
    axes[1].set_title(f'{candidate} vs {baseline}')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"📊 Plots saved to: {save_path}")
        plt.close(fig)

    return fig


def compare_results(file1, file2):
    """Compare two benchmark result files."""
    results1 = load_results(file1)
    results2 = load_results(file2)

    print("\n" + "="*50)
    print("BENCHMARK COMPARISON")
    print("="*50)

    print(f"File 1: {os.path.basename(file1)} ({results1['metadata']['timestamp']})")
    print(f"File 2: {os.path.basename(file2)} ({results2['metadata']['timestamp']})")
    print()

    print("PERFORMANCE COMPARISON:")
    print("-" * 30)

    changes = {}
    for mode, timings in results1['timing'].items():
        if mode not in results2['timing']:
            continue
        for name, timing in timings.items():
            other = results2['timing'][mode].get(name)
            if other is None:
                continue
            val1 = timing['mean_time'] * 1e3
            val2 = other['mean_time'] * 1e3
            if val1 <= 0 or val2 <= 0:
                continue

            speedup = val1 / val2
            change_pct = (val2 - val1) / val1 * 100
            changes[f'{mode}/{name}'] = change_pct

            print(f"{mode} {name}:")
            print(f"  File 1: {val1:.3f}ms")
            print(f"  File 2: {val2:.3f}ms")

            if speedup > 1.05:
                print(f"  🚀 {speedup:.2f}x speedup ({-change_pct:+.1f}%)")
            elif speedup < 0.95:
                print(f"  🐌 {1/speedup:.2f}x slower ({-change_pct:+.1f}%)")
            else:
                print(f"  ➡️  Similar performance ({-change_pct:+.1f}%)")
            print()

    print("="*50)
    return changes


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="privlog Benchmark Analysis")
    parser.add_argument('--file', help='Specific result file to analyze')
    parser.add_argument('--results-dir', default='benchmarks/results',
                       help='Directory searched for the latest results')
    parser.add_argument('--summary', action='store_true', help='Print summary only')
    parser.add_argument('--plot', action='store_true', help='Generate plots')
    parser.add_argument('--compare', nargs=2, metavar=('file1', 'file2'),
                       help='Compare two result files')
    parser.add_argument('--output-dir', default='benchmarks/analysis',
                       help='Output directory for plots')

    args = parser.parse_args(argv)

    if args.compare:
        compare_results(args.compare[0], args.compare[1])
        return 0

    results_file = args.file or find_latest_results(args.results_dir)
    if not results_file:
        return 1

    print(f"📁 Analyzing: {os.path.basename(results_file)}")
    results = load_results(results_file)

    if args.summary or not args.plot:
        print_summary(results)

    if args.plot:
        os.makedirs(args.output_dir, exist_ok=True)
        timestamp = results['metadata']['timestamp'].replace(':', '-').replace(' ', '_')
        plot_path = os.path.join(args.output_dir, f'benchmark_plots_{timestamp}.png')
        create_plots(results, plot_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
