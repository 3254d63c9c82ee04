"""
End-to-end tests for the benchmark and analysis scripts.
"""

import glob
import json
import os

import matplotlib.pyplot as plt
import pytest

from benchmarks import analyze, benchmark

pytestmark = pytest.mark.benchmark


def run_quick(output_dir, *extra):
    argv = ["--quick", "--iterations", "3", "--runs", "1", "--no-plot",
            "--output-dir", str(output_dir), *extra]
    return benchmark.main(argv)


@pytest.fixture
def results_file(tmp_path):
    assert run_quick(tmp_path, "--no-memory") == 0
    files = glob.glob(os.path.join(str(tmp_path), "privlog_benchmark_quick_*.json"))
    assert len(files) == 1
    return files[0]


def test_benchmark_writes_results(results_file):
    with open(results_file) as f:
        results = json.load(f)

    assert results["baseline"] == "print"
    assert results["candidate"] == "logger"
    assert set(results["timing"]) == {"sequential", "parallel"}
    assert results["metadata"]["iteration_count"] == 3
    assert results["metadata"]["num_runs"] == 1
    assert results["memory"] == {"delta_bytes": {}, "error": None}
    assert results["summary"]["sequential"]["speedup"] == results["speedup"]["sequential"]


def test_benchmark_single_mode(tmp_path):
    assert run_quick(tmp_path, "--mode", "parallel", "--no-save") == 0
    assert os.listdir(str(tmp_path)) == []


def test_benchmark_rejects_bad_iteration_count(tmp_path, capsys):
    assert benchmark.main(["--quick", "--iterations", "0", "--output-dir", str(tmp_path)]) == 1
    assert "InvalidTrial" in capsys.readouterr().out
    assert os.listdir(str(tmp_path)) == []


def test_build_config_applies_flags(tmp_path):
    args = benchmark.build_parser().parse_args([
        "--quick", "--mode", "sequential", "--workers", "2", "--sink", "console",
        "--no-memory", "--output-dir", str(tmp_path),
    ])
    config = benchmark.build_config(args)

    assert config.modes == ("sequential",)
    assert config.max_workers == 2
    assert config.sink == "console"
    assert config.profile_memory is False
    assert config.output_dir == str(tmp_path)
    assert config.iteration_count == 100


def test_analyze_summary(results_file, capsys):
    assert analyze.main(["--file", results_file, "--summary"]) == 0
    out = capsys.readouterr().out
    assert "PRIVLOG BENCHMARK SUMMARY" in out
    assert "Not profiled" in out


def test_analyze_finds_latest(results_file, capsys):
    results_dir = os.path.dirname(results_file)
    assert analyze.main(["--results-dir", results_dir]) == 0
    assert os.path.basename(results_file) in capsys.readouterr().out


def test_analyze_without_results(tmp_path):
    assert analyze.main(["--results-dir", str(tmp_path)]) == 1


def test_analyze_plot(results_file, tmp_path):
    out_dir = tmp_path / "analysis"
    assert analyze.main(["--file", results_file, "--plot", "--output-dir", str(out_dir)]) == 0
    assert len(list(out_dir.glob("benchmark_plots_*.png"))) == 1


def test_create_plots_without_timing():
    assert analyze.create_plots({"timing": {}}) is None


def test_create_plots_closes_saved_figure(results_file, tmp_path):
    results = analyze.load_results(results_file)
    fig = analyze.create_plots(results, str(tmp_path / "plots.png"))

    assert (tmp_path / "plots.png").exists()
    assert fig.number not in plt.get_fignums()


def test_compare_results(tmp_path):
    def write(name, mean):
        results = {
            "metadata": {"timestamp": "2025-01-11 10:00:00"},
            "timing": {"sequential": {"print": {"mean_time": mean}}},
        }
        path = tmp_path / name
        path.write_text(json.dumps(results))
        return str(path)

    changes = analyze.compare_results(write("a.json", 0.010), write("b.json", 0.005))
    assert changes == {"sequential/print": pytest.approx(-50.0)}
