"""
Tests for resident memory sampling and the psutil-based profiler.
"""

from collections import namedtuple

import psutil
import pytest

from benchmarks import MemoryUnavailable, PsutilMemorySampler, UnavailableMemorySampler
from benchmarks import samplers
from benchmarks.utils.profiling import MemoryProfiler, ProfileResults, profile_memory_growth
from conftest import ScriptedSampler

MemInfo = namedtuple("MemInfo", ["rss", "vms"])


class FakeProcess:
    def __init__(self, rss):
        self.rss = rss

    def memory_info(self):
        return MemInfo(rss=self.rss, vms=self.rss * 2)


def test_psutil_sampler_reads_current_process():
    assert PsutilMemorySampler().sample() > 0


@pytest.mark.parametrize("error", [
    psutil.AccessDenied(pid=1),
    psutil.NoSuchProcess(pid=1),
    NotImplementedError("no task info"),
])
def test_psutil_sampler_maps_errors_to_memory_unavailable(monkeypatch, error):
    def denied(pid=None):
        raise error

    monkeypatch.setattr(samplers.psutil, "Process", denied)

    with pytest.raises(MemoryUnavailable) as excinfo:
        PsutilMemorySampler().sample()
    assert excinfo.value.__cause__ is error


def test_psutil_sampler_treats_zero_reading_as_failure(monkeypatch):
    monkeypatch.setattr(samplers.psutil, "Process", lambda pid=None: FakeProcess(0))
    with pytest.raises(MemoryUnavailable):
        PsutilMemorySampler().sample()


def test_psutil_sampler_reuses_process_handle(monkeypatch):
    created = []

    def factory(pid=None):
        created.append(pid)
        return FakeProcess(4096)

    monkeypatch.setattr(samplers.psutil, "Process", factory)
    sampler = PsutilMemorySampler(pid=42)

    assert sampler.sample() == 4096
    assert sampler.sample() == 4096
    assert created == [42]


def test_unavailable_sampler_reports_reason():
    with pytest.raises(MemoryUnavailable, match="no introspection"):
        UnavailableMemorySampler("no introspection").sample()


def test_profile_context_records_results():
    profiler = MemoryProfiler()
    with profiler.profile_context():
        data = ["x" * 100 for _ in range(1000)]

    results = profiler.last_results
    assert isinstance(results, ProfileResults)
    assert results.execution_time >= 0
    assert set(results.memory_delta) == {"rss_mb", "vms_mb"}
    assert results.memory_before.rss_mb > 0
    assert len(data) == 1000
    assert "Memory Delta" in str(results)


def test_profile_function_returns_result():
    results, value = MemoryProfiler().profile_function(sum, range(10))
    assert value == 45
    assert results.execution_time >= 0


def test_profile_context_snapshot_failure_is_memory_unavailable(monkeypatch):
    def denied(pid=None):
        raise psutil.AccessDenied(pid=1)

    monkeypatch.setattr("benchmarks.utils.profiling.psutil.Process", denied)
    profiler = MemoryProfiler()
    with pytest.raises(MemoryUnavailable):
        with profiler.profile_context():
            pass
    assert profiler.last_results is None


def test_profile_memory_growth_tracks_every_call():
    calls = []
    sampler = ScriptedSampler([100, 110, 120, 130])

    report = profile_memory_growth(lambda: calls.append(1), iterations=3, sampler=sampler)

    assert len(calls) == 3
    assert [entry["rss_bytes"] for entry in report["memory_usage"]] == [110, 120, 130]
    assert report["initial_memory"] == 100
    assert report["memory_growth"] == 30


def test_profile_memory_growth_rejects_non_positive_iterations():
    with pytest.raises(ValueError):
        profile_memory_growth(lambda: None, iterations=0)
