import io
import itertools
import os
import threading

# Headless plotting for the comparison and analysis tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

import privlog

PRIVLOG_ENV = ("PRIVLOG_LEVEL", "PRIVLOG_REVEAL_PRIVATE", "PRIVLOG_SUBSYSTEM")


class ScriptedSampler:
    """Memory sampler returning preset readings, in order."""

    def __init__(self, readings):
        self.readings = list(readings)
        self.calls = 0

    def sample(self):
        self.calls += 1
        return self.readings.pop(0)


class CountingSampler:
    """Memory sampler whose reading grows by ``step`` bytes per sample."""

    def __init__(self, start=10_000_000, step=4096):
        self._counter = itertools.count(start, step)

    def sample(self):
        return next(self._counter)


class RecordingOperation:
    """Thread-safe operation that remembers every call."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on or (lambda call_number, i, payload: False)
        self._lock = threading.Lock()

    def __call__(self, i, payload):
        with self._lock:
            self.calls.append((i, payload))
            call_number = len(self.calls)
        if self.fail_on(call_number, i, payload):
            raise RuntimeError(f"boom at {i}")


@pytest.fixture(autouse=True)
def clean_privlog(monkeypatch):
    for name in PRIVLOG_ENV:
        monkeypatch.delenv(name, raising=False)
    privlog.reset_config()
    yield
    privlog.teardown_logging()
    privlog.reset_config()


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    privlog.setup_logging(stream=stream)
    return stream
