"""
Benchmark harness for logging operations.

A :class:`Trial` describes what to run: an operation called as
``operation(i, payload)`` for every iteration index ``i`` and every payload
string, either sequentially or fanned out over a thread pool. Running a
trial yields a :class:`Measurement` or raises; a trial that did not
complete every invocation never produces a Measurement.
"""

import enum
import gc
import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, asdict, replace
from typing import Callable, Optional, Sequence, Tuple

from .errors import HarnessError, InvalidTrial, MemoryUnavailable, OperationFailed
from .samplers import PsutilMemorySampler

logger = logging.getLogger(__name__)

Operation = Callable[[int, str], object]


class ExecutionMode(str, enum.Enum):
    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class Trial:
    """One parameterized benchmark request."""
    label: str
    iteration_count: int
    payloads: Tuple[str, ...]
    mode: ExecutionMode = ExecutionMode.SEQUENTIAL

    def __post_init__(self):
        # A bare string is kept as is so validate() can reject it
        if not isinstance(self.payloads, (str, bytes)):
            object.__setattr__(self, "payloads", tuple(self.payloads))
        try:
            object.__setattr__(self, "mode", ExecutionMode(self.mode))
        except ValueError as e:
            raise InvalidTrial(f"Unknown execution mode: {self.mode!r}") from e

    @property
    def invocations(self) -> int:
        """Number of operation calls one run makes."""
        return self.iteration_count * len(self.payloads)

    def validate(self) -> "Trial":
        """
        Check the trial before any measurement begins.

        Raises:
            InvalidTrial: non-positive iteration count, empty payload set,
                or payloads that are not strings.
        """
        count = self.iteration_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidTrial(f"iteration_count must be an int, got {count!r}")
        if count <= 0:
            raise InvalidTrial(f"iteration_count must be positive, got {count}")
        if isinstance(self.payloads, (str, bytes)):
            raise InvalidTrial("payloads must be a sequence of strings, not a single string")
        if not self.payloads:
            raise InvalidTrial(f"Trial '{self.label}' has an empty payload set")
        for payload in self.payloads:
            if not isinstance(payload, str):
                raise InvalidTrial(f"payloads must be strings, got {type(payload).__name__}")
        return self


@dataclass(frozen=True)
class Measurement:
    """Timing (and optionally memory) result of running a Trial."""
    label: str
    mode: ExecutionMode
    elapsed: float
    iterations: int
    invocations: int
    memory_delta: Optional[int] = None  # signed bytes, after minus before

    @property
    def time_per_invocation(self) -> float:
        return self.elapsed / self.invocations

    def with_memory(self, memory_delta: int) -> "Measurement":
        return replace(self, memory_delta=memory_delta)

    def to_dict(self):
        result = asdict(self)
        result['mode'] = self.mode.value
        return result

    def __str__(self):
        memory = "" if self.memory_delta is None else f", memory={self.memory_delta / 1024:+.1f}KB"
        return (f"Measurement({self.label}, {self.mode.value}, "
                f"elapsed={self.elapsed:.6f}s, invocations={self.invocations}{memory})")


class BenchmarkHarness:
    """Runs trials and reports Measurements."""

    def __init__(self, memory_sampler=None, max_workers: Optional[int] = None):
        """
        Args:
            memory_sampler: Object with a ``sample() -> int`` method returning
                resident bytes. Defaults to a psutil-based sampler.
            max_workers: Thread pool size for parallel trials; the
                ThreadPoolExecutor default when None.
        """
        if max_workers is not None and max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self.memory_sampler = memory_sampler if memory_sampler is not None else PsutilMemorySampler()
        self.max_workers = max_workers

    def run(self, trial: Trial, operation: Operation) -> Measurement:
        """Run a trial in the mode it asks for."""
        if trial.mode is ExecutionMode.PARALLEL:
            return self.run_parallel(trial, operation)
        return self.run_sequential(trial, operation)

    def run_sequential(self, trial: Trial, operation: Operation) -> Measurement:
        """
        Call ``operation(i, payload)`` for every index and payload in order.

        Raises:
            InvalidTrial: before the first call if the trial is invalid.
            OperationFailed: on the first failing call; the trial is aborted.
        """
        trial.validate()
        _check_operation(operation)
        logger.debug("Running trial '%s' sequentially: %d x %d",
                     trial.label, trial.iteration_count, len(trial.payloads))

        completed = 0
        start = time.perf_counter()
        for i in range(trial.iteration_count):
            for payload in trial.payloads:
                try:
                    operation(i, payload)
                except Exception as e:
                    raise OperationFailed(trial.label, i, payload, e) from e
                completed += 1
        elapsed = time.perf_counter() - start

        return self._measurement(trial, ExecutionMode.SEQUENTIAL, elapsed, completed)

    def run_parallel(self, trial: Trial, operation: Operation) -> Measurement:
        """
        Fan out one task per iteration index and join them all.

        Payloads within one index run in order; indices run in no particular
        order. Every task is waited for even after a failure.

        Raises:
            InvalidTrial: before the first call if the trial is invalid.
            OperationFailed: for the lowest failing index, with every
                failure listed in ``failures``.
        """
        trial.validate()
        _check_operation(operation)
        logger.debug("Running trial '%s' in parallel: %d x %d",
                     trial.label, trial.iteration_count, len(trial.payloads))

        def run_index(i):
            done = 0
            for payload in trial.payloads:
                try:
                    operation(i, payload)
                except Exception as e:
                    raise OperationFailed(trial.label, i, payload, e) from e
                done += 1
            return done

        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(run_index, i) for i in range(trial.iteration_count)]
            wait(futures)
        elapsed = time.perf_counter() - start

        completed = 0
        failures = []
        for future in futures:
            error = future.exception()
            if error is None:
                completed += future.result()
            elif isinstance(error, OperationFailed):
                failures.append(error)
            else:
                raise error

        if failures:
            first = failures[0]
            raise OperationFailed(
                trial.label, first.iteration, first.payload, first.error,
                failures=[(f.iteration, f.payload, f.error) for f in failures]
            ) from first.error

        return self._measurement(trial, ExecutionMode.PARALLEL, elapsed, completed)

    def measure_memory(self, block: Callable[[], object]) -> int:
        """
        Resident memory delta, in bytes, caused by running ``block``.

        The result is signed: memory reclaimed during the block makes it
        negative.

        Raises:
            MemoryUnavailable: if either sample fails.
        """
        if not callable(block):
            raise TypeError(f"block must be callable, got {type(block).__name__}")
        gc.collect()
        before = self.memory_sampler.sample()
        block()
        after = self.memory_sampler.sample()
        return after - before

    def profile_memory(self, trial: Trial, operation: Operation) -> Measurement:
        """Run a trial sequentially inside :meth:`measure_memory`."""
        trial.validate()
        measurements = []
        delta = self.measure_memory(lambda: measurements.append(self.run_sequential(trial, operation)))
        return measurements[0].with_memory(delta)

    @staticmethod
    def _measurement(trial, mode, elapsed, completed):
        if completed != trial.invocations:
            raise HarnessError(
                f"Trial '{trial.label}' completed {completed} of {trial.invocations} invocations"
            )
        logger.debug("Trial '%s' finished in %.6fs", trial.label, elapsed)
        return Measurement(
            label=trial.label,
            mode=mode,
            elapsed=elapsed,
            iterations=trial.iteration_count,
            invocations=completed,
        )


def make_trial(label: str, iteration_count: int, payloads: Sequence[str],
               mode=ExecutionMode.SEQUENTIAL) -> Trial:
    """Build and validate a Trial."""
    return Trial(label, iteration_count, payloads, mode).validate()


def _check_operation(operation):
    if not callable(operation):
        raise TypeError(f"operation must be callable, got {type(operation).__name__}")


__all__ = [
    "ExecutionMode",
    "Trial",
    "Measurement",
    "BenchmarkHarness",
    "make_trial",
    "HarnessError",
    "InvalidTrial",
    "OperationFailed",
    "MemoryUnavailable",
]
