"""
Errors raised by the benchmark harness.
"""


class HarnessError(Exception):
    """Base class for benchmark harness failures."""


class InvalidTrial(HarnessError, ValueError):
    """A trial was rejected before any measurement began."""


class MemoryUnavailable(HarnessError):
    """Resident memory could not be sampled on this host."""


class OperationFailed(HarnessError):
    """
    The measured operation raised, so the trial produced no Measurement.

    The original exception is available as ``error`` (and ``__cause__``).
    In parallel trials ``failures`` lists every failed ``(iteration,
    payload, error)`` triple, ordered by iteration.
    """

    def __init__(self, label, iteration, payload, error, failures=None):
        self.label = label
        self.iteration = iteration
        self.payload = payload
        self.error = error
        self.failures = list(failures) if failures else [(iteration, payload, error)]
        super().__init__(
            f"Operation failed in trial '{label}' at iteration {iteration}: {error!r}"
            + (f" ({len(self.failures)} failed invocations)" if len(self.failures) > 1 else "")
        )
