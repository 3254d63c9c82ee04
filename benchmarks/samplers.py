"""
Process memory samplers.

A sampler has one method, ``sample()``, returning the resident set size
in bytes or raising MemoryUnavailable. Hosts without memory introspection
use UnavailableMemorySampler, which fails closed instead of reporting zero.
"""

import psutil
from typing import Optional

from .errors import MemoryUnavailable


class PsutilMemorySampler:
    """Samples the resident set size of a process through psutil."""

    def __init__(self, pid: Optional[int] = None):
        self.pid = pid
        self._process = None

    def sample(self) -> int:
        """
        Current resident set size in bytes.

        Raises:
            MemoryUnavailable: if the process cannot be inspected. A zero
                reading counts as a failed sample.
        """
        try:
            if self._process is None:
                self._process = psutil.Process(self.pid)
            rss = self._process.memory_info().rss
        except (psutil.Error, NotImplementedError, OSError) as e:
            raise MemoryUnavailable(f"Resident memory sampling failed: {e}") from e

        if not rss:
            raise MemoryUnavailable("Resident memory sampler returned no data")
        return int(rss)


class UnavailableMemorySampler:
    """Sampler for hosts without memory introspection."""

    def __init__(self, reason: str = "Memory introspection is not supported on this host"):
        self.reason = reason

    def sample(self) -> int:
        raise MemoryUnavailable(self.reason)
