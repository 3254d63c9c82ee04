"""
Configuration presets for benchmark runs.
"""

from .benchmark_configs import *

__all__ = [
    "BenchmarkConfig",
    "DEFAULT_PAYLOADS",
    "get_default_config",
    "get_quick_test_config",
    "get_comprehensive_config",
]
