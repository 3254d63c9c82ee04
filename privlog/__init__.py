"""
privlog: structured, privacy-aware logging

A small logging facility built on the standard library's logging module.
Records carry a subsystem, a category and a level, and arguments are
redacted according to their privacy before any handler sees them.
"""

__version__ = "0.1.0"

from .levels import DEBUG, INFO, NOTICE, ERROR, FAULT
from .config import get_config, configure, reset_config
from .privacy import Privacy, PrivacyValue, PrivacyFilter, public, private
from .formatter import StructuredFormatter
from .logger import Category, PrivacyLogger, get_logger, setup_logging, teardown_logging
from .console import console_print

__all__ = [
    "__version__",

    # Levels
    "DEBUG",
    "INFO",
    "NOTICE",
    "ERROR",
    "FAULT",

    # Configuration
    "get_config",
    "configure",
    "reset_config",

    # Privacy
    "Privacy",
    "PrivacyValue",
    "PrivacyFilter",
    "public",
    "private",

    # Loggers
    "Category",
    "PrivacyLogger",
    "StructuredFormatter",
    "get_logger",
    "setup_logging",
    "teardown_logging",
    "console_print",
]
