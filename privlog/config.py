"""
Configuration settings for privlog.
"""

import os
from box import Box as AD

from .levels import resolve_level

DEFAULT_SUBSYSTEM = "com.example.privlog"
FORMATS = ("text", "json")

_TRUTHY = ("1", "true", "yes", "on")


def _default_config():
    return AD(
        subsystem=os.environ.get("PRIVLOG_SUBSYSTEM", DEFAULT_SUBSYSTEM),
        level=os.environ.get("PRIVLOG_LEVEL", "DEBUG").upper(),
        fmt="text",
        # Private arguments are redacted unless this is set
        reveal_private=os.environ.get("PRIVLOG_REVEAL_PRIVATE", "").lower() in _TRUTHY,
        stream=None,
    )


_CONFIG = _default_config()


def get_config():
    """Get a copy of the current privlog configuration."""
    return AD(_CONFIG)


def configure(**overrides):
    """
    Update the privlog configuration.

    Parameters:
        **overrides: any of ``subsystem``, ``level``, ``fmt``,
            ``reveal_private`` and ``stream``.

    Example:
      import privlog
      privlog.configure(fmt="json", reveal_private=True)
    """
    unknown = set(overrides) - set(_CONFIG)
    if unknown:
        raise ValueError(f"Unknown privlog config keys: {sorted(unknown)}")

    if "subsystem" in overrides:
        subsystem = overrides["subsystem"]
        if not isinstance(subsystem, str) or not subsystem:
            raise ValueError(f"subsystem must be a non-empty string, got {subsystem!r}")
    if "level" in overrides:
        resolve_level(overrides["level"])
    if "fmt" in overrides and overrides["fmt"] not in FORMATS:
        raise ValueError(f"fmt must be one of {FORMATS}, got {overrides['fmt']!r}")
    if "reveal_private" in overrides and not isinstance(overrides["reveal_private"], bool):
        raise ValueError("reveal_private must be a bool")

    _CONFIG.update(overrides)
    return get_config()


def reset_config():
    """Restore the configuration read from the environment."""
    global _CONFIG
    _CONFIG = _default_config()
    return get_config()
