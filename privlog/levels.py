"""
Log levels used by privlog.

The stdlib levels are kept as they are. Two extra levels are registered:
NOTICE sits between INFO and WARNING, FAULT sits above CRITICAL.
"""

import logging

DEBUG = logging.DEBUG
INFO = logging.INFO
NOTICE = 25
ERROR = logging.ERROR
FAULT = 55

LEVELS = {
    "DEBUG": DEBUG,
    "INFO": INFO,
    "NOTICE": NOTICE,
    "ERROR": ERROR,
    "FAULT": FAULT,
}

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(FAULT, "FAULT")


def resolve_level(level):
    """
    Turn a level name or number into a numeric logging level.

    Parameters:
        level: int or str
            A numeric level, or a name registered with the logging module
            (case-insensitive).

    Returns:
        int: the numeric level.
    """
    if isinstance(level, bool):
        raise ValueError(f"level must be an int or a level name, got {level!r}")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if isinstance(value, int):
            return value
    raise ValueError(f"Unknown log level: {level!r}")
