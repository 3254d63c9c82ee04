"""
Structured formatter for privlog records.
"""

import json
import logging

from .config import FORMATS


class StructuredFormatter(logging.Formatter):
    """
    Render records as text lines or as one JSON object per line.

    Text lines look like::

        2025-01-11 10:15:02.123 com.example.privlog[network] INFO Request started
    """

    default_msec_format = "%s.%03d"

    def __init__(self, fmt_style="text", datefmt=None):
        if fmt_style not in FORMATS:
            raise ValueError(f"fmt_style must be one of {FORMATS}, got {fmt_style!r}")
        super().__init__(datefmt=datefmt)
        self.fmt_style = fmt_style

    @staticmethod
    def _origin(record):
        subsystem = getattr(record, "subsystem", None)
        category = getattr(record, "category", None)
        if subsystem is None or category is None:
            head, _, tail = record.name.rpartition(".")
            subsystem = subsystem or head or record.name
            category = category or tail
        return subsystem, category

    def format(self, record):
        message = record.getMessage()
        timestamp = self.formatTime(record, self.datefmt)
        subsystem, category = self._origin(record)

        if self.fmt_style == "json":
            payload = {
                "timestamp": timestamp,
                "level": record.levelname,
                "subsystem": subsystem,
                "category": category,
                "thread": record.threadName,
                "message": message,
            }
            if record.exc_info:
                payload["exception"] = self.formatException(record.exc_info)
            return json.dumps(payload, ensure_ascii=False)

        line = f"{timestamp} {subsystem}[{category}] {record.levelname} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
