"""
Category loggers for privlog.

Every logger belongs to a subsystem (a reverse-DNS style application id)
and a category such as ``network`` or ``ui``. Records are routed through
the stdlib logging tree under ``"<subsystem>.<category>"`` so that one
handler installed on the subsystem logger sees every category.
"""

import enum
import logging
import sys

from .config import get_config
from .formatter import StructuredFormatter
from .levels import FAULT, NOTICE, resolve_level
from .privacy import PrivacyFilter


class Category(str, enum.Enum):
    APP = "app"
    NETWORK = "network"
    UI = "ui"
    DATA_MODEL = "datamodel"


class PrivacyLogger(logging.LoggerAdapter):
    """Logger adapter that tags records with their subsystem and category."""

    def __init__(self, logger, subsystem, category):
        super().__init__(logger, {"subsystem": subsystem, "category": category})

    @property
    def subsystem(self):
        return self.extra["subsystem"]

    @property
    def category(self):
        return self.extra["category"]

    def process(self, msg, kwargs):
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs

    def notice(self, msg, *args, **kwargs):
        # One extra frame so records point at the caller
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        self.log(NOTICE, msg, *args, **kwargs)

    def fault(self, msg, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        self.log(FAULT, msg, *args, **kwargs)


def get_logger(category, subsystem=None):
    """
    Get the logger for a category.

    Parameters:
        category: Category or str
            One of the predefined categories or any non-empty name.
        subsystem: str, optional
            Defaults to the configured subsystem.
    """
    if isinstance(category, Category):
        category = category.value
    if not isinstance(category, str) or not category:
        raise ValueError(f"category must be a non-empty string, got {category!r}")
    subsystem = subsystem or get_config().subsystem
    return PrivacyLogger(logging.getLogger(f"{subsystem}.{category}"), subsystem, category)


def _installed_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "privlog_handler", False)]


def setup_logging(stream=None, fmt=None, level=None, reveal_private=None, subsystem=None):
    """
    Install the privlog handler on the subsystem logger.

    Calling it again replaces the previously installed handler, so the
    function is safe to call more than once.

    Returns:
        logging.Handler: the installed handler.
    """
    cfg = get_config()
    subsystem = subsystem or cfg.subsystem
    logger = logging.getLogger(subsystem)
    teardown_logging(subsystem)

    handler = logging.StreamHandler(stream or cfg.stream or sys.stderr)
    handler.privlog_handler = True
    handler.addFilter(PrivacyFilter(reveal_private=reveal_private))
    handler.setFormatter(StructuredFormatter(fmt or cfg.fmt))

    logger.addHandler(handler)
    logger.setLevel(resolve_level(level if level is not None else cfg.level))
    logger.propagate = False
    return handler


def teardown_logging(subsystem=None):
    """Remove the privlog handler from the subsystem logger."""
    logger = logging.getLogger(subsystem or get_config().subsystem)
    for handler in _installed_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
