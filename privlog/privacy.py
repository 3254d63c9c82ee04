"""
Privacy markers and redaction for log arguments.

Arguments passed to a privlog logger are rendered according to their
privacy. Values wrapped with :func:`public` are always shown, values
wrapped with :func:`private` are replaced by ``<private>`` (or by a stable
hash when ``mask="hash"``). Unwrapped arguments follow the default rule:
numbers and booleans are public, everything else is private.
"""

import base64
import enum
import hashlib
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .config import get_config

REDACTED = "<private>"
MASKS = ("hash",)

_CONVERSION = re.compile(
    r"%(?:\((?P<key>[^)]*)\))?(?P<flags>[#0 +\-]*)(?P<width>\*|\d+)?(?:\.(?P<precision>\*|\d*))?"
    r"[hlL]?(?P<type>[diouxXeEfFgGcrsa%])"
)


class Privacy(enum.Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    AUTO = "auto"


@dataclass(frozen=True)
class PrivacyValue:
    """A log argument tagged with its privacy."""
    value: Any
    privacy: Privacy = Privacy.AUTO
    mask: Optional[str] = None

    def __str__(self):
        # Safe rendering if a tagged value is formatted outside a PrivacyFilter
        return render(self, reveal=False)


def public(value):
    """Mark a log argument as safe to show."""
    return PrivacyValue(value, Privacy.PUBLIC)


def private(value, mask=None):
    """
    Mark a log argument as private.

    Parameters:
        value: the argument to hide.
        mask: None to render ``<private>``, or ``"hash"`` to render a
            stable hash so equal values can still be correlated.
    """
    if mask is not None and mask not in MASKS:
        raise ValueError(f"mask must be one of {MASKS} or None, got {mask!r}")
    return PrivacyValue(value, Privacy.PRIVATE, mask)


def is_public_by_default(value):
    return value is None or isinstance(value, (bool, int, float))


def hash_value(value):
    digest = hashlib.sha256(str(value).encode("utf-8")).digest()
    return base64.b64encode(digest[:12]).decode("ascii")


def _redact(value, reveal):
    """Return ``(shown, redacted)`` for a single log argument."""
    mask = None
    if isinstance(value, PrivacyValue):
        privacy, mask, value = value.privacy, value.mask, value.value
    else:
        privacy = Privacy.AUTO

    if privacy is Privacy.AUTO:
        privacy = Privacy.PUBLIC if is_public_by_default(value) else Privacy.PRIVATE

    if reveal or privacy is Privacy.PUBLIC:
        return value, False
    if mask == "hash":
        return f"<mask.hash: '{hash_value(value)}'>", True
    return REDACTED, True


def render(value, reveal=False):
    """Return what a handler is allowed to see for ``value``."""
    return _redact(value, reveal)[0]


def _as_string_conversions(msg, redacted):
    """
    Rewrite the %-conversions of redacted arguments to ``%s``.

    ``redacted`` holds positional indexes for tuple arguments or keys for
    mapping arguments. Widths and left alignment are kept, precisions and conversion types are
    dropped so ``%d`` or ``%.2f`` can still render the redaction token.
    """
    position = 0

    def rewrite(match):
        nonlocal position
        if match.group("type") == "%":
            return match.group(0)
        key = match.group("key")
        width, precision = match.group("width"), match.group("precision")
        if key is None:
            # '*' widths and precisions consume an argument of their own
            position += (width == "*") + (precision == "*")
            slot = position
            position += 1
        else:
            slot = key
        if slot not in redacted:
            return match.group(0)
        spec = "%" + (f"({key})" if key is not None else "")
        spec += ("-" if "-" in match.group("flags") else "") + (width or "")
        if precision == "*":
            spec += ".*"
        return spec + "s"

    return _CONVERSION.sub(rewrite, msg)


class PrivacyFilter(logging.Filter):
    """
    Logging filter that redacts private arguments before formatting.

    Redaction happens once per record, so the filter can sit on several
    handlers without hashing an already redacted value.
    """

    def __init__(self, reveal_private=None, name=""):
        super().__init__(name)
        self.reveal_private = reveal_private

    def filter(self, record):
        if getattr(record, "privlog_redacted", False):
            return True

        reveal = self.reveal_private
        if reveal is None:
            reveal = get_config().reveal_private

        args = record.args
        if isinstance(args, Mapping):
            shown = {key: _redact(value, reveal) for key, value in args.items()}
            record.args = {key: value for key, (value, _) in shown.items()}
            redacted = {key for key, (_, hidden) in shown.items() if hidden}
        elif args:
            shown = [_redact(value, reveal) for value in args]
            record.args = tuple(value for value, _ in shown)
            redacted = {index for index, (_, hidden) in enumerate(shown) if hidden}
        else:
            redacted = None
        if redacted and isinstance(record.msg, str):
            record.msg = _as_string_conversions(record.msg, redacted)
        record.privlog_redacted = True
        return True
