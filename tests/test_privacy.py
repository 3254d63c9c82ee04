"""
Tests for privacy markers, redaction and the logging filter.
"""

import io
import logging

import pytest

import privlog
from privlog import PrivacyFilter, get_logger, private, public
from privlog.privacy import REDACTED, hash_value, render


@pytest.mark.parametrize("value, expected", [
    ("user@example.com", REDACTED),
    (b"raw", REDACTED),
    (["a", "b"], REDACTED),
    (42, 42),
    (3.5, 3.5),
    (True, True),
    (None, None),
])
def test_default_rule(value, expected):
    assert render(value) == expected


def test_explicit_markers_override_default():
    assert render(public("visible")) == "visible"
    assert render(private(42)) == REDACTED


def test_reveal_shows_private_values():
    assert render(private("secret"), reveal=True) == "secret"
    assert render("secret", reveal=True) == "secret"


def test_hash_mask_is_stable_and_hides_value():
    first = render(private("password123", mask="hash"))
    second = render(private("password123", mask="hash"))
    other = render(private("password124", mask="hash"))

    assert first == second == f"<mask.hash: '{hash_value('password123')}'>"
    assert first != other
    assert "password123" not in first


def test_unknown_mask_rejected():
    with pytest.raises(ValueError):
        private("x", mask="crc")


def test_tagged_value_str_is_redacted():
    assert str(private("secret")) == REDACTED
    assert f"{private('secret')}" == REDACTED


def test_logger_redacts_private_arguments(log_stream):
    get_logger("app").info("email=%s id=%d name=%s", "a@b.c", 7, public("demo"))
    line = log_stream.getvalue().strip()
    assert line.endswith("email=<private> id=7 name=demo")


def test_logger_redacts_mapping_arguments(log_stream):
    get_logger("app").info("user=%(user)s count=%(count)d", {"user": "bob", "count": 2})
    assert log_stream.getvalue().strip().endswith("user=<private> count=2")


def test_configured_reveal_shows_values(log_stream):
    privlog.configure(reveal_private=True)
    get_logger("app").info("email=%s", private("a@b.c"))
    assert "email=a@b.c" in log_stream.getvalue()


def test_handler_level_reveal_overrides_config():
    stream = io.StringIO()
    privlog.setup_logging(stream=stream, reveal_private=True)
    get_logger("app").info("email=%s", "a@b.c")
    assert "email=a@b.c" in stream.getvalue()


def test_filter_redacts_each_record_once():
    record = logging.LogRecord("x.app", logging.INFO, __file__, 1, "%s", (private("v", mask="hash"),), None)
    log_filter = PrivacyFilter()

    assert log_filter.filter(record)
    first = record.args
    assert log_filter.filter(record)
    assert record.args == first
    assert record.getMessage() == f"<mask.hash: '{hash_value('v')}'>"


def test_filter_leaves_records_without_args():
    record = logging.LogRecord("x.app", logging.INFO, __file__, 1, "plain", None, None)
    assert PrivacyFilter().filter(record)
    assert record.getMessage() == "plain"


@pytest.mark.parametrize("msg, args, expected", [
    ("code=%d", (private(500),), "code=<private>"),
    ("ratio=%.2f done=%d%%", (private(0.25), 3), "ratio=<private> done=3%"),
    ("[%5d] %s", (private(7), "name"), "[<private>] <private>"),
    ("id=%-12d|", (private(42),), "id=<private>   |"),
    ("%*d items", (4, private(12)), "<private> items"),
])
def test_redacted_numbers_keep_the_record(log_stream, msg, args, expected):
    get_logger("network").info(msg, *args)
    assert log_stream.getvalue().strip().endswith(f"[network] INFO {expected}")


def test_redacted_mapping_numbers_keep_the_record(log_stream):
    get_logger("app").info("user=%(user)s pin=%(pin)04d n=%(n)d",
                           {"user": "bob", "pin": private(1234), "n": 5})
    assert log_stream.getvalue().strip().endswith("user=<private> pin=<private> n=5")


def test_hash_masked_number_under_float_conversion(log_stream):
    get_logger("app").info("balance=%.2f", private(10.5, mask="hash"))
    assert f"balance=<mask.hash: '{hash_value(10.5)}'>" in log_stream.getvalue()


def test_revealed_numbers_keep_their_conversion(log_stream):
    privlog.configure(reveal_private=True)
    get_logger("app").info("ratio=%.2f", private(0.256))
    assert log_stream.getvalue().strip().endswith("ratio=0.26")
