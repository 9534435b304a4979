"""
tests/test_logging_config.py
─────────────────────────────
Tests for the contextual log formatter.
"""
import logging

from src.logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("src.test", logging.INFO, __file__, 1, "scored", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestContextualFormatter:
    def test_appends_known_extras(self):
        formatter = ContextualFormatter(fmt="%(message)s")
        line = formatter.format(_record(health_score=80, status="GOOD"))
        assert line == "scored | health_score=80 status=GOOD"

    def test_plain_message_without_extras(self):
        assert ContextualFormatter(fmt="%(message)s").format(_record()) == "scored"

    def test_custom_keys_and_none_skipped(self):
        formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["machine", "fields"])
        line = formatter.format(_record(machine="M1", fields=None, status="GOOD"))
        assert line == "scored | machine=M1"

    def test_documented(self):
        assert ContextualFormatter.__doc__
