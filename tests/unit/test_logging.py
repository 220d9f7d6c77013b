"""Tests for the log record filter used by setup_logging."""

import logging

from uploader.shared.telemetry import FileContextFilter
from uploader.shared.telemetry.logging import LOG_FORMAT


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("uploader.test", logging.INFO, __file__, 1, "msg", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_record_without_context_gets_placeholders() -> None:
    record = _record()
    assert FileContextFilter().filter(record) is True
    assert logging.Formatter(LOG_FORMAT).format(record).endswith("[- -] msg")


def test_file_id_preferred_over_file_name() -> None:
    record = _record(file_id="abc", file_name="a.png", operation="upload")
    FileContextFilter().filter(record)
    assert logging.Formatter(LOG_FORMAT).format(record).endswith("[upload abc] msg")


def test_file_name_used_when_no_id() -> None:
    record = _record(file_name="a.png", operation="upload")
    FileContextFilter().filter(record)
    assert record.file_ref == "a.png"
