# tests/test_logging_config.py

import json
import logging

from core.logging_config import StructuredJsonFormatter, get_logger, setup_logging


def make_record(**extra):
    record = logging.LogRecord(
        name="app.store",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Student created.",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_one_json_object():
    record = make_record(context={"student_id": "s000002"}, channel="store")

    entry = json.loads(StructuredJsonFormatter().format(record))

    assert entry["level"] == "WARNING"
    assert entry["message"] == "Student created."
    assert entry["channel"] == "store"
    assert entry["context"] == {"student_id": "s000002"}
    assert entry["timestamp"].endswith("Z")
    assert "exception" not in entry


def test_formatter_falls_back_to_logger_name():
    entry = json.loads(StructuredJsonFormatter().format(make_record()))

    assert entry["channel"] == "store"
    assert entry["context"] == {}


def test_setup_logging_reads_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    app_logger = setup_logging()

    try:
        assert app_logger.level == logging.DEBUG
        assert len(app_logger.handlers) == 1
        assert get_logger("store").level == logging.DEBUG

        setup_logging("error")
        assert len(app_logger.handlers) == 1
        assert app_logger.level == logging.ERROR
    finally:
        app_logger.handlers = []
        app_logger.setLevel(logging.NOTSET)
        for channel in ("store", "persistence", "cli"):
            get_logger(channel).setLevel(logging.NOTSET)
