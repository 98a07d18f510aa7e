import json
import logging
import sys

from friendbook.core.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("friendbook.api", logging.WARNING, __file__, 1, "Friend %s gone", (7,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_context() -> None:
    payload = json.loads(JSONFormatter().format(_record(path="/api/friends/7", friend_id=7, unrelated="x")))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "friendbook.api"
    assert payload["message"] == "Friend 7 gone"
    assert payload["path"] == "/api/friends/7"
    assert payload["friend_id"] == 7
    assert "unrelated" not in payload
    assert "exception" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("friendbook", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    payload = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_setup_logging_replaces_its_own_handler() -> None:
    root = logging.getLogger()
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        root.removeHandler(second)
        root.setLevel(logging.WARNING)
