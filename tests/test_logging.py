from __future__ import annotations

import json
import logging

from markmedium.utils.logging import JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.makeLogRecord({"name": "markmedium.test", "levelname": "INFO", "msg": "hello"})
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extras() -> None:
    data = json.loads(JsonFormatter().format(_record(event="medium.request", status=201)))

    assert data["message"] == "hello"
    assert data["logger"] == "markmedium.test"
    assert data["event"] == "medium.request"
    assert data["status"] == 201


def test_json_formatter_redacts_tokens() -> None:
    data = json.loads(JsonFormatter().format(_record(token="secret", Authorization="Bearer x")))

    assert data["token"] == "***"
    assert data["Authorization"] == "***"
