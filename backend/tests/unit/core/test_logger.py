# tests/unit/core/test_logger.py
from __future__ import annotations

import json
import logging

from blog_api.core.logger import REQUEST_ID_HEADER, JSONFormatter, ensure_request_id


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("blog_api.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_one_object():
    line = JSONFormatter().format(_record(request_id="rid-1", status=200, ignored="nope"))
    payload = json.loads(line)

    assert payload["message"] == "hello x"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "rid-1"
    assert payload["status"] == 200
    assert "ignored" not in payload


def test_json_formatter_includes_traceback():
    try:
        raise ValueError("kaput")
    except ValueError:
        import sys

        record = logging.LogRecord(
            "blog_api.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: kaput" in payload["exc_info"]


def test_request_id_outside_request_is_fresh():
    assert ensure_request_id() != ensure_request_id()


def test_incoming_request_id_is_echoed(client):
    resp = client.get("/api/v1/health", headers={REQUEST_ID_HEADER: "trace-123"})
    assert resp.headers[REQUEST_ID_HEADER] == "trace-123"


def test_request_id_is_generated_per_request(client):
    first = client.get("/api/v1/health").headers[REQUEST_ID_HEADER]
    second = client.get("/api/v1/health").headers[REQUEST_ID_HEADER]
    assert first and second and first != second
