"""
Core Tests

Tests for settings, error conversion and trace-id logging.

Run: pytest tutormatch/tests/test_core.py -v
"""

import logging

import httpx
import pytest


# ==================== Config ====================

def test_settings_defaults(monkeypatch):
    from tutormatch.core.config import settings

    monkeypatch.delenv("TUTOR_STORE_URL", raising=False)
    monkeypatch.delenv("SEARCH_RESULT_LIMIT", raising=False)

    assert settings.TUTOR_STORE_URL == "http://localhost:3001"
    assert settings.SEARCH_RESULT_LIMIT == 50


def test_settings_read_environment(monkeypatch):
    from tutormatch.core.config import settings, is_production

    monkeypatch.setenv("TUTOR_STORE_TIMEOUT", "2.5")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("APP_ENV", "prod")

    assert settings.TUTOR_STORE_TIMEOUT == 2.5
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]
    assert is_production()


# ==================== Errors ====================

def test_error_codes_and_payload():
    from tutormatch.core.errors import ValidationError, NotFoundError, AppError

    error = ValidationError("Bad cell", details={"minute": 1500})
    assert error.status_code == 400
    assert error.to_dict(trace_id="abc") == {
        "code": "validation_error",
        "message": "Bad cell",
        "details": {"minute": 1500},
        "trace_id": "abc",
    }

    assert NotFoundError().status_code == 404
    assert AppError("boom").code == "app"


def _status_error(status_code, **response_kwargs):
    request = httpx.Request("GET", "http://tutor-store.test/tutors")
    response = httpx.Response(status_code, request=request, **response_kwargs)
    return httpx.HTTPStatusError("error", request=request, response=response)


@pytest.mark.parametrize("status_code, error_name, expected_status", [
    (400, "ValidationError", 400),
    (422, "ValidationError", 400),
    (404, "NotFoundError", 404),
    (502, "ServiceUnavailableError", 503),
    (409, "AppError", 409),
])
def test_from_http_exception_maps_status(status_code, error_name, expected_status):
    from tutormatch.core.errors import from_http_exception

    error = from_http_exception(_status_error(status_code, json={"message": "store says no"}))

    assert type(error).__name__ == error_name
    assert error.status_code == expected_status


def test_from_http_exception_hides_backend_text():
    from tutormatch.core.errors import from_http_exception

    error = from_http_exception(_status_error(503, text="stack trace here"))
    assert error.message == "Service error"

    error = from_http_exception(_status_error(400, json={"detail": "weekday out of range"}))
    assert error.message == "weekday out of range"


def test_error_payload_omits_empty_fields():
    from tutormatch.core.errors import NotFoundError

    assert NotFoundError("No such tutor").to_dict() == {
        "code": "not_found",
        "message": "No such tutor",
    }


# ==================== Logging ====================

def test_trace_id_filter_tags_records():
    from tutormatch.core.logging import TraceIdFilter, set_trace_id, TRACE_ID

    token = TRACE_ID.set("-")
    try:
        set_trace_id("req-42")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        assert TraceIdFilter().filter(record) is True
        assert record.trace_id == "req-42"
    finally:
        TRACE_ID.reset(token)


def test_setup_logging_is_idempotent():
    from tutormatch.core.logging import setup_logging, reset_logging

    reset_logging()
    setup_logging("DEBUG")
    handlers = list(logging.getLogger().handlers)
    setup_logging("ERROR")

    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.DEBUG
