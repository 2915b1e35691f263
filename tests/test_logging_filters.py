"""Tests for sensitive data filtering in logs."""

from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from client_helpers.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    SensitiveDataFilter,
    clear_request_id,
    set_request_id,
)


@pytest.fixture
def capture() -> tuple[logging.Logger, StringIO]:
    logger = logging.getLogger("test_redaction")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(SensitiveDataFilter())
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger, stream


def test_redacts_secrets_handled_by_helpers(capture) -> None:
    logger, stream = capture

    logger.info(
        "helper_event",
        extra={
            "password": "Sup3r$ecret",
            "card_number": "4532015112830366",
            "ssn": "123-45-6789",
            "email": "jane@example.com",
            "validator": "password",
        },
    )

    output = stream.getvalue()
    assert "Sup3r$ecret" not in output
    assert "4532015112830366" not in output
    assert "123-45-6789" not in output
    assert "jane@example.com" not in output
    assert "[REDACTED]" in output
    assert json.loads(output)["validator"] == "password"


def test_redacts_nested_dicts(capture) -> None:
    logger, stream = capture

    logger.info(
        "nested_event",
        extra={
            "payload": {"coupon": "SAVE-1234", "length": 8},
            "headers": {"Authorization": "Bearer abc"},
        },
    )

    data = json.loads(stream.getvalue())
    assert data["payload"] == {"coupon": "[REDACTED]", "length": 8}
    assert data["headers"] == {"Authorization": "[REDACTED]"}


def test_safe_fields_pass_through(capture) -> None:
    logger, stream = capture

    logger.info(
        "safe_event",
        extra={"route": "/v1/validate/email", "status": 200, "failed_rules": ["digit"]},
    )

    data = json.loads(stream.getvalue())
    assert data["message"] == "safe_event"
    assert data["level"] == "info"
    assert data["route"] == "/v1/validate/email"
    assert data["failed_rules"] == ["digit"]
    assert "[REDACTED]" not in stream.getvalue()


def test_request_id_from_context_is_attached(capture) -> None:
    logger, stream = capture

    set_request_id("req-42")
    try:
        logger.info("with_request")
    finally:
        clear_request_id()

    assert json.loads(stream.getvalue())["request_id"] == "req-42"
