"""Tests for app/core/logging.py - JSON formatting and env switches."""

import json
import logging

import pytest

from app.core.logging import JsonFormatter, build_logging_config, env_bool


@pytest.mark.parametrize(
    "raw,expected",
    [("true", True), ("1", True), (" Yes ", True), ("false", False), ("0", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("FEATURE_FLAG", raw)

    assert env_bool("FEATURE_FLAG", default=not expected) is expected


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("FEATURE_FLAG", raising=False)

    assert env_bool("FEATURE_FLAG", default=True) is True


def test_json_formatter_includes_domain_extras():
    record = logging.LogRecord(
        name="app.donation.service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Donation request %s -> %s",
        args=("pending", "done"),
        exc_info=None,
    )
    record.actor = "vic@x.com"
    record.donation_request_id = "b7a0"
    record.donation_status = "done"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.donation.service"
    assert payload["msg"] == "Donation request pending -> done"
    assert payload["actor"] == "vic@x.com"
    assert payload["donation_request_id"] == "b7a0"
    assert payload["donation_status"] == "done"
    assert "method" not in payload


def test_build_logging_config_quiets_uvicorn_access():
    config = build_logging_config("DEBUG", as_json=True, uvicorn_access=False)

    assert config["handlers"]["console"]["formatter"] == "json"
    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn"]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"


def test_build_logging_config_text_with_uvicorn_access():
    config = build_logging_config("INFO", as_json=False, uvicorn_access=True)

    assert config["handlers"]["console"]["formatter"] == "text"
    assert config["loggers"]["uvicorn.access"]["level"] == "INFO"
