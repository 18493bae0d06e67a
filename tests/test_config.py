from __future__ import annotations

import json
import logging

import pytest
import structlog
from pydantic import ValidationError as SettingsError

from rulechain import String, check
from rulechain.core import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    schema_logger,
    unbind_context,
    validation_logger,
)
from rulechain.core.errors import ConfigurationError
from rulechain.core.config import Settings, get_settings
from rulechain.core.logging import _censor_sensitive_keys


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_JSON", "VALIDATION_MODE", "MAX_ERRORS", "REDACT_VALUES"):
            monkeypatch.delenv(f"RULECHAIN_{name}", raising=False)
        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "INFO"
        assert settings.VALIDATION_MODE == "fail_fast"
        assert settings.MAX_ERRORS == 50
        assert settings.REDACT_VALUES is False
        assert not settings.collects_all

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("RULECHAIN_VALIDATION_MODE", "collect_all")
        monkeypatch.setenv("RULECHAIN_MAX_ERRORS", "5")

        settings = get_settings()
        assert settings.collects_all
        assert settings.MAX_ERRORS == 5

    def test_unknown_mode_rejected(self, monkeypatch):
        monkeypatch.setenv("RULECHAIN_VALIDATION_MODE", "sometimes")

        with pytest.raises(SettingsError):
            Settings(_env_file=None)

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_model_config(self):
        assert Settings.model_config["env_prefix"] == "RULECHAIN_"
        assert Settings.model_config["extra"] == "ignore"


class TestLogging:

    def test_configure_logging_sets_library_logger(self):
        configure_logging(level="DEBUG", json_logs=True)

        logger = logging.getLogger("rulechain")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_configure_logging_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("RULECHAIN_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("RULECHAIN_LOG_JSON", "true")

        configure_logging()

        logger = logging.getLogger("rulechain")
        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_explicit_arguments_win_over_settings(self, monkeypatch):
        monkeypatch.setenv("RULECHAIN_LOG_JSON", "true")

        configure_logging(level="ERROR", json_logs=False)

        logger = logging.getLogger("rulechain")
        assert logger.level == logging.ERROR
        assert isinstance(logger.handlers[0].formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_lines_carry_bound_context(self, capsys):
        configure_logging(level="INFO", json_logs=True)
        bind_context(request_id="r-1")

        get_logger("rulechain.tests").info("schema_built", kind="string", token="t")

        line = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert line["event"] == "schema_built"
        assert line["request_id"] == "r-1"
        assert line["library"] == "rulechain"
        assert line["token"] == "[REDACTED]"

    def test_domain_loggers_are_shared(self):
        assert schema_logger() is schema_logger()
        assert validation_logger() is not schema_logger()

    def test_sensitive_keys_are_censored(self):
        event = _censor_sensitive_keys(None, "info", {"event": "login", "password": "p", "extra": {"Token": "t"}})

        assert event["password"] == "[REDACTED]"
        assert event["extra"]["Token"] == "[REDACTED]"
        assert event["event"] == "login"


class TestUnconfiguredLogging:
    """Until the host configures logging, the library prints nothing."""

    def test_check_is_silent(self, capsys):
        check("abc", String())
        check("", String())

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_rejected_schema_is_silent(self, capsys):
        with pytest.raises(ConfigurationError):
            String().min(-1)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_library_logger_has_null_handler(self):
        assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger("rulechain").handlers)


class TestContextHelpers:

    def test_bind_and_unbind(self):
        bind_context(request_id="r-1", user="u")
        unbind_context("user")

        assert structlog.contextvars.get_contextvars() == {"request_id": "r-1"}

    def test_clear(self):
        bind_context(request_id="r-1")
        clear_context()

        assert structlog.contextvars.get_contextvars() == {}
