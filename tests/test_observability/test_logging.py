"""Tests for structured logging setup."""

import logging

import pytest
import structlog

from src.config.settings import Settings
from src.observability.logging import QUIET_LOGGERS, bind_context, clear_context, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    clear_context()
    structlog.reset_defaults()


class TestSetupLogging:
    def test_production_renders_json(self):
        setup_logging(Settings(_env_file=None, environment="production"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        setup_logging(Settings(_env_file=None, environment="development"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_quiets_http_libraries(self):
        setup_logging(Settings(_env_file=None))

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestContext:
    def test_bind_and_clear(self):
        bind_context(request_id="req-123")
        assert structlog.contextvars.get_contextvars() == {"request_id": "req-123"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
