import logging
import sys

import pytest
import structlog

from gerrit_review_mcp.infrastructure.configuration import LoggingSettings
from gerrit_review_mcp.infrastructure.observability import logger_factory_service

MODULE = logger_factory_service


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(MODULE, "_CONFIGURED", False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    structlog.reset_defaults()


@pytest.mark.parametrize(
    ("log_format", "app_env", "renderer_type"),
    [
        ("json", "local", structlog.processors.JSONRenderer),
        ("console", "prod", structlog.dev.ConsoleRenderer),
        ("", "prod", structlog.processors.JSONRenderer),
        ("", "local", structlog.dev.ConsoleRenderer),
    ],
)
def test_select_renderer(log_format, app_env, renderer_type):
    settings = LoggingSettings(LOG_FORMAT=log_format, APP_ENV=app_env)

    assert isinstance(MODULE._select_renderer(settings), renderer_type)


def test_configure_logging_writes_to_stderr_only(fresh_logging, capsys):
    MODULE.configure_logging(LoggingSettings(LOG_FORMAT="json", LOG_LEVEL="DEBUG"))

    handler = logging.getLogger().handlers[0]
    assert handler.stream is sys.stderr
    assert logging.getLogger().level == logging.DEBUG

    MODULE.get_logger("tests").info("hello", change_id="1")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert '"message": "hello"' in captured.err


def test_configure_logging_is_one_shot(fresh_logging):
    MODULE.configure_logging(LoggingSettings(LOG_LEVEL="WARNING"))
    MODULE.configure_logging(LoggingSettings(LOG_LEVEL="DEBUG"))

    assert logging.getLogger().level == logging.WARNING


def test_unknown_level_falls_back_to_info(fresh_logging):
    MODULE.configure_logging(LoggingSettings(LOG_LEVEL="chatty"))

    assert logging.getLogger().level == logging.INFO
