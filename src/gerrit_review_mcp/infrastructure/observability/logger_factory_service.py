"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger

Everything is written to stderr: stdout carries the MCP stdio transport.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from gerrit_review_mcp.infrastructure.configuration import LoggingSettings
from gerrit_review_mcp.infrastructure.observability.logging import build_event_schema_processor

_CONFIGURED = False
_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by LOG_FORMAT (json|console) or APP_ENV.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    settings = settings or LoggingSettings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = _select_renderer(settings)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if isinstance(renderer, structlog.processors.JSONRenderer):
        shared_processors.append(structlog.processors.format_exc_info)
        shared_processors.append(
            build_event_schema_processor(settings.service_name, settings.app_env)
        )

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route logging.getLogger() output (httpx, mcp) through structlog
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(component: str) -> structlog.typing.FilteringBoundLogger:
    """Return a lazy structlog logger carrying the component name."""
    return structlog.get_logger(component=component)


def _select_renderer(settings: LoggingSettings) -> Any:
    """Choose renderer based on LOG_FORMAT or APP_ENV."""
    log_format = settings.log_format.lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)

    if settings.app_env.lower() in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
