"""Structlog processor nesting flat event fields into a stable JSON schema.

All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

EventDict = dict[str, Any]


def _build_root_fields(event_dict: EventDict, service: str, environment: str) -> EventDict:
    """Extract root-level fields: timestamp, level, service, environment, message."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": service,
        "environment": environment,
        "component": event_dict.pop("component", None),
        "message": event_dict.pop("event", ""),
    }


def _build_processing(event_dict: EventDict) -> EventDict | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {"status": status}


def _build_error(event_dict: EventDict) -> EventDict | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_context(event_dict: EventDict) -> EventDict | None:
    """Extract the Gerrit request context block."""
    keys = ("change_url", "change_id", "revision_id", "auth_scheme")
    context = {key: event_dict.pop(key) for key in keys if key in event_dict}
    return context or None


def _build_metadata(event_dict: EventDict) -> EventDict | None:
    source = event_dict.pop("source_system", None)
    tags = event_dict.pop("tags", None)
    if source is None and tags is None:
        return None
    return {
        "source_system": source,
        "tags": tags,
    }


def build_event_schema_processor(
    service: str, environment: str
) -> Callable[[Any, str, EventDict], EventDict]:
    """Return a structlog processor bound to the given service and environment."""

    def event_schema_processor(
        logger: Any,  # noqa: ARG001
        method_name: str,  # noqa: ARG001
        event_dict: EventDict,
    ) -> EventDict:
        # ProcessorFormatter meta keys (_record, _from_structlog) must stay top-level
        meta = {key: event_dict.pop(key) for key in list(event_dict) if key.startswith("_")}
        result = _build_root_fields(event_dict, service, environment)

        for block_name, builder in (
            ("processing", _build_processing),
            ("error", _build_error),
            ("context", _build_context),
            ("metadata", _build_metadata),
        ):
            block = builder(event_dict)
            if block is not None:
                result[block_name] = block

        if event_dict:
            result["extra"] = dict(event_dict)

        result.update(meta)
        return result

    return event_schema_processor
