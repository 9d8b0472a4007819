from gerrit_review_mcp.infrastructure.observability.logging.event_schema_processor import (
    build_event_schema_processor,
)

__all__ = ["build_event_schema_processor"]
