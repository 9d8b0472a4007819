"""Tool handler for ``get-gerrit-change``: URL in, latest patch text out."""

from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from gerrit_review_mcp.core.application.exceptions import (
    ChangeUrlResolutionError,
    ToolInputError,
    ToolInvocationError,
)
from gerrit_review_mcp.core.application.policies.patch_size_policy import (
    MAX_PATCH_CHARS,
    apply_patch_size_limit,
)
from gerrit_review_mcp.core.application.resolution.change_url_resolver import resolve_change_url
from gerrit_review_mcp.core.application.services.change_patch_fetcher import ChangePatchFetcher
from gerrit_review_mcp.core.application.tools.tool_result import ToolResult

logger = structlog.get_logger()

CHANGE_URL_ARGUMENT = "change_url"


class GerritChangeToolHandler:
    """Parse -> Resolve -> Fetch change -> Fetch patch -> Limit. No retries."""

    def __init__(self, fetcher: ChangePatchFetcher, max_patch_chars: int = MAX_PATCH_CHARS) -> None:
        self._fetcher = fetcher
        self._max_patch_chars = max_patch_chars

    async def get_change_patch(self, arguments: dict[str, Any] | None) -> ToolResult:
        try:
            change_url = self._require_change_url(arguments)
            with bound_contextvars(change_url=change_url):
                return await self._run_pipeline(change_url)
        except ToolInvocationError as exc:
            logger.warning(
                "Tool invocation failed",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=exc.message,
                error_code=exc.stage,
            )
            return ToolResult.error(exc.message)

    async def _run_pipeline(self, change_url: str) -> ToolResult:
        try:
            change = resolve_change_url(change_url)
        except ChangeUrlResolutionError as exc:
            raise ChangeUrlResolutionError(
                f"failed to parse change URL: {exc}", context=exc.context
            ) from exc

        patch = await self._fetcher.fetch_patch(change)
        limited = apply_patch_size_limit(patch, self._max_patch_chars)
        if len(limited) != len(patch):
            logger.info("Patch truncated", change_id=change.value, original_chars=len(patch))

        logger.info("Patch served", change_id=change.value, processing_status="SUCCESS")
        return ToolResult.success(limited)

    @staticmethod
    def _require_change_url(arguments: dict[str, Any] | None) -> str:
        if not arguments or CHANGE_URL_ARGUMENT not in arguments:
            raise ToolInputError(f'required argument "{CHANGE_URL_ARGUMENT}" not found')
        value = arguments[CHANGE_URL_ARGUMENT]
        if not isinstance(value, str):
            raise ToolInputError(f'argument "{CHANGE_URL_ARGUMENT}" is not a string')
        return value
