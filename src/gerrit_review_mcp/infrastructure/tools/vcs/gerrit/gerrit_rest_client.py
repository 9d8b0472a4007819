import urllib.parse

import structlog

from gerrit_review_mcp.core.application.ports import GerritChangePort
from gerrit_review_mcp.core.application.tools.common.exceptions import GerritApiError
from gerrit_review_mcp.core.domain.change import ChangeMetadata, ChangeReference
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_connection import GerritConnection
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_response_parser import (
    decode_patch_body,
    parse_json_body,
    raise_for_gerrit_status,
)

logger = structlog.get_logger()


class GerritRestClient(GerritChangePort):
    """GerritChangePort backed by the Gerrit REST API over a shared connection."""

    def __init__(self, connection: GerritConnection) -> None:
        self._connection = connection

    async def get_change(
        self, change: ChangeReference, additional_fields: list[str] | None = None
    ) -> ChangeMetadata:
        action = f"get change {change.value}"
        params = [("o", field) for field in additional_fields or []]
        response = await self._connection.get(f"changes/{_quote(change.value)}", params=params)
        raise_for_gerrit_status(response, action)

        data = parse_json_body(response, action)
        if not isinstance(data, dict):
            raise GerritApiError(message=f"{action}: unexpected response shape")

        revision = data.get("current_revision") or ""
        if not isinstance(revision, str):
            raise GerritApiError(message=f"{action}: unexpected response shape")
        logger.debug("Change metadata received", change_id=change.value, revision_id=revision)
        return ChangeMetadata(current_revision=revision)

    async def get_patch(self, change: ChangeReference, revision_id: str) -> str | None:
        action = f"get patch {change.value}/{revision_id}"
        path = f"changes/{_quote(change.value)}/revisions/{_quote(revision_id)}/patch"
        response = await self._connection.get(path)
        raise_for_gerrit_status(response, action)
        return decode_patch_body(response, action)


def _quote(segment: str) -> str:
    return urllib.parse.quote(segment, safe="")
