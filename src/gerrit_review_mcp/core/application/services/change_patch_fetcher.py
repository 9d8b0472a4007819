import structlog

from gerrit_review_mcp.core.application.exceptions import (
    ChangeFetchError,
    EmptyPatchError,
    NoCurrentRevisionError,
    PatchFetchError,
)
from gerrit_review_mcp.core.application.ports import GerritChangePort
from gerrit_review_mcp.core.application.tools.common.exceptions import ProviderError
from gerrit_review_mcp.core.domain.change import ChangeReference

logger = structlog.get_logger()

CHANGE_ADDITIONAL_FIELDS = ["CURRENT_REVISION", "CURRENT_COMMIT"]


class ChangePatchFetcher:
    """Two sequential lookups: change metadata, then the current revision's patch."""

    def __init__(self, gerrit: GerritChangePort) -> None:
        self._gerrit = gerrit

    async def fetch_patch(self, change: ChangeReference) -> str:
        revision_id = await self._fetch_current_revision(change)
        return await self._fetch_revision_patch(change, revision_id)

    async def _fetch_current_revision(self, change: ChangeReference) -> str:
        logger.info("Fetching change metadata", change_id=change.value)
        try:
            metadata = await self._gerrit.get_change(change, CHANGE_ADDITIONAL_FIELDS)
        except ProviderError as exc:
            raise ChangeFetchError(
                f"failed to get change {change.value}: {exc}",
                context={"change_id": change.value},
            ) from exc

        if not metadata.has_current_revision:
            raise NoCurrentRevisionError(
                f"no current revision found for change {change.value}",
                context={"change_id": change.value},
            )
        return metadata.current_revision

    async def _fetch_revision_patch(self, change: ChangeReference, revision_id: str) -> str:
        logger.info("Fetching revision patch", change_id=change.value, revision_id=revision_id)
        try:
            patch = await self._gerrit.get_patch(change, revision_id)
        except ProviderError as exc:
            raise PatchFetchError(
                f"failed to get patch for change {change.value}: {exc}",
                context={"change_id": change.value, "revision_id": revision_id},
            ) from exc

        if patch is None:
            raise EmptyPatchError(
                "received nil patch content",
                context={"change_id": change.value, "revision_id": revision_id},
            )
        return patch
