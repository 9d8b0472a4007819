from abc import ABC, abstractmethod

from gerrit_review_mcp.core.domain.change import ChangeMetadata, ChangeReference


class GerritChangePort(ABC):
    """Read-only view of a Gerrit server: change lookup and patch retrieval."""

    @abstractmethod
    async def get_change(
        self, change: ChangeReference, additional_fields: list[str] | None = None
    ) -> ChangeMetadata:
        """Fetches change metadata. Raises ProviderError when the lookup fails."""

    @abstractmethod
    async def get_patch(self, change: ChangeReference, revision_id: str) -> str | None:
        """Fetches the patch of one revision. Returns None when the server sends no content."""
