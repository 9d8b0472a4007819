import pytest
import pytest_asyncio
import respx

from gerrit_review_mcp.core.application.ports import GerritChangePort
from gerrit_review_mcp.core.application.services.change_patch_fetcher import ChangePatchFetcher
from gerrit_review_mcp.core.application.tools.common.exceptions import GerritApiError
from gerrit_review_mcp.core.application.tools.gerrit_change_tool_handler import (
    GerritChangeToolHandler,
)
from gerrit_review_mcp.core.domain.change import ChangeMetadata, ChangeReference
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit import GerritConnection

GERRIT_BASE_URL = "https://gerrit.example.com"


class FakeGerritPort(GerritChangePort):
    """In-memory Gerrit: register changes and patches, optionally inject failures."""

    def __init__(self) -> None:
        self.changes: dict[str, ChangeMetadata] = {}
        self.patches: dict[tuple[str, str], str | None] = {}
        self.change_error: Exception | None = None
        self.patch_error: Exception | None = None
        self.calls: list[tuple] = []

    def add_change(self, change_id: str, revision: str, patch: str | None) -> None:
        self.changes[change_id] = ChangeMetadata(current_revision=revision)
        self.patches[(change_id, revision)] = patch

    async def get_change(
        self, change: ChangeReference, additional_fields: list[str] | None = None
    ) -> ChangeMetadata:
        self.calls.append(("get_change", change.value, tuple(additional_fields or ())))
        if self.change_error is not None:
            raise self.change_error
        if change.value not in self.changes:
            raise GerritApiError(message=f"get change {change.value}: Not found", status_code=404)
        return self.changes[change.value]

    async def get_patch(self, change: ChangeReference, revision_id: str) -> str | None:
        self.calls.append(("get_patch", change.value, revision_id))
        if self.patch_error is not None:
            raise self.patch_error
        return self.patches.get((change.value, revision_id))


@pytest.fixture
def fake_gerrit() -> FakeGerritPort:
    return FakeGerritPort()


@pytest.fixture
def tool_handler(fake_gerrit) -> GerritChangeToolHandler:
    return GerritChangeToolHandler(ChangePatchFetcher(fake_gerrit))


@pytest.fixture
def gerrit_api():
    """respx router scoped to the fake Gerrit host."""
    with respx.mock(base_url=GERRIT_BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def connection():
    conn = GerritConnection(GERRIT_BASE_URL, timeout=5.0)
    yield conn
    await conn.aclose()
