"""Per-invocation error hierarchy for the change-patch tool.

Each class pins the pipeline stage that failed so the tool handler can report
it without string-matching. None of these ever terminate the server process.
"""

from typing import Any, ClassVar

from gerrit_review_mcp.core.application.tools.common.exceptions import DomainError


class ToolInvocationError(DomainError):
    """Base exception for recoverable failures inside a single tool call."""

    stage: ClassVar[str] = "invoke"

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class ToolInputError(ToolInvocationError):
    """The tool arguments are missing or have the wrong type."""

    stage = "parse"


class ChangeUrlResolutionError(ToolInvocationError):
    """The input does not yield a change identifier."""

    stage = "resolve"


class ChangeFetchError(ToolInvocationError):
    """The change lookup call failed."""

    stage = "fetch-change"


class NoCurrentRevisionError(ToolInvocationError):
    """The change lookup succeeded but carried no current revision."""

    stage = "fetch-change"


class PatchFetchError(ToolInvocationError):
    """The patch lookup call failed."""

    stage = "fetch-patch"


class EmptyPatchError(ToolInvocationError):
    """The patch lookup succeeded but returned no content."""

    stage = "fetch-patch"
