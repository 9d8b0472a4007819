from gerrit_review_mcp.core.application.exceptions.tool_invocation_errors import (
    ChangeFetchError,
    ChangeUrlResolutionError,
    EmptyPatchError,
    NoCurrentRevisionError,
    PatchFetchError,
    ToolInputError,
    ToolInvocationError,
)

__all__ = [
    "ChangeFetchError",
    "ChangeUrlResolutionError",
    "EmptyPatchError",
    "NoCurrentRevisionError",
    "PatchFetchError",
    "ToolInputError",
    "ToolInvocationError",
]
