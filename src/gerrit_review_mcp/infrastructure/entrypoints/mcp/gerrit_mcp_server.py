"""MCP stdio server exposing the single ``get-gerrit-change`` tool."""

from typing import Any

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from gerrit_review_mcp.core.application.tools.gerrit_change_tool_handler import (
    CHANGE_URL_ARGUMENT,
    GerritChangeToolHandler,
)
from gerrit_review_mcp.core.application.tools.tool_result import ToolResult

logger = structlog.get_logger()

SERVER_NAME = "Gerrit Code Review"
SERVER_VERSION = "0.1.0"
TOOL_NAME = "get-gerrit-change"

GET_GERRIT_CHANGE_TOOL = types.Tool(
    name=TOOL_NAME,
    description="Get Gerrit change",
    inputSchema={
        "type": "object",
        "properties": {
            CHANGE_URL_ARGUMENT: {
                "type": "string",
                "description": "URL of Gerrit change",
            },
        },
        "required": [CHANGE_URL_ARGUMENT],
    },
)


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def build_server(handler: GerritChangeToolHandler) -> Server:
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [GET_GERRIT_CHANGE_TOOL]

    # Argument checks live in the handler so input errors keep their own wording
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        return to_call_tool_result(await dispatch_tool_call(handler, name, arguments))

    return server


async def dispatch_tool_call(
    handler: GerritChangeToolHandler, name: str, arguments: dict[str, Any] | None
) -> ToolResult:
    """Route a call to the handler; unexpected failures become error results."""
    if name != TOOL_NAME:
        return ToolResult.error(f"unknown tool: {name}")
    try:
        return await handler.get_change_patch(arguments)
    except Exception as exc:  # noqa: BLE001
        logger.exception(
            "Unexpected failure in tool handler",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
        return ToolResult.error(f"internal error while handling {name}: {exc}")


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP server listening on stdio", tool_name=TOOL_NAME)
        await server.run(read_stream, write_stream, server.create_initialization_options())
