"""MCP server returning the latest patch of a Gerrit change."""
