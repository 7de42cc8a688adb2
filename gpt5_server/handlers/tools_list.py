# MCP Tools List Handler
"""Handles MCP tools/list request."""

import logging

from gpt5_server.models.mcp import MCPToolsListResponse
from gpt5_server.services.tool_registry import list_tools

logger = logging.getLogger("gpt5.handlers.tools_list")


async def handle_tools_list() -> MCPToolsListResponse:
    """
    Handle MCP tools/list request.

    Returns:
        The generation tools with their input schemas
    """
    tools = [tool.to_mcp_tool() for tool in list_tools()]
    logger.info(f"Returning {len(tools)} tools")
    return MCPToolsListResponse(tools=tools)
