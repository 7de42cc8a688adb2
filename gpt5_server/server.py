# MCP SDK Server
"""MCP server built on the official SDK's low-level Server."""

import logging
from typing import List

import mcp.types as types
from mcp.server import Server
from mcp.shared.exceptions import McpError

from gpt5_server.config import ProviderCredentials, settings
from gpt5_server.errors import InvalidArgumentError, ToolNotFoundError
from gpt5_server.handlers import handle_tools_call, handle_tools_list
from gpt5_server.models.mcp import MCPTool, MCPToolsCallResponse

logger = logging.getLogger("gpt5.server")


def to_sdk_tools(tools: List[MCPTool]) -> list[types.Tool]:
    """Convert tool models to SDK types.Tool."""
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.inputSchema,
        )
        for tool in tools
    ]


def to_call_tool_result(response: MCPToolsCallResponse) -> types.CallToolResult:
    """Convert a handler response to an SDK CallToolResult."""
    return types.CallToolResult(
        content=[
            types.TextContent(type="text", text=block.text)
            for block in response.content
        ],
        isError=response.isError,
    )


def create_server(credentials: ProviderCredentials) -> Server:
    """
    Build the MCP server.

    The tools/call handler is registered directly on ``request_handlers``
    rather than through ``Server.call_tool()``: the decorator turns every
    exception into an error result, while unknown tools and malformed
    arguments must reach the client as JSON-RPC errors.

    Args:
        credentials: Upstream API keys used for every call

    Returns:
        Configured SDK server
    """
    server = Server(settings.mcp_server_name, version=settings.mcp_server_version)

    @server.list_tools()
    async def sdk_list_tools() -> list[types.Tool]:
        """List available tools via SDK transport."""
        logger.debug("Handling ListToolsRequest")
        result = await handle_tools_list()
        return to_sdk_tools(result.tools)

    async def sdk_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        """Execute a tool via SDK transport."""
        name = request.params.name
        logger.debug(f"Handling CallToolRequest: {name}")

        try:
            response = await handle_tools_call(
                name=name,
                arguments=request.params.arguments,
                credentials=credentials,
            )
        except ToolNotFoundError as e:
            raise McpError(
                types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(e))
            ) from e
        except InvalidArgumentError as e:
            raise McpError(
                types.ErrorData(
                    code=types.INVALID_PARAMS,
                    message=str(e),
                    data={"errors": e.errors},
                )
            ) from e

        return types.ServerResult(to_call_tool_result(response))

    server.request_handlers[types.CallToolRequest] = sdk_call_tool
    return server
