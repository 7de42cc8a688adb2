# MCP Tools Call Handler
"""Handles MCP tools/call request."""

import logging
from typing import Any, Dict, Optional

import httpx

from gpt5_server.config import ProviderCredentials
from gpt5_server.models.generation import GenerationResult, MessagesArgs, TextSource, Usage
from gpt5_server.models.mcp import MCPTextContent, MCPToolsCallResponse
from gpt5_server.services.generation import generate_from_messages, generate_from_prompt
from gpt5_server.services.tool_registry import get_tool

logger = logging.getLogger("gpt5.handlers.tools_call")

ERROR_PREFIX = "GPT-5 API error"


async def handle_tools_call(
    name: str,
    arguments: Optional[Dict[str, Any]],
    credentials: ProviderCredentials,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> MCPToolsCallResponse:
    """
    Handle MCP tools/call request.

    1. Look up the tool
    2. Validate arguments against its schema
    3. Resolve the provider (OpenAI or OpenRouter) from flag and credentials
    4. Run the generation
    5. Return the text with a usage summary

    Unknown tools and invalid arguments are raised to the protocol layer.
    Every failure after validation is returned as an error result.

    Args:
        name: Tool name
        arguments: Raw tool arguments
        credentials: Upstream API keys
        transport: Optional httpx transport for the upstream call

    Returns:
        MCP tool call response

    Raises:
        ToolNotFoundError: If the tool does not exist
        InvalidArgumentError: If the arguments are malformed
    """
    tool = get_tool(name)
    args = tool.parse_arguments(arguments or {})

    if isinstance(args, MessagesArgs):
        logger.info(f"GPT-5 Messages: {len(args.messages)} messages")
    else:
        logger.info(f'GPT-5 Generate: "{args.input[:100]}..."')

    try:
        provider = credentials.resolve(args.use_openrouter)
        logger.info(f"Calling {provider.name} with model {args.model}")

        if isinstance(args, MessagesArgs):
            result = await generate_from_messages(
                provider, args.messages, args, transport=transport
            )
        else:
            result = await generate_from_prompt(
                provider, args.input, args, transport=transport
            )
    except Exception as e:
        logger.exception(f"Error during GPT-5 API call for {name}: {e}")
        return _error_response(str(e) or type(e).__name__)

    return _format_result(result)


def format_usage(usage: Usage) -> str:
    """Render the usage summary appended to successful results."""
    return (
        f"\n\n**Usage:** {usage.prompt_tokens} prompt tokens, "
        f"{usage.completion_tokens} completion tokens, "
        f"{usage.total_tokens} total tokens"
    )


def _format_result(result: GenerationResult) -> MCPToolsCallResponse:
    """Format a generation result as MCP response."""
    if result.source == TextSource.RAW_FALLBACK:
        logger.warning("Returning raw upstream response as content")

    text = result.content
    if result.usage is not None:
        text += format_usage(result.usage)

    return MCPToolsCallResponse(
        content=[MCPTextContent(type="text", text=text)],
        isError=False,
    )


def _error_response(message: str) -> MCPToolsCallResponse:
    """Create an error response."""
    return MCPToolsCallResponse(
        content=[MCPTextContent(type="text", text=f"{ERROR_PREFIX}: {message}")],
        isError=True,
    )
