# GPT-5 Server Models
"""Pydantic models for the MCP protocol and generation requests."""

from .generation import (
    DEFAULT_MODEL,
    ContentPart,
    GenerateArgs,
    GenerationOptions,
    GenerationResult,
    HostedTool,
    Message,
    MessagesArgs,
    TextSource,
    Usage,
)
from .mcp import (
    MCPTextContent,
    MCPTool,
    MCPToolsCallResponse,
    MCPToolsListResponse,
)
from .upstream import (
    ChatCompletionRequest,
    ChatMessage,
    ReasoningConfig,
    ResponsesRequest,
)

__all__ = [
    # MCP models
    "MCPTool",
    "MCPTextContent",
    "MCPToolsListResponse",
    "MCPToolsCallResponse",
    # Generation models
    "DEFAULT_MODEL",
    "ContentPart",
    "Message",
    "HostedTool",
    "GenerationOptions",
    "GenerateArgs",
    "MessagesArgs",
    "TextSource",
    "Usage",
    "GenerationResult",
    # Upstream request models
    "ResponsesRequest",
    "ReasoningConfig",
    "ChatMessage",
    "ChatCompletionRequest",
]
