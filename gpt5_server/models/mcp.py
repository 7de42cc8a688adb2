# MCP Protocol Models
"""Pydantic models for MCP (Model Context Protocol) messages."""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class MCPTool(BaseModel):
    """MCP tool definition."""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="Tool description")
    inputSchema: Dict[str, Any] = Field(..., description="JSON Schema for tool input")


class MCPTextContent(BaseModel):
    """MCP text content block."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text content")


class MCPToolsListResponse(BaseModel):
    """MCP tools/list response."""

    tools: List[MCPTool] = Field(..., description="Available tools")


class MCPToolsCallResponse(BaseModel):
    """MCP tools/call response."""

    content: List[MCPTextContent] = Field(..., description="Result content")
    isError: bool = Field(default=False, description="Error flag")
