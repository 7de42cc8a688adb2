# GPT-5 MCP Server
"""MCP server exposing GPT-5 generation through OpenAI or OpenRouter."""

__version__ = "0.1.0"
