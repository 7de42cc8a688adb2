#!/usr/bin/env python3
"""
GPT-5 MCP server.

Exposes the ``gpt5_generate`` and ``gpt5_messages`` tools over MCP and
forwards each call to the OpenAI Responses API or to OpenRouter.

Usage:
    python -m gpt5_server
    python -m gpt5_server --transport streamable-http --port 8020

Environment:
    OPENAI_API_KEY: OpenAI API key
    OPENROUTER_API_KEY: OpenRouter API key (at least one of the two is required)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import uvicorn
from mcp.server.stdio import stdio_server

from gpt5_server.config import ProviderCredentials, settings
from gpt5_server.http_app import create_app
from gpt5_server.server import create_server

logger = logging.getLogger("gpt5.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("gpt5-mcp-server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        default="stdio",
    )
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Log to stderr; stdout carries JSON-RPC on the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


async def run_stdio(credentials: ProviderCredentials) -> None:
    server = create_server(credentials)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("GPT-5 MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run_http(credentials: ProviderCredentials, host: str, port: int) -> None:
    uvicorn.run(create_app(credentials), host=host, port=port)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    credentials = settings.credentials()
    if not credentials.has_any:
        logger.error("Neither OPENAI_API_KEY nor OPENROUTER_API_KEY environment variable is set")
        logger.error("Please set at least one in .env file or as an environment variable")
        return 1

    if credentials.has_openrouter:
        logger.info("OpenRouter API key detected")
    if credentials.has_openai:
        logger.info("OpenAI API key detected")

    logger.info(f"Starting GPT-5 MCP server ({args.transport})")
    try:
        if args.transport == "streamable-http":
            run_http(credentials, args.host, args.port)
        else:
            asyncio.run(run_stdio(credentials))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Server runtime error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
