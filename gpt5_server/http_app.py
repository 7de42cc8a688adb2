# HTTP Transport Application
"""FastAPI application serving the MCP server over Streamable HTTP."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.routing import Route

from gpt5_server.config import ProviderCredentials, settings
from gpt5_server.server import create_server

logger = logging.getLogger("gpt5.http_app")


class MCPTransport:
    """
    ASGI app delegating to the MCP SDK session manager.

    Starlette's Route treats class instances (non-function callables) as
    raw ASGI apps, passing (scope, receive, send) directly.
    """

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope, receive, send):
        await self.session_manager.handle_request(scope, receive, send)


def create_app(credentials: ProviderCredentials) -> FastAPI:
    """Build the HTTP application for the given credentials."""
    server = create_server(credentials)
    session_manager = StreamableHTTPSessionManager(
        app=server,
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.mcp_server_name} v{settings.mcp_server_version} (HTTP)")
        async with session_manager.run():
            yield
        logger.info(f"Shutting down {settings.mcp_server_name}")

    app = FastAPI(
        title="GPT-5 MCP Server",
        description="MCP server forwarding generation tools to OpenAI or OpenRouter",
        version=settings.mcp_server_version,
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    # Bare /mcp path; a Mount would only match /mcp/ and /mcp/*
    app.router.routes.insert(
        0,
        Route("/mcp", MCPTransport(session_manager), methods=["GET", "POST", "DELETE"]),
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.mcp_server_name,
            "version": settings.mcp_server_version,
            "providers": {
                "openai": credentials.has_openai,
                "openrouter": credentials.has_openrouter,
            },
        }

    @app.get("/")
    async def root():
        """Root endpoint with service info."""
        return {
            "service": settings.mcp_server_name,
            "version": settings.mcp_server_version,
            "endpoints": {
                "health": "/health",
                "mcp": "/mcp",
            },
        }

    return app
