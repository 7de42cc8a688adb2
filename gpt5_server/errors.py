# GPT-5 Server Errors
"""Exception types raised while dispatching and executing tool calls."""

from typing import List, Optional


class GPT5ServerError(Exception):
    """Base class for all server errors."""


class ToolNotFoundError(GPT5ServerError):
    """Raised when a tools/call names a tool this server does not provide."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentError(GPT5ServerError):
    """Raised when tool arguments do not match the tool's input schema."""

    def __init__(self, tool: str, errors: List[str]):
        super().__init__(f"Invalid arguments for {tool}: {'; '.join(errors)}")
        self.tool = tool
        self.errors = errors


class MissingCredentialError(GPT5ServerError):
    """Raised when the selected provider has no API key configured."""

    def __init__(self, env_var: str):
        super().__init__(f"{env_var} is not set")
        self.env_var = env_var


class UpstreamError(GPT5ServerError):
    """Raised when an upstream provider answers with a non-2xx status."""

    def __init__(self, provider: str, status: int, status_text: str, body: str):
        super().__init__(f"{provider} returned {status} {status_text} - {body}")
        self.provider = provider
        self.status = status
        self.status_text = status_text
        self.body = body


class UpstreamTransportError(GPT5ServerError):
    """Raised when the upstream provider could not be reached."""

    def __init__(self, provider: str, cause: Optional[Exception] = None):
        if cause is None:
            detail = "connection failed"
        else:
            detail = str(cause) or type(cause).__name__
        super().__init__(f"Could not reach {provider}: {detail}")
        self.provider = provider
        self.cause = cause


class ResponseDecodeError(GPT5ServerError):
    """Raised when a successful upstream response body is not valid JSON."""

    def __init__(self, provider: str, body: str):
        super().__init__(f"{provider} returned a non-JSON response: {body[:200]}")
        self.provider = provider
        self.body = body
