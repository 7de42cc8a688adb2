# OpenRouter Client Service
"""HTTP client for OpenRouter's chat-completions API."""

from typing import Dict, Optional

import httpx

from gpt5_server.config import settings
from gpt5_server.models.generation import GenerationResult
from gpt5_server.models.upstream import ChatCompletionRequest
from gpt5_server.services.response_parser import parse_chat_payload
from gpt5_server.services.upstream_client import UpstreamClient


class OpenRouterClient(UpstreamClient):
    """Client for ``POST {base_url}/chat/completions`` with attribution headers."""

    provider_name = "OpenRouter"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        referer: Optional[str] = None,
        title: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url or settings.openrouter_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )
        self.referer = referer or settings.openrouter_referer
        self.title = title or settings.openrouter_title

    def _build_headers(self) -> Dict[str, str]:
        headers = super()._build_headers()
        headers["HTTP-Referer"] = self.referer
        headers["X-Title"] = self.title
        return headers

    async def chat_completion(self, request: ChatCompletionRequest) -> GenerationResult:
        """Run one chat completion and decode the first choice."""
        data = await self._post_json("/chat/completions", request.to_payload())
        return parse_chat_payload(data)
