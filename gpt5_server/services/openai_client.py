# OpenAI Client Service
"""HTTP client for the OpenAI Responses API."""

from typing import Optional

import httpx

from gpt5_server.config import settings
from gpt5_server.models.generation import GenerationResult
from gpt5_server.models.upstream import ResponsesRequest
from gpt5_server.services.response_parser import parse_responses_payload
from gpt5_server.services.upstream_client import UpstreamClient


class OpenAIResponsesClient(UpstreamClient):
    """Client for ``POST {base_url}/responses``."""

    provider_name = "OpenAI"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url or settings.openai_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def create_response(self, request: ResponsesRequest) -> GenerationResult:
        """
        Run one non-streaming generation.

        Args:
            request: Responses API request body

        Returns:
            Decoded generation result
        """
        data = await self._post_json("/responses", request.to_payload())
        return parse_responses_payload(data)
