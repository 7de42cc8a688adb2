# Upstream Client Base
"""Shared HTTP plumbing for the OpenAI and OpenRouter clients."""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from gpt5_server.errors import ResponseDecodeError, UpstreamError, UpstreamTransportError

logger = logging.getLogger("gpt5.services.upstream_client")


class UpstreamClient:
    """
    Minimal JSON-over-HTTP client for an OpenAI-compatible provider.

    A fresh ``httpx.AsyncClient`` is opened per request, so concurrent tool
    calls share nothing. Each request is attempted exactly once.
    """

    provider_name = "upstream"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def _post_json(self, path: str, payload: Dict[str, Any]) -> Any:
        """
        POST a JSON body and return the decoded JSON response.

        Raises:
            UpstreamTransportError: If the provider could not be reached
            UpstreamError: If the provider answered with a non-2xx status
            ResponseDecodeError: If a 2xx body is not JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{self.provider_name} request to {url}: {json.dumps(payload, indent=2)}")

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            ) as client:
                response = await client.post(url, headers=self._build_headers(), json=payload)
        except httpx.TransportError as e:
            logger.error(f"{self.provider_name} request failed: {e!r}")
            raise UpstreamTransportError(self.provider_name, e) from e

        if not response.is_success:
            logger.error(f"{self.provider_name} returned HTTP {response.status_code}")
            raise UpstreamError(
                self.provider_name,
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(self.provider_name, response.text) from e

        logger.debug(f"{self.provider_name} response: {json.dumps(data, indent=2)}")
        return data
