# Test Configuration
"""Pytest fixtures for GPT-5 server tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from gpt5_server.config import ProviderCredentials, ResolvedProvider


@pytest.fixture
def both_keys():
    """Credentials with both providers configured."""
    return ProviderCredentials(openai_api_key="sk-openai", openrouter_api_key="sk-or")


@pytest.fixture
def openai_only():
    """Credentials with only an OpenAI key."""
    return ProviderCredentials(openai_api_key="sk-openai")


@pytest.fixture
def openrouter_only():
    """Credentials with only an OpenRouter key."""
    return ProviderCredentials(openrouter_api_key="sk-or")


@pytest.fixture
def openai_provider():
    return ResolvedProvider(name="openai", api_key="sk-openai")


@pytest.fixture
def openrouter_provider():
    return ResolvedProvider(name="openrouter", api_key="sk-or")


@pytest.fixture
def sample_responses_payload():
    """Sample OpenAI Responses API body."""
    return {
        "id": "resp_123",
        "object": "response",
        "output": [
            {
                "id": "msg_1",
                "type": "message",
                "role": "assistant",
                "content": [
                    {"type": "output_text", "text": "Hello from GPT-5", "annotations": []},
                ],
            },
        ],
        "output_text": "Hello from GPT-5",
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


@pytest.fixture
def sample_chat_payload():
    """Sample OpenRouter chat-completions body."""
    return {
        "id": "gen-1",
        "model": "openai/gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello from OpenRouter"},
                "finish_reason": "stop",
            },
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 4, "total_tokens": 16},
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def json_bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def make_transport():
    """Build a RecordingTransport answering every request with one response."""

    def _make(status_code: int = 200, json_body: Any = None, text: str = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        return RecordingTransport(handler)

    return _make
