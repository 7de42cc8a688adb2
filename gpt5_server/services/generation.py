# Generation Service
"""Entry points that run one generation against the resolved provider."""

import logging
from typing import List, Optional

import httpx

from gpt5_server.config import ResolvedProvider
from gpt5_server.models.generation import GenerationOptions, GenerationResult, Message
from gpt5_server.models.upstream import ChatMessage, ResponsesRequest
from gpt5_server.services.openai_client import OpenAIResponsesClient
from gpt5_server.services.openrouter_client import OpenRouterClient
from gpt5_server.services.request_builder import (
    build_chat_request,
    build_responses_request,
    prompt_to_chat_messages,
    to_chat_messages,
)

logger = logging.getLogger("gpt5.services.generation")


async def generate_from_prompt(
    provider: ResolvedProvider,
    input: str,
    options: GenerationOptions,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GenerationResult:
    """Generate a reply to a single prompt string."""
    if provider.use_openrouter:
        messages = prompt_to_chat_messages(input, options.instructions)
        return await _chat_completion(provider, messages, options, transport)

    request = build_responses_request(input, options)
    return await _responses(provider, request, options, transport)


async def generate_from_messages(
    provider: ResolvedProvider,
    messages: List[Message],
    options: GenerationOptions,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GenerationResult:
    """Generate a reply to a conversation."""
    if provider.use_openrouter:
        chat_messages = to_chat_messages(messages, options.instructions)
        return await _chat_completion(provider, chat_messages, options, transport)

    request = build_responses_request(messages, options)
    return await _responses(provider, request, options, transport)


async def _responses(
    provider: ResolvedProvider,
    request: ResponsesRequest,
    options: GenerationOptions,
    transport: Optional[httpx.AsyncBaseTransport],
) -> GenerationResult:
    ignored = [
        name for name in ("max_tokens", "temperature", "top_p")
        if getattr(options, name) is not None
    ]
    if ignored:
        logger.debug(f"Not sent to the Responses API: {', '.join(ignored)}")

    client = OpenAIResponsesClient(provider.api_key, transport=transport)
    return await client.create_response(request)


async def _chat_completion(
    provider: ResolvedProvider,
    messages: List[ChatMessage],
    options: GenerationOptions,
    transport: Optional[httpx.AsyncBaseTransport],
) -> GenerationResult:
    if options.reasoning_effort or options.tools:
        logger.debug("reasoning_effort and tools are not sent to OpenRouter")

    client = OpenRouterClient(provider.api_key, transport=transport)
    return await client.chat_completion(build_chat_request(messages, options))
