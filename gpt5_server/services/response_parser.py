# Response Parser Service
"""
Decodes upstream response bodies into a GenerationResult.

Responses API text is taken from, in order:

1. ``output_text``
2. ``output[0].content[0].text``
3. the whole body, pretty-printed (tagged ``TextSource.RAW_FALLBACK``)

Chat-completions text is ``choices[0].message.content``, or an empty string.
"""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from gpt5_server.models.generation import GenerationResult, TextSource, Usage

logger = logging.getLogger("gpt5.services.response_parser")


def _parse_usage(data: Any) -> Optional[Usage]:
    """Extract the usage block if the provider sent one."""
    if not isinstance(data, dict):
        return None
    raw = data.get("usage")
    if not isinstance(raw, dict):
        return None
    try:
        return Usage.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed usage block: {e}")
        return None


def _first_output_text(data: dict) -> Optional[str]:
    """Return ``output[0].content[0].text`` when every step of the path exists."""
    output = data.get("output")
    if not isinstance(output, list) or not output or not isinstance(output[0], dict):
        return None
    content = output[0].get("content")
    if not isinstance(content, list) or not content or not isinstance(content[0], dict):
        return None
    text = content[0].get("text")
    return text if isinstance(text, str) else None


def parse_responses_payload(data: Any) -> GenerationResult:
    """Decode an OpenAI Responses API body."""
    usage = _parse_usage(data)

    if isinstance(data, dict):
        output_text = data.get("output_text")
        if isinstance(output_text, str) and output_text:
            return GenerationResult(
                content=output_text, usage=usage, source=TextSource.OUTPUT_TEXT
            )

        nested_text = _first_output_text(data)
        if nested_text:
            return GenerationResult(
                content=nested_text, usage=usage, source=TextSource.OUTPUT_CONTENT
            )

    logger.warning("No output text in Responses API body, returning raw response")
    return GenerationResult(
        content=json.dumps(data, indent=2),
        usage=usage,
        source=TextSource.RAW_FALLBACK,
    )


def parse_chat_payload(data: Any) -> GenerationResult:
    """Decode a chat-completions body."""
    content = ""
    if isinstance(data, dict):
        choices = data.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            message = choices[0].get("message") or {}
            if isinstance(message, dict) and isinstance(message.get("content"), str):
                content = message["content"]

    return GenerationResult(
        content=content,
        usage=_parse_usage(data),
        source=TextSource.CHAT_CHOICE,
    )
