# Request Builder Service
"""
Builds upstream request bodies from validated tool arguments.

Two targets are supported:

1. OpenAI Responses API - the input (prompt string or message list) is sent
   unchanged, together with instructions, reasoning effort and hosted tools.
2. OpenRouter chat completions - messages are reduced to text-only
   ``{role, content}`` pairs, ``developer`` becomes ``system`` and the
   instructions become a leading system message.

Everything here is a pure function of its arguments.
"""

from typing import List, Optional, Union

from gpt5_server.models.generation import (
    DEFAULT_MODEL,
    ContentPart,
    GenerationOptions,
    Message,
)
from gpt5_server.models.upstream import (
    ChatCompletionRequest,
    ChatMessage,
    ReasoningConfig,
    ResponsesRequest,
)

# Chat-completions has no "developer" role
_CHAT_ROLES = {
    "developer": "system",
    "user": "user",
    "assistant": "assistant",
}


def build_responses_request(
    input: Union[str, List[Message]],
    options: GenerationOptions,
) -> ResponsesRequest:
    """Build a Responses API request for a prompt string or a message list."""
    if isinstance(input, str):
        payload_input = input
    else:
        payload_input = [message.model_dump(exclude_none=True) for message in input]

    return ResponsesRequest(
        model=options.model or DEFAULT_MODEL,
        input=payload_input,
        instructions=options.instructions or None,
        reasoning=(
            ReasoningConfig(effort=options.reasoning_effort)
            if options.reasoning_effort
            else None
        ),
        tools=(
            [tool.model_dump(exclude_none=True) for tool in options.tools]
            if options.tools
            else None
        ),
        stream=False,
    )


def flatten_content(content: Union[str, List[ContentPart]]) -> str:
    """
    Reduce message content to plain text.

    Structured content keeps only its ``input_text`` parts, joined with
    newlines. Image and file parts are dropped.
    """
    if isinstance(content, str):
        return content
    return "\n".join(
        part.text
        for part in content
        if part.type == "input_text" and part.text is not None
    )


def to_chat_messages(
    messages: List[Message],
    instructions: Optional[str] = None,
) -> List[ChatMessage]:
    """Translate tool messages into chat-completions messages."""
    chat_messages = [
        ChatMessage(role=_CHAT_ROLES[message.role], content=flatten_content(message.content))
        for message in messages
    ]
    if instructions:
        chat_messages.insert(0, ChatMessage(role="system", content=instructions))
    return chat_messages


def prompt_to_chat_messages(
    input: str,
    instructions: Optional[str] = None,
) -> List[ChatMessage]:
    """Wrap a plain prompt as an optional system message plus one user message."""
    chat_messages: List[ChatMessage] = []
    if instructions:
        chat_messages.append(ChatMessage(role="system", content=instructions))
    chat_messages.append(ChatMessage(role="user", content=input))
    return chat_messages


def build_chat_request(
    messages: List[ChatMessage],
    options: GenerationOptions,
) -> ChatCompletionRequest:
    """Build an OpenRouter chat-completions request."""
    return ChatCompletionRequest(
        model=options.model or DEFAULT_MODEL,
        messages=messages,
        max_tokens=options.max_tokens,
        temperature=options.temperature,
        top_p=options.top_p,
    )
