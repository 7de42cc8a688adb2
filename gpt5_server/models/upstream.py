# Upstream Request Models
"""Wire models for the OpenAI Responses and OpenRouter chat-completions APIs."""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class UpstreamModel(BaseModel):
    """Base for request bodies; unset optional fields are left out of the payload."""

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ReasoningConfig(UpstreamModel):
    """Responses API reasoning block."""

    effort: Literal["low", "medium", "high"]


class ResponsesRequest(UpstreamModel):
    """POST /v1/responses body."""

    model: str
    input: Union[str, List[Dict[str, Any]]]
    instructions: Optional[str] = None
    reasoning: Optional[ReasoningConfig] = None
    tools: Optional[List[Dict[str, Any]]] = None
    stream: bool = Field(default=False, description="Streaming is never requested")


class ChatMessage(UpstreamModel):
    """Chat-completions message (text only)."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(UpstreamModel):
    """POST /chat/completions body."""

    model: str
    messages: List[ChatMessage]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
