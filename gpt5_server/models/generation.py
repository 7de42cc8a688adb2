# Generation Models
"""Pydantic models for tool arguments and upstream generation results."""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MODEL = "gpt-5"

ReasoningEffort = Literal["low", "medium", "high"]
MessageRole = Literal["user", "developer", "assistant"]
ContentPartType = Literal["input_text", "input_image", "input_file"]

# Fields each content part type may populate
_PART_FIELDS: Dict[str, frozenset] = {
    "input_text": frozenset({"text"}),
    "input_image": frozenset({"image_url"}),
    "input_file": frozenset({"file_id", "file_url"}),
}


class ContentPart(BaseModel):
    """One part of a structured message body."""

    model_config = ConfigDict(extra="forbid")

    type: ContentPartType = Field(..., description="Content part type")
    text: Optional[str] = Field(default=None, description="Text for input_text parts")
    image_url: Optional[str] = Field(default=None, description="Image URL for input_image parts")
    file_id: Optional[str] = Field(default=None, description="Uploaded file ID for input_file parts")
    file_url: Optional[str] = Field(default=None, description="File URL for input_file parts")

    @model_validator(mode="after")
    def check_fields_match_type(self) -> "ContentPart":
        allowed = _PART_FIELDS[self.type]
        populated = {
            name for name in ("text", "image_url", "file_id", "file_url")
            if getattr(self, name) is not None
        }
        unexpected = populated - allowed
        if unexpected:
            raise ValueError(
                f"{self.type} part does not accept: {', '.join(sorted(unexpected))}"
            )
        if not populated:
            raise ValueError(
                f"{self.type} part requires one of: {', '.join(sorted(allowed))}"
            )
        return self


class Message(BaseModel):
    """Conversation message passed to gpt5_messages."""

    role: MessageRole = Field(..., description="Message role")
    content: Union[str, List[ContentPart]] = Field(
        ..., description="Message content (text or structured content parts)"
    )


class HostedTool(BaseModel):
    """Tool definition forwarded to the Responses API."""

    model_config = ConfigDict(extra="allow")

    type: Literal["web_search_preview", "file_search", "function"] = Field(
        ..., description="Hosted tool type"
    )


class GenerationOptions(BaseModel):
    """Options shared by both generation tools."""

    model: str = Field(
        default=DEFAULT_MODEL,
        description="GPT-5 model variant to use (or OpenRouter model like 'openai/gpt-4o')",
    )
    instructions: Optional[str] = Field(
        default=None, description="System instructions for the model"
    )
    reasoning_effort: Optional[ReasoningEffort] = Field(
        default=None, description="Reasoning effort level"
    )
    max_tokens: Optional[int] = Field(
        default=None, description="Maximum tokens to generate"
    )
    temperature: Optional[float] = Field(
        default=None, ge=0, le=2, description="Temperature for randomness (0-2)"
    )
    top_p: Optional[float] = Field(
        default=None, ge=0, le=1, description="Top-p sampling parameter"
    )
    use_openrouter: Optional[bool] = Field(
        default=None, description="Use OpenRouter instead of OpenAI GPT-5"
    )
    tools: Optional[List[HostedTool]] = Field(
        default=None,
        description="Hosted tools for the Responses API (ignored by OpenRouter)",
    )


class GenerateArgs(GenerationOptions):
    """Arguments for the gpt5_generate tool."""

    input: str = Field(..., description="The input text or prompt for GPT-5")


class MessagesArgs(GenerationOptions):
    """Arguments for the gpt5_messages tool."""

    messages: List[Message] = Field(
        ..., min_length=1, description="Array of conversation messages"
    )


class TextSource(str, Enum):
    """Where the returned text was found in the upstream response."""

    OUTPUT_TEXT = "output_text"
    OUTPUT_CONTENT = "output_content"
    CHAT_CHOICE = "chat_choice"
    RAW_FALLBACK = "raw_fallback"


class Usage(BaseModel):
    """Token usage reported by the upstream provider."""

    model_config = ConfigDict(extra="allow")

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def accept_responses_names(cls, data: Any) -> Any:
        # Responses API reports input/output tokens instead of prompt/completion
        if isinstance(data, dict):
            data = dict(data)
            if data.get("prompt_tokens") is None and "input_tokens" in data:
                data["prompt_tokens"] = data["input_tokens"]
            if data.get("completion_tokens") is None and "output_tokens" in data:
                data["completion_tokens"] = data["output_tokens"]
        return data


class GenerationResult(BaseModel):
    """Uniform result of one upstream generation call."""

    content: str
    usage: Optional[Usage] = None
    source: TextSource
