# Tool Registry Service
"""
Definitions of the tools this server exposes.

Each tool is backed by a pydantic argument model. The model's JSON Schema is
what ``tools/list`` advertises, and incoming arguments are checked against
that same schema before being parsed into the model. The schema is cleaned
for MCP clients:

1. The top-level ``title`` is dropped (the tool name already identifies it).
2. ``"default": null`` is stripped from properties. Optional fields are
   declared with a ``None`` default, which serialises as ``null``; LLMs see
   the literal and send it back for every unset option.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Type

from jsonschema import Draft7Validator
from pydantic import ValidationError

from gpt5_server.errors import InvalidArgumentError, ToolNotFoundError
from gpt5_server.models.generation import GenerateArgs, GenerationOptions, MessagesArgs
from gpt5_server.models.mcp import MCPTool

logger = logging.getLogger("gpt5.services.tool_registry")


def _strip_null_defaults(schema: Dict[str, Any]) -> None:
    props = schema.get("properties")
    if not isinstance(props, dict):
        return
    for defn in props.values():
        if isinstance(defn, dict) and "default" in defn and defn["default"] is None:
            del defn["default"]


def clean_schema_for_mcp(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-copy a pydantic JSON Schema and clean it for MCP exposure."""
    schema = copy.deepcopy(schema)
    schema.pop("title", None)

    _strip_null_defaults(schema)
    for definition in schema.get("$defs", {}).values():
        if isinstance(definition, dict):
            _strip_null_defaults(definition)

    return schema


def _format_pydantic_errors(error: ValidationError) -> List[str]:
    messages = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "$"
        messages.append(f"{location}: {err['msg']}")
    return messages


@dataclass(frozen=True)
class ToolDefinition:
    """A tool name, its description and the model its arguments parse into."""

    name: str
    description: str
    args_model: Type[GenerationOptions]

    @property
    def input_schema(self) -> Dict[str, Any]:
        return clean_schema_for_mcp(self.args_model.model_json_schema())

    def to_mcp_tool(self) -> MCPTool:
        return MCPTool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    def parse_arguments(self, arguments: Dict[str, Any]) -> GenerationOptions:
        """
        Validate raw arguments and parse them into the tool's model.

        Raises:
            InvalidArgumentError: If the arguments do not fit the schema
        """
        validator = Draft7Validator(self.input_schema)
        errors = [f"{e.json_path}: {e.message}" for e in validator.iter_errors(arguments)]
        if errors:
            logger.info(f"Rejected arguments for {self.name}: {errors}")
            raise InvalidArgumentError(self.name, errors)

        try:
            return self.args_model.model_validate(arguments)
        except ValidationError as e:
            raise InvalidArgumentError(self.name, _format_pydantic_errors(e)) from e


TOOLS: Dict[str, ToolDefinition] = {
    tool.name: tool
    for tool in (
        ToolDefinition(
            name="gpt5_generate",
            description="Generate text using OpenAI GPT-5 API with a simple input prompt",
            args_model=GenerateArgs,
        ),
        ToolDefinition(
            name="gpt5_messages",
            description="Generate text using GPT-5 with structured conversation messages",
            args_model=MessagesArgs,
        ),
    )
}


def get_tool(name: str) -> ToolDefinition:
    """
    Look up a tool by name.

    Raises:
        ToolNotFoundError: If no tool has that name
    """
    tool = TOOLS.get(name)
    if tool is None:
        raise ToolNotFoundError(name)
    return tool


def list_tools() -> List[ToolDefinition]:
    return list(TOOLS.values())
