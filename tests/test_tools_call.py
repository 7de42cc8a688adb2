# Tools Call Handler Tests
"""Tests for MCP tools/call handler."""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from gpt5_server.errors import InvalidArgumentError, ToolNotFoundError, UpstreamError
from gpt5_server.handlers.tools_call import handle_tools_call
from gpt5_server.models.generation import GenerationResult, TextSource, Usage

USAGE_SUFFIX = "\n\n**Usage:** 10 prompt tokens, 5 completion tokens, 15 total tokens"


class TestToolsCall:
    """Test tools/call handler."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, both_keys):
        """Test that an unknown tool raises instead of returning an error result."""
        with pytest.raises(ToolNotFoundError) as exc:
            await handle_tools_call("nonexistent_tool", {"input": "Hi"}, both_keys)

        assert "nonexistent_tool" in str(exc.value)

    @pytest.mark.asyncio
    async def test_missing_input(self, both_keys):
        """Test schema validation failure on missing required field."""
        with pytest.raises(InvalidArgumentError) as exc:
            await handle_tools_call("gpt5_generate", {}, both_keys)

        assert any("input" in error for error in exc.value.errors)

    @pytest.mark.asyncio
    async def test_temperature_out_of_range(self, both_keys):
        """Test that temperature above 2 is rejected."""
        with pytest.raises(InvalidArgumentError):
            await handle_tools_call(
                "gpt5_generate", {"input": "Hi", "temperature": 3}, both_keys
            )

    @pytest.mark.asyncio
    async def test_invalid_role(self, both_keys):
        """Test that roles outside the enum are rejected."""
        with pytest.raises(InvalidArgumentError):
            await handle_tools_call(
                "gpt5_messages",
                {"messages": [{"role": "system", "content": "Hi"}]},
                both_keys,
            )

    @pytest.mark.asyncio
    async def test_mismatched_content_part(self, both_keys):
        """Test that a content part with fields of another type is rejected."""
        with pytest.raises(InvalidArgumentError) as exc:
            await handle_tools_call(
                "gpt5_messages",
                {
                    "messages": [
                        {
                            "role": "user",
                            "content": [{"type": "input_text", "image_url": "https://x"}],
                        }
                    ]
                },
                both_keys,
            )

        assert "input_text" in str(exc.value)

    @pytest.mark.asyncio
    async def test_successful_generate(self, both_keys, make_transport, sample_responses_payload):
        """Test a successful call appends the usage summary."""
        transport = make_transport(json_body=sample_responses_payload)

        result = await handle_tools_call(
            "gpt5_generate", {"input": "Hi"}, both_keys, transport=transport
        )

        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].text == "Hello from GPT-5" + USAGE_SUFFIX
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_no_usage_no_suffix(self, both_keys, make_transport, sample_responses_payload):
        """Test that no usage summary is added when usage is absent."""
        del sample_responses_payload["usage"]
        transport = make_transport(json_body=sample_responses_payload)

        result = await handle_tools_call(
            "gpt5_generate", {"input": "Hi"}, both_keys, transport=transport
        )

        assert result.content[0].text == "Hello from GPT-5"

    @pytest.mark.asyncio
    async def test_openrouter_fallback_without_openai_key(
        self, openrouter_only, make_transport, sample_chat_payload
    ):
        """Test that OpenRouter is used when only its key is set."""
        transport = make_transport(json_body=sample_chat_payload)

        result = await handle_tools_call(
            "gpt5_messages",
            {"messages": [{"role": "developer", "content": "Rules"}]},
            openrouter_only,
            transport=transport,
        )

        assert result.isError is False
        assert result.content[0].text.startswith("Hello from OpenRouter")
        request = transport.requests[0]
        assert "openrouter.ai" in request.url.host
        body = json.loads(request.content)
        assert body["messages"] == [{"role": "system", "content": "Rules"}]

    @pytest.mark.asyncio
    async def test_explicit_openrouter_without_key(self, openai_only):
        """Test missing OpenRouter key is reported as an error result."""
        with patch("gpt5_server.handlers.tools_call.generate_from_prompt") as mock_generate:
            result = await handle_tools_call(
                "gpt5_generate", {"input": "Hi", "use_openrouter": True}, openai_only
            )

            mock_generate.assert_not_called()

        assert result.isError is True
        assert result.content[0].text == "GPT-5 API error: OPENROUTER_API_KEY is not set"

    @pytest.mark.asyncio
    async def test_upstream_rate_limit(self, both_keys, make_transport):
        """Test that a 429 becomes an error result with status and body."""
        transport = make_transport(status_code=429, text="rate limited")

        result = await handle_tools_call(
            "gpt5_generate", {"input": "Hi"}, both_keys, transport=transport
        )

        assert result.isError is True
        text = result.content[0].text
        assert text.startswith("GPT-5 API error: ")
        assert "429" in text
        assert "rate limited" in text
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_transport_error(self, both_keys):
        """Test that network failures become error results."""

        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        result = await handle_tools_call(
            "gpt5_generate",
            {"input": "Hi"},
            both_keys,
            transport=httpx.MockTransport(handler),
        )

        assert result.isError is True
        assert "OpenAI" in result.content[0].text

    @pytest.mark.asyncio
    async def test_unexpected_exception(self, both_keys):
        """Test that any exception from generation is caught."""
        with patch(
            "gpt5_server.handlers.tools_call.generate_from_prompt",
            AsyncMock(side_effect=RuntimeError("boom")),
        ):
            result = await handle_tools_call("gpt5_generate", {"input": "Hi"}, both_keys)

        assert result.isError is True
        assert result.content[0].text == "GPT-5 API error: boom"

    @pytest.mark.asyncio
    async def test_options_passed_through(self, both_keys):
        """Test that optional parameters reach the generation call unchanged."""
        mock_generate = AsyncMock(
            return_value=GenerationResult(content="ok", source=TextSource.OUTPUT_TEXT)
        )
        with patch("gpt5_server.handlers.tools_call.generate_from_prompt", mock_generate):
            await handle_tools_call(
                "gpt5_generate",
                {
                    "input": "Hi",
                    "model": "gpt-5-mini",
                    "instructions": "Be brief",
                    "reasoning_effort": "medium",
                    "max_tokens": 200,
                    "temperature": 1.5,
                    "top_p": 0.8,
                },
                both_keys,
            )

        provider, prompt, options = mock_generate.call_args.args
        assert provider.name == "openai"
        assert prompt == "Hi"
        assert options.model == "gpt-5-mini"
        assert options.instructions == "Be brief"
        assert options.reasoning_effort == "medium"
        assert options.max_tokens == 200
        assert options.temperature == 1.5
        assert options.top_p == 0.8

    @pytest.mark.asyncio
    async def test_raw_fallback_still_succeeds(self, both_keys, make_transport):
        """Test that an unrecognised body is returned as raw JSON, not an error."""
        transport = make_transport(json_body={"id": "resp_1", "output": []})

        result = await handle_tools_call(
            "gpt5_generate", {"input": "Hi"}, both_keys, transport=transport
        )

        assert result.isError is False
        assert json.loads(result.content[0].text) == {"id": "resp_1", "output": []}

    @pytest.mark.asyncio
    async def test_usage_suffix_format(self, both_keys):
        """Test exact usage suffix text."""
        mock_generate = AsyncMock(
            return_value=GenerationResult(
                content="answer",
                usage=Usage(prompt_tokens=10, completion_tokens=5, total_tokens=15),
                source=TextSource.OUTPUT_TEXT,
            )
        )
        with patch("gpt5_server.handlers.tools_call.generate_from_prompt", mock_generate):
            result = await handle_tools_call("gpt5_generate", {"input": "Hi"}, both_keys)

        assert result.content[0].text.endswith(USAGE_SUFFIX)

    @pytest.mark.asyncio
    async def test_upstream_error_message(self, both_keys):
        """Test the error text carries the upstream error message."""
        with patch(
            "gpt5_server.handlers.tools_call.generate_from_messages",
            AsyncMock(side_effect=UpstreamError("OpenAI", 500, "Internal Server Error", "oops")),
        ):
            result = await handle_tools_call(
                "gpt5_messages",
                {"messages": [{"role": "user", "content": "Hi"}]},
                both_keys,
            )

        assert result.isError is True
        assert result.content[0].text == (
            "GPT-5 API error: OpenAI returned 500 Internal Server Error - oops"
        )
