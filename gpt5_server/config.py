# GPT-5 Server Configuration
"""Configuration settings loaded from environment variables."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gpt5_server.errors import MissingCredentialError

Provider = Literal["openai", "openrouter"]


class ResolvedProvider(BaseModel):
    """Upstream provider selected for a single tool call."""

    model_config = ConfigDict(frozen=True)

    name: Provider
    api_key: str

    @property
    def use_openrouter(self) -> bool:
        return self.name == "openrouter"


class ProviderCredentials(BaseModel):
    """
    Upstream API keys, resolved once at startup.

    Either key may be missing, but a server is only started when at least
    one is present (see ``has_any``).
    """

    model_config = ConfigDict(frozen=True)

    openai_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None

    @property
    def has_openai(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def has_openrouter(self) -> bool:
        return bool(self.openrouter_api_key)

    @property
    def has_any(self) -> bool:
        return self.has_openai or self.has_openrouter

    def resolve(self, use_openrouter: Optional[bool] = None) -> ResolvedProvider:
        """
        Pick the upstream provider for a call.

        OpenRouter is used when explicitly requested, or when no OpenAI key
        is configured but an OpenRouter key is.

        Raises:
            MissingCredentialError: If the selected provider has no key
        """
        openrouter = bool(use_openrouter) or (not self.has_openai and self.has_openrouter)

        if openrouter:
            if not self.has_openrouter:
                raise MissingCredentialError("OPENROUTER_API_KEY")
            return ResolvedProvider(name="openrouter", api_key=self.openrouter_api_key)

        if not self.has_openai:
            raise MissingCredentialError("OPENAI_API_KEY")
        return ResolvedProvider(name="openai", api_key=self.openai_api_key)


class Settings(BaseSettings):
    """GPT-5 server settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream credentials
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key (Responses API)",
    )
    openrouter_api_key: Optional[str] = Field(
        default=None,
        description="OpenRouter API key (chat completions)",
    )

    # Upstream endpoints
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI API base URL",
    )
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenRouter API base URL",
    )
    openrouter_referer: str = Field(
        default="https://github.com/gpt5-mcp-server",
        description="Value sent as the OpenRouter HTTP-Referer attribution header",
    )
    openrouter_title: str = Field(
        default="GPT-5 MCP Server",
        description="Value sent as the OpenRouter X-Title attribution header",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        description="Upstream request timeout in seconds (unset = wait indefinitely)",
    )

    # Server settings
    host: str = Field(default="127.0.0.1", description="HTTP transport host")
    port: int = Field(default=8020, description="HTTP transport port")
    log_level: str = Field(default="INFO", description="Logging level")

    # MCP protocol settings
    mcp_server_name: str = Field(
        default="gpt5-server",
        description="MCP server name",
    )
    mcp_server_version: str = Field(
        default="0.1.0",
        description="MCP server version",
    )

    def credentials(self) -> ProviderCredentials:
        """Build the immutable credential set handed to the dispatcher."""
        return ProviderCredentials(
            openai_api_key=self.openai_api_key or None,
            openrouter_api_key=self.openrouter_api_key or None,
        )


# Global settings instance
settings = Settings()
