"""
Converter configuration settings.

Settings for the NeoBase chat-messages API that turns free text into
Mermaid syntax.

Dependencies: pydantic_settings
System role: Text-to-diagram upstream configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConverterSettings(BaseSettings):
    """NeoBase chat-messages API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NEOBASE_",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(
        default="https://neobase.app/v1/chat-messages",
        description="Chat-messages endpoint of the NeoBase API",
    )
    api_key: str | None = Field(
        default=None,
        description="Bearer token for the NeoBase API",
    )
    user: str = Field(
        default="mermaid_converter",
        description="End-user identifier sent with every request",
    )
    response_mode: str = Field(
        default="blocking",
        description="NeoBase response mode (blocking returns the full answer)",
    )
    timeout: float = Field(
        default=60.0,
        gt=0,
        description="Request timeout in seconds",
    )
