"""
Renderer configuration settings.

Settings for the hosted mermaid.ink renderer used by the server-side
render endpoint.

Dependencies: pydantic_settings
System role: Diagram renderer upstream configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RendererSettings(BaseSettings):
    """mermaid.ink renderer configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RENDERER_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://mermaid.ink",
        description="Base URL of the mermaid.ink service",
    )
    theme: str = Field(default="neutral", description="Mermaid theme name")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
