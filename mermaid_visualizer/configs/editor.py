"""
Editor page configuration settings.

Controls how the browser editor loads and initializes mermaid.js.

Dependencies: pydantic_settings
System role: Editor UI configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorSettings(BaseSettings):
    """Browser editor configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EDITOR_",
        case_sensitive=False,
        extra="ignore",
    )

    title: str = Field(default="Mermaid Visualizer", description="Page and navbar title")
    mermaid_js_url: str = Field(
        default="https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js",
        description="Script URL for the mermaid.js bundle",
    )
    theme: str = Field(default="neutral", description="Mermaid theme name")
    security_level: str = Field(
        default="loose",
        description="Mermaid securityLevel (strict, loose, antiscript, sandbox)",
    )
