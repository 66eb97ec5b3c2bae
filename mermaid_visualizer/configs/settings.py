"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from mermaid_visualizer.configs.base import BaseSettings
from mermaid_visualizer.configs.converter import ConverterSettings
from mermaid_visualizer.configs.editor import EditorSettings
from mermaid_visualizer.configs.renderer import RendererSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    converter: ConverterSettings = Field(default_factory=ConverterSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)
    editor: EditorSettings = Field(default_factory=EditorSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from mermaid_visualizer.configs import get_settings
        settings = get_settings()
    """
    return Settings()
