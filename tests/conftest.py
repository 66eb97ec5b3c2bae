"""
Shared test fixtures and configuration for entire test suite.

Provides: service mocks, sample diagram sources, settings/cache isolation
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

from functools import lru_cache
from unittest.mock import AsyncMock, MagicMock

import pytest

from mermaid_visualizer.api.deps import get_service_cache
from mermaid_visualizer.configs import Settings, get_settings
from mermaid_visualizer.configs.converter import ConverterSettings
from mermaid_visualizer.configs.editor import EditorSettings
from mermaid_visualizer.configs.renderer import RendererSettings


def build_settings_without_env_file() -> Settings:
    """Build settings from the process environment only, ignoring any .env file."""
    return Settings(
        _env_file=None,
        converter=ConverterSettings(_env_file=None),
        renderer=RendererSettings(_env_file=None),
        editor=EditorSettings(_env_file=None),
    )


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """
    Reset cached settings and services around every test.

    Removes converter env vars and skips the .env file so a developer's
    shell or local configuration does not leak in.
    """
    for var in ("NEOBASE_API_KEY", "NEOBASE_API_URL", "RENDERER_BASE_URL", "EDITOR_THEME"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_service_cache().clear()
    isolated_settings = lru_cache(build_settings_without_env_file)
    monkeypatch.setattr("mermaid_visualizer.api.deps.dependencies.get_settings", isolated_settings)
    monkeypatch.setattr("mermaid_visualizer.main.get_settings", isolated_settings)
    yield
    get_settings.cache_clear()
    get_service_cache().clear()


@pytest.fixture
def sample_mermaid() -> str:
    """Provide a small valid flowchart."""
    return "graph TD\n    A[Start] --> B[Stop]"


@pytest.fixture
def sample_text() -> str:
    """Provide free text describing a process."""
    return "A customer places an order, then the warehouse ships it."


@pytest.fixture
def mock_conversion_service():
    """
    Create mock ConversionService for testing.

    Returns:
        AsyncMock: Mocked ConversionService with async convert
    """
    service = AsyncMock()
    service.convert = AsyncMock()
    return service


@pytest.fixture
def mock_render_service():
    """
    Create mock RenderService for testing.

    Returns:
        AsyncMock: Mocked RenderService with async render
    """
    service = AsyncMock()
    service.render = AsyncMock()
    return service


@pytest.fixture
def mock_neobase_client():
    """
    Create mock NeoBaseClient for testing.

    Returns:
        MagicMock: Configured client with async send_query
    """
    client = MagicMock()
    client.is_configured = True
    client.send_query = AsyncMock()
    return client
