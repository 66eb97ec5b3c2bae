"""
Test suite for dependency injection container.

Tests factory functions for service creation and configuration.

System role: Verification of DI container
"""

from unittest.mock import patch

import pytest

from mermaid_visualizer.api.deps import (
    get_conversion_service,
    get_editor_service,
    get_neobase_client,
    get_render_service,
    get_service_cache,
)
from mermaid_visualizer.application.services import (
    ConversionService,
    EditorService,
    RenderService,
)
from mermaid_visualizer.boundary.llm.neobase_client import NeoBaseClient
from mermaid_visualizer.configs import Settings
from mermaid_visualizer.models.editor import EditorMode


class TestServiceFactories:
    """Test suite for dependency factories."""

    def test_get_conversion_service_should_wrap_cached_client(self) -> None:
        service = get_conversion_service()

        assert isinstance(service, ConversionService)
        assert service.client is get_neobase_client()

    def test_get_render_service_should_return_render_service(self) -> None:
        assert isinstance(get_render_service(), RenderService)

    def test_get_editor_service_should_return_editor_service(self) -> None:
        assert isinstance(get_editor_service(), EditorService)

    def test_factories_should_return_cached_instances(self) -> None:
        assert get_conversion_service() is get_conversion_service()
        assert get_render_service() is get_render_service()

    def test_neobase_client_should_use_converter_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("NEOBASE_API_KEY", "k")
        settings = Settings(_env_file=None)

        with patch(
            "mermaid_visualizer.api.deps.dependencies.get_settings", return_value=settings
        ):
            client = get_neobase_client()

        assert isinstance(client, NeoBaseClient)
        assert client.is_configured is True


def test_service_cache_clear_should_drop_instances() -> None:
    cache = get_service_cache()
    first = cache.conversion_service

    cache.clear()

    assert cache.conversion_service is not first


def test_editor_service_should_point_at_mounted_convert_route() -> None:
    view = get_editor_service().build_view(EditorMode.CONVERT)

    assert view.convert_url == "/api/v1/convert"
