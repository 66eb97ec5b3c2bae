"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: mermaid_visualizer.configs, mermaid_visualizer.application,
    mermaid_visualizer.boundary
System role: DI container for service injection
"""

from mermaid_visualizer.api.constants import CONVERT_URL
from mermaid_visualizer.application.services import (
    ConversionService,
    EditorService,
    RenderService,
)
from mermaid_visualizer.boundary.llm.neobase_client import NeoBaseClient
from mermaid_visualizer.boundary.renderer.mermaid_ink_client import MermaidInkClient
from mermaid_visualizer.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._neobase_client = None
        self._renderer_client = None
        self._conversion_service = None
        self._render_service = None
        self._editor_service = None

    @property
    def neobase_client(self) -> NeoBaseClient:
        """Get cached NeoBase client."""
        if self._neobase_client is None:
            converter = get_settings().converter
            self._neobase_client = NeoBaseClient(
                api_url=converter.api_url,
                api_key=converter.api_key,
                user=converter.user,
                response_mode=converter.response_mode,
                timeout=converter.timeout,
            )
        return self._neobase_client

    @property
    def renderer_client(self) -> MermaidInkClient:
        """Get cached mermaid.ink client."""
        if self._renderer_client is None:
            renderer = get_settings().renderer
            self._renderer_client = MermaidInkClient(
                base_url=renderer.base_url,
                theme=renderer.theme,
                timeout=renderer.timeout,
            )
        return self._renderer_client

    @property
    def conversion_service(self) -> ConversionService:
        """Get cached conversion service."""
        if self._conversion_service is None:
            self._conversion_service = ConversionService(client=self.neobase_client)
        return self._conversion_service

    @property
    def render_service(self) -> RenderService:
        """Get cached render service."""
        if self._render_service is None:
            self._render_service = RenderService(renderer=self.renderer_client)
        return self._render_service

    @property
    def editor_service(self) -> EditorService:
        """Get cached editor service."""
        if self._editor_service is None:
            self._editor_service = EditorService(
                settings=get_settings().editor,
                convert_url=CONVERT_URL,
            )
        return self._editor_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._neobase_client = None
        self._renderer_client = None
        self._conversion_service = None
        self._render_service = None
        self._editor_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_neobase_client() -> NeoBaseClient:
    """
    Get NeoBase client instance.

    Returns:
        NeoBaseClient: Client configured from NEOBASE_* settings
    """
    return get_service_cache().neobase_client


def get_conversion_service() -> ConversionService:
    """
    Get conversion service instance.

    Returns:
        ConversionService: Service wired to the NeoBase client
    """
    return get_service_cache().conversion_service


def get_render_service() -> RenderService:
    """
    Get render service instance.

    Returns:
        RenderService: Service wired to the mermaid.ink client
    """
    return get_service_cache().render_service


def get_editor_service() -> EditorService:
    """
    Get editor service instance.

    Returns:
        EditorService: Service configured from EDITOR_* settings
    """
    return get_service_cache().editor_service
