"""API-specific dependencies."""

from .dependencies import (
    get_conversion_service,
    get_editor_service,
    get_neobase_client,
    get_render_service,
    get_service_cache,
)

__all__ = [
    "get_conversion_service",
    "get_editor_service",
    "get_neobase_client",
    "get_render_service",
    "get_service_cache",
]
