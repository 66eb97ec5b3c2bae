"""Service orchestrators."""

from .conversion_service import ConversionService
from .editor_service import EditorService
from .render_service import RenderService

__all__ = [
    "ConversionService",
    "EditorService",
    "RenderService",
]
