"""API routers."""

from .convert import router as convert_router
from .editor import router as editor_router
from .health import router as health_router
from .render import router as render_router

__all__ = [
    "convert_router",
    "editor_router",
    "health_router",
    "render_router",
]
