"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    convert_router,
    health_router,
    render_router,
)

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(convert_router)
api_router.include_router(render_router)

__all__ = ["api_router"]
