"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, mermaid_visualizer.api, mermaid_visualizer.observability,
    mermaid_visualizer.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
from pathlib import Path
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from mermaid_visualizer.api import api_router
from mermaid_visualizer.api.constants import API_PREFIX
from mermaid_visualizer.api.deps import get_service_cache
from mermaid_visualizer.api.routers import editor_router
from mermaid_visualizer.configs import get_settings
from mermaid_visualizer.observability.logger import configure_logging
from mermaid_visualizer.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-warms the service cache on startup,
    clears it on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    if not cache.neobase_client.is_configured:
        logger.warning("NEOBASE_API_KEY is not set; conversion requests will fail")
    _ = cache.conversion_service
    _ = cache.render_service
    _ = cache.editor_service
    logger.info("Service cache pre-warmed")

    yield

    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.editor.title,
        description="Live Mermaid editor with text-to-diagram conversion",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added first = innermost, so request logs carry the correlation id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=API_PREFIX)
    app.include_router(editor_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "mermaid_visualizer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
