"""
Health check API endpoints.

Routes: GET /health, GET /health/converter

Dependencies: mermaid_visualizer.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from mermaid_visualizer.api.deps import get_neobase_client
from mermaid_visualizer.boundary.llm.neobase_client import NeoBaseClient
from mermaid_visualizer.models.common import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/converter", response_model=HealthResponse)
async def health_check_converter(
    client: NeoBaseClient = Depends(get_neobase_client),
) -> HealthResponse:
    """Converter configuration check (does not call the API)."""
    if not client.is_configured:
        return HealthResponse(status="degraded", message="NeoBase API key is not configured")
    return HealthResponse(status="healthy", message="Converter configured")
