"""
Render API endpoint.

Routes: POST /render

Dependencies: mermaid_visualizer.application.services.render_service
System role: Server-side Mermaid rendering HTTP API
"""

from fastapi import APIRouter, Depends

from mermaid_visualizer.api.deps import get_render_service
from mermaid_visualizer.api.routers.router_utils import handle_diagram_errors
from mermaid_visualizer.application.services.render_service import RenderService
from mermaid_visualizer.models.common import ErrorResponse
from mermaid_visualizer.models.render import RenderRequest, RenderResponse

router = APIRouter(tags=["render"])


@router.post(
    "/render",
    response_model=RenderResponse,
    status_code=200,
    responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
@handle_diagram_errors
async def render_diagram(
    request: RenderRequest,
    render_service: RenderService = Depends(get_render_service),
) -> RenderResponse:
    """Render Mermaid source to SVG.

    Raises:
        HTTPException(422): Invalid Mermaid syntax
        HTTPException(502): Renderer unavailable
    """
    return await render_service.render(request.source)
