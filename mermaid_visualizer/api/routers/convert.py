"""
Conversion API endpoint.

Routes: POST /convert

Dependencies: mermaid_visualizer.application.services.conversion_service
System role: Text-to-Mermaid HTTP API
"""

from fastapi import APIRouter, Depends

from mermaid_visualizer.api.constants import CONVERT_PATH
from mermaid_visualizer.api.deps import get_conversion_service
from mermaid_visualizer.api.routers.router_utils import handle_diagram_errors
from mermaid_visualizer.application.services.conversion_service import ConversionService
from mermaid_visualizer.models.common import ErrorResponse
from mermaid_visualizer.models.conversion import ConversionRequest, ConversionResponse

router = APIRouter(tags=["convert"])


@router.post(
    CONVERT_PATH,
    response_model=ConversionResponse,
    status_code=200,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_diagram_errors
async def convert_text(
    request: ConversionRequest,
    conversion_service: ConversionService = Depends(get_conversion_service),
) -> ConversionResponse:
    """Convert free text into Mermaid syntax.

    Forwards the text with a fixed instruction prompt to the NeoBase API and
    returns its answer verbatim.

    Raises:
        HTTPException(400): Blank text
        HTTPException(500): Any upstream failure
    """
    return await conversion_service.convert(request.text)
