"""
Render service for server-side Mermaid rendering.

Dependencies: mermaid_visualizer.boundary
System role: Render orchestration layer
"""

import logging

from mermaid_visualizer.boundary.renderer.mermaid_ink_client import MermaidInkClient
from mermaid_visualizer.models.render import RenderResponse

logger = logging.getLogger(__name__)


class RenderService:
    """Renders Mermaid source to SVG."""

    def __init__(self, renderer: MermaidInkClient) -> None:
        self.renderer = renderer

    async def render(self, source: str) -> RenderResponse:
        """
        Render a diagram source.

        Blank source produces an empty SVG without contacting the renderer.

        Raises:
            InvalidDiagramError: If the source does not parse
            RendererUpstreamError: If the renderer is unavailable
        """
        if not source.strip():
            return RenderResponse(svg="")

        svg = await self.renderer.render_svg(source)
        logger.debug(f"{__name__}:render - svg_length={len(svg)}")
        return RenderResponse(svg=svg)
