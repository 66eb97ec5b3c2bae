"""
mermaid.ink renderer client.

Renders Mermaid source to SVG through the hosted mermaid.ink service.
The source travels base64-encoded in the URL path.

Dependencies: httpx
System role: Diagram rendering boundary
"""

import base64
import logging

import httpx

from mermaid_visualizer.boundary.errors import InvalidDiagramError, RendererUpstreamError

logger = logging.getLogger(__name__)


def encode_source(source: str) -> str:
    """
    Encode Mermaid source for a mermaid.ink path segment.

    Args:
        source: Mermaid diagram source

    Returns:
        str: URL-safe base64 of the UTF-8 source
    """
    return base64.urlsafe_b64encode(source.encode("utf-8")).decode("ascii")


class MermaidInkClient:
    """Client for the mermaid.ink SVG endpoint."""

    def __init__(
        self,
        base_url: str = "https://mermaid.ink",
        theme: str = "neutral",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._theme = theme
        self._timeout = timeout
        self._transport = transport

    def svg_url(self, source: str) -> str:
        """Build the SVG URL for a diagram source."""
        return f"{self._base_url}/svg/{encode_source(source)}"

    async def render_svg(self, source: str) -> str:
        """
        Render Mermaid source to SVG markup.

        Args:
            source: Mermaid diagram source

        Returns:
            str: SVG document

        Raises:
            InvalidDiagramError: If the renderer rejects the source (4xx)
            RendererUpstreamError: On network failure or renderer 5xx
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    self.svg_url(source), params={"theme": self._theme}
                )
        except httpx.HTTPError as e:
            raise RendererUpstreamError(f"Renderer request failed: {type(e).__name__}: {e}") from e

        if response.is_client_error:
            raise InvalidDiagramError(
                f"Renderer rejected diagram with status {response.status_code}",
                status_code=response.status_code,
            )
        if not response.is_success:
            raise RendererUpstreamError(
                f"Renderer failed with status {response.status_code}",
                status_code=response.status_code,
            )

        return response.text
