"""
Test suite for RenderService.

System role: Verification of render orchestration layer
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from mermaid_visualizer.application.services.render_service import RenderService
from mermaid_visualizer.boundary.errors import InvalidDiagramError


@pytest.fixture
def mock_renderer() -> MagicMock:
    """Provide mock renderer client."""
    renderer = MagicMock()
    renderer.render_svg = AsyncMock(return_value="<svg>ok</svg>")
    return renderer


class TestRenderServiceRender:
    """Test suite for RenderService.render."""

    @pytest.mark.asyncio
    async def test_render_should_return_renderer_svg(
        self, mock_renderer: MagicMock, sample_mermaid: str
    ) -> None:
        """Test non-blank source is rendered."""
        service = RenderService(renderer=mock_renderer)

        result = await service.render(sample_mermaid)

        assert result.svg == "<svg>ok</svg>"
        mock_renderer.render_svg.assert_awaited_once_with(sample_mermaid)

    @pytest.mark.asyncio
    async def test_render_should_clear_preview_for_blank_source(
        self, mock_renderer: MagicMock
    ) -> None:
        """Test blank source yields empty SVG and skips the renderer."""
        service = RenderService(renderer=mock_renderer)

        result = await service.render("  \n ")

        assert result.svg == ""
        mock_renderer.render_svg.assert_not_called()

    @pytest.mark.asyncio
    async def test_render_should_propagate_invalid_diagram(
        self, mock_renderer: MagicMock
    ) -> None:
        """Test renderer rejection reaches the caller."""
        mock_renderer.render_svg.side_effect = InvalidDiagramError("bad", status_code=400)
        service = RenderService(renderer=mock_renderer)

        with pytest.raises(InvalidDiagramError):
            await service.render("graph TD\n  A -->")
