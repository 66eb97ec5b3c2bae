"""
Editor page.

Routes: GET /

Dependencies: mermaid_visualizer.application.services.editor_service, jinja2
System role: Browser editor entry point
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mermaid_visualizer.api.deps import get_editor_service
from mermaid_visualizer.application.services.editor_service import EditorService
from mermaid_visualizer.models.editor import EditorMode

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["editor"])


@router.get("/", response_class=HTMLResponse)
async def editor_page(
    request: Request,
    mode: EditorMode = EditorMode.VISUALIZE,
    editor_service: EditorService = Depends(get_editor_service),
) -> HTMLResponse:
    """Serve the editor page in visualize or convert mode."""
    view = editor_service.build_view(mode)
    return templates.TemplateResponse(
        request,
        "editor.html",
        {"view": view, "modes": list(EditorMode)},
    )
