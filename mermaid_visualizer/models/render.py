"""
Render request/response schemas.

Dependencies: pydantic
System role: Render API contracts
"""

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    """Request schema for server-side rendering."""

    source: str = Field(description="Mermaid diagram source")


class RenderResponse(BaseModel):
    """Response schema for server-side rendering."""

    svg: str = Field(description="Rendered SVG markup, empty for blank source")
