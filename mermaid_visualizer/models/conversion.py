"""
Conversion request/response schemas.

Dependencies: pydantic
System role: Conversion API contracts
"""

from pydantic import BaseModel, Field


class ConversionRequest(BaseModel):
    """Request schema for text-to-Mermaid conversion."""

    text: str = Field(description="Free-form text to convert")


class ConversionResponse(BaseModel):
    """Response schema for text-to-Mermaid conversion."""

    mermaid: str = Field(description="Diagram description returned by the API")
