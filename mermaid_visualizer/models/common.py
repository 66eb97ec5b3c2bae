"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class ErrorResponse(BaseModel):
    """Error response schema (FastAPI HTTPException body)."""

    detail: str = Field(description="User-facing error message")
