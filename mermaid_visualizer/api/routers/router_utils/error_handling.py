"""
Diagram error handling utilities.

Decorator that turns service and boundary exceptions into HTTPExceptions
with fixed, user-facing messages. Details are logged, never returned.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from mermaid_visualizer.boundary.errors import InvalidDiagramError, RendererUpstreamError
from mermaid_visualizer.models.editor import RENDER_ERROR_MESSAGE

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

GENERIC_SERVER_ERROR = "Internal server error"


def handle_diagram_errors(func: F) -> F:
    """
    Decorator to handle diagram endpoint errors and transform them into HTTPExceptions.

    Mapping:
    - ValueError -> 400 with the validation message
    - InvalidDiagramError -> 422 with the generic syntax message
    - RendererUpstreamError -> 502 with the generic syntax message
    - anything else -> 500 Internal server error
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValueError as e:
            logger.warning("Invalid diagram request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except InvalidDiagramError as e:
            logger.warning("Diagram rejected by renderer", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=RENDER_ERROR_MESSAGE,
            )

        except RendererUpstreamError as e:
            logger.error(f"Renderer unavailable: {e}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=RENDER_ERROR_MESSAGE,
            )

        except Exception as e:
            logger.exception(f"{func.__name__} failed: {type(e).__name__}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=GENERIC_SERVER_ERROR,
            )

    return wrapper  # type: ignore
