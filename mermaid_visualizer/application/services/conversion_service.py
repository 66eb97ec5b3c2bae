"""
Conversion service for text-to-Mermaid requests.

Builds the fixed instruction prompt and forwards it to the text-generation
API. The API's answer is returned unmodified.

Dependencies: mermaid_visualizer.boundary, mermaid_visualizer.core
System role: Conversion orchestration layer
"""

import logging

from mermaid_visualizer.boundary.llm.neobase_client import NeoBaseClient
from mermaid_visualizer.core.conversion_prompt import build_conversion_query
from mermaid_visualizer.models.conversion import ConversionResponse
from mermaid_visualizer.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ConversionService:
    """Converts free text into Mermaid syntax through the LLM API."""

    def __init__(self, client: NeoBaseClient) -> None:
        """
        Initialize conversion service.

        Args:
            client: NeoBase API client
        """
        self.client = client

    async def convert(self, text: str) -> ConversionResponse:
        """
        Convert free text to a Mermaid diagram description.

        Args:
            text: User's free-form text

        Returns:
            ConversionResponse: The API's answer as the diagram description

        Raises:
            ValueError: If text is blank
            UpstreamError: If the API call fails
        """
        if not text.strip():
            raise ValueError("Text to convert must not be empty")

        log_with_context(logger, logging.INFO, f"{__name__}:convert - START", text=text)
        answer = await self.client.send_query(build_conversion_query(text))
        logger.info(f"{__name__}:convert - DONE mermaid_length={len(answer)}")
        return ConversionResponse(mermaid=answer)
