"""
NeoBase chat-messages client.

Sends a single blocking query to the NeoBase API and returns its answer.

Dependencies: httpx
System role: Text-generation API boundary
"""

import logging

import httpx

from mermaid_visualizer.boundary.errors import (
    ConverterConfigurationError,
    ConverterUpstreamError,
)

logger = logging.getLogger(__name__)


class NeoBaseClient:
    """Client for the NeoBase chat-messages endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        user: str = "mermaid_converter",
        response_mode: str = "blocking",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize NeoBase client.

        Args:
            api_url: Chat-messages endpoint URL
            api_key: Bearer token (None means unconfigured)
            user: End-user identifier sent with each query
            response_mode: NeoBase response mode
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._api_url = api_url
        self._api_key = api_key
        self._user = user
        self._response_mode = response_mode
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self._api_key and self._api_key.strip())

    async def send_query(self, query: str) -> str:
        """
        Send a query and return the answer text.

        Args:
            query: Full prompt text

        Returns:
            str: The `answer` field of the response, unmodified

        Raises:
            ConverterConfigurationError: If no API key is configured
            ConverterUpstreamError: On network failure, non-success status
                or a response without an answer
        """
        if not self.is_configured:
            raise ConverterConfigurationError("NeoBase API key is not configured")

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "query": query,
            "response_mode": self._response_mode,
            "user": self._user,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._api_url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise ConverterUpstreamError(f"API request failed: {type(e).__name__}: {e}") from e

        if not response.is_success:
            raise ConverterUpstreamError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ConverterUpstreamError("API returned a non-JSON body") from e

        answer = data.get("answer") if isinstance(data, dict) else None
        if not isinstance(answer, str):
            raise ConverterUpstreamError("API response has no answer")

        logger.info(
            f"{__name__}:send_query - received answer",
            extra={"answer_length": len(answer)},
        )
        return answer
