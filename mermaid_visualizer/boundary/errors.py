"""
Boundary errors.

Exceptions raised by the external-service clients. Routers translate them
into HTTP responses.
"""


class UpstreamError(Exception):
    """Base class for failures talking to an external service."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConverterConfigurationError(UpstreamError):
    """Raised when the converter API key is missing."""
    pass


class ConverterUpstreamError(UpstreamError):
    """Raised when the text-generation API fails or answers unexpectedly."""
    pass


class InvalidDiagramError(UpstreamError):
    """Raised when the renderer rejects the diagram source."""
    pass


class RendererUpstreamError(UpstreamError):
    """Raised when the renderer is unreachable or fails internally."""
    pass
