"""
Boundary layer.

HTTP clients for the external services the editor depends on.
"""

from mermaid_visualizer.boundary.errors import (
    ConverterConfigurationError,
    ConverterUpstreamError,
    InvalidDiagramError,
    RendererUpstreamError,
    UpstreamError,
)
from mermaid_visualizer.boundary.llm.neobase_client import NeoBaseClient
from mermaid_visualizer.boundary.renderer.mermaid_ink_client import MermaidInkClient

__all__ = [
    "ConverterConfigurationError",
    "ConverterUpstreamError",
    "InvalidDiagramError",
    "MermaidInkClient",
    "NeoBaseClient",
    "RendererUpstreamError",
    "UpstreamError",
]
