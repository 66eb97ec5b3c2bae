"""Diagram renderer clients."""

from .mermaid_ink_client import MermaidInkClient

__all__ = ["MermaidInkClient"]
