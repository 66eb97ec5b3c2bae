"""Mermaid Visualizer: live Mermaid editor with LLM-backed text conversion."""

__version__ = "0.1.0"
