"""LLM API clients."""

from .neobase_client import NeoBaseClient

__all__ = ["NeoBaseClient"]
