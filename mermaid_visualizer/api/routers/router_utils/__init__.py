"""Router helpers."""

from .error_handling import GENERIC_SERVER_ERROR, handle_diagram_errors

__all__ = ["GENERIC_SERVER_ERROR", "handle_diagram_errors"]
